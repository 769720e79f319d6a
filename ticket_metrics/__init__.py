"""Support-desk ticket ingestion and metrics package."""

from .models import Ticket
from .parsing import parse_ticket_row, rows_to_tickets
from .pipeline import TicketAnalysisSession, load_tickets
from .summary import build_ticket_summary

__all__ = [
    "Ticket",
    "TicketAnalysisSession",
    "build_ticket_summary",
    "load_tickets",
    "parse_ticket_row",
    "rows_to_tickets",
]
