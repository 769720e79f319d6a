"""Dashboard-side filtering of parsed tickets."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date, datetime, time
from typing import Iterable

from .dates import parse_timestamp
from .models import Ticket, resolve_field


@dataclass(frozen=True)
class TicketFilter:
    start_date: date | None = None
    end_date: date | None = None
    client: str | None = None
    author: str | None = None
    priority: str | None = None
    status: str | None = None
    assignee: str | None = None

    def is_active(self) -> bool:
        return any(getattr(self, f.name) not in (None, "") for f in fields(self))


_EXACT_MATCH_FIELDS = ("client", "author", "priority", "status", "assignee")


def _matches(ticket: Ticket, ticket_filter: TicketFilter) -> bool:
    created = parse_timestamp(ticket.created)
    # Tickets without a readable creation date are kept by the date bounds.
    if created is not None:
        if ticket_filter.start_date and created < datetime.combine(ticket_filter.start_date, time.min):
            return False
        if ticket_filter.end_date and created > datetime.combine(ticket_filter.end_date, time.max):
            return False

    for name in _EXACT_MATCH_FIELDS:
        wanted = getattr(ticket_filter, name)
        if wanted and getattr(ticket, name) != wanted:
            return False
    return True


def filter_tickets(tickets: Iterable[Ticket], ticket_filter: TicketFilter | None = None) -> list[Ticket]:
    if ticket_filter is None:
        return list(tickets)
    return [ticket for ticket in tickets if _matches(ticket, ticket_filter)]


def select_segment(tickets: Iterable[Ticket], field: str, value: str) -> list[Ticket]:
    """Keep tickets whose trimmed ``field`` equals ``value`` (chart click-through)."""
    attribute = resolve_field(field)
    return [ticket for ticket in tickets if str(getattr(ticket, attribute)).strip() == value]
