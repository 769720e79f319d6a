"""Pipeline orchestration for ticket metrics."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from .config import Settings, load_settings
from .filters import TicketFilter, filter_tickets
from .models import Ticket
from .parsing import rows_to_tickets
from .reader import Source, read_ticket_grid
from .summary import build_ticket_summary


def load_tickets(source: Source, file_name: str | None = None, settings: Settings | None = None) -> list[Ticket]:
    if settings is None:
        settings = load_settings()
    grid = read_ticket_grid(source, file_name=file_name)
    return rows_to_tickets(grid, header_row_index=settings.header_row_index)


@dataclass
class TicketAnalysisSession:
    tickets: list[Ticket]
    settings: Settings

    @classmethod
    def from_grid(cls, grid: Sequence[object], settings: Settings | None = None) -> "TicketAnalysisSession":
        if settings is None:
            settings = load_settings()
        return cls(rows_to_tickets(grid, header_row_index=settings.header_row_index), settings)

    @classmethod
    def from_file(
        cls,
        source: Source,
        file_name: str | None = None,
        settings: Settings | None = None,
    ) -> "TicketAnalysisSession":
        if settings is None:
            settings = load_settings()
        return cls(load_tickets(source, file_name=file_name, settings=settings), settings)

    def filter(self, ticket_filter: TicketFilter | None = None) -> list[Ticket]:
        return filter_tickets(self.tickets, ticket_filter)

    def summary(
        self,
        ticket_filter: TicketFilter | None = None,
        sla_target_hours: float | None = None,
        reference_time: datetime | None = None,
    ) -> dict:
        if sla_target_hours is None:
            sla_target_hours = self.settings.sla_target_hours
        return build_ticket_summary(
            self.filter(ticket_filter),
            sla_target_hours=sla_target_hours,
            reference_time=reference_time,
        )
