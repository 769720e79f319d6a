"""KPI bundle for the ticket dashboard."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Sequence

from .analytics import (
    by_month,
    closed_tickets,
    count_with_priority,
    group_by,
    mean_open_age_days,
    mean_resolution_hours,
    open_by_client,
    open_tickets,
    sla_compliance_pct,
    sort_by_count,
)
from .constants import TOP_ASSIGNEES_LIMIT, TOP_CLIENTS_LIMIT, URGENT_PRIORITY
from .models import Ticket


def format_hours(hours: float | None) -> str:
    if hours is None:
        return "—"
    if hours < 24:
        return f"{hours:.1f} h"
    return f"{hours / 24:.1f} días"


def format_days(days: float | None) -> str:
    if days is None:
        return "—"
    return f"{days:.1f} días"


def build_ticket_summary(
    tickets: Sequence[Ticket],
    sla_target_hours: float,
    reference_time: datetime | None = None,
    top_clients: int = TOP_CLIENTS_LIMIT,
    top_assignees: int = TOP_ASSIGNEES_LIMIT,
) -> dict[str, Any]:
    if reference_time is None:
        reference_time = datetime.now()

    return {
        "total_tickets": len(tickets),
        "closed_tickets": len(closed_tickets(tickets)),
        "open_tickets": len(open_tickets(tickets)),
        "urgent_tickets": count_with_priority(tickets, URGENT_PRIORITY),
        "mean_resolution_hours": mean_resolution_hours(tickets),
        "sla_target_hours": sla_target_hours,
        "sla_compliance_pct": sla_compliance_pct(tickets, sla_target_hours),
        "mean_open_age_days": mean_open_age_days(tickets, reference_time=reference_time),
        "by_client": sort_by_count(group_by(tickets, "client"), top_clients),
        "by_priority": sort_by_count(group_by(tickets, "priority")),
        "by_status": sort_by_count(group_by(tickets, "status")),
        "by_type": sort_by_count(group_by(tickets, "ticket_type")),
        "by_assignee": sort_by_count(group_by(tickets, "assignee"), top_assignees),
        "by_month_created": by_month(tickets, "created"),
        "open_by_client": open_by_client(tickets),
    }
