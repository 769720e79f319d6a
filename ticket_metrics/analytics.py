"""Aggregate metrics over lists of parsed tickets.

Every function is a pure transform over the caller's list: nothing is cached
and nothing is mutated. Missing or unreadable data never raises; it resolves
to ``None`` (no data) or to a documented degenerate value.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Iterable, Mapping, Sequence

import pandas as pd

from .constants import CLOSED_STATUSES, DATE_FIELDS, NO_VALUE_LABEL, OPEN_EXCLUDED_STATUSES
from .dates import parse_timestamp, to_local_naive
from .models import Ticket, resolve_field

SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0


def _label(value: object) -> str:
    text = str(value if value is not None else "").strip()
    return text or NO_VALUE_LABEL


def _mean(values: Sequence[float]) -> float | None:
    if not values:
        return None
    return float(pd.Series(values, dtype="float64").mean())


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def group_by(tickets: Iterable[Ticket], field: str) -> dict[str, int]:
    attribute = resolve_field(field)
    labels = pd.Series([_label(getattr(ticket, attribute)) for ticket in tickets], dtype="object")
    return {str(name): int(count) for name, count in labels.value_counts(sort=False).items()}


def sort_by_count(counts: Mapping[str, int], limit: int | None = None) -> list[dict[str, object]]:
    """Order label counts for display: highest count first, ties by name.

    A truthy ``limit`` keeps only the top ``limit`` entries.
    """
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    if limit:
        ordered = ordered[:limit]
    return [{"name": name, "value": value} for name, value in ordered]


def by_month(tickets: Iterable[Ticket], date_field: str) -> list[dict[str, object]]:
    """Count tickets per ``YYYY-MM`` of a date field, ascending.

    Months without tickets are left out.
    """
    attribute = resolve_field(date_field)
    if attribute not in DATE_FIELDS:
        raise ValueError(f"by_month expects one of {DATE_FIELDS}, got {date_field!r}")

    counts: dict[str, int] = {}
    for ticket in tickets:
        moment = parse_timestamp(getattr(ticket, attribute))
        if moment is None:
            continue
        key = f"{moment.year:04d}-{moment.month:02d}"
        counts[key] = counts.get(key, 0) + 1
    return [{"name": key, "value": counts[key]} for key in sorted(counts)]


def closed_tickets(tickets: Iterable[Ticket]) -> list[Ticket]:
    return [ticket for ticket in tickets if ticket.status in CLOSED_STATUSES]


def open_tickets(tickets: Iterable[Ticket]) -> list[Ticket]:
    return [ticket for ticket in tickets if ticket.status not in OPEN_EXCLUDED_STATUSES]


def resolution_hours(ticket: Ticket) -> float | None:
    """Signed hours from creation to last modification, ``None`` without both dates."""
    created = parse_timestamp(ticket.created)
    modified = parse_timestamp(ticket.modified)
    if created is None or modified is None:
        return None
    return (modified - created).total_seconds() / SECONDS_PER_HOUR


def mean_resolution_hours(tickets: Iterable[Ticket]) -> float | None:
    hours = [h for h in map(resolution_hours, closed_tickets(tickets)) if h is not None]
    return _mean(hours)


def sla_compliance_pct(tickets: Iterable[Ticket], target_hours: float) -> int | None:
    """Percent of closed tickets resolved within ``target_hours``.

    Closed tickets without readable dates stay in the denominator.
    """
    closed = closed_tickets(tickets)
    if not closed:
        return None
    within = 0
    for ticket in closed:
        hours = resolution_hours(ticket)
        if hours is not None and hours <= target_hours:
            within += 1
    return _round_half_up(within / len(closed) * 100)


def days_open(ticket: Ticket, reference_time: datetime | None = None) -> float:
    created = parse_timestamp(ticket.created)
    if created is None:
        return 0.0
    if reference_time is None:
        reference_time = datetime.now()
    return (to_local_naive(reference_time) - created).total_seconds() / SECONDS_PER_DAY


def mean_open_age_days(tickets: Iterable[Ticket], reference_time: datetime | None = None) -> float | None:
    if reference_time is None:
        reference_time = datetime.now()
    return _mean([days_open(ticket, reference_time) for ticket in open_tickets(tickets)])


def open_by_client(tickets: Iterable[Ticket]) -> list[dict[str, object]]:
    return sort_by_count(group_by(open_tickets(tickets), "client"))


def count_with_priority(tickets: Iterable[Ticket], priority: str) -> int:
    return sum(1 for ticket in tickets if ticket.priority == priority)


def distinct_values(tickets: Iterable[Ticket], field: str) -> list[str]:
    attribute = resolve_field(field)
    return sorted({getattr(ticket, attribute) for ticket in tickets if getattr(ticket, attribute)})


def creation_date_range(tickets: Iterable[Ticket]) -> tuple[pd.Timestamp, pd.Timestamp] | None:
    moments = [moment for moment in (parse_timestamp(ticket.created) for ticket in tickets) if moment is not None]
    if not moments:
        return None
    return min(moments), max(moments)


def sort_by_creation_desc(tickets: Iterable[Ticket]) -> list[Ticket]:
    """Newest first; tickets without a readable creation date go last."""

    def _sort_key(ticket: Ticket) -> float:
        moment = parse_timestamp(ticket.created)
        return moment.value if moment is not None else -math.inf

    return sorted(tickets, key=_sort_key, reverse=True)
