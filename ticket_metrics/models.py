"""Typed ticket record."""

from __future__ import annotations

from dataclasses import astuple, dataclass

from .constants import FIELD_BY_LABEL, FIELD_NAMES


def resolve_field(field: str) -> str:
    """Map a source label (``"Cliente"``) or attribute name (``"client"``) to the attribute name."""
    if field in FIELD_NAMES:
        return field
    attribute = FIELD_BY_LABEL.get(field)
    if attribute is None:
        raise KeyError(f"Unknown ticket field: {field!r}")
    return attribute


@dataclass(frozen=True)
class Ticket:
    ticket_id: int | float
    client: str = ""
    title: str = ""
    ticket_type: str = ""
    author: str = ""
    assignee: str = ""
    priority: str = ""
    status: str = ""
    created: str = ""
    modified: str = ""

    def get(self, field: str):
        return getattr(self, resolve_field(field))

    def as_row(self) -> list:
        return list(astuple(self))
