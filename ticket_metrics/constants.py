"""Constants for ticket ingestion and metrics."""

from __future__ import annotations

from typing import Dict, List, Tuple

# Zero-based index of the label row in the exported sheet (row 3 in Excel).
HEADER_ROW_INDEX = 2

# (attribute, source label) in fixed column order.
TICKET_COLUMNS: List[Tuple[str, str]] = [
    ("ticket_id", "ID"),
    ("client", "Cliente"),
    ("title", "Título"),
    ("ticket_type", "Tipo"),
    ("author", "Autor"),
    ("assignee", "Asignado"),
    ("priority", "Prioridad"),
    ("status", "Estado"),
    ("created", "Creación"),
    ("modified", "Modificación"),
]

FIELD_NAMES: List[str] = [attribute for attribute, _ in TICKET_COLUMNS]
COLUMN_LABELS: List[str] = [label for _, label in TICKET_COLUMNS]
FIELD_BY_LABEL: Dict[str, str] = {label: attribute for attribute, label in TICKET_COLUMNS}
LABEL_BY_FIELD: Dict[str, str] = {attribute: label for attribute, label in TICKET_COLUMNS}

DATE_FIELDS = ("created", "modified")

NO_VALUE_LABEL = "(sin valor)"

CLOSED_STATUSES = frozenset({"Resuelto", "Cerrado"})

# Rechazado is neither closed nor open.
OPEN_EXCLUDED_STATUSES = frozenset({"Resuelto", "Cerrado", "Rechazado"})

URGENT_PRIORITY = "Urgente"

DEFAULT_SLA_TARGET_HOURS = 24
SLA_TARGET_MIN_HOURS = 1
SLA_TARGET_MAX_HOURS = 720

TOP_CLIENTS_LIMIT = 12
TOP_ASSIGNEES_LIMIT = 10

EXCEL_EPOCH = "1899-12-30"
