"""Turn the raw cell grid of a ticket export into typed ``Ticket`` records."""

from __future__ import annotations

import logging
import math
from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from .constants import COLUMN_LABELS, HEADER_ROW_INDEX
from .models import Ticket

logger = logging.getLogger(__name__)

_ROW_TYPES = (list, tuple, np.ndarray)


def _is_blank(value: object) -> bool:
    if value is None or value is pd.NaT:
        return True
    if isinstance(value, float) and np.isnan(value):
        return True
    return isinstance(value, str) and not value.strip()


def _cell_text(value: object) -> str:
    if _is_blank(value):
        return ""
    return str(value).strip()


def _coerce_id(value: object) -> int | float:
    if not pd.api.types.is_scalar(value):
        return math.nan
    if isinstance(value, str):
        value = value.strip()
    numeric = pd.to_numeric(value, errors="coerce")
    if pd.isna(numeric):
        return math.nan
    numeric = float(numeric)
    if not math.isfinite(numeric):
        return math.nan
    return int(numeric) if numeric.is_integer() else numeric


def is_valid_id(ticket_id: object) -> bool:
    return isinstance(ticket_id, (int, float)) and not isinstance(ticket_id, bool) and math.isfinite(ticket_id)


def parse_ticket_row(row: Sequence[object]) -> Ticket | None:
    """Parse one data row by column position; ``None`` when the ID cell is blank.

    A non-numeric ID still yields a Ticket (with a NaN ID) so that
    ``rows_to_tickets`` can tell it apart from a blank trailing row.
    """
    cells = list(row)
    if not cells or _is_blank(cells[0]):
        return None
    cells += [None] * (len(COLUMN_LABELS) - len(cells))
    return Ticket(_coerce_id(cells[0]), *(_cell_text(cell) for cell in cells[1 : len(COLUMN_LABELS)]))


def check_header_labels(grid: Sequence[object], header_row_index: int = HEADER_ROW_INDEX) -> list[str]:
    """Compare the label row with the expected column labels.

    Returns one message per mismatching column and logs them as warnings.
    Parsing never depends on the result; columns are always bound by position.
    """
    if header_row_index < 0 or header_row_index >= len(grid):
        return []
    header = grid[header_row_index]
    if not isinstance(header, _ROW_TYPES):
        return []

    cells = list(header)
    problems: list[str] = []
    for index, expected in enumerate(COLUMN_LABELS):
        found = _cell_text(cells[index]) if index < len(cells) else ""
        if found.casefold() != expected.casefold():
            problems.append(f"column {index}: expected {expected!r}, found {found!r}")

    for problem in problems:
        logger.warning("Unexpected header label in row %d, %s", header_row_index, problem)
    return problems


def rows_to_tickets(grid: Sequence[object], header_row_index: int = HEADER_ROW_INDEX) -> list[Ticket]:
    check_header_labels(grid, header_row_index)

    tickets: list[Ticket] = []
    skipped = 0
    for row in grid[header_row_index + 1 :]:
        if not isinstance(row, _ROW_TYPES):
            skipped += 1
            continue
        ticket = parse_ticket_row(row)
        if ticket is None or not is_valid_id(ticket.ticket_id):
            skipped += 1
            continue
        tickets.append(ticket)

    logger.info("Parsed %d tickets, skipped %d rows", len(tickets), skipped)
    return tickets


def tickets_to_grid(
    tickets: Iterable[Ticket],
    preamble: Sequence[Sequence[object]] | None = None,
    header_row_index: int = HEADER_ROW_INDEX,
) -> list[list[object]]:
    """Lay tickets back out in the export format: preamble rows, label row, data rows."""
    grid: list[list[object]] = [list(row) for row in (preamble or [])][:header_row_index]
    while len(grid) < header_row_index:
        grid.append([])
    grid.append(list(COLUMN_LABELS))
    grid.extend(ticket.as_row() for ticket in tickets)
    return grid


def tickets_to_frame(tickets: Iterable[Ticket]) -> pd.DataFrame:
    return pd.DataFrame([ticket.as_row() for ticket in tickets], columns=COLUMN_LABELS)
