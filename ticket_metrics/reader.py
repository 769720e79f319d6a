"""Spreadsheet reading and export for ticket exports."""

from __future__ import annotations

import csv
import logging
from io import BytesIO, StringIO
from os import PathLike
from typing import BinaryIO, Iterable, Union

import pandas as pd

from .models import Ticket
from .parsing import tickets_to_frame

logger = logging.getLogger(__name__)

Source = Union[str, PathLike, bytes, BinaryIO]


class TicketFileError(ValueError):
    """The uploaded file is not a readable spreadsheet."""


def _source_name(source: Source, file_name: str | None) -> str:
    if file_name:
        return file_name
    if isinstance(source, (str, PathLike)):
        return str(source)
    return getattr(source, "name", "") or ""


def _read_csv_frame(source: Source) -> pd.DataFrame:
    if isinstance(source, (str, PathLike)):
        with open(source, "rb") as handle:
            payload = handle.read()
    else:
        payload = source.read()
    text = payload.decode("utf-8-sig") if isinstance(payload, bytes) else payload

    # Preamble rows are shorter than data rows, so size the columns on the widest row.
    width = max((len(row) for row in csv.reader(StringIO(text))), default=0)
    if width == 0:
        return pd.DataFrame()
    return pd.read_csv(
        StringIO(text),
        header=None,
        names=range(width),
        index_col=False,
        dtype=object,
        skip_blank_lines=False,
    )


def read_ticket_grid(source: Source, file_name: str | None = None) -> list[list[object]]:
    """Read the first sheet (or a CSV) as a grid of raw cells, without header handling.

    Empty cells come back as ``""``.
    """
    name = _source_name(source, file_name)
    if isinstance(source, bytes):
        source = BytesIO(source)

    try:
        if name.lower().endswith(".csv"):
            frame = _read_csv_frame(source)
        else:
            frame = pd.read_excel(source, sheet_name=0, header=None, dtype=object)
    except Exception as exc:
        raise TicketFileError(f"Could not read ticket file {name or '<buffer>'}: {exc}") from exc

    frame = frame.astype(object).where(frame.notna(), "")
    grid = frame.values.tolist()
    logger.info("Read %d rows from %s", len(grid), name or "<buffer>")
    return grid


def tickets_to_excel_bytes(tickets: Iterable[Ticket], sheet_name: str = "Tickets") -> bytes:
    stream = BytesIO()
    with pd.ExcelWriter(stream, engine="openpyxl") as writer:
        tickets_to_frame(tickets).to_excel(writer, index=False, sheet_name=sheet_name)
    return stream.getvalue()
