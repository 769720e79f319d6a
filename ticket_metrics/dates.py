"""Lenient timestamp parsing for spreadsheet date cells."""

from __future__ import annotations

import re
import warnings
from datetime import datetime

import numpy as np
import pandas as pd

from .constants import EXCEL_EPOCH

_NUMERIC_TEXT = re.compile(r"\d+(\.\d+)?")


def _is_missing(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and np.isnan(value):
        return True
    return value is pd.NaT


def to_local_naive(moment: datetime | pd.Timestamp) -> pd.Timestamp:
    """Return ``moment`` as a naive timestamp on the local calendar."""
    stamp = pd.Timestamp(moment)
    if stamp.tzinfo is not None:
        stamp = pd.Timestamp(stamp.to_pydatetime().astimezone().replace(tzinfo=None))
    return stamp


def parse_timestamp(value: object) -> pd.Timestamp | None:
    """Parse a cell into a local naive timestamp, or ``None`` when it cannot be read.

    Tries ISO / month-first parsing, then day-first, then Excel serial day
    numbers for purely numeric text.
    """
    if _is_missing(value):
        return None
    if isinstance(value, (datetime, pd.Timestamp)):
        return to_local_naive(value)

    text = str(value).strip()
    if not text:
        return None

    with warnings.catch_warnings():
        # pandas warns per cell when the day/month order disagrees with dayfirst.
        warnings.simplefilter("ignore", UserWarning)
        parsed = pd.to_datetime(text, errors="coerce")
        if pd.isna(parsed):
            parsed = pd.to_datetime(text, errors="coerce", dayfirst=True)
    if pd.isna(parsed) and _NUMERIC_TEXT.fullmatch(text):
        parsed = pd.to_datetime(float(text), unit="D", origin=EXCEL_EPOCH, errors="coerce")
    if pd.isna(parsed):
        return None
    return to_local_naive(parsed)
