"""Plotly figures for aggregate count sequences."""

from __future__ import annotations

from typing import Sequence

import pandas as pd
import plotly.express as px
from plotly.graph_objs import Figure

COLORS = ["#3b82f6", "#8b5cf6", "#ec4899", "#f59e0b", "#10b981", "#6366f1", "#14b8a6", "#f97316"]


def _entries_frame(entries: Sequence[dict]) -> pd.DataFrame:
    return pd.DataFrame(list(entries), columns=["name", "value"])


def fill_month_gaps(entries: Sequence[dict]) -> list[dict[str, object]]:
    """Turn a sparse ``YYYY-MM`` series into a dense one with zero months."""
    if not entries:
        return []
    counts = {entry["name"]: entry["value"] for entry in entries}
    months = pd.period_range(start=min(counts), end=max(counts), freq="M")
    return [{"name": str(month), "value": counts.get(str(month), 0)} for month in months]


def build_bar_figure(entries: Sequence[dict], title: str, color: str = COLORS[0]) -> Figure | None:
    if not entries:
        return None
    df = _entries_frame(entries)
    fig = px.bar(
        df,
        x="value",
        y="name",
        orientation="h",
        title=title,
        labels={"name": "", "value": "Tickets"},
        color_discrete_sequence=[color],
    )
    fig.update_yaxes(autorange="reversed")
    return fig


def build_pie_figure(entries: Sequence[dict], title: str) -> Figure | None:
    if not entries:
        return None
    return px.pie(_entries_frame(entries), names="name", values="value", title=title, color_discrete_sequence=COLORS)


def build_month_figure(entries: Sequence[dict], title: str, fill_gaps: bool = True) -> Figure | None:
    if not entries:
        return None
    series = fill_month_gaps(entries) if fill_gaps else list(entries)
    return px.line(
        _entries_frame(series),
        x="name",
        y="value",
        markers=True,
        title=title,
        labels={"name": "Mes", "value": "Tickets"},
    )
