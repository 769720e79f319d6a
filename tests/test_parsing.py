from __future__ import annotations

import logging
import math

import numpy as np
import pandas as pd

from ticket_metrics.constants import COLUMN_LABELS, HEADER_ROW_INDEX
from ticket_metrics.models import Ticket
from ticket_metrics.parsing import (
    check_header_labels,
    parse_ticket_row,
    rows_to_tickets,
    tickets_to_frame,
    tickets_to_grid,
)


def test_parse_ticket_row_trims_and_defaults() -> None:
    ticket = parse_ticket_row([" 7 ", " Acme ", None, "Incidente"])

    assert ticket == Ticket(7, "Acme", "", "Incidente")
    assert ticket.status == ""
    assert ticket.modified == ""


def test_parse_ticket_row_blank_id_is_absent() -> None:
    assert parse_ticket_row([]) is None
    assert parse_ticket_row([None, "Acme"]) is None
    assert parse_ticket_row(["", "Acme"]) is None
    assert parse_ticket_row(["   ", "Acme"]) is None
    assert parse_ticket_row([np.nan, "Acme"]) is None


def test_parse_ticket_row_non_numeric_id_is_nan() -> None:
    ticket = parse_ticket_row(["abc", "Acme"])

    assert ticket is not None
    assert math.isnan(ticket.ticket_id)


def test_parse_ticket_row_id_coercion() -> None:
    assert parse_ticket_row([12.0]).ticket_id == 12
    assert isinstance(parse_ticket_row([12.0]).ticket_id, int)
    assert parse_ticket_row(["12.5"]).ticket_id == 12.5
    assert parse_ticket_row([np.int64(9)]).ticket_id == 9
    assert math.isnan(parse_ticket_row(["inf"]).ticket_id)


def test_rows_to_tickets_skips_preamble_and_bad_rows(raw_grid) -> None:
    tickets = rows_to_tickets(raw_grid)

    assert [t.ticket_id for t in tickets] == [101, 102, 103, 104, 105]
    assert tickets[0].client == "Acme"
    assert tickets[1].assignee == ""
    assert len(tickets) <= len(raw_grid) - (HEADER_ROW_INDEX + 1)
    assert all(isinstance(t.ticket_id, int) for t in tickets)


def test_rows_to_tickets_skips_non_sequence_rows() -> None:
    grid = [[], [], list(COLUMN_LABELS), "not a row", None, 42, (5, "Acme"), np.array([6, "Globex"], dtype=object)]

    tickets = rows_to_tickets(grid)

    assert [(t.ticket_id, t.client) for t in tickets] == [(5, "Acme"), (6, "Globex")]


def test_rows_to_tickets_skips_container_id_cells() -> None:
    grid = [[], [], list(COLUMN_LABELS), [{"a": 1}, "Acme"], [[1], "Initech"], [(2,), "Umbrella"], [7, "Globex"]]

    tickets = rows_to_tickets(grid)

    assert [(t.ticket_id, t.client) for t in tickets] == [(7, "Globex")]
    assert math.isnan(parse_ticket_row([{"a": 1}]).ticket_id)


def test_rows_to_tickets_keeps_duplicate_ids_in_order() -> None:
    grid = [[], [], list(COLUMN_LABELS), [1, "B"], [1, "A"], [0, "C"]]

    tickets = rows_to_tickets(grid)

    assert [(t.ticket_id, t.client) for t in tickets] == [(1, "B"), (1, "A"), (0, "C")]


def test_rows_to_tickets_custom_header_index() -> None:
    grid = [list(COLUMN_LABELS), [1, "Acme"], [2, "Globex"]]

    assert [t.ticket_id for t in rows_to_tickets(grid, header_row_index=0)] == [1, 2]


def test_rows_to_tickets_short_grid_returns_empty() -> None:
    assert rows_to_tickets([]) == []
    assert rows_to_tickets([["Título"], ["x"]]) == []


def test_check_header_labels_warns_on_mismatch(caplog) -> None:
    grid = [[], [], ["ID", "Client", "Título"], [1, "Acme"]]

    with caplog.at_level(logging.WARNING, logger="ticket_metrics.parsing"):
        problems = check_header_labels(grid)
        tickets = rows_to_tickets(grid)

    assert any("column 1" in problem for problem in problems)
    assert any("column 3" in problem for problem in problems)
    assert "Unexpected header label" in caplog.text
    assert [t.ticket_id for t in tickets] == [1]


def test_check_header_labels_accepts_case_variants(raw_grid) -> None:
    grid = [list(row) for row in raw_grid]
    grid[HEADER_ROW_INDEX] = [label.upper() for label in COLUMN_LABELS]

    assert check_header_labels(grid) == []


def test_round_trip_grid(sample_tickets) -> None:
    grid = tickets_to_grid(sample_tickets, preamble=[["Reporte"], ["Generado"]])

    assert grid[0] == ["Reporte"]
    assert grid[HEADER_ROW_INDEX] == COLUMN_LABELS
    assert rows_to_tickets(grid) == sample_tickets


def test_tickets_to_frame_uses_source_labels(sample_tickets) -> None:
    frame = tickets_to_frame(sample_tickets)

    assert list(frame.columns) == COLUMN_LABELS
    assert frame["ID"].tolist() == [1, 2, 3, 4, 5]
    assert frame.loc[0, "Cliente"] == "Acme"
    assert tickets_to_frame([]).empty
    assert isinstance(frame, pd.DataFrame)
