from __future__ import annotations

import dataclasses

import pytest

from ticket_metrics.models import Ticket, resolve_field


def test_ticket_get_by_attribute_or_label() -> None:
    ticket = Ticket(7, client="Acme", title="VPN", status="Nuevo", created="2024-01-01")

    assert ticket.get("client") == "Acme"
    assert ticket.get("Cliente") == "Acme"
    assert ticket.get("Título") == "VPN"
    assert ticket.get("ID") == 7
    assert ticket.as_row() == [7, "Acme", "VPN", "", "", "", "", "Nuevo", "2024-01-01", ""]


def test_resolve_field_unknown_name() -> None:
    assert resolve_field("Creación") == "created"
    with pytest.raises(KeyError):
        resolve_field("Severidad")


def test_ticket_is_immutable() -> None:
    ticket = Ticket(1)

    with pytest.raises(dataclasses.FrozenInstanceError):
        ticket.status = "Cerrado"
