from __future__ import annotations

from datetime import datetime

import pytest

from ticket_metrics.models import Ticket


@pytest.fixture
def reference_time() -> datetime:
    return datetime(2024, 3, 1, 0, 0, 0)


@pytest.fixture
def raw_grid() -> list[list[object]]:
    return [
        ["Bandeja de equipo - Mesa de Ayuda"],
        ["Exportado el 2024-03-01", "", ""],
        ["ID", "Cliente", "Título", "Tipo", "Autor", "Asignado", "Prioridad", "Estado", "Creación", "Modificación"],
        [101, " Acme ", "VPN caída", "Incidente", "ana", "luis", "Urgente", "Resuelto", "2024-01-01T00:00:00", "2024-01-01T10:00:00"],
        ["102", "Globex", "Alta de usuario", "Pedido", "ana", "", "Media", "Cerrado", "2024-01-05T00:00:00", "2024-01-07T00:00:00"],
        [103, "Acme", "Impresora", "Incidente", "juan", "luis", "Alta", "En progreso", "2024-02-10T00:00:00", "2024-02-11T00:00:00"],
        [104, "", "Consulta", "Consulta", "juan", "marta", "", "Rechazado", "2024-02-20T00:00:00", "2024-02-20T01:00:00"],
        [105, "Initech", "Backup", "Incidente", "ana", "marta", "Urgente", "Nuevo", "", ""],
        ["abc", "Acme", "ID inválido", "", "", "", "", "Nuevo", "2024-02-01T00:00:00", ""],
        ["", "Acme", "Sin ID", "", "", "", "", "Nuevo", "2024-02-01T00:00:00", ""],
        [None, None, None, None, None, None, None, None, None, None],
        [],
    ]


@pytest.fixture
def sample_tickets() -> list[Ticket]:
    return [
        Ticket(1, "Acme", "VPN", "Incidente", "ana", "luis", "Urgente", "Resuelto", "2024-01-01T00:00:00", "2024-01-01T10:00:00"),
        Ticket(2, "Globex", "Alta", "Pedido", "ana", "", "Media", "Cerrado", "2024-01-05T00:00:00", "2024-01-07T00:00:00"),
        Ticket(3, "Acme", "Impresora", "Incidente", "juan", "luis", "Alta", "En progreso", "2024-02-10T00:00:00", "2024-02-11T00:00:00"),
        Ticket(4, "", "Consulta", "Consulta", "juan", "marta", "", "Rechazado", "2024-02-20T00:00:00", "2024-02-20T01:00:00"),
        Ticket(5, "Initech", "Backup", "Incidente", "ana", "marta", "Urgente", "Nuevo", "2024-02-25T00:00:00", ""),
    ]
