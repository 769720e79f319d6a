from __future__ import annotations

from datetime import date, datetime

import streamlit as st

from ticket_metrics.analytics import creation_date_range, distinct_values, sort_by_creation_desc
from ticket_metrics.config import clamp_sla_target, configure_logging, load_settings
from ticket_metrics.constants import SLA_TARGET_MAX_HOURS, SLA_TARGET_MIN_HOURS
from ticket_metrics.filters import TicketFilter, filter_tickets, select_segment
from ticket_metrics.models import Ticket
from ticket_metrics.parsing import rows_to_tickets, tickets_to_frame
from ticket_metrics.reader import TicketFileError, read_ticket_grid, tickets_to_excel_bytes
from ticket_metrics.summary import build_ticket_summary, format_days, format_hours
from ticket_metrics.visualization import COLORS, build_bar_figure, build_month_figure, build_pie_figure

settings = load_settings()
configure_logging(settings.log_level)

st.set_page_config(page_title="Análisis de tickets", page_icon="📊", layout="wide")


@st.cache_data(show_spinner=False)
def _load_tickets(file_name: str, payload: bytes, header_row_index: int) -> list[Ticket]:
    grid = read_ticket_grid(payload, file_name=file_name)
    return rows_to_tickets(grid, header_row_index=header_row_index)


def _select(label: str, options: list[str], placeholder: str) -> str | None:
    choice = st.sidebar.selectbox(label, [placeholder] + options)
    return None if choice == placeholder else choice


st.title("Análisis de tickets · Mesa de Ayuda")
st.caption("Subí el Excel de la bandeja de equipo para ver métricas por cliente, severidad y más.")

uploaded = st.file_uploader("Excel de tickets", type=["xlsx", "xls", "csv"])
if uploaded is None:
    st.info("Arrastrá el Excel acá o hacé clic para elegir.")
    st.stop()

try:
    tickets = _load_tickets(uploaded.name, uploaded.getvalue(), settings.header_row_index)
except TicketFileError as exc:
    st.error(str(exc))
    st.stop()

if not tickets:
    st.warning("No se encontraron tickets en el archivo.")
    st.stop()

st.sidebar.header("Filtros")

date_range = creation_date_range(tickets)
default_start: date | None = date_range[0].date() if date_range else None
default_end: date | None = date_range[1].date() if date_range else None
start_date = st.sidebar.date_input("Desde", value=default_start)
end_date = st.sidebar.date_input("Hasta", value=default_end)

ticket_filter = TicketFilter(
    start_date=start_date or None,
    end_date=end_date or None,
    client=_select("Cliente", distinct_values(tickets, "client"), "Todos"),
    author=_select("Autor", distinct_values(tickets, "author"), "Todos"),
    priority=_select("Prioridad", distinct_values(tickets, "priority"), "Todas"),
    status=_select("Estado", distinct_values(tickets, "status"), "Todos"),
    assignee=_select("Asignado", distinct_values(tickets, "assignee"), "Todos"),
)
sla_target = clamp_sla_target(
    st.sidebar.number_input(
        "Objetivo SLA (horas)",
        min_value=SLA_TARGET_MIN_HOURS,
        max_value=SLA_TARGET_MAX_HOURS,
        value=settings.sla_target_hours,
    )
)

filtered = filter_tickets(tickets, ticket_filter)
summary = build_ticket_summary(filtered, sla_target_hours=sla_target, reference_time=datetime.now())

if ticket_filter.is_active():
    st.caption(f"Mostrando {len(filtered)} de {len(tickets)} tickets")

col1, col2, col3, col4 = st.columns(4)
col1.metric("Tickets", f"{summary['total_tickets']}")
col2.metric("Cerrados", f"{summary['closed_tickets']}")
col3.metric("Urgentes", f"{summary['urgent_tickets']}")
col4.metric("Abiertos", f"{summary['open_tickets']}")

col1, col2, col3 = st.columns(3)
sla_pct = summary["sla_compliance_pct"]
col1.metric(f"Cumplimiento SLA (≤ {sla_target} h)", "—" if sla_pct is None else f"{sla_pct}%")
col2.metric("TTR promedio", format_hours(summary["mean_resolution_hours"]))
col3.metric("Tiempo de vida promedio abiertos", format_days(summary["mean_open_age_days"]))

charts = [
    (build_bar_figure(summary["open_by_client"][:10], "Casos abiertos por cliente", color="#dc2626"), "open_by_client"),
    (build_bar_figure(summary["by_client"], "Tickets por cliente"), "by_client"),
    (build_pie_figure(summary["by_priority"], "Tickets por prioridad"), "by_priority"),
    (build_pie_figure(summary["by_status"], "Tickets por estado"), "by_status"),
    (build_bar_figure(summary["by_type"], "Tickets por tipo", color=COLORS[1]), "by_type"),
    (build_bar_figure(summary["by_assignee"], "Tickets por asignado", color=COLORS[4]), "by_assignee"),
    (build_month_figure(summary["by_month_created"], "Tickets creados por mes"), "by_month_created"),
]
left, right = st.columns(2)
for index, (fig, key) in enumerate(charts):
    target = left if index % 2 == 0 else right
    if fig is None:
        target.info("Sin datos")
    else:
        target.plotly_chart(fig, use_container_width=True, key=key)

st.subheader("Tickets")
segment_field = st.selectbox("Segmento", ["Ninguno", "Cliente", "Prioridad", "Estado", "Tipo"])
listed = sort_by_creation_desc(filtered)
if segment_field != "Ninguno":
    segment_value = st.selectbox("Valor", distinct_values(filtered, segment_field))
    if segment_value:
        listed = select_segment(listed, segment_field, segment_value)

if not listed:
    st.info("No hay tickets con los filtros aplicados.")
else:
    st.caption(f"{len(listed)} tickets (ordenados por fecha de creación, más recientes primero)")
    st.dataframe(tickets_to_frame(listed), use_container_width=True)
    st.download_button(
        "Descargar Excel",
        data=tickets_to_excel_bytes(listed),
        file_name=f"tickets-filtrados-{date.today().isoformat()}.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )
