"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from .constants import (
    DEFAULT_SLA_TARGET_HOURS,
    HEADER_ROW_INDEX,
    SLA_TARGET_MAX_HOURS,
    SLA_TARGET_MIN_HOURS,
)

logger = logging.getLogger(__name__)

ENV_HEADER_ROW_INDEX = "TICKET_METRICS_HEADER_ROW_INDEX"
ENV_SLA_TARGET_HOURS = "TICKET_METRICS_SLA_TARGET_HOURS"
ENV_LOG_LEVEL = "TICKET_METRICS_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    header_row_index: int = HEADER_ROW_INDEX
    sla_target_hours: int = DEFAULT_SLA_TARGET_HOURS
    log_level: str = "INFO"


def clamp_sla_target(value: object) -> int:
    """Validate an SLA target in hours; anything outside 1..720 falls back to the default."""
    try:
        hours = int(float(str(value).strip()))
    except (TypeError, ValueError):
        return DEFAULT_SLA_TARGET_HOURS
    if hours < SLA_TARGET_MIN_HOURS or hours > SLA_TARGET_MAX_HOURS:
        return DEFAULT_SLA_TARGET_HOURS
    return hours


def _read_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        logger.warning("Ignoring %s=%r, not an integer; using %d", name, raw, default)
        return default


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    if environ is None:
        environ = os.environ

    header_row_index = _read_int(environ, ENV_HEADER_ROW_INDEX, HEADER_ROW_INDEX)
    if header_row_index < 0:
        logger.warning("Ignoring negative %s=%d; using %d", ENV_HEADER_ROW_INDEX, header_row_index, HEADER_ROW_INDEX)
        header_row_index = HEADER_ROW_INDEX

    sla_target = _read_int(environ, ENV_SLA_TARGET_HOURS, DEFAULT_SLA_TARGET_HOURS)
    if clamp_sla_target(sla_target) != sla_target:
        logger.warning(
            "Ignoring %s=%d outside %d..%d; using %d",
            ENV_SLA_TARGET_HOURS,
            sla_target,
            SLA_TARGET_MIN_HOURS,
            SLA_TARGET_MAX_HOURS,
            DEFAULT_SLA_TARGET_HOURS,
        )
        sla_target = DEFAULT_SLA_TARGET_HOURS

    log_level = environ.get(ENV_LOG_LEVEL, "INFO").strip().upper() or "INFO"
    if not isinstance(logging.getLevelName(log_level), int):
        logger.warning("Ignoring unknown %s=%r; using INFO", ENV_LOG_LEVEL, log_level)
        log_level = "INFO"

    return Settings(header_row_index=header_row_index, sla_target_hours=sla_target, log_level=log_level)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
