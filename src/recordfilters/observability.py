"""Observability: structured logs for filter evaluation."""

from __future__ import annotations

import logging
from typing import Any

_LOGGER = logging.getLogger("recordfilters")


def get_logger() -> logging.Logger:
    return _LOGGER


def configure_logging(level: str | int | None = None) -> None:
    """Set the package logger level, defaulting to ``RuntimeSettings.log_level``."""
    if level is None:
        from .config.runtime import get_settings

        level = get_settings().log_level
    _LOGGER.setLevel(level.upper() if isinstance(level, str) else level)


def log_evaluation(
    logic: str,
    filter_count: int,
    records_in: int,
    records_out: int,
    extra: dict[str, Any] | None = None,
) -> None:
    """Emit one structured debug record per evaluation."""
    if not _LOGGER.isEnabledFor(logging.DEBUG):
        return
    payload: dict[str, Any] = {
        "logic": logic,
        "filter_count": filter_count,
        "records_in": records_in,
        "records_out": records_out,
    }
    if extra:
        payload.update(extra)
    _LOGGER.debug("filter_evaluation", extra=payload)
