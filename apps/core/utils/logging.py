from __future__ import annotations

import logging
from typing import Any

_LEVELS = ("debug", "info", "warning", "error", "critical")


def log_event(logger: logging.Logger, level: str, message: str, **extra: Any) -> None:
    """
    Structured logging helper. Attaches the keyword arguments as an
    ``event`` payload on the record so handlers can pick them up.

    Unknown level names fall back to INFO.
    """
    level = level.lower()
    numeric = getattr(logging, level.upper()) if level in _LEVELS else logging.INFO
    logger.log(numeric, message, extra={"event": extra})
