from __future__ import annotations

import logging
import sys

from rofiscript.core.config import settings

CONTEXT_KEYS = (
    "state",
    "ran_by_launcher",
    "has_selection",
    "payload_bytes",
    "encoded_length",
    "option_count",
    "row_count",
    "error",
)


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in CONTEXT_KEYS:
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Route rofiscript logs to stderr.

    stdout carries the rofi protocol, so the handler is always bound to
    stderr. Only the ``rofiscript`` logger is touched; the root logger is
    left to the calling script.
    """
    level_name = (level or settings.ROFI_SCRIPT_LOG_LEVEL).upper()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

    logger = logging.getLogger("rofiscript")
    logger.setLevel(getattr(logging, level_name, logging.WARNING))
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
    return logger
