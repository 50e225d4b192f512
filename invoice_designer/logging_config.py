"""Logging bootstrap for the API process and the maintenance scripts."""

from __future__ import annotations

import logging

from invoice_designer.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger once using ``LOG_LEVEL`` unless ``level`` is given."""

    resolved = (level or get_settings().log_level or "INFO").upper()
    numeric_level = logging.getLevelName(resolved)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    root.setLevel(numeric_level)


__all__ = ["configure_logging"]
