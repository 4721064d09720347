"""
Logging configuration helpers.
The dashboard and its domain modules share one process-wide logging setup.
Keeping this isolated means the Streamlit entrypoint only has to call one function.
"""

from __future__ import annotations

import logging

from src.common.settings import get_settings

_LOGGING_CONFIGURED = False


def configure_logging() -> None:
    """Configure process-wide logging from environment settings."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level_value,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    _LOGGING_CONFIGURED = True
