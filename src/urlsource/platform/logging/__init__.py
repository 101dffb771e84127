"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the package logger, setup helpers, and the Rich handler.
Why: Provide a single canonical import path for every layer.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, LOGGER_NAME, logger, setup_logger
from .handlers import LocatorRichHandler

__all__ = [
    "DEFAULT_LOG_FILE",
    "LOGGER_NAME",
    "LocatorRichHandler",
    "logger",
    "setup_logger",
]
