"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, setup helpers, and the rich handler.
Why: Provide a single canonical import path for every layer.
"""

from __future__ import annotations

from .config import LOGGER_NAME, console_for, logger, setup_logger
from .handlers import CountdownRichHandler

__all__ = [
    "CountdownRichHandler",
    "LOGGER_NAME",
    "console_for",
    "logger",
    "setup_logger",
]
