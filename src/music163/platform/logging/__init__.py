"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the library logger, its setup and reset helpers, and the Rich HTTP handler.
Why: Provide a single canonical import path for every module that logs.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, reset_logger, setup_logger
from .handlers import HttpEventRichHandler

__all__ = [
    "HttpEventRichHandler",
    "LOGGER_NAME",
    "logger",
    "reset_logger",
    "setup_logger",
]
