"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Configure the shared ``music163`` logger and expose it to every module.
Why: Separate handler formatting from setup so configuration stays concise.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Final

from rich.console import Console

from .handlers import HttpEventRichHandler

LOGGER_NAME: Final[str] = "music163"


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    console: Console | None = None,
) -> logging.Logger:
    """Set up and configure the library logger.

    Calling this again replaces the previously attached handlers, so the CLI
    can raise verbosity or add a log file after import.
    """

    logger = _detach_handlers()
    logger.setLevel(logging.DEBUG)

    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    console_handler = HttpEventRichHandler(
        console=console or Console(stderr=True, soft_wrap=True)
    )
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        resolved_log_file = Path(log_file).expanduser().resolve()
        os.makedirs(resolved_log_file.parent, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            resolved_log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


def reset_logger() -> logging.Logger:
    """Return the library logger to its import-time state.

    Only a ``NullHandler`` stays attached, so records reach the embedding
    application through propagation and are not printed twice.
    """

    logger = _detach_handlers()
    logger.setLevel(logging.NOTSET)
    logger.addHandler(logging.NullHandler())
    return logger


def _detach_handlers() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    return logger


logger: Final[logging.Logger] = reset_logger()


__all__ = ["LOGGER_NAME", "logger", "reset_logger", "setup_logger"]
