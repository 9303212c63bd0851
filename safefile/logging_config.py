# SafeFile - Crash-safe file replacement
# Copyright (C) 2026 SafeFile Authors
# SPDX-License-Identifier: Apache-2.0

"""Optional structured output for the ``safefile`` logger.

Every module emits through ``logging.getLogger(__name__)`` and nothing is
installed on import. :func:`setup_logging` attaches structlog-rendered
handlers to the ``safefile`` logger only; the root logger, its handlers
and its level belong to the embedding application and are never touched.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import structlog

LOGGER_NAME = "safefile"
LOG_FILE_NAME = "safefile.log"

_HANDLER_PREFIX = "safefile."
_MAX_LOG_BYTES = 10 * 1024 * 1024
_LOG_BACKUPS = 5


def _pre_chain() -> list:
    """Processors applied to every stdlib record before rendering."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _formatter(renderer) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=_pre_chain(),
    )


def _detach_own_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if (handler.get_name() or "").startswith(_HANDLER_PREFIX):
            logger.removeHandler(handler)
            handler.close()


def setup_logging(
    level: str = "INFO",
    log_dir: Path | None = None,
    json_file: bool = True,
    *,
    propagate: bool = True,
) -> logging.Logger:
    """Route ``safefile.*`` records to a console and an optional log file.

    Calling it again replaces the handlers installed by the previous call.
    Handlers added by the application, on ``safefile`` or elsewhere, stay.

    Args:
        level: Level of the ``safefile`` logger (DEBUG, INFO, ...).
            Unknown names fall back to INFO.
        log_dir: Directory for ``safefile.log``; no file output if None.
        json_file: JSON lines in the file instead of plain text.
        propagate: Whether records still reach the application's handlers.

    Returns:
        The configured ``safefile`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    _detach_own_handlers(logger)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = propagate

    console = logging.StreamHandler()
    console.set_name(_HANDLER_PREFIX + "console")
    console.setFormatter(_formatter(structlog.dev.ConsoleRenderer()))
    logger.addHandler(console)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        if json_file:
            renderer = structlog.processors.JSONRenderer()
        else:
            renderer = structlog.dev.ConsoleRenderer(colors=False)
        file_handler = RotatingFileHandler(
            log_dir / LOG_FILE_NAME,
            maxBytes=_MAX_LOG_BYTES,
            backupCount=_LOG_BACKUPS,
            encoding="utf-8",
        )
        file_handler.set_name(_HANDLER_PREFIX + "file")
        file_handler.setFormatter(_formatter(renderer))
        logger.addHandler(file_handler)

    return logger
