from __future__ import annotations

"""
Diagnostic Handler Factories.

Builds the delivery handlers for a LoggingConfig. Every handler we create
is tagged, so a reconfiguration removes ours and leaves handlers installed
by libraries or test harnesses alone.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional, TypeVar

from combinenotes.infra.logging.config import LoggingConfig

_HANDLER_TAG_ATTR = "_combinenotes_handler"

H = TypeVar("H", bound=logging.Handler)


def tag_handler(handler: H) -> H:
    """Mark a handler as ours and return it."""
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def is_tagged(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def build_handlers(cfg: LoggingConfig, level: int) -> List[logging.Handler]:
    """
    Create the handlers a QueueListener should deliver to.

    A log file that cannot be opened is reported on stderr and skipped; the
    run continues with console diagnostics only.

    Args:
        cfg: Logging settings.
        level: Numeric threshold applied to each handler.

    Returns:
        List[logging.Handler]: Tagged handlers, possibly empty.
    """
    handlers: List[logging.Handler] = []

    if cfg.console:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(cfg.console_fmt))
        console.setLevel(level)
        handlers.append(tag_handler(console))

    if cfg.log_file:
        rotating = _open_log_file(cfg)
        if rotating is not None:
            rotating.setLevel(level)
            handlers.append(tag_handler(rotating))

    return handlers


def _open_log_file(cfg: LoggingConfig) -> Optional[RotatingFileHandler]:
    path = os.path.abspath(cfg.log_file)
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        handler = RotatingFileHandler(
            path,
            maxBytes=cfg.max_bytes,
            backupCount=cfg.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Log file '{path}' unavailable, logging to console only: {e}\n")
        return None
    handler.setFormatter(logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt))
    return handler
