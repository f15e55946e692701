from __future__ import annotations

from .config import LoggingConfig
from .core import configure_logging, get_logger, reset_logging
from .handlers import is_tagged

__all__ = [
    "LoggingConfig",
    "configure_logging",
    "get_logger",
    "is_tagged",
    "reset_logging",
]
