from __future__ import annotations

"""
Logging Configuration Model.

One frozen value describes where diagnostics go: stderr, an optional
rotating file, or both. The CLI derives it from its --debug and --log-file
flags.
"""

import logging
from dataclasses import dataclass
from typing import Optional

DEBUG_LEVEL = "DEBUG"
DEFAULT_LEVEL = "INFO"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for the diagnostics subsystem.

    Attributes:
        level: Minimum severity name ('DEBUG', 'INFO', ...). Unknown names
            mean INFO.
        console: Emit records on stderr.
        log_file: Optional path of a rotating log file.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files to keep.
    """
    level: str = DEFAULT_LEVEL
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 512 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def for_cli(cls, debug: bool, log_file: Optional[str] = None) -> "LoggingConfig":
        """Diagnostics for one CLI run: stderr always, file only on request."""
        return cls(level=DEBUG_LEVEL if debug else DEFAULT_LEVEL, console=True, log_file=log_file)

    def level_number(self) -> int:
        """Numeric logging level; INFO when the name is not a standard level."""
        number = logging.getLevelName((self.level or "").strip().upper())
        return number if isinstance(number, int) else logging.INFO
