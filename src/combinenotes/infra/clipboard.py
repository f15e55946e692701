from __future__ import annotations

"""
System Clipboard Access.

Thin wrapper over pyperclip so that sinks depend on a plain callable and
tests can inject a fake writer.
"""

import logging
from typing import Callable

import pyperclip

logger = logging.getLogger(__name__)

ClipboardWriter = Callable[[str], None]


def write_clipboard(text: str) -> None:
    """
    Replace the system clipboard content with the given text.

    Raises:
        pyperclip.PyperclipException: If no clipboard mechanism is available.
    """
    pyperclip.copy(text)
    logger.debug(f"Copied {len(text)} characters to the clipboard.")
