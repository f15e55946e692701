from __future__ import annotations

"""
Markdown Line Styling.

Classifies the lines of a combined document into display styles for the
preview surface. Only line-level constructs are recognized; the content of
each note is otherwise shown verbatim. Also holds the status line shown
after a copy attempt.
"""

import re
from typing import List, Optional, Tuple

from combinenotes.domain.constants import BLOCK_SEPARATOR
from combinenotes.utils.i18n import i18n

TAG_DOCUMENT = "document_header"
TAG_HEADING = "heading"
TAG_SEPARATOR = "separator"
TAG_QUOTE = "quote"
TAG_CODE = "code"

_DOCUMENT_HEADER_RX = re.compile(r"^# Document: ")
_HEADING_RX = re.compile(r"^#{1,6}\s")
_FENCE_RX = re.compile(r"^(```|~~~)")

STYLE_COLORS = {
    TAG_DOCUMENT: "#2CC985",
    TAG_HEADING: "#3B8ED0",
    TAG_SEPARATOR: "gray50",
    TAG_QUOTE: "gray60",
    TAG_CODE: "#F0AD4E",
}

STATUS_OK_COLOR = "#2CC985"
STATUS_ERROR_COLOR = "#E04F5F"


def classify_line(line: str, in_code: bool = False) -> Optional[str]:
    """Return the style tag of a single line, or None for plain text."""
    if in_code or _FENCE_RX.match(line):
        return TAG_CODE
    if line == BLOCK_SEPARATOR.rstrip("\n"):
        return TAG_SEPARATOR
    if _DOCUMENT_HEADER_RX.match(line):
        return TAG_DOCUMENT
    if _HEADING_RX.match(line):
        return TAG_HEADING
    if line.startswith(">"):
        return TAG_QUOTE
    return None


def markdown_line_tags(text: str) -> List[Tuple[int, str]]:
    """
    Compute the styled lines of a document.

    Args:
        text: Document text.

    Returns:
        List[Tuple[int, str]]: (1-based line number, tag) for each styled line,
        in Tk text index convention.
    """
    tags: List[Tuple[int, str]] = []
    in_code = False
    for number, line in enumerate(text.split("\n"), start=1):
        is_fence = bool(_FENCE_RX.match(line))
        tag = classify_line(line, in_code)
        if tag:
            tags.append((number, tag))
        if is_fence:
            in_code = not in_code
    return tags


def copy_status(copied: bool) -> Tuple[str, str]:
    """Status label text and color after the preview's copy action."""
    if copied:
        return i18n.t("notices.copied"), STATUS_OK_COLOR
    return i18n.t("preview.copy_failed"), STATUS_ERROR_COLOR
