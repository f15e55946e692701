from __future__ import annotations

"""
Unit tests for the preview line styling.
"""

from combinenotes.interface.gui.markdown_styles import (
    TAG_CODE,
    TAG_DOCUMENT,
    TAG_HEADING,
    TAG_QUOTE,
    TAG_SEPARATOR,
    STATUS_ERROR_COLOR,
    STATUS_OK_COLOR,
    classify_line,
    copy_status,
    markdown_line_tags,
)


def test_classify_line() -> None:
    assert classify_line("------------") == TAG_SEPARATOR
    assert classify_line("# Document: a/b.md") == TAG_DOCUMENT
    assert classify_line("## Section") == TAG_HEADING
    assert classify_line("> quoted") == TAG_QUOTE
    assert classify_line("```python") == TAG_CODE
    assert classify_line("#tag") is None
    assert classify_line("plain", in_code=True) == TAG_CODE


def test_markdown_line_tags_tracks_code_fences() -> None:
    text = (
        "------------\n"
        "# Document: a.md\n"
        "\n"
        "# Title\n"
        "> note\n"
        "```\n"
        "# not a heading\n"
        "```\n"
        "text"
    )

    assert markdown_line_tags(text) == [
        (1, TAG_SEPARATOR),
        (2, TAG_DOCUMENT),
        (4, TAG_HEADING),
        (5, TAG_QUOTE),
        (6, TAG_CODE),
        (7, TAG_CODE),
        (8, TAG_CODE),
    ]


def test_copy_status_messages() -> None:
    assert copy_status(True) == ("Copied to clipboard!", STATUS_OK_COLOR)

    text, color = copy_status(False)
    assert text == "Copy failed, see the log for details."
    assert color == STATUS_ERROR_COLOR
