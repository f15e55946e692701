from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared vault fixtures used across unit and integration tests.
"""

import os
import sys
from pathlib import Path
from typing import List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def vault_dir(tmp_path: Path) -> Path:
    """
    Create a sample vault on disk.

    Structure:
    /vault
      /Notes
        b.md        ("Hello")
        a.md        ("World")
        image.png
        /Sub
          c.md      ("Nested")
      /Images
        photo.png
      top.md        ("Top")
    """
    root = tmp_path / "vault"
    notes = root / "Notes"
    (notes / "Sub").mkdir(parents=True)
    (root / "Images").mkdir()

    (notes / "b.md").write_text("Hello", encoding="utf-8")
    (notes / "a.md").write_text("World", encoding="utf-8")
    (notes / "image.png").write_bytes(b"\x89PNG")
    (notes / "Sub" / "c.md").write_text("Nested", encoding="utf-8")
    (root / "Images" / "photo.png").write_bytes(b"\x89PNG")
    (root / "top.md").write_text("Top", encoding="utf-8")

    return root


@pytest.fixture
def expected_notes_body() -> str:
    """Combined body of the 'Notes' folder of the sample vault."""
    return (
        "------------\n# Document: a.md\n\nWorld\n\n"
        "------------\n# Document: b.md\n\nHello\n\n"
        "------------\n# Document: Sub/c.md\n\nNested\n\n"
    )


class Recorder:
    """Collects notifications, clipboard writes or any single-argument calls."""

    def __init__(self) -> None:
        self.calls: List[str] = []

    def __call__(self, value: str) -> None:
        self.calls.append(value)


@pytest.fixture
def notifications() -> Recorder:
    return Recorder()


@pytest.fixture
def clipboard() -> Recorder:
    return Recorder()
