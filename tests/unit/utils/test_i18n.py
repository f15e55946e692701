from __future__ import annotations

"""
Unit tests for Internationalization (i18n).

Ensures the bundled locale loads and dot-notation resolution works as
expected.
"""

import json
import os
from typing import Any, Dict, Set

import pytest

from combinenotes.utils.i18n import I18n, i18n


def _get_flat_keys(d: Dict[str, Any], prefix: str = "") -> Set[str]:
    """Helper to flatten nested dictionary keys into dot-notation sets."""
    keys = set()
    for k, v in d.items():
        new_key = f"{prefix}.{k}" if prefix else k
        if isinstance(v, dict):
            keys.update(_get_flat_keys(v, new_key))
        else:
            keys.add(new_key)
    return keys


def test_bundled_locale_is_loaded() -> None:
    """TC-01: The singleton resolves user-visible notices."""
    assert i18n.is_loaded
    assert i18n.t("notices.no_files") == "No markdown files found in that folder."
    assert i18n.t("notices.copied_count", count=2) == "Copied 2 combined notes to clipboard!"


def test_notice_keys_presence() -> None:
    """TC-02: Every notice used by the sinks exists in the English locale."""
    base_path = os.path.dirname(os.path.abspath(__file__))
    loc_rel = os.path.join("..", "..", "..", "src", "combinenotes", "interface", "locales")
    en_path = os.path.abspath(os.path.join(base_path, loc_rel, "en.json"))

    with open(en_path, "r", encoding="utf-8") as f:
        flat_keys = _get_flat_keys(json.load(f))

    required_keys = [
        "notices.combining",
        "notices.no_files",
        "notices.folder_error",
        "notices.combine_error",
        "notices.saved",
        "notices.copied_count",
        "notices.copied",
        "notices.copy_error",
    ]
    for key in required_keys:
        assert key in flat_keys, f"Key '{key}' is missing in en.json"


def test_i18n_resolution_logic(tmp_path: pytest.TempPathFactory) -> None:
    """TC-03: Verify dot-notation resolution and interpolation."""
    dummy_content = {
        "test": {
            "hello": "Hello {name}!",
            "simple": "Simple Text"
        }
    }
    locale_file = tmp_path / "test_locale.json"
    locale_file.write_text(json.dumps(dummy_content), encoding="utf-8")

    service = I18n("en")
    service._locales_path = str(tmp_path)
    service.load_locale("test_locale")

    assert service.t("test.simple") == "Simple Text"
    assert service.t("test.hello", name="World") == "Hello World!"

    # Fallbacks: missing key, non-leaf key, missing placeholder
    assert service.t("missing.key") == "missing.key"
    assert service.t("test") == "test"
    assert service.t("test.hello", other="x") == "Hello {name}!"


def test_missing_locale_falls_back_to_keys(tmp_path) -> None:
    service = I18n("en")
    service._locales_path = str(tmp_path)
    service.load_locale("xx")

    assert not service.is_loaded
    assert service.t("notices.copied") == "notices.copied"
