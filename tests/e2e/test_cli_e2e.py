from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies the application's external behavior by invoking the entry point
script via subprocess: argument parsing, exit codes, stream output and the
combined note written into the vault.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "combinenotes" / "main.py"


def run_cli(args: List[str], home: Path) -> subprocess.CompletedProcess[str]:
    """
    Helper to execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH and points HOME to a
    temporary directory so the user settings file is isolated.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(home)
    env["LOCALAPPDATA"] = str(home)

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        env=env,
        stdin=subprocess.DEVNULL,
        capture_output=True,
        text=True,
        encoding="utf-8"
    )


@pytest.fixture
def home(tmp_path: Path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


def test_cli_help_execution(home: Path) -> None:
    """Verify that --help prints usage and exits successfully."""
    result = run_cli(["--help"], home)

    assert result.returncode == 0
    assert "usage:" in result.stdout.lower()
    assert "save" in result.stdout


def test_cli_save_full_flow(vault_dir: Path, home: Path, expected_notes_body: str) -> None:
    """Combine a folder into a new note and report it as JSON."""
    result = run_cli(["save", "Notes", "--vault", str(vault_dir), "--json"], home)

    assert result.returncode == 0, result.stderr
    payload = json.loads(result.stdout)
    assert payload["status"] == "success"
    assert payload["file_count"] == 3

    target = vault_dir / payload["output_path"]
    assert target.read_text(encoding="utf-8") == expected_notes_body


def test_cli_settings_roundtrip(vault_dir: Path, home: Path, tmp_path: Path) -> None:
    """Settings saved by 'config' are picked up by later runs."""
    config_file = tmp_path / "combine.json"

    saved = run_cli(["config", "--output-folder", "digest", "--config", str(config_file)], home)
    result = run_cli(["save", "Notes", "--vault", str(vault_dir), "--config", str(config_file)], home)

    assert saved.returncode == 0
    assert result.returncode == 0, result.stderr
    assert len(list((vault_dir / "digest").glob("*_Notes-combined.md"))) == 1


def test_cli_empty_folder(vault_dir: Path, home: Path) -> None:
    result = run_cli(["save", "Images", "--vault", str(vault_dir)], home)

    assert result.returncode == 3
    assert "No markdown files found in that folder." in result.stderr


def test_cli_unknown_folder_non_interactive(vault_dir: Path, home: Path) -> None:
    result = run_cli(["copy", "Missing", "--vault", str(vault_dir)], home)

    assert result.returncode == 2
    assert "Folder not found in vault: Missing" in result.stderr
