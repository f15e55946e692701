from __future__ import annotations

"""
FileSystem Helpers.

Location of the per-user settings directory and the path normalization
shared by the vault provider and the CLI.
"""

import os
from typing import Optional

APP_DIR_NAME = "CombineNotes"
UNIX_APP_DIR_NAME = ".combinenotes"


def get_user_data_dir() -> str:
    """
    Return the per-user directory holding the settings file.

    %LOCALAPPDATA%\\CombineNotes on Windows (falling back to %APPDATA%),
    ~/.combinenotes elsewhere. The directory is not created here; writers
    create it on first save.

    Returns:
        str: Absolute directory path.
    """
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            return os.path.abspath(os.path.join(base, APP_DIR_NAME))
    return os.path.abspath(os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME))


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Turn user input into an absolute path.

    '~' and environment variables are expanded; blank input means `fallback`.
    """
    raw = (path or "").strip() or fallback
    return os.path.abspath(os.path.expandvars(os.path.expanduser(raw)))


def split_extension(file_name: str) -> str:
    """
    Extension of a file name without the dot ('' when there is none).

    Follows os.path.splitext, so a dotfile such as '.md' has no extension.
    """
    return os.path.splitext(file_name)[1][1:]
