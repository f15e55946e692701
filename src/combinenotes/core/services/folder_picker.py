from __future__ import annotations

"""
Fuzzy Folder Search Service.

Ranks vault folders against a free-text query the way command palettes do:
every query character must appear in order in the folder path, and matches
that are contiguous or start a path segment rank higher.
"""

import logging
import os
from typing import List, Optional, Tuple

from combinenotes.domain.config import CombineSettings
from combinenotes.domain.constants import PATH_SEPARATOR, VAULT_ROOT_PATH
from combinenotes.domain.vault_models import FolderNode
from combinenotes.infra.vault import LocalVault

logger = logging.getLogger(__name__)

DEFAULT_RESULT_LIMIT = 10

_SEGMENT_START_BONUS = 3.0
_CONSECUTIVE_BONUS = 4.0
_LENGTH_PENALTY = 0.01


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def fuzzy_score(query: str, text: str) -> Optional[float]:
    """
    Score how well a query matches a candidate string.

    Matching is case-insensitive and ignores whitespace in the query.

    Returns:
        Optional[float]: Higher is better; None when the query characters
        do not all appear in order.
    """
    needle = "".join(query.lower().split())
    haystack = text.lower()
    if not needle:
        return 0.0

    # best alignment score with needle[i] matched at haystack[j]
    prev: List[Optional[float]] = [
        1.0 + _segment_bonus(haystack, j) if ch == needle[0] else None
        for j, ch in enumerate(haystack)
    ]
    for i in range(1, len(needle)):
        cur: List[Optional[float]] = [None] * len(haystack)
        gap_best: Optional[float] = None
        for j, ch in enumerate(haystack):
            if j >= 2 and prev[j - 2] is not None:
                gap_best = prev[j - 2] if gap_best is None else max(gap_best, prev[j - 2])
            if ch != needle[i]:
                continue
            options = []
            if gap_best is not None:
                options.append(gap_best)
            if j >= 1 and prev[j - 1] is not None:
                options.append(prev[j - 1] + _CONSECUTIVE_BONUS)
            if options:
                cur[j] = max(options) + 1.0 + _segment_bonus(haystack, j)
        prev = cur

    scores = [s for s in prev if s is not None]
    if not scores:
        return None
    return max(scores) - _LENGTH_PENALTY * len(haystack)


def search_folders(
        folders: List[FolderNode],
        query: str,
        limit: Optional[int] = DEFAULT_RESULT_LIMIT,
) -> List[FolderNode]:
    """
    Return the folders matching a query, best first.

    An empty query keeps every folder in path order. Ties are broken by path.

    Args:
        folders: Candidate folders.
        query: Free-text search.
        limit: Maximum number of results (None for all).

    Returns:
        List[FolderNode]: Ranked matches.
    """
    if not query.strip():
        ranked = sorted(folders, key=lambda f: f.path)
    else:
        scored: List[Tuple[float, FolderNode]] = []
        for folder in folders:
            s = fuzzy_score(query, folder.path)
            if s is not None:
                scored.append((s, folder))
        scored.sort(key=lambda item: (-item[0], item[1].path))
        ranked = [f for _, f in scored]

    return ranked if limit is None else ranked[:limit]


def parent_folder_path(file_path: str) -> str:
    """Vault path of the folder containing a file ('/' for top-level files)."""
    stripped = file_path.strip(PATH_SEPARATOR)
    if PATH_SEPARATOR not in stripped:
        return VAULT_ROOT_PATH
    return stripped.rsplit(PATH_SEPARATOR, 1)[0]


def initial_query(
        settings: CombineSettings,
        vault: LocalVault,
        active_file: Optional[str],
) -> str:
    """
    Compute the text prefilled in the folder search.

    With parent-folder preselection enabled and an active file inside the
    vault, this is the path of the active file's parent folder.

    Args:
        settings: Active settings.
        vault: Vault the active file belongs to.
        active_file: Filesystem path of the currently open note, if any.

    Returns:
        str: The prefilled query ('' when nothing applies).
    """
    if not settings.preselect_parent_folder or not active_file:
        return ""

    vault_path = vault.to_vault_path(os.path.abspath(active_file))
    if not vault_path or vault_path == VAULT_ROOT_PATH:
        logger.debug(f"Active file '{active_file}' is outside the vault; no preselection.")
        return ""

    return parent_folder_path(vault_path)


def _segment_bonus(text: str, index: int) -> float:
    if index == 0 or text[index - 1] == PATH_SEPARATOR:
        return _SEGMENT_START_BONUS
    return 0.0
