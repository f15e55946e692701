from __future__ import annotations

"""
Terminal Folder Picker.

Interactive fuzzy search over the vault's folders: the user refines the
query until the wanted folder is listed, then picks it by number. Pressing
Enter on an unchanged query picks the best match.
"""

import logging
import sys
from typing import Callable, List, Optional, TextIO

from combinenotes.core.services.folder_picker import search_folders
from combinenotes.domain.vault_models import FolderNode
from combinenotes.infra.vault import VaultProvider
from combinenotes.utils.i18n import i18n

logger = logging.getLogger(__name__)


def pick_folder(
        vault: VaultProvider,
        placeholder: str,
        query: str = "",
        input_fn: Callable[[str], str] = input,
        out: Optional[TextIO] = None,
) -> Optional[FolderNode]:
    """
    Run the interactive folder search.

    Args:
        vault: Vault whose folders are offered.
        placeholder: Heading describing what the folder is for.
        query: Prefilled search text.
        input_fn: Line reader (input by default).
        out: Stream for the listing (stderr by default).

    Returns:
        Optional[FolderNode]: The chosen folder, or None if the user aborted
        (EOF or Ctrl+C).
    """
    stream = out or sys.stderr
    folders = vault.all_folders()
    print(placeholder, file=stream)

    while True:
        matches = search_folders(folders, query)
        _print_matches(stream, query, matches)

        try:
            answer = input_fn(f"{i18n.t('picker.prompt')} [{query}]: ").strip()
        except (EOFError, KeyboardInterrupt):
            print(i18n.t("picker.cancelled"), file=stream)
            return None

        if not answer:
            if matches:
                return matches[0]
            continue

        if answer.isdigit() and matches:
            index = int(answer)
            if 1 <= index <= len(matches):
                logger.debug(f"Folder picked: {matches[index - 1].path}")
                return matches[index - 1]

        query = answer


def _print_matches(stream: TextIO, query: str, matches: List[FolderNode]) -> None:
    if not matches:
        print(i18n.t("picker.no_match", query=query), file=stream)
        return
    for i, folder in enumerate(matches, start=1):
        print(f"  {i:>2}. {folder.path}", file=stream)
    print(i18n.t("picker.choose", count=len(matches)), file=stream)
