from __future__ import annotations

"""
Markdown Combiner.

Collects every markdown file below a vault folder and concatenates them into
one document. Block order depends only on the file path strings, never on
the order in which the host enumerates children. Files are read one at a
time in that order.

Block layout:
------------
# Document: <relative path>

<raw file content>

"""

import logging
from functools import lru_cache
from typing import List, Optional, Tuple

from pyuca import Collator

from combinenotes.domain.combine_models import CombinedDocument
from combinenotes.domain.constants import (
    BLOCK_HEADER_TEMPLATE,
    BLOCK_SEPARATOR,
    BLOCK_TRAILER,
    MARKDOWN_EXTENSION,
)
from combinenotes.domain.vault_models import FileNode, FolderNode
from combinenotes.infra.vault import VaultProvider

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def collect_markdown_files(vault: VaultProvider, root: FolderNode) -> List[FileNode]:
    """
    Recursively gather the markdown files below a folder.

    Args:
        vault: Tree host used to enumerate children.
        root: Folder to descend from.

    Returns:
        List[FileNode]: Matching files in traversal order (not sorted).
    """
    files: List[FileNode] = []
    for child in vault.list_children(root):
        if isinstance(child, FolderNode):
            files.extend(collect_markdown_files(vault, child))
        elif isinstance(child, FileNode) and child.extension == MARKDOWN_EXTENSION:
            files.append(child)
    return files


def relative_path(file: FileNode, root: FolderNode) -> str:
    """
    Express a file path relative to the combined folder.

    The vault root leaves paths unchanged; any other folder strips its own
    path plus one separator from the front.
    """
    if root.is_root:
        return file.path
    return file.path[len(root.path) + 1:]


def path_sort_key(file: FileNode) -> Tuple[Tuple[int, ...], str]:
    """
    Ordering key for output blocks.

    Paths are compared with the Unicode Collation Algorithm: accents and case
    only matter when the base letters are equal (lowercase first), and
    punctuation such as '_' or '/' sorts ahead of digits and letters. The raw
    path breaks remaining ties so the order stays total.
    """
    return _collator().sort_key(file.path), file.path


def render_block(rel_path: str, content: str) -> str:
    """Format one file as a separator, a header and its untouched content."""
    return (
        BLOCK_SEPARATOR
        + BLOCK_HEADER_TEMPLATE.format(rel_path=rel_path)
        + content
        + BLOCK_TRAILER
    )


def combine(
        vault: VaultProvider,
        root: FolderNode,
        *,
        skip_path: Optional[str] = None,
) -> Optional[CombinedDocument]:
    """
    Build the combined document for a folder.

    Any error raised while reading propagates to the caller, so a failed run
    never yields a partial document.

    Args:
        vault: Tree host used for enumeration and reads.
        root: Folder to combine.
        skip_path: Vault path of a file to leave out (the file sink's own
            destination).

    Returns:
        Optional[CombinedDocument]: The document, or None when the folder
        holds no markdown file.
    """
    ordered = sorted(collect_markdown_files(vault, root), key=path_sort_key)

    if not ordered:
        logger.info(f"No markdown files found under '{root.path}'.")
        return None

    logger.info(f"Found {len(ordered)} markdown files under '{root.path}'.")

    parts: List[str] = []
    included: List[str] = []
    for file in ordered:
        if skip_path is not None and file.path == skip_path:
            logger.debug(f"Skipping output file '{file.path}'.")
            continue

        rel = relative_path(file, root)
        parts.append(render_block(rel, vault.read(file)))
        included.append(rel)

    return CombinedDocument(root_path=root.path, text="".join(parts), files=included)


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # the collation table is parsed once per process
    return Collator()
