from __future__ import annotations

"""
Vault Provider Infrastructure.

Exposes a notes directory as a read-mostly tree of FolderNode / FileNode
handles addressed by vault-relative, '/'-delimited paths. The combiner and
the sinks only talk to the abstract VaultProvider interface, so the local
directory implementation can be swapped for any other tree host.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import List, Optional

from combinenotes.domain.constants import PATH_SEPARATOR, VAULT_ROOT_PATH
from combinenotes.domain.vault_models import FileNode, FolderNode, VaultNode
from combinenotes.infra.fs import split_extension

logger = logging.getLogger(__name__)


# ==============================================================================
# ABSTRACT PROVIDER
# ==============================================================================

class VaultProvider(ABC):
    """
    Tree-host capability consumed by the combiner and the sinks.
    """

    @abstractmethod
    def root(self) -> FolderNode:
        """Return the handle of the vault root folder."""

    @abstractmethod
    def list_children(self, folder: FolderNode) -> List[VaultNode]:
        """Enumerate the direct children of a folder, in host order."""

    @abstractmethod
    def read(self, file: FileNode) -> str:
        """Return the full text content of a file."""

    @abstractmethod
    def resolve(self, path: str) -> Optional[VaultNode]:
        """Return the node at a vault path, or None when absent."""

    @abstractmethod
    def create_folder(self, path: str) -> FolderNode:
        """
        Ensure a folder (and missing parents) exists at a vault path.

        An existing folder is returned as is; anything else at the path is an
        error.
        """

    @abstractmethod
    def create(self, path: str, content: str) -> FileNode:
        """Create a new file; fails if something already exists at the path."""

    @abstractmethod
    def all_folders(self) -> List[FolderNode]:
        """Return every folder of the vault, root included, sorted by path."""


# ==============================================================================
# LOCAL DIRECTORY IMPLEMENTATION
# ==============================================================================

class LocalVault(VaultProvider):
    """
    VaultProvider backed by a directory on the local filesystem.

    Hidden entries (names starting with '.') are not part of the vault, and
    symbolic links to directories are not descended into, which keeps the
    tree acyclic.
    """

    def __init__(self, base_dir: str):
        """
        Args:
            base_dir: Filesystem directory holding the vault.

        Raises:
            NotADirectoryError: If base_dir is not an existing directory.
        """
        self.base_dir = os.path.abspath(base_dir)
        if not os.path.isdir(self.base_dir):
            raise NotADirectoryError(f"Vault directory does not exist: {self.base_dir}")
        self.name = os.path.basename(self.base_dir.rstrip(os.sep)) or self.base_dir

    # --------------------------------------------------------------------------
    # Path mapping
    # --------------------------------------------------------------------------

    def to_os_path(self, path: str) -> str:
        """Map a vault path to the corresponding filesystem path."""
        parts = _split_vault_path(path)
        if parts is None:
            raise ValueError(f"Invalid vault path: {path!r}")
        return os.path.join(self.base_dir, *parts)

    def to_vault_path(self, os_path: str) -> Optional[str]:
        """
        Map a filesystem path to a vault path.

        Returns:
            Optional[str]: The vault path, or None if os_path lies outside
            the vault.
        """
        rel = os.path.relpath(os.path.abspath(os_path), self.base_dir)
        if rel == os.curdir:
            return VAULT_ROOT_PATH
        if rel == os.pardir or rel.startswith(os.pardir + os.sep):
            return None
        return rel.replace(os.sep, PATH_SEPARATOR)

    # --------------------------------------------------------------------------
    # VaultProvider API
    # --------------------------------------------------------------------------

    def root(self) -> FolderNode:
        return FolderNode(path=VAULT_ROOT_PATH, name=self.name)

    def list_children(self, folder: FolderNode) -> List[VaultNode]:
        children: List[VaultNode] = []
        with os.scandir(self.to_os_path(folder.path)) as it:
            for entry in it:
                if entry.name.startswith("."):
                    continue
                child_path = _join(folder.path, entry.name)
                if entry.is_dir(follow_symlinks=False):
                    children.append(FolderNode(path=child_path, name=entry.name))
                elif entry.is_file():
                    children.append(_file_node(child_path, entry.name))
        return children

    def read(self, file: FileNode) -> str:
        # newline="" keeps the content byte-for-byte (no CRLF translation)
        with open(self.to_os_path(file.path), "r", encoding="utf-8", newline="") as f:
            return f.read()

    def resolve(self, path: str) -> Optional[VaultNode]:
        parts = _split_vault_path(path)
        if parts is None:
            return None
        if not parts:
            return self.root()
        if any(p.startswith(".") for p in parts):
            return None

        os_path = os.path.join(self.base_dir, *parts)
        vault_path = PATH_SEPARATOR.join(parts)
        if os.path.isdir(os_path) and not os.path.islink(os_path):
            return FolderNode(path=vault_path, name=parts[-1])
        if os.path.isfile(os_path):
            return _file_node(vault_path, parts[-1])
        return None

    def create_folder(self, path: str) -> FolderNode:
        parts = _split_vault_path(path)
        if not parts:
            raise ValueError(f"Invalid folder path: {path!r}")
        # checked on disk: hidden folders are valid targets but never resolve
        os_path = self.to_os_path(path)
        os.makedirs(os_path, exist_ok=True)
        if not os.path.isdir(os_path):
            raise NotADirectoryError(f"Folder could not be created: {path}")
        logger.debug(f"Ensured vault folder '{path}'")
        return FolderNode(path=PATH_SEPARATOR.join(parts), name=parts[-1])

    def create(self, path: str, content: str) -> FileNode:
        parts = _split_vault_path(path)
        if not parts:
            raise ValueError(f"Invalid file path: {path!r}")
        # Exclusive mode: an existing destination is never overwritten
        with open(self.to_os_path(path), "x", encoding="utf-8", newline="") as f:
            f.write(content)
        return _file_node(PATH_SEPARATOR.join(parts), parts[-1])

    def all_folders(self) -> List[FolderNode]:
        folders: List[FolderNode] = [self.root()]
        for dirpath, dirnames, _ in os.walk(self.base_dir):
            dirnames[:] = [
                d for d in dirnames
                if not d.startswith(".") and not os.path.islink(os.path.join(dirpath, d))
            ]
            for d in dirnames:
                vault_path = self.to_vault_path(os.path.join(dirpath, d))
                if vault_path:
                    folders.append(FolderNode(path=vault_path, name=d))
        folders.sort(key=lambda f: f.path)
        return folders


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _split_vault_path(path: str) -> Optional[List[str]]:
    """
    Split a vault path into segments.

    Leading and trailing separators are ignored; '' and '/' both designate
    the root (empty list). Returns None for paths that try to escape the vault.
    """
    parts = [p for p in (path or "").strip().split(PATH_SEPARATOR) if p]
    if any(p in (".", "..") for p in parts):
        return None
    return parts


def _join(parent: str, name: str) -> str:
    if parent == VAULT_ROOT_PATH:
        return name
    return f"{parent}{PATH_SEPARATOR}{name}"


def _file_node(path: str, name: str) -> FileNode:
    return FileNode(path=path, name=name, extension=split_extension(name))
