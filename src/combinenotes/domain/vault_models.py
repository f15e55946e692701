from __future__ import annotations

"""
Vault Tree Data Models.

Lightweight handles for the nodes of a vault. Nodes only carry identity
(path, name, extension); their children and contents are always obtained
through the vault provider, so a node never goes stale on its own.
"""

from dataclasses import dataclass
from typing import Union

from combinenotes.domain.constants import VAULT_ROOT_PATH

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FolderNode:
    """
    Represents a directory of the vault.

    Attributes:
        path: Vault-relative, '/'-delimited path. The vault root is '/'.
        name: Display name (last path segment, or the vault name for the root).
    """
    path: str
    name: str

    @property
    def is_root(self) -> bool:
        return self.path == VAULT_ROOT_PATH


@dataclass(frozen=True)
class FileNode:
    """
    Represents a leaf entry (file) of the vault.

    Attributes:
        path: Vault-relative, '/'-delimited path.
        name: Base filename including the extension.
        extension: Extension without the leading dot ('' when absent).
    """
    path: str
    name: str
    extension: str


VaultNode = Union[FolderNode, FileNode]
