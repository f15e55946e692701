from __future__ import annotations

"""
Unit tests for the Markdown Combiner.

Verifies:
1. Exhaustive, filtered collection at every depth.
2. Output order independent of child enumeration order.
3. Relative path computation for sub-folders and the vault root.
4. Exact block layout and empty-folder handling.
"""

from pathlib import Path
from typing import List

import pytest

from combinenotes.core.combiner import (
    collect_markdown_files,
    combine,
    path_sort_key,
    relative_path,
    render_block,
)
from combinenotes.domain.vault_models import FileNode, FolderNode, VaultNode
from combinenotes.infra.vault import LocalVault


class ReversedVault(LocalVault):
    """Enumerates children in reverse lexical order."""

    def list_children(self, folder: FolderNode) -> List[VaultNode]:
        children = super().list_children(folder)
        return sorted(children, key=lambda n: n.path, reverse=True)


class ShuffledVault(LocalVault):
    """Enumerates files before folders, each group in reverse order."""

    def list_children(self, folder: FolderNode) -> List[VaultNode]:
        children = super().list_children(folder)
        files = sorted((c for c in children if isinstance(c, FileNode)), key=lambda n: n.name, reverse=True)
        folders = [c for c in children if isinstance(c, FolderNode)]
        return files + folders


# -----------------------------------------------------------------------------
# Collection
# -----------------------------------------------------------------------------

def test_collect_is_exhaustive_and_filtered(tmp_path: Path) -> None:
    """Every .md file at any depth is found once; other types are skipped."""
    root = tmp_path / "vault"
    deep = root / "A" / "B" / "C" / "D"
    deep.mkdir(parents=True)
    expected = {
        "A/one.md",
        "A/B/two.md",
        "A/B/C/three.md",
        "A/B/C/D/four.md",
        "root.md",
    }
    for rel in expected:
        (root / rel).write_text(rel, encoding="utf-8")
    (root / "A" / "B" / "skip.txt").write_text("x", encoding="utf-8")
    (root / "A" / "B" / "C" / "pic.png").write_bytes(b"x")
    (root / "A" / "README.markdown").write_text("x", encoding="utf-8")

    vault = LocalVault(str(root))
    found = collect_markdown_files(vault, vault.root())
    paths = [f.path for f in found]

    assert set(paths) == expected
    assert len(paths) == len(set(paths))


def test_collect_empty_for_images_only(vault_dir: Path) -> None:
    vault = LocalVault(str(vault_dir))
    folder = vault.resolve("Images")

    assert collect_markdown_files(vault, folder) == []


# -----------------------------------------------------------------------------
# Relative paths
# -----------------------------------------------------------------------------

def test_relative_path_from_subfolder() -> None:
    file = FileNode(path="A/B/c.md", name="c.md", extension="md")
    assert relative_path(file, FolderNode(path="A", name="A")) == "B/c.md"


def test_relative_path_from_vault_root() -> None:
    file = FileNode(path="A/B/c.md", name="c.md", extension="md")
    assert relative_path(file, FolderNode(path="/", name="vault")) == "A/B/c.md"


def test_render_block_layout() -> None:
    assert render_block("x/y.md", "body") == "------------\n# Document: x/y.md\n\nbody\n\n"


# -----------------------------------------------------------------------------
# Combine
# -----------------------------------------------------------------------------

def test_combine_notes_scenario(vault_dir: Path, expected_notes_body: str) -> None:
    """Files are sorted by full path and rendered relative to the folder."""
    vault = LocalVault(str(vault_dir))
    document = combine(vault, vault.resolve("Notes"))

    assert document is not None
    assert document.text == expected_notes_body
    assert document.files == ["a.md", "b.md", "Sub/c.md"]
    assert document.root_path == "Notes"


@pytest.mark.parametrize("vault_cls", [ReversedVault, ShuffledVault])
def test_combine_order_ignores_enumeration_order(vault_dir: Path, vault_cls, expected_notes_body: str) -> None:
    vault = vault_cls(str(vault_dir))
    document = combine(vault, vault.resolve("Notes"))

    assert document.text == expected_notes_body


def test_combine_orders_paths_case_insensitively(tmp_path: Path) -> None:
    """Case does not group files: 'a.md' < 'B.md' < 'Sub/z.md'."""
    root = tmp_path / "vault"
    (root / "Sub").mkdir(parents=True)
    (root / "a.md").write_text("1", encoding="utf-8")
    (root / "B.md").write_text("2", encoding="utf-8")
    (root / "Sub" / "z.md").write_text("3", encoding="utf-8")

    vault = LocalVault(str(root))
    document = combine(vault, vault.root())

    assert document.files == ["a.md", "B.md", "Sub/z.md"]


def test_combine_from_vault_root_keeps_full_paths(vault_dir: Path) -> None:
    vault = LocalVault(str(vault_dir))
    document = combine(vault, vault.root())

    assert document.files == ["Notes/a.md", "Notes/b.md", "Notes/Sub/c.md", "top.md"]
    assert "# Document: Notes/Sub/c.md\n\nNested\n\n" in document.text


def test_combine_is_repeatable(vault_dir: Path) -> None:
    vault = LocalVault(str(vault_dir))
    folder = vault.resolve("Notes")

    assert combine(vault, folder).text == combine(vault, folder).text


def test_combine_returns_none_without_markdown(vault_dir: Path) -> None:
    vault = LocalVault(str(vault_dir))

    assert combine(vault, vault.resolve("Images")) is None


def test_combine_keeps_content_verbatim(tmp_path: Path) -> None:
    """CRLF line endings and trailing whitespace are not normalized."""
    root = tmp_path / "vault"
    root.mkdir()
    (root / "n.md").write_bytes("line1\r\nline2  \n\n".encode("utf-8"))

    vault = LocalVault(str(root))
    document = combine(vault, vault.root())

    assert document.text == "------------\n# Document: n.md\n\nline1\r\nline2  \n\n\n\n"


def test_combine_skip_path_excludes_single_file(vault_dir: Path) -> None:
    vault = LocalVault(str(vault_dir))
    document = combine(vault, vault.resolve("Notes"), skip_path="Notes/b.md")

    assert document.files == ["a.md", "Sub/c.md"]
    assert "Hello" not in document.text


def test_combine_propagates_read_errors(vault_dir: Path) -> None:
    (vault_dir / "Notes" / "bad.md").write_bytes(b"\xff\xfe\xfa")
    vault = LocalVault(str(vault_dir))

    with pytest.raises(UnicodeDecodeError):
        combine(vault, vault.resolve("Notes"))


def test_path_sort_key_puts_lowercase_first_on_case_ties() -> None:
    upper = FileNode(path="Note.md", name="Note.md", extension="md")
    lower = FileNode(path="note.md", name="note.md", extension="md")

    assert sorted([upper, lower], key=path_sort_key) == [lower, upper]


def test_combine_collates_accents_and_punctuation(tmp_path: Path) -> None:
    """Accented letters sort with their base letter; punctuation precedes letters."""
    root = tmp_path / "vault"
    (root / "a").mkdir(parents=True)
    for name in ("Zeta.md", "\u00dcber.md", "Apfel.md", "a_b.md", "a/c.md"):
        (root / name).write_text(name, encoding="utf-8")

    vault = LocalVault(str(root))
    document = combine(vault, vault.root())

    assert document.files == ["a_b.md", "a/c.md", "Apfel.md", "\u00dcber.md", "Zeta.md"]
