from __future__ import annotations

"""
Combined Document Sinks.

The three user commands share the combiner and differ only in where the
document goes:
1. File sink: a new timestamped note inside the configured output folder.
2. Clipboard sink: the system clipboard.
3. Preview sink: an interactive surface offering an on-demand copy.

Every failure ends the invocation with exactly one notification and one
diagnostic log entry; nothing is written after an error.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from combinenotes.core.combiner import combine
from combinenotes.domain.combine_models import (
    CombinedDocument,
    CombineResult,
    Notifier,
    create_empty_result,
    create_error_result,
    create_success_result,
)
from combinenotes.domain.config import CombineSettings
from combinenotes.domain.constants import OUTPUT_FILE_TEMPLATE, TIMESTAMP_FORMAT
from combinenotes.domain.vault_models import FolderNode
from combinenotes.infra.clipboard import ClipboardWriter, write_clipboard
from combinenotes.infra.vault import VaultProvider
from combinenotes.utils.i18n import i18n

logger = logging.getLogger(__name__)

# Receives the document and the copy action bound to it
Presenter = Callable[[CombinedDocument, Callable[[], bool]], None]


# -----------------------------------------------------------------------------
# OUTPUT NAMING
# -----------------------------------------------------------------------------

def format_timestamp(now: datetime) -> str:
    """Render a local time as YYYY-MM-DD-HHmm."""
    return now.strftime(TIMESTAMP_FORMAT)


def build_output_path(
        settings: CombineSettings,
        folder: FolderNode,
        now: Optional[datetime] = None,
) -> str:
    """
    Compute the vault path of the file sink's destination.

    Format: <output_folder>/<YYYY>-<MM>-<DD>-<HHmm>_<folder name>-combined.md

    Args:
        settings: Active settings (output folder).
        folder: Folder being combined.
        now: Local time to stamp; defaults to the current time.

    Returns:
        str: Destination vault path.
    """
    stamp = format_timestamp(now or datetime.now())
    return OUTPUT_FILE_TEMPLATE.format(
        folder=settings.output_folder,
        timestamp=stamp,
        name=folder.name,
    )


# -----------------------------------------------------------------------------
# FILE SINK
# -----------------------------------------------------------------------------

def save_to_file(
        vault: VaultProvider,
        folder: FolderNode,
        settings: CombineSettings,
        notify: Notifier,
        now: Optional[datetime] = None,
) -> CombineResult:
    """
    Combine a folder into a new note inside the configured output folder.

    The output folder is created first when missing. The destination file is
    only created once the whole document has been assembled, and is itself
    excluded from the combination.

    Args:
        vault: Tree host.
        folder: Folder to combine.
        settings: Active settings.
        notify: User-visible message sink.
        now: Timestamp override for the output filename.

    Returns:
        CombineResult: Outcome of the operation.
    """
    output_folder = settings.output_folder

    try:
        existing = vault.resolve(output_folder)
        if not isinstance(existing, FolderNode):
            vault.create_folder(output_folder)
    except Exception as e:
        notify(i18n.t("notices.folder_error", error=e))
        logger.error(f"Failed to create output folder '{output_folder}': {e}", exc_info=True)
        return create_error_result(str(e), folder.path)

    output_path = build_output_path(settings, folder, now)
    notify(i18n.t("notices.combining", path=folder.path))

    try:
        document = combine(vault, folder, skip_path=output_path)
        if document is None:
            notify(i18n.t("notices.no_files"))
            return create_empty_result(folder.path)

        vault.create(output_path, document.text)
    except Exception as e:
        notify(i18n.t("notices.combine_error", error=e))
        logger.error(f"Failed to combine '{folder.path}' into '{output_path}': {e}", exc_info=True)
        return create_error_result(str(e), folder.path, output_path)

    notify(i18n.t("notices.saved", path=output_path))
    logger.info(f"Combined {document.file_count} notes into '{output_path}'.")
    return create_success_result(document, document.file_count, output_path)


# -----------------------------------------------------------------------------
# CLIPBOARD SINK
# -----------------------------------------------------------------------------

def copy_to_clipboard(
        vault: VaultProvider,
        folder: FolderNode,
        notify: Notifier,
        clipboard: ClipboardWriter = write_clipboard,
) -> CombineResult:
    """
    Combine a folder and place the text on the clipboard.

    Args:
        vault: Tree host.
        folder: Folder to combine.
        notify: User-visible message sink.
        clipboard: Clipboard writer.

    Returns:
        CombineResult: Outcome of the operation.
    """
    try:
        document = combine(vault, folder)
        if document is None:
            notify(i18n.t("notices.no_files"))
            return create_empty_result(folder.path)

        clipboard(document.text)
    except Exception as e:
        notify(i18n.t("notices.combine_error", error=e))
        logger.error(f"Failed to copy combined notes of '{folder.path}': {e}", exc_info=True)
        return create_error_result(str(e), folder.path)

    notify(i18n.t("notices.copied_count", count=document.file_count))
    return create_success_result(document, document.file_count)


# -----------------------------------------------------------------------------
# PREVIEW SINK
# -----------------------------------------------------------------------------

def show_preview(
        vault: VaultProvider,
        folder: FolderNode,
        notify: Notifier,
        presenter: Presenter,
        clipboard: ClipboardWriter = write_clipboard,
) -> CombineResult:
    """
    Combine a folder and hand the document to an interactive presenter.

    The presenter receives a zero-argument copy action; nothing reaches the
    clipboard unless the user triggers it.

    Args:
        vault: Tree host.
        folder: Folder to combine.
        notify: User-visible message sink.
        presenter: Preview surface.
        clipboard: Clipboard writer used by the copy action.

    Returns:
        CombineResult: Outcome of the operation.
    """
    try:
        document = combine(vault, folder)
        if document is None:
            notify(i18n.t("notices.no_files"))
            return create_empty_result(folder.path)

        def _copy() -> bool:
            return copy_text(document.text, notify, clipboard)

        presenter(document, _copy)
    except Exception as e:
        notify(i18n.t("notices.combine_error", error=e))
        logger.error(f"Failed to preview combined notes of '{folder.path}': {e}", exc_info=True)
        return create_error_result(str(e), folder.path)

    return create_success_result(document, document.file_count)


def copy_text(text: str, notify: Notifier, clipboard: ClipboardWriter = write_clipboard) -> bool:
    """
    Copy an already combined text, reporting the outcome.

    Returns:
        bool: True if the clipboard was written.
    """
    try:
        clipboard(text)
    except Exception as e:
        notify(i18n.t("notices.copy_error", error=e))
        logger.error(f"Clipboard write failed: {e}", exc_info=True)
        return False

    notify(i18n.t("notices.copied"))
    return True
