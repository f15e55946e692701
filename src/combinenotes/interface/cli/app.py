from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, settings resolution
(persisted file plus command-line overrides), vault and folder selection,
sink dispatch and result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from combinenotes.core.services.exporter import (
    Presenter,
    copy_to_clipboard,
    save_to_file,
    show_preview,
)
from combinenotes.core.services.folder_picker import initial_query
from combinenotes.core.validator import validate_settings
from combinenotes.domain.combine_models import STATUS_EMPTY, CombineResult
from combinenotes.domain.config import CONFIG_FILE, CombineSettings, load_config, save_config
from combinenotes.domain.vault_models import FolderNode
from combinenotes.infra.fs import normalize_path
from combinenotes.infra.logging import LoggingConfig, configure_logging, get_logger
from combinenotes.infra.vault import LocalVault
from combinenotes.interface.cli import args as cli_args
from combinenotes.interface.cli.picker import pick_folder
from combinenotes.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_BAD_INPUT = 2
EXIT_NO_INPUT = 3
EXIT_INTERRUPTED = 130

_PICKER_PLACEHOLDERS = {
    cli_args.COMMAND_SAVE: "picker.placeholder_save",
    cli_args.COMMAND_COPY: "picker.placeholder_copy",
    cli_args.COMMAND_PREVIEW: "picker.placeholder_preview",
}

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    configure_logging(LoggingConfig.for_cli(args.debug, args.log_file))

    # 3. Settings resolution (persisted file + overrides)
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(load_config(args.config_file), overrides)
    settings, warnings = validate_settings(raw_conf)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.command == cli_args.COMMAND_CONFIG:
        return _run_config_command(args, settings, bool(overrides))

    # 4. Vault and folder selection
    vault_dir = normalize_path(args.vault_path, os.getcwd())
    if not os.path.isdir(vault_dir):
        msg = i18n.t("cli.errors.vault_missing", path=vault_dir)
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_BAD_INPUT

    vault = LocalVault(vault_dir)
    logger.debug(f"Vault resolved at '{vault.base_dir}'.")

    try:
        folder = _resolve_folder(vault, args, settings)
        if folder is None:
            msg = i18n.t("cli.errors.folder_missing", path=args.folder or "")
            logger.error(msg)
            print(f"ERROR: {msg}", file=sys.stderr)
            return EXIT_BAD_INPUT

        # 5. Sink dispatch
        result = _dispatch(args.command, vault, folder, settings)
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED

    # 6. Output rendering phase
    if args.json_output:
        payload = asdict(result)
        payload.pop("text", None)
        print(json.dumps(payload, ensure_ascii=False, indent=2))

    if result.ok:
        return EXIT_OK
    return EXIT_NO_INPUT if result.status == STATUS_EMPTY else EXIT_ERROR

# -----------------------------------------------------------------------------
# COMMAND HANDLERS
# -----------------------------------------------------------------------------

def _dispatch(
        command: str,
        vault: LocalVault,
        folder: FolderNode,
        settings: CombineSettings,
) -> CombineResult:
    """Route a combine command to its sink."""
    if command == cli_args.COMMAND_SAVE:
        return save_to_file(vault, folder, settings, notify)
    if command == cli_args.COMMAND_COPY:
        return copy_to_clipboard(vault, folder, notify)
    return show_preview(vault, folder, notify, presenter=_load_presenter())


def _run_config_command(args: Any, settings: CombineSettings, changed: bool) -> int:
    """Persist changed settings and/or print the effective ones."""
    target = args.config_file or CONFIG_FILE
    if changed:
        if not save_config(asdict(settings), args.config_file):
            print(f"ERROR: {i18n.t('settings.save_failed', path=target)}", file=sys.stderr)
            return EXIT_ERROR
        notify(i18n.t("settings.saved", path=target))

    if args.show or args.json_output or not changed:
        print(json.dumps(asdict(settings), ensure_ascii=False, indent=2))
    return EXIT_OK


def _resolve_folder(
        vault: LocalVault,
        args: Any,
        settings: CombineSettings,
) -> Optional[FolderNode]:
    """
    Turn the folder argument into a FolderNode.

    An exact vault path is used as-is. Otherwise, on an interactive terminal,
    the fuzzy picker opens with the argument (or the preselected parent
    folder of the active file) as its query.
    """
    if args.folder:
        node = vault.resolve(args.folder)
        if isinstance(node, FolderNode):
            return node
        query = args.folder
    else:
        query = initial_query(settings, vault, args.active_file)

    if not _is_interactive():
        return None

    placeholder = i18n.t(_PICKER_PLACEHOLDERS[args.command])
    return pick_folder(vault, placeholder, query)


def _is_interactive() -> bool:
    return sys.stdin.isatty()


def _load_presenter() -> Presenter:
    """Import the GUI preview lazily; only the preview command needs Tk."""
    from combinenotes.interface.gui.preview_window import show_preview_window
    return show_preview_window


def notify(message: str) -> None:
    """CLI notification sink: user-visible messages go to stderr."""
    print(message, file=sys.stderr)

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of known override keys into the base settings.

    Args:
        base: The persisted settings dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged settings.
    """
    out = dict(base)
    for k in ("output_folder", "preselect_parent_folder"):
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
