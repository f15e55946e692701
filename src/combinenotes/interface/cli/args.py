from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema (one subcommand per sink plus 'config') and
translates parsed namespaces into settings overrides.
"""

import argparse
from typing import Any, Dict

from combinenotes.utils.i18n import i18n

COMMAND_SAVE = "save"
COMMAND_COPY = "copy"
COMMAND_PREVIEW = "preview"
COMMAND_CONFIG = "config"

COMBINE_COMMANDS = (COMMAND_SAVE, COMMAND_COPY, COMMAND_PREVIEW)

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the combine-notes CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--vault",
        dest="vault_path",
        default=None,
        help=i18n.t("cli.args.vault"),
    )
    common.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help=i18n.t("cli.args.config"),
    )
    common.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )
    common.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    common.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )

    p = argparse.ArgumentParser(
        prog="combine-notes",
        description=i18n.t("app.description"),
    )
    sub = p.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    # --- Combine commands (one per sink) ---
    for name in COMBINE_COMMANDS:
        sp = sub.add_parser(name, parents=[common], help=i18n.t(f"cli.args.{name}"))
        sp.add_argument(
            "folder",
            nargs="?",
            default=None,
            help=i18n.t("cli.args.folder"),
        )
        sp.add_argument(
            "--active-file",
            dest="active_file",
            default=None,
            help=i18n.t("cli.args.active_file"),
        )
        if name == COMMAND_SAVE:
            sp.add_argument(
                "--output-folder",
                dest="output_folder",
                default=None,
                help=i18n.t("cli.args.output_folder"),
            )

    # --- Settings editor ---
    cp = sub.add_parser(COMMAND_CONFIG, parents=[common], help=i18n.t("cli.args.config_cmd"))
    cp.add_argument(
        "--output-folder",
        dest="output_folder",
        default=None,
        help=i18n.t("cli.args.output_folder"),
    )
    toggle = cp.add_mutually_exclusive_group()
    toggle.add_argument(
        "--preselect",
        dest="preselect_parent_folder",
        action="store_const",
        const=True,
        default=None,
        help=i18n.t("cli.args.preselect"),
    )
    toggle.add_argument(
        "--no-preselect",
        dest="preselect_parent_folder",
        action="store_const",
        const=False,
        help=i18n.t("cli.args.no_preselect"),
    )
    cp.add_argument(
        "--show",
        action="store_true",
        help=i18n.t("cli.args.show"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into settings overrides.

    Only options that were actually given are returned.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Settings overrides subset.
    """
    overrides: Dict[str, Any] = {}

    output_folder = getattr(args, "output_folder", None)
    if output_folder is not None:
        overrides["output_folder"] = output_folder

    preselect = getattr(args, "preselect_parent_folder", None)
    if preselect is not None:
        overrides["preselect_parent_folder"] = preselect

    return overrides
