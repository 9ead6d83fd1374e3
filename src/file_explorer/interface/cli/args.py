from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the explorer and translates the parsed
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from file_explorer.domain.constants import APP_NAME, APP_VERSION
from file_explorer.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the explorer CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description=i18n.t("app.description"),
    )

    # --- Configuration Sources ---
    p.add_argument(
        "-c", "--config",
        dest="config_path",
        default=None,
        help=i18n.t("cli.args.config"),
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )

    # --- Presentation ---
    p.add_argument(
        "--indent",
        dest="indent_width",
        type=int,
        default=None,
        metavar="N",
        help=i18n.t("cli.args.indent"),
    )
    p.add_argument(
        "--no-menu",
        action="store_true",
        help=i18n.t("cli.args.no_menu"),
    )
    p.add_argument(
        "--print-tree",
        action="store_true",
        help=i18n.t("cli.args.print_tree"),
    )

    # --- Diagnostics ---
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Keys whose flag was not given map to None and are skipped by the merge.
    """
    overrides: Dict[str, Any] = {
        "indent_width": args.indent_width,
        "log_file": args.log_file,
    }

    if args.no_menu:
        overrides["show_menu"] = False
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
