from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, configuration
resolution (defaults, JSON file, CLI overrides), logging bootstrap,
tree construction and the interactive shell loop.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional, TextIO

from file_explorer.core.analysis.tree_renderer import render_tree
from file_explorer.core.services.bootstrap import build_sample_tree
from file_explorer.core.validator import validate_config
from file_explorer.domain.config import get_default_config, load_config
from file_explorer.infra.console import StreamConsole
from file_explorer.infra.logging import LoggingConfig, configure_logging, get_logger
from file_explorer.interface.cli import args as cli_args
from file_explorer.interface.shell.dispatcher import run_shell
from file_explorer.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(
        argv: Optional[List[str]] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.
        stdin: Input stream for the shell. Defaults to sys.stdin.
        stdout: Output stream for the shell. Defaults to sys.stdout.

    Returns:
        int: Process exit code (0 success, 2 bad configuration, 130 interrupted).
    """
    out = stdout if stdout is not None else sys.stdout

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    if args.config_path and not args.use_defaults and not os.path.exists(args.config_path):
        msg = i18n.t("cli.errors.config_not_exist", path=args.config_path)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 2. Resolve configuration (defaults < file < CLI flags)
    base_conf = get_default_config() if args.use_defaults else load_config(args.config_path)
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console logs go to stderr, never to the shell output)
    configure_logging(LoggingConfig.from_app_config(clean_conf))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if clean_conf["locale"] != i18n.locale:
        i18n.load_locale(clean_conf["locale"])

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2), file=out)
        return 0

    # 4. Tree construction
    root = build_sample_tree()

    if args.print_tree:
        for line in render_tree(root, indent_width=clean_conf["indent_width"]):
            print(line, file=out)
        return 0

    # 5. Interactive loop
    console = StreamConsole(stdin=stdin, stdout=out)
    try:
        run_shell(
            root,
            console,
            indent_width=clean_conf["indent_width"],
            show_menu=clean_conf["show_menu"],
        )
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(f"\n{msg}", file=sys.stderr)
        return 130

    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of non-None override values over the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out


if __name__ == "__main__":
    sys.exit(main())
