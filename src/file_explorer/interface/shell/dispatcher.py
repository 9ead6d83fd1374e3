from __future__ import annotations

"""
Interactive Shell Dispatcher.

Tokenizes one input line at a time, routes it to the matching command
and drives the read-eval loop until 'exit' or end of input. The loop
state is an explicit RUNNING/TERMINATED value; the current directory is
always the root.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from file_explorer.core.commands import ListCommand, ReadCommand
from file_explorer.core.services.lookup import find_file
from file_explorer.domain.constants import CMD_EXIT, CMD_LIST, CMD_READ
from file_explorer.domain.tree_models import Directory, LineSink
from file_explorer.infra.console import Console
from file_explorer.utils.i18n import i18n

logger = logging.getLogger(__name__)

_MENU_KEYS = (
    "shell.menu.available",
    "shell.menu.list",
    "shell.menu.read",
    "shell.menu.exit",
)


class ShellState(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class ParsedCommand:
    """
    One tokenized input line.

    Attributes:
        keyword: First token, lower-cased. May be empty.
        argument: Second token, or None when the line has a single token.
    """
    keyword: str
    argument: Optional[str] = None


# -----------------------------------------------------------------------------
# PARSING
# -----------------------------------------------------------------------------

def parse_command(line: str) -> ParsedCommand:
    """
    Split a line on single spaces into keyword and optional argument.

    Leading and inner empty tokens are kept, trailing empty tokens are
    dropped, and tokens past the second one are ignored.
    """
    parts = line.split(" ")
    while len(parts) > 1 and parts[-1] == "":
        parts.pop()
    argument = parts[1] if len(parts) > 1 else None
    return ParsedCommand(keyword=parts[0].lower(), argument=argument)


# -----------------------------------------------------------------------------
# DISPATCH
# -----------------------------------------------------------------------------

def dispatch(
        line: str,
        root: Directory,
        sink: LineSink,
        indent_width: int = 0,
) -> ShellState:
    """
    Execute a single input line against the root directory.

    User errors are reported through the sink and never raise.

    Args:
        line: Raw input line without its terminator.
        root: Directory used as the current directory.
        sink: Output line sink.
        indent_width: Spaces per nesting level used by 'list'.

    Returns:
        ShellState: TERMINATED after 'exit', RUNNING otherwise.
    """
    parsed = parse_command(line)
    logger.debug(f"Dispatching keyword='{parsed.keyword}' argument={parsed.argument!r}")

    if parsed.keyword == CMD_LIST:
        ListCommand(root, indent_width).execute(sink)
        return ShellState.RUNNING

    if parsed.keyword == CMD_READ:
        if parsed.argument is None:
            sink(i18n.t("shell.missing_filename"))
            return ShellState.RUNNING

        target = find_file(root, parsed.argument)
        if target is None:
            sink(i18n.t("shell.file_not_found"))
        else:
            ReadCommand(target).execute(sink)
        return ShellState.RUNNING

    if parsed.keyword == CMD_EXIT:
        sink(i18n.t("shell.goodbye"))
        return ShellState.TERMINATED

    sink(i18n.t("shell.invalid_command"))
    return ShellState.RUNNING


# -----------------------------------------------------------------------------
# LOOP
# -----------------------------------------------------------------------------

def print_menu(console: Console, root: Directory, show_menu: bool = True) -> None:
    """Write the menu block (if enabled) followed by the prompt."""
    if show_menu:
        console.write("")
        console.write(i18n.t("shell.menu.current_directory", name=root.name))
        for key in _MENU_KEYS:
            console.write(i18n.t(key))
    console.write(i18n.t("shell.menu.prompt"), end="")


def run_shell(
        root: Directory,
        console: Console,
        *,
        indent_width: int = 0,
        show_menu: bool = True,
) -> int:
    """
    Run the interactive loop until 'exit' or end of input.

    End of input is handled like 'exit': the farewell is printed and the
    loop ends.

    Args:
        root: Directory explored by the shell.
        console: Text channel for prompts, input and results.
        indent_width: Spaces per nesting level used by 'list'.
        show_menu: Print the command menu before each prompt.

    Returns:
        int: Number of input lines processed.
    """
    state = ShellState.RUNNING
    processed = 0
    logger.info(f"Shell started on directory '{root.name}'")

    while state is ShellState.RUNNING:
        print_menu(console, root, show_menu)

        line = console.read_line()
        if line is None:
            logger.info("End of input reached. Terminating shell.")
            console.write("")
            console.write(i18n.t("shell.goodbye"))
            state = ShellState.TERMINATED
            break

        processed += 1
        state = dispatch(line, root, console.write, indent_width)

    logger.info(f"Shell terminated after {processed} command(s)")
    return processed
