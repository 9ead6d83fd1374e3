from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Delegates to the CLI controller and installs a global exception hook so
an unexpected crash is logged and reported on stderr instead of dying
with a bare traceback.
"""

import logging
import os
import sys
import traceback
from typing import Any

# Make the package importable when this file is executed directly
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)


def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Log an unhandled exception and print a crash banner to stderr.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))

    logger = logging.getLogger("file_explorer.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {value}\n{stack_trace}")

    print("\n" + "=" * 80, file=sys.stderr)
    print("CRITICAL ERROR (FILE EXPLORER)", file=sys.stderr)
    print("=" * 80, file=sys.stderr)
    print(stack_trace, file=sys.stderr)


sys.excepthook = global_exception_handler


def main() -> int:
    """
    Run the CLI application.

    Returns:
        int: Process exit code.
    """
    from file_explorer.interface.cli.app import main as cli_main

    try:
        return cli_main()
    except Exception as e:
        global_exception_handler(type(e), e, e.__traceback__)
        return 1


if __name__ == "__main__":
    sys.exit(main())
