from __future__ import annotations

"""
Domain Constants.

Centralizes application-wide constants: versioning, shell keywords
and the fixed data used to seed the startup tree.
"""

from typing import Dict, List, Tuple

APP_NAME = "file_explorer"
APP_VERSION = "1.0.0"
DEFAULT_LOCALE = "en"

# -----------------------------------------------------------------------------
# SHELL KEYWORDS
# -----------------------------------------------------------------------------
CMD_LIST = "list"
CMD_READ = "read"
CMD_EXIT = "exit"

# -----------------------------------------------------------------------------
# BOOTSTRAP DATA
# -----------------------------------------------------------------------------
ROOT_NAME = "Root"

# Files placed directly under the root: (name, content)
ROOT_FILES: List[Tuple[str, str]] = [
    ("hello.txt", "Hello World!"),
]

# Subdirectories of the root with their files
ROOT_SUBDIRECTORIES: Dict[str, List[Tuple[str, str]]] = {
    "Documents": [
        ("todo.txt", "Finish assignment"),
    ],
}
