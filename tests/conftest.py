from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation so the 'src' directory is importable without install.
2. Shared fixtures: the sample tree and a scripted console.
"""

import os
import sys
from typing import Iterable, List, Optional

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from file_explorer.core.services.bootstrap import build_sample_tree  # noqa: E402
from file_explorer.domain.tree_models import Directory  # noqa: E402


class ScriptedConsole:
    """
    In-memory console that replays a fixed list of input lines.

    Everything written is accumulated in 'output'. Once the script is
    exhausted read_line() reports end of input.
    """

    def __init__(self, lines: Iterable[str]):
        self._pending: List[str] = list(lines)
        self.output = ""
        self.reads = 0

    def read_line(self) -> Optional[str]:
        if not self._pending:
            return None
        self.reads += 1
        return self._pending.pop(0)

    def write(self, text: str, end: str = "\n") -> None:
        self.output += text + end

    @property
    def lines(self) -> List[str]:
        return self.output.splitlines()


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_root() -> Directory:
    """
    Return the startup tree.

    Structure:
    Root
      hello.txt  = "Hello World!"
      Documents
        todo.txt = "Finish assignment"
    """
    return build_sample_tree()


@pytest.fixture
def scripted_console():
    """Factory fixture building a ScriptedConsole from input lines."""
    def _make(*lines: str) -> ScriptedConsole:
        return ScriptedConsole(lines)
    return _make
