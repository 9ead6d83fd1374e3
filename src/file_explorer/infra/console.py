from __future__ import annotations

"""
Text Console Infrastructure.

Line-oriented text channel used by the shell: a blocking input source
that distinguishes end-of-input from an empty line, and a fire-and-forget
output sink.
"""

import sys
from typing import Optional, Protocol, TextIO


class Console(Protocol):
    def read_line(self) -> Optional[str]:
        """Return the next line without its terminator, or None at end of input."""
        ...

    def write(self, text: str, end: str = "\n") -> None:
        ...


class StreamConsole:
    """
    Console backed by a pair of text streams.

    Output is flushed after every write so a prompt written without a
    line terminator is visible before the next blocking read.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def read_line(self) -> Optional[str]:
        line = self._stdin.readline()
        if line == "":
            return None
        # Strip only the terminator; inner and leading spaces are significant
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        return line

    def write(self, text: str, end: str = "\n") -> None:
        self._stdout.write(text + end)
        self._stdout.flush()
