from __future__ import annotations

"""
Shell Commands.

Each command captures its target node at construction time and writes
its result to an output sink when executed. Commands have no failure
path: resolving the target is the caller's job.
"""

from dataclasses import dataclass

from file_explorer.domain.tree_models import Directory, File, LineSink
from file_explorer.utils.i18n import i18n


@dataclass(frozen=True)
class ListCommand:
    """
    Print a header for the directory, then display every child in order.

    Nested directories expand recursively, so listing the root dumps the
    whole tree.
    """
    directory: Directory
    indent_width: int = 0

    def execute(self, sink: LineSink) -> None:
        sink(i18n.t("shell.list_header", name=self.directory.name))
        for child in self.directory.children:
            child.display(sink, 0, self.indent_width)


@dataclass(frozen=True)
class ReadCommand:
    """Print the content of an already resolved file."""
    file: File

    def execute(self, sink: LineSink) -> None:
        sink(i18n.t("shell.read_content", content=self.file.content))
