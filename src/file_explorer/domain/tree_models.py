from __future__ import annotations

"""
In-Memory File Tree Data Models.

Provides the composite node types of the explorer: a leaf File that holds
text content and a Directory that owns an ordered list of children.
Both variants share the same display contract so that a whole subtree can
be dumped through a single recursive call.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Union

from file_explorer.utils.i18n import i18n

# Output sink used by display(): receives one rendered line per call
LineSink = Callable[[str], None]

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class File:
    """
    Represents a leaf entry (file) in the tree.

    Attributes:
        name: Display name of the file. Any string is accepted.
        content: Text returned by the read command.
    """
    name: str
    content: str = ""

    def display(self, sink: LineSink, depth: int = 0, indent_width: int = 0) -> None:
        """Emit the identifying line for this file. Content is never shown."""
        sink(format_node_line(self, depth, indent_width))


@dataclass
class Directory:
    """
    Represents a container entry (directory) in the tree.

    Children keep insertion order, which is the order used both for
    display and for lookup. Duplicate names are allowed.

    Attributes:
        name: Display name of the directory.
        children: Ordered, exclusively owned child nodes.
    """
    name: str
    children: List[Node] = field(default_factory=list)

    def add_child(self, node: Node) -> None:
        """Append a node as the last child of this directory."""
        self.children.append(node)

    def display(self, sink: LineSink, depth: int = 0, indent_width: int = 0) -> None:
        """
        Emit this directory's line, then every child's display in order.

        The traversal is depth-first pre-order. With the default indent
        width of 0 the output is flat.

        Args:
            sink: Callable receiving each rendered line.
            depth: Nesting level of this node relative to the render origin.
            indent_width: Spaces added per nesting level.
        """
        sink(format_node_line(self, depth, indent_width))
        for child in self.children:
            child.display(sink, depth + 1, indent_width)


# Closed sum type of the tree: every node is exactly one of these variants
Node = Union[File, Directory]


# -----------------------------------------------------------------------------
# PRESENTATION
# -----------------------------------------------------------------------------

def format_node_line(node: Node, depth: int = 0, indent_width: int = 0) -> str:
    """
    Build the single display line of a node.

    Args:
        node: File or Directory to describe.
        depth: Nesting level of the node.
        indent_width: Spaces per nesting level (0 keeps the line flat).

    Returns:
        str: The indented, labelled line.
    """
    prefix = " " * (depth * indent_width)

    if isinstance(node, Directory):
        return prefix + i18n.t("tree.directory", name=node.name)

    if isinstance(node, File):
        return prefix + i18n.t("tree.file", name=node.name)

    raise TypeError(f"Unsupported node type: {type(node).__name__}")
