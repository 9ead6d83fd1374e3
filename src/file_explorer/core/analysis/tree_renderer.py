from __future__ import annotations

"""
Tree Renderer.

Converts the in-memory node tree into plain text lines using a
depth-first pre-order walk. Output is flat by default; an indent width
can be supplied to nest each level visually.
"""

from typing import Iterator, List, Tuple

from file_explorer.domain.tree_models import Directory, Node, format_node_line

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def iter_preorder(node: Node, depth: int = 0) -> Iterator[Tuple[int, Node]]:
    """
    Yield every node of the subtree exactly once, in pre-order.

    Args:
        node: Subtree origin.
        depth: Depth assigned to the origin.

    Yields:
        Tuple[int, Node]: The nesting depth and the node itself.
    """
    yield depth, node
    if isinstance(node, Directory):
        for child in node.children:
            yield from iter_preorder(child, depth + 1)


def render_node(
        node: Node,
        lines: List[str],
        depth: int = 0,
        indent_width: int = 0,
) -> None:
    """
    Append the text dump of a subtree to an accumulator list.

    Args:
        node: Subtree origin.
        lines: Accumulator list for output strings.
        depth: Nesting level assigned to the origin.
        indent_width: Spaces per nesting level (0 keeps the dump flat).
    """
    for level, current in iter_preorder(node, depth):
        lines.append(format_node_line(current, level, indent_width))


def render_tree(node: Node, indent_width: int = 0) -> List[str]:
    """Return the pre-order dump of a subtree as a new list of lines."""
    lines: List[str] = []
    render_node(node, lines, indent_width=indent_width)
    return lines
