from __future__ import annotations

"""
Unit tests for the Tree Renderer.

Verifies that the pre-order walk visits every descendant exactly once,
in insertion order, and that rendered lines mirror node display output.
"""

from file_explorer.core.analysis.tree_renderer import iter_preorder, render_node, render_tree
from file_explorer.domain.factory import create_directory, create_file


def _deep_tree():
    """
    root
      a.txt
      d1
        b.txt
        d2
          c.txt
        e.txt
      f.txt
    """
    root = create_directory("root")
    d1 = create_directory("d1")
    d2 = create_directory("d2")
    d2.add_child(create_file("c.txt", "c"))
    d1.add_child(create_file("b.txt", "b"))
    d1.add_child(d2)
    d1.add_child(create_file("e.txt", "e"))
    root.add_child(create_file("a.txt", "a"))
    root.add_child(d1)
    root.add_child(create_file("f.txt", "f"))
    return root


def test_preorder_visits_each_node_once_in_order():
    visited = [(depth, node.name) for depth, node in iter_preorder(_deep_tree())]
    assert visited == [
        (0, "root"),
        (1, "a.txt"),
        (1, "d1"),
        (2, "b.txt"),
        (2, "d2"),
        (3, "c.txt"),
        (2, "e.txt"),
        (1, "f.txt"),
    ]
    ids = [id(node) for _, node in iter_preorder(_deep_tree())]
    assert len(ids) == len(set(ids))


def test_render_matches_display_output():
    root = _deep_tree()
    displayed = []
    root.display(displayed.append)
    assert render_tree(root) == displayed


def test_render_node_appends_to_accumulator():
    lines = ["existing"]
    render_node(create_file("solo.txt", "x"), lines, depth=1, indent_width=4)
    assert lines == ["existing", "    File: solo.txt"]


def test_render_empty_directory():
    assert render_tree(create_directory("empty")) == ["Directory: empty"]
