from __future__ import annotations

"""
Unit tests for the tree data models and the tree builder.

Verifies:
1. File immutability and display output (name only, never content).
2. Directory child ordering, duplicates and recursive display.
3. Factory helpers accept any name without validation.
"""

import dataclasses

import pytest

from file_explorer.core.analysis.tree_renderer import render_tree
from file_explorer.domain.factory import create_directory, create_file
from file_explorer.domain.tree_models import Directory, File, format_node_line
from file_explorer.utils.i18n import i18n


def test_file_is_frozen():
    f = create_file("a.txt", "alpha")
    with pytest.raises(dataclasses.FrozenInstanceError):
        f.content = "changed"  # type: ignore[misc]


def test_file_display_never_shows_content():
    lines = []
    File("secret.txt", "do not print").display(lines.append)
    assert lines == ["File: secret.txt"]


def test_create_directory_starts_empty():
    d = create_directory("Empty")
    assert isinstance(d, Directory)
    assert d.children == []


def test_factory_accepts_empty_and_duplicate_names():
    d = create_directory("")
    d.add_child(create_file("", ""))
    d.add_child(create_file("", "second"))
    assert d.name == ""
    assert [c.content for c in d.children] == ["", "second"]


def test_directory_display_is_preorder(sample_root):
    lines = []
    sample_root.display(lines.append)
    assert lines == [
        "Directory: Root",
        "File: hello.txt",
        "Directory: Documents",
        "File: todo.txt",
    ]


def test_directory_display_with_indent(sample_root):
    lines = []
    sample_root.display(lines.append, indent_width=2)
    assert lines == [
        "Directory: Root",
        "  File: hello.txt",
        "  Directory: Documents",
        "    File: todo.txt",
    ]


def test_directories_do_not_share_children():
    a = create_directory("a")
    b = create_directory("b")
    a.add_child(create_file("x", "1"))
    assert b.children == []


def test_node_labels_come_from_message_catalogue(sample_root, monkeypatch):
    monkeypatch.setitem(i18n._translations, "tree", {"file": "F<{name}>", "directory": "D<{name}>"})

    displayed = []
    sample_root.display(displayed.append, indent_width=1)

    assert displayed == ["D<Root>", " F<hello.txt>", " D<Documents>", "  F<todo.txt>"]
    assert render_tree(sample_root, indent_width=1) == displayed


def test_format_node_line_rejects_unknown_nodes():
    with pytest.raises(TypeError):
        format_node_line("not a node")  # type: ignore[arg-type]


def test_format_node_line_keeps_braces_in_names():
    assert format_node_line(File("{x}.txt", ""), depth=2, indent_width=3) == "      File: {x}.txt"
