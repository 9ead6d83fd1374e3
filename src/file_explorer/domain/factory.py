from __future__ import annotations

"""
Tree Builder.

Thin construction helpers for tree nodes. No validation is performed:
empty and duplicate names are accepted as-is.
"""

from file_explorer.domain.tree_models import Directory, File


def create_file(name: str, content: str) -> File:
    """Return a new File holding the given content."""
    return File(name=name, content=content)


def create_directory(name: str) -> Directory:
    """Return a new Directory with no children."""
    return Directory(name=name)
