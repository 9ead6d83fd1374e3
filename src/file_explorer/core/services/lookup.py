from __future__ import annotations

"""
Name Lookup Service.

Resolves a file by name among the direct children of a directory.
Subdirectories are never searched, so nested files are unreachable.
"""

import logging
from typing import Optional

from file_explorer.domain.tree_models import Directory, File

logger = logging.getLogger(__name__)


def find_file(directory: Directory, name: str) -> Optional[File]:
    """
    Return the first direct child File whose name matches case-insensitively.

    Directories with a matching name are skipped.

    Args:
        directory: Directory whose children are scanned in insertion order.
        name: Target file name.

    Returns:
        Optional[File]: The matching file, or None when absent.
    """
    for node in directory.children:
        if isinstance(node, File) and names_match(node.name, name):
            return node

    logger.debug(f"Lookup miss for '{name}' in directory '{directory.name}'")
    return None


def names_match(left: str, right: str) -> bool:
    """
    Compare two names ignoring case, one character at a time.

    Two characters match when they are equal, when their uppercase forms
    are equal, or when the lowercase forms of those uppercase forms are
    equal. Only single-character case mappings are used, so 'ß' does not
    expand to 'SS' and the long s 'ſ' matches 's'.
    """
    if len(left) != len(right):
        return False
    return all(_chars_match(a, b) for a, b in zip(left, right))


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _chars_match(a: str, b: str) -> bool:
    if a == b:
        return True
    upper_a, upper_b = _upper(a), _upper(b)
    if upper_a == upper_b:
        return True
    return _lower(upper_a) == _lower(upper_b)


def _upper(ch: str) -> str:
    # Multi-character expansions ('ß' -> 'SS') have no single-character form
    mapped = ch.upper()
    return mapped if len(mapped) == 1 else ch


def _lower(ch: str) -> str:
    # 'İ' lowers to 'i' + combining dot; its single-character form is 'i'
    mapped = ch.lower()
    return mapped if len(mapped) == 1 else mapped[0]
