from __future__ import annotations

"""
Startup Tree Construction.

Builds the fixed in-memory tree the shell explores: files placed
directly under the root plus one level of subdirectories with their own
files, all taken from the domain constants.
"""

import logging
from typing import Dict, List, Optional, Tuple

from file_explorer.domain.constants import ROOT_FILES, ROOT_NAME, ROOT_SUBDIRECTORIES
from file_explorer.domain.factory import create_directory, create_file
from file_explorer.domain.tree_models import Directory

logger = logging.getLogger(__name__)


def build_sample_tree(
        root_name: str = ROOT_NAME,
        files: Optional[List[Tuple[str, str]]] = None,
        subdirectories: Optional[Dict[str, List[Tuple[str, str]]]] = None,
) -> Directory:
    """
    Create the root directory and attach its children.

    Root files come first, then subdirectories, each in the given order.

    Args:
        root_name: Name of the root directory.
        files: Direct root files as (name, content) pairs.
        subdirectories: Mapping of subdirectory name to its (name, content) files.

    Returns:
        Directory: The populated root.
    """
    files = ROOT_FILES if files is None else files
    subdirectories = ROOT_SUBDIRECTORIES if subdirectories is None else subdirectories

    root = create_directory(root_name)

    for name, content in files:
        root.add_child(create_file(name, content))

    for dir_name, dir_files in subdirectories.items():
        subdir = create_directory(dir_name)
        for name, content in dir_files:
            subdir.add_child(create_file(name, content))
        root.add_child(subdir)

    logger.debug(
        f"Tree built: root='{root_name}', files={len(files)}, "
        f"subdirectories={len(subdirectories)}"
    )
    return root
