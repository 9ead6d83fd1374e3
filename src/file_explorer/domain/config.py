from __future__ import annotations

"""
Configuration Domain Management.

Provides the default runtime configuration of the explorer shell and
loads user overrides from an optional JSON file. Unknown or corrupted
content never aborts startup: the loader falls back to defaults.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from file_explorer.domain.constants import DEFAULT_LOCALE

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Presentation
        "indent_width": 0,
        "show_menu": True,
        "locale": DEFAULT_LOCALE,

        # Diagnostics
        "log_level": "WARNING",
        "log_file": None,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from a JSON file and merge it over the defaults.

    Args:
        path: Location of the JSON file. None returns the defaults.

    Returns:
        Dict[str, Any]: The merged configuration, or defaults on failure.
    """
    defaults = get_default_config()

    if not path:
        return defaults

    if not os.path.exists(path):
        logger.debug(f"Config file not found at '{path}'. Returning defaults.")
        return defaults

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return defaults

    defaults.update(data)
    return defaults
