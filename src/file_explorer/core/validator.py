from __future__ import annotations

"""
Configuration Validation Service.

Normalizes the configuration dictionary coming from the JSON file and
the command line. Invalid values are replaced by defaults and reported
as warnings, unless strict mode is requested.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from file_explorer.domain.config import get_default_config

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises TypeError/ValueError instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    unknown = sorted(set(merged) - set(defaults))
    for key in unknown:
        warnings.append(f"Unknown field '{key}' ignored.")
        merged.pop(key)

    merged["indent_width"] = _as_non_negative_int(
        merged.get("indent_width"), defaults["indent_width"], "indent_width", warnings, strict
    )
    merged["show_menu"] = _as_bool(
        merged.get("show_menu"), defaults["show_menu"], "show_menu", warnings, strict
    )
    merged["locale"] = _as_str(
        merged.get("locale"), defaults["locale"], "locale", warnings, strict
    )
    merged["log_level"] = _as_str(
        merged.get("log_level"), defaults["log_level"], "log_level", warnings, strict
    ).upper()
    merged["log_file"] = _as_optional_str(
        merged.get("log_file"), "log_file", warnings, strict
    )

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _reject(msg: str, warnings: List[str], strict: bool, exc: type = TypeError) -> None:
    if strict:
        raise exc(msg)
    warnings.append(f"{msg} Using fallback.")
    logger.warning(msg)


def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback
    _reject(f"Invalid field '{field}': expected str, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_optional_str(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip() or None
    _reject(f"Invalid field '{field}': expected str, received {type(value).__name__}.", warnings, strict)
    return None


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Accept real booleans and the usual textual spellings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
    _reject(f"Invalid field '{field}': expected bool, received {value!r}.", warnings, strict)
    return fallback


def _as_non_negative_int(
        value: Any,
        fallback: int,
        field: str,
        warnings: List[str],
        strict: bool,
) -> int:
    """Coerce integers (and numeric strings) and reject negatives."""
    if isinstance(value, bool):
        _reject(f"Invalid field '{field}': expected int, received bool.", warnings, strict)
        return fallback
    try:
        number = int(value)
    except (TypeError, ValueError):
        _reject(f"Invalid field '{field}': expected int, received {value!r}.", warnings, strict)
        return fallback
    if number < 0:
        _reject(f"Invalid field '{field}': must be >= 0, received {number}.", warnings, strict, ValueError)
        return fallback
    return number
