from __future__ import annotations

"""
Internationalization (i18n) Utility.

Provides a singleton catalogue of user-facing strings loaded from JSON
locale files. Keys use dot-notation ('shell.file_not_found') and values
support str.format interpolation.
"""

import json
import logging
import os
from typing import Any, Dict

from file_explorer.domain.constants import DEFAULT_LOCALE

logger = logging.getLogger(__name__)

LOCALES_REL_PATH = os.path.join("..", "interface", "locales")

# -----------------------------------------------------------------------------
# I18N MANAGER SERVICE
# -----------------------------------------------------------------------------

class I18n:
    """
    Resource manager for locale-specific strings.

    Resolution failures never raise: the requested key is returned instead.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self._locale = locale
        self._translations: Dict[str, Any] = {}
        self.is_loaded = False

        base_dir = os.path.dirname(os.path.abspath(__file__))
        self._locales_path = os.path.abspath(os.path.join(base_dir, LOCALES_REL_PATH))

        self.load_locale(locale)

    @property
    def locale(self) -> str:
        return self._locale

    def load_locale(self, locale: str) -> None:
        """
        Load a translation dictionary from the locales directory.

        A missing or corrupted file keeps the previously active catalogue.

        Args:
            locale: ISO identifier for the target language.
        """
        file_path = os.path.join(self._locales_path, f"{locale}.json")

        if not os.path.exists(file_path):
            logger.warning(f"I18n: Locale resource missing at '{file_path}'.")
            return

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                self._translations = json.load(f)
            self._locale = locale
            self.is_loaded = True
            logger.debug(f"I18n: Loaded locale dictionary: {locale}")
        except (OSError, ValueError) as e:
            logger.error(f"I18n: Corruption in locale file {file_path}: {e}")

    def t(self, key: str, **kwargs: Any) -> str:
        """
        Resolve and format a string using dot-notation.

        Args:
            key: Hierarchical identifier path (e.g., 'shell.goodbye').
            **kwargs: Values interpolated with str.format.

        Returns:
            str: The formatted string, or the key itself when unresolved.
        """
        current_val: Any = self._translations
        for k in key.split("."):
            if not isinstance(current_val, dict):
                return key
            current_val = current_val.get(k)

        if not isinstance(current_val, str):
            return key

        try:
            return current_val.format(**kwargs) if kwargs else current_val
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: Formatting error for path '{key}': {e}")
            return current_val

# -----------------------------------------------------------------------------
# SERVICE INITIALIZATION
# -----------------------------------------------------------------------------

# Global singleton instance for application-wide resource access
i18n = I18n(DEFAULT_LOCALE)
