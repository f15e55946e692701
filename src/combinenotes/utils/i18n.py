from __future__ import annotations

"""
Message Catalog (i18n).

Every user-visible string (notices, picker prompts, preview labels, CLI
help) lives in interface/locales/<locale>.json as a nested dictionary and is
looked up with a dotted key such as 'notices.saved'. Placeholders use
str.format syntax.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
LOCALES_DIR = os.path.abspath(
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "interface", "locales")
)


class I18n:
    """
    Catalog of translated messages for one locale.

    Lookups never fail: an unknown key resolves to the key itself, and a
    message whose placeholders cannot be filled is returned unformatted.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self._locale = locale
        self._locales_path = LOCALES_DIR
        self._messages: Dict[str, Any] = {}
        self.is_loaded = False
        self.load_locale(locale)

    @property
    def locale(self) -> str:
        return self._locale

    def load_locale(self, locale: str) -> None:
        """
        Replace the catalog with the one of `locale`.

        A missing or unreadable catalog leaves an empty one (every lookup
        then returns its key) and is logged.
        """
        file_path = os.path.join(self._locales_path, f"{locale}.json")
        self._messages = {}
        self.is_loaded = False

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                messages = json.load(f)
        except FileNotFoundError:
            logger.warning(f"I18n: no catalog for locale '{locale}' at {file_path}.")
            return
        except (OSError, ValueError) as e:
            logger.error(f"I18n: cannot read catalog {file_path}: {e}")
            return

        self._messages = messages
        self._locale = locale
        self.is_loaded = True

    def t(self, key: str, **kwargs: Any) -> str:
        """
        Resolve a dotted key and fill its placeholders.

        Args:
            key: Dotted path into the catalog (e.g. 'notices.copied_count').
            **kwargs: Placeholder values.

        Returns:
            str: The message, or `key` when it does not name a message.
        """
        message = self._lookup(key)
        if message is None:
            return key
        if not kwargs:
            return message
        try:
            return message.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: cannot format '{key}': {e}")
            return message

    def _lookup(self, key: str) -> Optional[str]:
        node: Any = self._messages
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node if isinstance(node, str) else None


i18n = I18n(DEFAULT_LOCALE)
