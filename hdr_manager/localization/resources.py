# ==============================================
# ResourceProvider
# ==============================================
#
# PURPOSE:
#   Look up localized strings by key. Each locale is a flat JSON
#   object stored next to this module (en_US.json, fr_FR.json, ...).
#
#   Lookup order:
#     1. requested locale
#     2. en_US
#     3. the key itself
#
#   An unknown locale falls back to en_US entirely.
#
# ==============================================

import json
import logging
from pathlib import Path
from typing import Dict, List

log = logging.getLogger(__name__)

DEFAULT_LOCALE = "en_US"
LOCALIZATION_DIR = Path(__file__).parent


def available_locales() -> List[str]:
    return sorted(path.stem for path in LOCALIZATION_DIR.glob("*_*.json"))


def load_string_table(locale: str) -> Dict[str, str]:
    """
    Read one locale's string table.

    Args:
        locale: Locale name such as "fr_FR"

    Returns:
        Mapping of key → localized string

    Raises:
        FileNotFoundError: If the locale is not shipped
    """
    path = LOCALIZATION_DIR / f"{locale}.json"
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


class ResourceProvider:
    def __init__(self, locale: str = DEFAULT_LOCALE):
        self._fallback = load_string_table(DEFAULT_LOCALE)
        if locale == DEFAULT_LOCALE:
            self._strings = self._fallback
        elif locale in available_locales():
            self._strings = load_string_table(locale)
        else:
            log.warning(f"Locale '{locale}' is not available, using {DEFAULT_LOCALE}")
            self._strings = self._fallback
            locale = DEFAULT_LOCALE
        self.locale = locale

    def get_string(self, key: str) -> str:
        if key in self._strings:
            return self._strings[key]
        if key in self._fallback:
            return self._fallback[key]
        log.warning(f"Missing localized string '{key}'")
        return key
