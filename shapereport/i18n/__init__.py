"""Language selection for reports.

Public API:
    Language              — numeric identifiers (SPANISH = 1, ENGLISH = 2).
    get_language(ident)   — strategy for a Language, int or code ("es", "en").

Unrecognized identifiers fall back to English; nothing here raises.
"""

from __future__ import annotations

import enum
import logging

from shapereport.i18n.base import LanguageStrategy
from shapereport.i18n.en import EnglishLanguageStrategy
from shapereport.i18n.es import SpanishLanguageStrategy

logger = logging.getLogger(__name__)


class Language(enum.IntEnum):
    SPANISH = 1
    ENGLISH = 2


SPANISH = SpanishLanguageStrategy()
ENGLISH = EnglishLanguageStrategy()

_BY_ID: dict[int, LanguageStrategy] = {
    Language.SPANISH: SPANISH,
    Language.ENGLISH: ENGLISH,
}

_BY_CODE: dict[str, LanguageStrategy] = {
    "es": SPANISH,
    "spanish": SPANISH,
    "en": ENGLISH,
    "english": ENGLISH,
}


def get_language(identifier: Language | int | str | None) -> LanguageStrategy:
    """Resolve a language identifier to its strategy, defaulting to English.

    Strings are matched as codes first, then as numeric ids ("1" → Spanish).
    """
    strategy: LanguageStrategy | None = None
    if isinstance(identifier, str):
        key = identifier.strip().lower()
        strategy = _BY_CODE.get(key)
        if strategy is None and key.lstrip("-").isdigit():
            strategy = _BY_ID.get(int(key))
    elif isinstance(identifier, int) and not isinstance(identifier, bool):
        strategy = _BY_ID.get(identifier)

    if strategy is None:
        logger.debug("Unknown language %r, falling back to English", identifier)
        return ENGLISH
    return strategy


__all__ = [
    "Language",
    "LanguageStrategy",
    "SpanishLanguageStrategy",
    "EnglishLanguageStrategy",
    "SPANISH",
    "ENGLISH",
    "get_language",
]
