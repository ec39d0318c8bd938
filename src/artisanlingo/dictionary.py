# src/artisanlingo/dictionary.py
"""
Static dictionary of pre-authored UI strings.

Provides a lightweight dictionary-based lookup for the six supported
languages.  Labels are addressed by camelCase keys (``"home"``,
``"editProfile"``) and every bundled language table covers the same key
set as English.

Usage::

    from artisanlingo.dictionary import StaticDictionary
    from artisanlingo.languages import Language

    strings = StaticDictionary()
    strings.lookup(Language.HINDI, "home")   # → "होम"
    strings.lookup(Language.HINDI, "nope")   # → None

Entries may be added at runtime by warming (see
:meth:`artisanlingo.context.LanguageContext.t`); the bundled tables
themselves are never mutated.
"""
from __future__ import annotations

import logging
from typing import Mapping, Optional, Union

from .languages import Language, parse_language

logger = logging.getLogger(__name__)


class StaticDictionary:
    """
    Mapping of language → (key → translated string).

    Args:
        tables: Optional initial tables keyed by language (tag or
            :class:`Language`).  Defaults to the bundled string tables.
            The tables are copied so every instance can learn
            independently.
    """

    def __init__(self, tables: Optional[Mapping[Union[str, Language], Mapping[str, str]]] = None):
        if tables is None:
            tables = _BUNDLED
        self._tables: dict[Language, dict[str, str]] = {lang: {} for lang in Language}
        for lang, strings in tables.items():
            self._tables[parse_language(lang)].update(strings)

    def lookup(self, language: Union[str, Language], key: str) -> Optional[str]:
        """Return the string for *key* in *language*, or ``None`` if absent."""
        return self._tables[parse_language(language)].get(key)

    def learn(self, language: Union[str, Language], key: str, text: str) -> None:
        """Add (or replace) a runtime entry.  Empty strings are ignored."""
        if not text:
            return
        lang = parse_language(language)
        table = self._tables[lang]
        previous = table.get(key)
        if previous and previous != text:
            logger.debug("Replacing %s entry for %r: %r -> %r", lang, key, previous, text)
        table[key] = text

    def keys(self, language: Union[str, Language]) -> set[str]:
        return set(self._tables[parse_language(language)])

    def missing_keys(self, language: Union[str, Language]) -> set[str]:
        """Keys defined for English but absent for *language*."""
        return self.keys(Language.ENGLISH) - self.keys(language)

    def __contains__(self, item) -> bool:
        language, key = item
        return self.lookup(language, key) is not None


# ═══════════════════════════════════════════════════════════════════════════
#  String tables – loaded from per-language modules in lang/
# ═══════════════════════════════════════════════════════════════════════════

from .lang.bengali import STRINGS as _BN
from .lang.english import STRINGS as _EN
from .lang.hindi import STRINGS as _HI
from .lang.marathi import STRINGS as _MR
from .lang.tamil import STRINGS as _TA
from .lang.telugu import STRINGS as _TE

_BUNDLED: dict[Language, dict[str, str]] = {
    Language.ENGLISH: _EN,
    Language.HINDI: _HI,
    Language.TAMIL: _TA,
    Language.TELUGU: _TE,
    Language.BENGALI: _BN,
    Language.MARATHI: _MR,
}
