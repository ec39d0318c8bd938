# src/artisanlingo/translator.py
"""
Memoizing front end for the translation oracle.

Identical ``(text, language)`` pairs are translated once per session.
Only successful translations are cached, so a text that fell back to
its original after an oracle failure is retried on the next call.
Concurrent misses for the same pair are not deduplicated; each issues
its own request and the last one to finish wins the cache slot.
"""
import logging
from typing import Callable, Dict, List, Optional, Tuple, Union

from .languages import SOURCE_LANGUAGE, Language, display_name, parse_language
from .models import Translated, TranslationResult
from .oracle import ErrorHandler, TranslationOracleClient

logger = logging.getLogger(__name__)


class MemoizedTranslator:
    """
    Session cache of oracle translations keyed by ``(text, language)``.

    Args:
        oracle: The client used on cache misses.
        on_request: Optional hook called with ``+1`` when an oracle call
            starts and ``-1`` when it finishes.
    """

    def __init__(
        self,
        oracle: TranslationOracleClient,
        on_request: Optional[Callable[[int], None]] = None,
    ):
        self.oracle = oracle
        self.on_request = on_request
        self._cache: Dict[Tuple[str, Language], str] = {}

    async def translate(
        self,
        text: str,
        language: Union[str, Language],
        on_error: Optional[ErrorHandler] = None,
    ) -> str:
        """Translate *text* into *language*, returning the original on failure."""
        result = await self.translate_result(text, language, on_error)
        return result.text

    async def translate_result(
        self,
        text: str,
        language: Union[str, Language],
        on_error: Optional[ErrorHandler] = None,
    ) -> TranslationResult:
        """Like :meth:`translate` but returns the tagged result."""
        lang = parse_language(language)
        if lang == SOURCE_LANGUAGE or not text or not text.strip():
            return Translated(text)

        key = (text, lang)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %r (%s)", text[:50], lang)
            return Translated(cached)

        self._started()
        try:
            result = await self.oracle.request_translation(text, display_name(lang), on_error)
        finally:
            self._finished()

        if isinstance(result, Translated):
            self._cache[key] = result.text
        return result

    async def translate_batch(
        self,
        texts: List[str],
        language: Union[str, Language],
        on_error: Optional[ErrorHandler] = None,
    ) -> List[str]:
        """
        Translate several texts, sending only the cache misses to the oracle
        in a single batch request.  Output order matches *texts*.
        """
        lang = parse_language(language)
        if lang == SOURCE_LANGUAGE:
            return list(texts)

        results = list(texts)
        pending: List[int] = []
        for index, text in enumerate(texts):
            if not text or not text.strip():
                continue
            cached = self._cache.get((text, lang))
            if cached is not None:
                results[index] = cached
            else:
                pending.append(index)

        if not pending:
            return results

        # Send each distinct text once
        unique = list(dict.fromkeys(texts[i] for i in pending))
        self._started()
        try:
            translated = await self.oracle.request_batch_translation(unique, display_name(lang), on_error)
        finally:
            self._finished()

        by_text = {}
        for text, result in zip(unique, translated):
            by_text[text] = result.text
            if isinstance(result, Translated):
                self._cache[(text, lang)] = result.text
        for index in pending:
            results[index] = by_text[texts[index]]
        return results

    def cached(self, text: str, language: Union[str, Language]) -> Optional[str]:
        return self._cache.get((text, parse_language(language)))

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def clear(self) -> None:
        self._cache.clear()

    def _started(self) -> None:
        if self.on_request:
            self.on_request(1)

    def _finished(self) -> None:
        if self.on_request:
            self.on_request(-1)
