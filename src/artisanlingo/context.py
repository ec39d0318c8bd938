# src/artisanlingo/context.py
"""
Session-scoped language state.

A :class:`LanguageContext` is built once by the application root and
handed to whatever renders UI copy.  It owns the active language, a
private copy of the static dictionary and a memoizing translator.

Usage::

    async with LanguageContext.create() as ctx:
        ctx.set_language("hindi")
        ctx.t("home")                       # → "होम"
        await ctx.translate_text(post_body)  # user-authored text
        await ctx.translate_page({"title": "Welcome", "cta": "Join"})

``t`` never blocks.  A key missing from the dictionary is returned
as-is while a background task asks the oracle for it and stores the
answer, so the next ``t`` call for that key is translated.  Await
:meth:`LanguageContext.flush` to wait for those background tasks.
"""
import asyncio
import logging
from typing import Dict, List, Optional, Tuple, Union

from .dictionary import StaticDictionary
from .languages import SOURCE_LANGUAGE, Language
from .models import OracleError, Translated
from .oracle import ErrorHandler, TranslationOracleClient
from .performance import PerformanceMonitor, performance_monitor
from .storage import KeyringStorage, load_language, store_language
from .translator import MemoizedTranslator

logger = logging.getLogger(__name__)


class LanguageContext:
    """
    Active language plus the lookup and translation operations bound to it.

    Args:
        oracle: Translation oracle client (anything with the
            :class:`~artisanlingo.oracle.TranslationOracleClient` coroutines).
        dictionary: Static dictionary; defaults to the bundled strings.
        storage: Durable storage for the active language; defaults to
            :class:`~artisanlingo.storage.KeyringStorage`.
        monitor: Performance monitor for page and batch translations.
    """

    def __init__(
        self,
        oracle: TranslationOracleClient,
        dictionary: Optional[StaticDictionary] = None,
        storage=None,
        monitor: Optional[PerformanceMonitor] = None,
    ):
        self.oracle = oracle
        self.dictionary = dictionary if dictionary is not None else StaticDictionary()
        self.storage = storage if storage is not None else KeyringStorage()
        self.monitor = monitor or performance_monitor
        self.translator = MemoizedTranslator(oracle, on_request=self._track_request)

        self._in_flight = 0
        self._warming: Dict[Tuple[Language, str], asyncio.Task] = {}
        self._language = load_language(self.storage)

    @classmethod
    def create(cls, storage=None, **oracle_kwargs) -> "LanguageContext":
        """Build a context with an oracle client configured from ``config.ini``."""
        return cls(TranslationOracleClient(**oracle_kwargs), storage=storage)

    async def aclose(self) -> None:
        await self.flush()
        close = getattr(self.oracle, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "LanguageContext":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ── active language ────────────────────────────────────────────────────

    @property
    def language(self) -> Language:
        return self._language

    def set_language(self, language: Union[str, Language]) -> Language:
        """
        Switch the active language and persist it.

        Raises:
            InvalidLanguageError: If *language* is not supported.  The
                active and stored language are left unchanged.
        """
        lang = store_language(self.storage, language)
        self._language = lang
        logger.info("Active language set to %s", lang)
        return lang

    @property
    def is_translating(self) -> bool:
        """True while an oracle request started by this context is in flight."""
        return self._in_flight > 0

    def _track_request(self, delta: int) -> None:
        self._in_flight += delta

    # ── lookups ────────────────────────────────────────────────────────────

    def t(self, key: str) -> str:
        """
        Return the static string for *key* in the active language.

        A key missing for a non-English language is returned unchanged and
        queued for warming.  Never blocks and never touches the network
        when the key is in the dictionary.
        """
        lang = self._language
        text = self.dictionary.lookup(lang, key)
        if text is not None:
            return text
        if lang == SOURCE_LANGUAGE:
            logger.warning("No English string for key %r", key)
            return key
        self._schedule_warming(lang, key)
        return key

    def _schedule_warming(self, lang: Language, key: str) -> None:
        if (lang, key) in self._warming:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop; not warming %r", key)
            return
        task = loop.create_task(self._warm(lang, key))
        self._warming[(lang, key)] = task
        task.add_done_callback(lambda _task, entry=(lang, key): self._warming.pop(entry, None))

    async def _warm(self, lang: Language, key: str) -> None:
        def log_failure(error: OracleError) -> None:
            logger.warning("Could not warm %r for %s: %s", key, lang, error)

        try:
            result = await self.translator.translate_result(key, lang, on_error=log_failure)
        except Exception:
            logger.warning("Warming %r for %s failed", key, lang, exc_info=True)
            return
        if isinstance(result, Translated):
            self.dictionary.learn(lang, key, result.text)
            logger.debug("Learned %s string for %r", lang, key)

    async def flush(self) -> None:
        """Wait until every pending warming task has finished."""
        while True:
            pending = [task for task in self._warming.values() if not task.done()]
            if not pending:
                return
            await asyncio.gather(*pending, return_exceptions=True)

    # ── dynamic translation ────────────────────────────────────────────────

    async def translate_text(self, text: str, on_error: Optional[ErrorHandler] = None) -> str:
        """Translate arbitrary text into the active language."""
        return await self.translator.translate(text, self._language, on_error)

    async def translate_page(self, content: Dict[str, str]) -> Dict[str, str]:
        """
        Translate every value of *content* concurrently, keeping its keys.

        Returns *content* itself when the active language is English.
        Fields whose translation failed keep their original text.
        """
        lang = self._language
        if lang == SOURCE_LANGUAGE:
            return content

        keys = list(content)
        with self.monitor.track_operation("translate_page"):
            values = await asyncio.gather(
                *(self.translator.translate(content[key], lang) for key in keys)
            )
        return dict(zip(keys, values))

    async def batch_translate(self, texts: List[str]) -> List[str]:
        """Translate *texts* into the active language with one batch request."""
        with self.monitor.track_operation("batch_translate"):
            return await self.translator.translate_batch(texts, self._language)
