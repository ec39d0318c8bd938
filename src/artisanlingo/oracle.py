# src/artisanlingo/oracle.py
"""
HTTP client for the translation endpoint (the "oracle").

The endpoint contract is deliberately small::

    POST /functions/v1/ai-translate
    {"text": "...", "targetLanguage": "Hindi"}
    → 200 {"translatedText": "..."}
    → 4xx/5xx or {"error": "..."} on failure

Failures never raise to the caller.  The client resolves with a
:class:`~artisanlingo.models.Fallback` carrying the original text and
reports the failure through a side channel: the caller's ``on_error``
handler when given, the client-wide notifier otherwise.

Configuration (``config.ini`` ``[oracle]`` section)::

    [oracle]
    base_url              = http://localhost:8000
    api_key               =          # sent as a bearer token when set
    timeout_seconds       = 30
    max_retries           = 0        # extra attempts for network errors / 5xx
    retry_backoff_seconds = 0.5
"""
import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional

import httpx

from .config import config
from .models import (
    MALFORMED_RESPONSE,
    ORACLE_UNAVAILABLE,
    Fallback,
    OracleError,
    Translated,
    TranslationResult,
)

logger = logging.getLogger(__name__)

TRANSLATE_PATH = "/functions/v1/ai-translate"
BATCH_TRANSLATE_PATH = "/functions/v1/batch-translate"

ErrorHandler = Callable[[OracleError], None]


def log_failure(error: OracleError) -> None:
    """Default notifier: log the failure and carry on."""
    logger.error("Translation failed (%s): %s", error.reason, error)


class TranslationOracleClient:
    """
    Async client for the translation endpoint.

    Args:
        base_url: Endpoint root; defaults to ``[oracle] base_url``.
        api_key: Bearer token; defaults to the stored key
            (see :func:`artisanlingo.auth.get_api_key`).
        notifier: Called with an :class:`OracleError` for failures the
            caller did not handle itself.
        transport: Optional ``httpx`` transport (used by tests).
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        retry_backoff: Optional[float] = None,
        notifier: Optional[ErrorHandler] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or config.get("oracle", "base_url", "http://localhost:8000")).rstrip("/")
        if api_key is None:
            from .auth import get_api_key
            api_key = get_api_key()
        self.api_key = api_key
        self.timeout = timeout if timeout is not None else config.get("oracle", "timeout_seconds", 30.0)
        self.max_retries = max_retries if max_retries is not None else config.get("oracle", "max_retries", 0)
        self.retry_backoff = (
            retry_backoff if retry_backoff is not None
            else config.get("oracle", "retry_backoff_seconds", 0.5)
        )
        self.notifier = notifier or log_failure

        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers=headers,
            transport=transport,
        )
        logger.debug("Oracle client initialized with base URL: %s", self.base_url)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "TranslationOracleClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ── public API ─────────────────────────────────────────────────────────

    async def request_translation(
        self,
        text: str,
        target_language: str,
        on_error: Optional[ErrorHandler] = None,
    ) -> TranslationResult:
        """
        Translate a single text.

        Args:
            text: Non-empty source text.
            target_language: Human-readable language name (``"Hindi"``).
            on_error: Failure handler; when given, the notifier is not called.

        Returns:
            ``Translated`` on success, ``Fallback(text, reason)`` otherwise.
        """
        payload = {"text": text, "targetLanguage": target_language}
        try:
            data = await self._post(TRANSLATE_PATH, payload)
            translated = data.get("translatedText")
            if not isinstance(translated, str) or not translated:
                raise OracleError(MALFORMED_RESPONSE, "Response is missing 'translatedText'")
        except OracleError as exc:
            self._report(exc, on_error)
            return Fallback(text, exc.reason, str(exc))
        return Translated(translated)

    async def request_batch_translation(
        self,
        texts: List[str],
        target_language: str,
        on_error: Optional[ErrorHandler] = None,
    ) -> List[TranslationResult]:
        """
        Translate several texts in one request.

        The response must carry one translated string per input text; any
        other shape makes every item fall back to its original text.
        """
        if not texts:
            return []
        payload = {"texts": list(texts), "targetLanguage": target_language}
        try:
            data = await self._post(BATCH_TRANSLATE_PATH, payload)
            translated = data.get("translatedTexts")
            if (
                not isinstance(translated, list)
                or len(translated) != len(texts)
                or not all(isinstance(item, str) for item in translated)
            ):
                raise OracleError(
                    MALFORMED_RESPONSE,
                    f"Response 'translatedTexts' does not match {len(texts)} inputs",
                )
        except OracleError as exc:
            self._report(exc, on_error)
            return [Fallback(text, exc.reason, str(exc)) for text in texts]

        # Blank items keep the source text
        return [
            Translated(item) if item else Fallback(text, MALFORMED_RESPONSE, "Empty translation")
            for text, item in zip(texts, translated)
        ]

    # ── helpers ────────────────────────────────────────────────────────────

    async def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """POST *payload*, retrying network errors and 5xx responses."""
        attempt = 0
        while True:
            try:
                response = await self.client.post(path, json=payload)
            except httpx.HTTPError as exc:
                if attempt < self.max_retries:
                    attempt += 1
                    await self._backoff(attempt, exc)
                    continue
                raise OracleError(
                    ORACLE_UNAVAILABLE, f"Cannot reach {self.base_url}{path}: {exc}"
                ) from exc

            if response.status_code >= 500 and attempt < self.max_retries:
                attempt += 1
                await self._backoff(attempt, f"HTTP {response.status_code}")
                continue
            break

        if not response.is_success:
            raise OracleError(
                ORACLE_UNAVAILABLE,
                f"HTTP {response.status_code}: {self._error_detail(response)}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError:
            raise OracleError(MALFORMED_RESPONSE, "Response body is not JSON") from None
        if not isinstance(data, dict):
            raise OracleError(MALFORMED_RESPONSE, "Response body is not a JSON object")
        if data.get("error"):
            raise OracleError(ORACLE_UNAVAILABLE, str(data["error"]), status_code=response.status_code)
        return data

    async def _backoff(self, attempt: int, cause) -> None:
        delay = self.retry_backoff * (2 ** (attempt - 1))
        logger.warning(
            "Translation request failed (%s); retry %d/%d in %.2fs",
            cause, attempt, self.max_retries, delay,
        )
        await asyncio.sleep(delay)

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return response.text[:200] or response.reason_phrase
        if isinstance(data, dict) and data.get("error"):
            return str(data["error"])
        return response.reason_phrase

    def _report(self, error: OracleError, on_error: Optional[ErrorHandler]) -> None:
        handler = on_error or self.notifier
        try:
            handler(error)
        except Exception:
            logger.exception("Translation failure handler raised")
