# src/artisanlingo/backends/local_llm.py
"""
LLM translation backend over HTTP.

Supports OpenAI-compatible and Anthropic-compatible chat endpoints, so
the same code serves the hosted OpenAI API and local inference servers
(LM Studio, Ollama, vLLM, LocalAI).

Configuration (``config.ini`` ``[llm]`` section)::

    [llm]
    api_url    = https://api.openai.com/v1
    api_type   = openai          # openai | anthropic
    model      = gpt-4o-mini
    api_key    =                 # falls back to OPENAI_API_KEY / ANTHROPIC_API_KEY
    timeout    = 60
    max_tokens = 2048
"""
import logging
import os
import time
from typing import List, Optional

import requests

from .base import (
    BATCH_TEMPERATURE,
    SINGLE_TEMPERATURE,
    TranslationBackend,
    TranslationBackendError,
    build_batch_prompt,
    build_translation_prompt,
    number_texts,
    parse_numbered_translations,
)
from artisanlingo.config import config

logger = logging.getLogger(__name__)

_ENV_KEYS = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}


class LocalLLMBackend(TranslationBackend):
    """Translation backend using an OpenAI- or Anthropic-compatible API."""

    name = "local"

    def __init__(
        self,
        api_url: Optional[str] = None,
        api_type: Optional[str] = None,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
    ):
        self.api_url = (
            api_url
            or config.get("llm", "api_url", "https://api.openai.com/v1")
        ).rstrip("/")

        self.api_type = (
            api_type
            or config.get("llm", "api_type", "openai")
        ).strip().lower()

        self.model = model or config.get("llm", "model", "gpt-4o-mini")
        self.api_key = (
            api_key
            or config.get("llm", "api_key", "")
            or os.environ.get(_ENV_KEYS.get(self.api_type, ""), "")
        )
        self.timeout = int(config.get("llm", "timeout", "60") or "60")
        self.max_tokens = int(config.get("llm", "max_tokens", "2048") or "2048")

        # Rate-limiting state
        self.last_request_time: float = 0.0
        self.min_request_interval: float = config.get(
            "performance", "min_request_interval_seconds", 0.0
        )

        logger.info(
            "LLM translation backend: %s (type=%s, model=%s)",
            self.api_url, self.api_type, self.model,
        )

    # ── TranslationBackend interface ───────────────────────────────────────

    def translate(self, text: str, target_language: str) -> str:
        logger.info(
            "Translating to %s: %r%s",
            target_language, text[:50], "..." if len(text) > 50 else "",
        )
        content = self._invoke(
            build_translation_prompt(target_language), text, SINGLE_TEMPERATURE,
        )
        return content.strip()

    def translate_batch(self, texts: List[str], target_language: str) -> List[str]:
        if not texts:
            return []
        logger.info("Batch translating %d items to %s", len(texts), target_language)
        content = self._invoke(
            build_batch_prompt(target_language), number_texts(texts), BATCH_TEMPERATURE,
        )
        results = parse_numbered_translations(content, texts)
        missing = sum(1 for original, result in zip(texts, results) if original is result)
        if missing:
            logger.warning(
                "Translation mismatch: %d of %d items returned untranslated", missing, len(texts),
            )
        return results

    def validate_connection(self) -> bool:
        """Check that the server answers a tiny translation request."""
        try:
            self._invoke("Reply with OK.", "Hello", 0.0, max_tokens=5)
            return True
        except TranslationBackendError as exc:
            logger.error("LLM connection test failed: %s", exc)
            return False

    # ── invocation ─────────────────────────────────────────────────────────

    def _invoke(
        self,
        system_prompt: str,
        user_message: str,
        temperature: float,
        max_tokens: Optional[int] = None,
    ) -> str:
        """Dispatch to the appropriate API implementation."""
        if not self.api_key and "localhost" not in self.api_url and "127.0.0.1" not in self.api_url:
            raise TranslationBackendError("LLM API key not configured")

        self._enforce_rate_limit()
        try:
            if self.api_type == "openai":
                content = self._invoke_openai(system_prompt, user_message, temperature, max_tokens)
            elif self.api_type == "anthropic":
                content = self._invoke_anthropic(system_prompt, user_message, temperature, max_tokens)
            else:
                raise TranslationBackendError(f"Unknown api_type '{self.api_type}'")
        except requests.ConnectionError as exc:
            raise TranslationBackendError(
                f"Cannot connect to {self.api_url}. Is the LLM server running?"
            ) from exc
        except requests.Timeout as exc:
            raise TranslationBackendError(
                f"Request to {self.api_url} timed out after {self.timeout}s."
            ) from exc
        except requests.RequestException as exc:
            raise TranslationBackendError(f"Request to {self.api_url} failed: {exc}") from exc
        finally:
            self.last_request_time = time.time()

        if not content or not content.strip():
            raise TranslationBackendError("Empty response from LLM.")
        return content

    def _invoke_openai(self, system_prompt, user_message, temperature, max_tokens) -> str:
        """Send a chat completion request to an OpenAI-compatible endpoint."""
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_message},
            ],
            "max_tokens": max_tokens or self.max_tokens,
            "temperature": temperature,
        }

        resp = requests.post(
            f"{self.api_url}/chat/completions",
            headers=self._openai_headers(),
            json=payload,
            timeout=self.timeout,
        )
        if resp.status_code != 200:
            raise TranslationBackendError(f"LLM API error: {self._error_message(resp)}")

        choices = self._json_body(resp).get("choices", [])
        if choices:
            return choices[0].get("message", {}).get("content", "")
        return ""

    def _invoke_anthropic(self, system_prompt, user_message, temperature, max_tokens) -> str:
        """Send a messages request to an Anthropic-compatible endpoint."""
        payload = {
            "model": self.model,
            "system": system_prompt,
            "messages": [
                {"role": "user", "content": user_message},
            ],
            "max_tokens": max_tokens or self.max_tokens,
            "temperature": temperature,
        }

        resp = requests.post(
            f"{self.api_url}/messages",
            headers=self._anthropic_headers(),
            json=payload,
            timeout=self.timeout,
        )
        if resp.status_code != 200:
            raise TranslationBackendError(f"LLM API error: {self._error_message(resp)}")

        content = self._json_body(resp).get("content", [])
        # Anthropic returns a list of content blocks
        texts = [block.get("text", "") for block in content if block.get("type") == "text"]
        return "\n".join(texts)

    # ── helpers ────────────────────────────────────────────────────────────

    @staticmethod
    def _json_body(resp) -> dict:
        try:
            body = resp.json()
        except ValueError:
            raise TranslationBackendError("Invalid JSON response from LLM.") from None
        if not isinstance(body, dict):
            raise TranslationBackendError("Invalid JSON response from LLM.")
        return body

    @staticmethod
    def _error_message(resp) -> str:
        try:
            error = resp.json().get("error")
        except ValueError:
            error = None
        if isinstance(error, dict) and error.get("message"):
            return error["message"]
        if isinstance(error, str) and error:
            return error
        return f"HTTP {resp.status_code} – {resp.text[:300]}"

    def _openai_headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def _anthropic_headers(self) -> dict:
        headers = {
            "Content-Type": "application/json",
            "anthropic-version": "2023-06-01",
        }
        if self.api_key:
            headers["x-api-key"] = self.api_key
        return headers

    def _enforce_rate_limit(self):
        """Enforce minimum request interval."""
        elapsed = time.time() - self.last_request_time
        if elapsed < self.min_request_interval:
            time.sleep(self.min_request_interval - elapsed)
