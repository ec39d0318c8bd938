# src/artisanlingo/backends/echo.py
"""
Offline backend that tags text instead of translating it.

``translate("Hello", "Hindi")`` returns ``"[Hindi] Hello"``.  Useful for
exercising the UI and the endpoint without an LLM account.
"""
from typing import List

from .base import TranslationBackend


class EchoBackend(TranslationBackend):
    """Deterministic stand-in for a real model."""

    name = "echo"

    def translate(self, text: str, target_language: str) -> str:
        return f"[{target_language}] {text}"

    def translate_batch(self, texts: List[str], target_language: str) -> List[str]:
        return [self.translate(text, target_language) for text in texts]
