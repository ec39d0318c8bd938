# src/artisanlingo/backends/base.py
"""
Abstract base for all translation backends.

Every backend must implement :pymethod:`translate` and
:pymethod:`translate_batch` so the translation service can remain
backend-agnostic.  Prompt construction and batch-response parsing are
shared here.
"""
import re
from abc import ABC, abstractmethod
from typing import Dict, List


class TranslationBackendError(Exception):
    """A translation request could not be served."""


# ── Language context injected into the system prompt ───────────────────────
LANGUAGE_CONTEXT: Dict[str, str] = {
    "hindi": "Hindi (हिंदी) is an Indo-Aryan language spoken primarily in India.",
    "tamil": (
        "Tamil (தமிழ்) is a Dravidian language spoken primarily in Tamil Nadu, "
        "India and Sri Lanka."
    ),
    "telugu": (
        "Telugu (తెలుగు) is a Dravidian language spoken primarily in Andhra Pradesh "
        "and Telangana, India."
    ),
    "bengali": (
        "Bengali (বাংলা) is an Indo-Aryan language spoken primarily in West Bengal, "
        "India and Bangladesh."
    ),
    "marathi": "Marathi (मराठी) is an Indo-Aryan language spoken primarily in Maharashtra, India.",
}

SINGLE_TEMPERATURE = 0.2
BATCH_TEMPERATURE = 0.3

_NUMBERED_RE = re.compile(r"\[(\d+)\]:\s*(.*?)(?=\n\[\d+\]:|\Z)", re.DOTALL)


def build_translation_prompt(target_language: str) -> str:
    """System prompt for translating a single text."""
    context_info = LANGUAGE_CONTEXT.get(target_language.strip().lower(), "")
    return (
        "You are a professional translator specialized in Indian languages. "
        f"{context_info}\n"
        f"Translate the following text into {target_language}.\n"
        "Maintain the same tone, style, formatting, and cultural context as the original.\n"
        "Only respond with the translated text, nothing else.\n"
        "Preserve any special characters, HTML markup, or formatting in the original text."
    )


def build_batch_prompt(target_language: str) -> str:
    """System prompt for translating numbered texts in one request."""
    return (
        f"You are a professional translator. Translate the following numbered texts into "
        f"{target_language}.\n"
        "Maintain the exact same format with the indices in brackets.\n"
        "Example:\n"
        "[0]: Hello\n"
        "[1]: How are you?\n\n"
        "Would be translated to Hindi as:\n"
        "[0]: नमस्ते\n"
        "[1]: आप कैसे हैं?\n\n"
        "Only respond with the translated text, keeping the exact same [index] format."
    )


def number_texts(texts: List[str]) -> str:
    return "\n\n".join(f"[{index}]: {text}" for index, text in enumerate(texts))


def parse_numbered_translations(content: str, originals: List[str]) -> List[str]:
    """
    Map a ``[index]: text`` response back onto *originals*.

    Indices the model skipped, left blank or invented are ignored; those
    positions keep their original text.
    """
    results = list(originals)
    for match in _NUMBERED_RE.finditer(content.strip()):
        index = int(match.group(1))
        text = match.group(2).strip()
        if 0 <= index < len(results) and text:
            results[index] = text
    return results


class TranslationBackend(ABC):
    """Abstract translation backend."""

    name: str = "base"

    @abstractmethod
    def translate(self, text: str, target_language: str) -> str:
        """
        Translate *text* into *target_language*.

        Raises:
            TranslationBackendError: If the model cannot be reached or
                returns an unusable response.
        """

    @abstractmethod
    def translate_batch(self, texts: List[str], target_language: str) -> List[str]:
        """Translate *texts*, returning one string per input in order."""

    def validate_connection(self) -> bool:
        """Return True if the backend is usable."""
        return True
