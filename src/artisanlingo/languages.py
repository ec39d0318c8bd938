# src/artisanlingo/languages.py
"""
Supported UI languages.

English is the source language of every bundled string and of all
user-authored content; translating into English is always the identity.
"""
from enum import Enum
from typing import Union


class InvalidLanguageError(ValueError):
    """Raised when a language tag is not one of the supported languages."""

    def __init__(self, value):
        self.value = value
        super().__init__(
            f"Unsupported language {value!r}. "
            f"Supported languages: {', '.join(lang.value for lang in Language)}"
        )


class Language(str, Enum):
    ENGLISH = "english"
    HINDI = "hindi"
    TAMIL = "tamil"
    TELUGU = "telugu"
    BENGALI = "bengali"
    MARATHI = "marathi"

    def __str__(self) -> str:
        return self.value


SOURCE_LANGUAGE = Language.ENGLISH

# Names understood by the translation endpoint
DISPLAY_NAMES = {
    Language.ENGLISH: "English",
    Language.HINDI: "Hindi",
    Language.TAMIL: "Tamil",
    Language.TELUGU: "Telugu",
    Language.BENGALI: "Bengali",
    Language.MARATHI: "Marathi",
}

NATIVE_NAMES = {
    Language.ENGLISH: "English",
    Language.HINDI: "हिंदी",
    Language.TAMIL: "தமிழ்",
    Language.TELUGU: "తెలుగు",
    Language.BENGALI: "বাংলা",
    Language.MARATHI: "मराठी",
}


def parse_language(value: Union[str, Language]) -> Language:
    """
    Convert a language tag to :class:`Language`.

    Tags are matched case-insensitively after stripping whitespace.

    Raises:
        InvalidLanguageError: If *value* is not a supported tag.
    """
    if isinstance(value, Language):
        return value
    if not isinstance(value, str):
        raise InvalidLanguageError(value)
    try:
        return Language(value.strip().lower())
    except ValueError:
        raise InvalidLanguageError(value) from None


def display_name(language: Union[str, Language]) -> str:
    """Return the human-readable name of *language* (``hindi`` -> ``"Hindi"``)."""
    return DISPLAY_NAMES[parse_language(language)]
