# src/artisanlingo/models.py
"""
Data models for ArtisanLingo.

Translation calls never raise to their callers.  Instead they return a
tagged result so callers that care can tell a real translation from the
fall-back-to-original policy, and log or surface the reason.

Classes:
    Translated: The oracle returned a translation
    Fallback: The original text is returned because the oracle failed
"""
from dataclasses import dataclass
from typing import Optional, Union

# Fallback reasons
ORACLE_UNAVAILABLE = "oracle_unavailable"
MALFORMED_RESPONSE = "malformed_response"


@dataclass(frozen=True)
class Translated:
    """
    A successful translation.

    Attributes:
        text (str): Translated text as returned by the oracle
    """
    text: str

    @property
    def is_fallback(self) -> bool:
        return False


@dataclass(frozen=True)
class Fallback:
    """
    The original text, returned because translation failed.

    Attributes:
        text (str): The untranslated source text
        reason (str): ``ORACLE_UNAVAILABLE`` or ``MALFORMED_RESPONSE``
        detail (Optional[str]): Human-readable error detail for logs
    """
    text: str
    reason: str
    detail: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return True


TranslationResult = Union[Translated, Fallback]


class OracleError(Exception):
    """
    Describes an oracle failure handed to failure handlers.

    Never raised past the oracle client; it is passed to ``on_error``
    callbacks and to the client's notifier.
    """

    def __init__(self, reason: str, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.reason = reason
        self.status_code = status_code
