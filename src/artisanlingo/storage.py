# src/artisanlingo/storage.py
"""
Durable client-side key/value storage.

The language context persists the active language under
:data:`LANGUAGE_STORAGE_KEY`.  :class:`KeyringStorage` keeps values in the
system keyring so they survive restarts; :class:`MemoryStorage` keeps them
for the lifetime of the object and is meant for tests and embedding.
"""
import logging
from typing import Dict, Optional, Union

import keyring
from keyring.errors import KeyringError, PasswordDeleteError

from .config import config
from .languages import SOURCE_LANGUAGE, InvalidLanguageError, Language, parse_language

logger = logging.getLogger(__name__)

LANGUAGE_STORAGE_KEY = "appLanguage"


def keyring_service_name() -> str:
    """Keyring service holding the stored language and the endpoint key."""
    return config.get("storage", "service_name", "ArtisanLingo")


def load_language(storage) -> Language:
    """
    Read the stored language.

    Returns English when nothing is stored or the stored value is not a
    supported language.
    """
    stored = storage.get_item(LANGUAGE_STORAGE_KEY)
    if not stored:
        return SOURCE_LANGUAGE
    try:
        return parse_language(stored)
    except InvalidLanguageError:
        logger.warning("Ignoring unsupported stored language %r", stored)
        return SOURCE_LANGUAGE


def store_language(storage, language: Union[str, Language]) -> Language:
    """
    Validate *language* and persist it.

    Raises:
        InvalidLanguageError: If *language* is not supported.  Nothing is
            written in that case.
    """
    lang = parse_language(language)
    storage.set_item(LANGUAGE_STORAGE_KEY, lang.value)
    return lang


class MemoryStorage:
    """In-memory storage with the same interface as :class:`KeyringStorage`."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class KeyringStorage:
    """
    Storage backed by the system keyring.

    Values are stored as keyring "passwords" under the configured service
    name (``[storage] service_name``).  Keyring failures are logged and
    treated as a missing value so the UI keeps working with defaults.
    """

    def __init__(self, service_name: Optional[str] = None):
        self.service_name = service_name or keyring_service_name()

    def get_item(self, key: str) -> Optional[str]:
        try:
            return keyring.get_password(self.service_name, key)
        except KeyringError as exc:
            logger.warning("Cannot read %r from keyring: %s", key, exc)
            return None

    def set_item(self, key: str, value: str) -> None:
        try:
            keyring.set_password(self.service_name, key, value)
        except KeyringError as exc:
            logger.warning("Cannot persist %r to keyring: %s", key, exc)

    def remove_item(self, key: str) -> None:
        try:
            keyring.delete_password(self.service_name, key)
        except PasswordDeleteError:
            pass  # Nothing stored
        except KeyringError as exc:
            logger.warning("Cannot remove %r from keyring: %s", key, exc)
