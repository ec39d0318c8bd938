"""Pytest configuration and shared fixtures."""
import asyncio

import pytest
from unittest.mock import patch

from artisanlingo.models import ORACLE_UNAVAILABLE, Fallback, OracleError, Translated


class FakeOracle:
    """
    Stand-in for TranslationOracleClient.

    Translates from a fixed table (``"<Language>:<text>"`` for unknown
    texts), records every call, and can be told to fail or to delay.
    """

    def __init__(self, translations=None, delay=0.0, fail=False):
        self.translations = translations or {}
        self.delay = delay
        self.fail = fail
        self.calls = []
        self.batch_calls = []
        self.closed = False

    async def request_translation(self, text, target_language, on_error=None):
        self.calls.append((text, target_language))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail:
            if on_error:
                on_error(OracleError(ORACLE_UNAVAILABLE, "oracle down"))
            return Fallback(text, ORACLE_UNAVAILABLE, "oracle down")
        return Translated(self.translations.get(text, f"{target_language}:{text}"))

    async def request_batch_translation(self, texts, target_language, on_error=None):
        self.batch_calls.append((list(texts), target_language))
        if self.fail:
            return [Fallback(text, ORACLE_UNAVAILABLE, "oracle down") for text in texts]
        return [
            Translated(self.translations.get(text, f"{target_language}:{text}"))
            for text in texts
        ]

    async def aclose(self):
        self.closed = True


@pytest.fixture
def make_oracle():
    """Factory for FakeOracle instances."""
    return FakeOracle


@pytest.fixture(autouse=True)
def fake_keyring():
    """Auto-mock the system keyring with an in-memory store."""
    store = {}

    def get_password(service, name):
        return store.get((service, name))

    def set_password(service, name, value):
        store[(service, name)] = value

    def delete_password(service, name):
        from keyring.errors import PasswordDeleteError
        if (service, name) not in store:
            raise PasswordDeleteError("not found")
        del store[(service, name)]

    with patch('keyring.get_password', side_effect=get_password), \
         patch('keyring.set_password', side_effect=set_password), \
         patch('keyring.delete_password', side_effect=delete_password):
        yield store
