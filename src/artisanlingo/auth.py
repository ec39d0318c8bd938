# src/artisanlingo/auth.py
"""
Credential management for the translation endpoint.

The endpoint key (the hosted backend's anonymous key) is resolved from,
in order: the ``ARTISANLINGO_API_KEY`` environment variable, the system
keyring (under ``[storage] service_name``, shared with the stored
language), and ``[oracle] api_key`` in ``config.ini``.

Functions:
    get_api_key: Resolve the endpoint key
    set_api_key: Store the endpoint key in the keyring
    clear_api_key: Remove the stored key
"""
import logging
import os

import keyring
from keyring.errors import KeyringError, PasswordDeleteError

from .config import config
from .storage import keyring_service_name

logger = logging.getLogger(__name__)

API_KEY_ENTRY = "api_key"
API_KEY_ENV = "ARTISANLINGO_API_KEY"


def get_api_key() -> str:
    """
    Resolve the endpoint key.

    Returns:
        str: The key, or an empty string when none is configured
    """
    key = os.environ.get(API_KEY_ENV)
    if key:
        return key
    try:
        key = keyring.get_password(keyring_service_name(), API_KEY_ENTRY)
    except KeyringError as exc:
        logger.debug("Keyring unavailable: %s", exc)
        key = None
    if key:
        return key
    return config.get("oracle", "api_key", "") or ""


def set_api_key(api_key):
    """
    Store the endpoint key in the system keyring.

    Args:
        api_key (str): The key to store

    Returns:
        str: The key that was stored
    """
    keyring.set_password(keyring_service_name(), API_KEY_ENTRY, api_key)
    print("API key saved.")
    return api_key


def clear_api_key():
    """Remove the stored endpoint key from the system keyring."""
    try:
        keyring.delete_password(keyring_service_name(), API_KEY_ENTRY)
        print("API key removed.")
    except PasswordDeleteError:
        print("No API key stored.")
