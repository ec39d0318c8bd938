# src/artisanlingo/backends/__init__.py
"""
Translation backends for the ArtisanLingo endpoint.

Provides a unified factory for creating backends: an LLM over HTTP
(OpenAI / Anthropic compatible) and an offline echo backend.

Functions:
    create_backend: Factory that returns a TranslationBackend based on configuration.
"""
from typing import Any, Optional

from .base import TranslationBackend, TranslationBackendError

__all__ = [
    "TranslationBackend",
    "TranslationBackendError",
    "create_backend",
]


def create_backend(backend_type: Optional[str] = None, **kwargs: Any) -> TranslationBackend:
    """
    Factory that instantiates the requested translation backend.

    Args:
        backend_type: ``'local'`` or ``'echo'``.  If *None*, reads from
                      ``config.ini [backend] type``.
        **kwargs: Forwarded to the backend constructor.

    Returns:
        An initialised :class:`TranslationBackend` instance.

    Raises:
        ValueError: If *backend_type* is unrecognised.
    """
    if backend_type is None:
        from artisanlingo.config import config as app_config
        backend_type = app_config.get("backend", "type", "local")

    _type = backend_type.strip().lower()

    if _type == "local":
        from .local_llm import LocalLLMBackend
        return LocalLLMBackend(**kwargs)
    elif _type == "echo":
        from .echo import EchoBackend
        return EchoBackend(**kwargs)
    else:
        raise ValueError(
            f"Unknown backend type '{_type}'. "
            "Supported backends: local, echo"
        )
