# src/artisanlingo/__init__.py
"""
ArtisanLingo - multilingual UI support for the artisan community platform.

Provides static UI strings in six languages, on-demand AI translation of
user-authored content, and the endpoint that proxies the language model.

Main Components:
- languages: Supported languages and their display names
- dictionary: Bundled static UI strings with runtime warming
- oracle: Async client for the translation endpoint
- translator: Session cache in front of the oracle
- context: Active language, t() lookups and text/page translation
- storage: Durable storage for the active language
- service: FastAPI translation endpoint
- backends: LLM backends used by the endpoint
- config: Configuration management
- performance: Performance monitoring utilities
"""

__version__ = "1.0.0"
__author__ = "ArtisanLingo Team"
__description__ = "Multilingual translation support for an artisan social platform"
