# src/artisanlingo/lang/__init__.py
"""Bundled per-language string tables, keyed by language tag."""
