# src/artisanlingo/main.py
"""
Command-line entry point for ArtisanLingo.

Translates text through the configured endpoint, resolves static
dictionary keys, manages the stored language and endpoint key, and can
host the translation endpoint itself.

Examples::

    artisanlingo --set-language hindi
    artisanlingo "Handwoven silk saree"          # uses the stored language
    artisanlingo "Terracotta lamp" --lang tamil
    artisanlingo --key home --lang bengali
    artisanlingo --serve --port 8000
"""
import argparse
import asyncio
import logging

from artisanlingo.auth import clear_api_key, set_api_key
from artisanlingo.config import config
from artisanlingo.context import LanguageContext
from artisanlingo.languages import Language, NATIVE_NAMES, parse_language
from artisanlingo.storage import (
    LANGUAGE_STORAGE_KEY,
    KeyringStorage,
    MemoryStorage,
    load_language,
    store_language,
)

LANGUAGE_CHOICES = [language.value for language in Language]


def _configure_logging():
    level = str(config.get("logging", "log_level", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def _translate(text, language, base_url):
    storage = MemoryStorage({LANGUAGE_STORAGE_KEY: language.value})
    async with LanguageContext.create(storage=storage, base_url=base_url) as ctx:
        return await ctx.translate_text(text)


async def _lookup_key(key, language, base_url):
    storage = MemoryStorage({LANGUAGE_STORAGE_KEY: language.value})
    async with LanguageContext.create(storage=storage, base_url=base_url) as ctx:
        ctx.t(key)
        await ctx.flush()
        return ctx.t(key)


def main(argv=None):
    """
    Main entry point for ArtisanLingo.

    Parses command-line arguments and runs the requested action.
    """
    parser = argparse.ArgumentParser(
        description="ArtisanLingo - translation for the artisan community platform",
        formatter_class=argparse.RawTextHelpFormatter,
    )

    # Language management options
    parser.add_argument("--set-language", metavar="LANG", choices=LANGUAGE_CHOICES,
                        help="Set and store the active UI language")
    parser.add_argument("--show-language", action="store_true",
                        help="Print the stored UI language")

    # Credential options
    parser.add_argument("--set-api-key", metavar="KEY",
                        help="Store the translation endpoint key in the keyring")
    parser.add_argument("--clear-api-key", action="store_true",
                        help="Remove the stored endpoint key from the keyring")

    # Translation options
    parser.add_argument("text", nargs="?", help="Text to translate")
    parser.add_argument("--key", metavar="KEY",
                        help="Resolve a static dictionary key instead of translating text")
    parser.add_argument("--lang", choices=LANGUAGE_CHOICES + ["default"], default="default",
                        help="Target language (default: the stored language)")
    parser.add_argument("--base-url", metavar="URL",
                        help="Translation endpoint root (overrides [oracle] base_url)")

    # Endpoint hosting options
    parser.add_argument("--serve", action="store_true",
                        help="Run the translation endpoint")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)
    _configure_logging()

    storage = KeyringStorage()

    # Handle management commands first
    if args.set_language:
        language = store_language(storage, args.set_language)
        print(f"Language set to {language.value} ({NATIVE_NAMES[language]})")
        return
    elif args.show_language:
        language = load_language(storage)
        print(f"{language.value} ({NATIVE_NAMES[language]})")
        return
    elif args.set_api_key:
        set_api_key(args.set_api_key)
        return
    elif args.clear_api_key:
        clear_api_key()
        return
    elif args.serve:
        import uvicorn
        uvicorn.run("artisanlingo.service:app", host=args.host, port=args.port)
        return

    if not args.text and not args.key:
        parser.error("text or --key is required")
    if args.text and args.key:
        parser.error("Cannot specify both text and --key")

    language = load_language(storage) if args.lang == "default" else parse_language(args.lang)

    if args.key:
        print(asyncio.run(_lookup_key(args.key, language, args.base_url)))
    else:
        print(asyncio.run(_translate(args.text, language, args.base_url)))


if __name__ == "__main__":
    main()
