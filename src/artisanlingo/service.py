# src/artisanlingo/service.py
"""
Translation endpoint.

Hosts the functions the client-side oracle talks to::

    POST /functions/v1/ai-translate       {text, targetLanguage}
    POST /functions/v1/batch-translate    {texts, targetLanguage}
    POST /functions/v1/translate-content  {text, targetLanguage, sourceLanguage?}
    GET  /health

Successful responses carry ``"success": true``; every failure is a 400
with ``{"success": false, "error": "<message>"}``.

Run with ``artisanlingo --serve`` or any ASGI server::

    uvicorn artisanlingo.service:app
"""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .backends import TranslationBackend, TranslationBackendError, create_backend

logger = logging.getLogger(__name__)

CORS_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"success": False, "error": message})


def _is_text(value) -> bool:
    return isinstance(value, str) and bool(value)


async def _read_json(request: Request) -> Dict[str, Any]:
    try:
        body = await request.json()
    except ValueError:
        raise TranslationBackendError("Request body must be valid JSON") from None
    if not isinstance(body, dict):
        raise TranslationBackendError("Request body must be a JSON object")
    return body


def create_app(backend: Optional[TranslationBackend] = None) -> FastAPI:
    """
    Build the endpoint application.

    Args:
        backend: Translation backend; created lazily from ``config.ini``
            on the first request when omitted.
    """
    app = FastAPI(title="ArtisanLingo translation endpoint", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=CORS_HEADERS,
    )
    app.state.backend = backend

    def get_backend() -> TranslationBackend:
        if app.state.backend is None:
            app.state.backend = create_backend()
        return app.state.backend

    @app.exception_handler(TranslationBackendError)
    async def handle_backend_error(request: Request, exc: TranslationBackendError):
        logger.error("Error in %s: %s", request.url.path, exc)
        return _error(str(exc))

    @app.get("/health")
    async def health():
        return {"status": "ok", "backend": get_backend().name}

    @app.post("/functions/v1/ai-translate")
    async def ai_translate(request: Request):
        body = await _read_json(request)
        text = body.get("text")
        target_language = body.get("targetLanguage")
        if not _is_text(text) or not _is_text(target_language):
            raise TranslationBackendError("Missing required parameters: text and targetLanguage")

        translated = await run_in_threadpool(get_backend().translate, text, target_language)
        return {
            "success": True,
            "translatedText": translated,
            "targetLanguage": target_language,
        }

    @app.post("/functions/v1/batch-translate")
    async def batch_translate(request: Request):
        body = await _read_json(request)
        texts = body.get("texts")
        target_language = body.get("targetLanguage")
        if not isinstance(texts, list) or not _is_text(target_language):
            raise TranslationBackendError(
                "Missing required parameters: texts (array) and targetLanguage"
            )
        if not all(isinstance(text, str) for text in texts):
            raise TranslationBackendError("texts must be an array of strings")

        translated = await run_in_threadpool(get_backend().translate_batch, texts, target_language)
        return {
            "success": True,
            "translatedTexts": translated,
            "targetLanguage": target_language,
        }

    @app.post("/functions/v1/translate-content")
    async def translate_content(request: Request):
        body = await _read_json(request)
        text = body.get("text")
        target_language = body.get("targetLanguage")
        source_language = body.get("sourceLanguage") or "en"
        if not _is_text(text) or not _is_text(target_language):
            raise TranslationBackendError("Missing required parameters: text and targetLanguage")

        logger.info("Translating from %s to %s: %r", source_language, target_language, text)
        return {
            "success": True,
            "translatedText": f"[{target_language}] {text}",
            "sourceLanguage": source_language,
            "targetLanguage": target_language,
        }

    return app


app = create_app()
