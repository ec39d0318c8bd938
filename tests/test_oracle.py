# tests/test_oracle.py
"""
Tests for the TranslationOracleClient.

Uses httpx.MockTransport so no endpoint has to be running.
"""
import json

import httpx
import pytest
from unittest.mock import MagicMock

from artisanlingo.models import (
    MALFORMED_RESPONSE,
    ORACLE_UNAVAILABLE,
    Fallback,
    OracleError,
    Translated,
)
from artisanlingo.oracle import BATCH_TRANSLATE_PATH, TRANSLATE_PATH, TranslationOracleClient


# ── helpers ────────────────────────────────────────────────────────────────

def _make_client(handler, **overrides):
    """Create a client whose requests are answered by *handler*."""
    defaults = dict(
        base_url="http://oracle.test",
        api_key="anon-key",
        timeout=5.0,
        max_retries=0,
        retry_backoff=0.0,
        notifier=MagicMock(),
    )
    defaults.update(overrides)
    return TranslationOracleClient(transport=httpx.MockTransport(handler), **defaults)


# ── single translation ─────────────────────────────────────────────────────

class TestRequestTranslation:

    @pytest.mark.asyncio
    async def test_success_returns_translated(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"success": True, "translatedText": "नमस्ते"})

        client = _make_client(handler)
        result = await client.request_translation("Hello", "Hindi")
        await client.aclose()

        assert result == Translated("नमस्ते")
        assert not result.is_fallback
        assert len(seen) == 1
        request = seen[0]
        assert request.method == "POST"
        assert request.url.path == TRANSLATE_PATH
        assert json.loads(request.content) == {"text": "Hello", "targetLanguage": "Hindi"}
        assert request.headers["Authorization"] == "Bearer anon-key"
        client.notifier.assert_not_called()

    @pytest.mark.asyncio
    async def test_no_authorization_header_without_key(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"translatedText": "x"})

        async with _make_client(handler, api_key="") as client:
            await client.request_translation("Hello", "Hindi")
        assert "Authorization" not in seen[0].headers

    @pytest.mark.asyncio
    async def test_http_error_falls_back_and_notifies(self):
        client = _make_client(lambda request: httpx.Response(400, json={"error": "OpenAI API key not configured"}))
        result = await client.request_translation("Hello", "Hindi")
        await client.aclose()

        assert isinstance(result, Fallback)
        assert result.text == "Hello"
        assert result.reason == ORACLE_UNAVAILABLE
        assert "OpenAI API key not configured" in result.detail
        client.notifier.assert_called_once()
        error = client.notifier.call_args[0][0]
        assert isinstance(error, OracleError)
        assert error.status_code == 400

    @pytest.mark.asyncio
    async def test_error_body_with_success_status_falls_back(self):
        client = _make_client(lambda request: httpx.Response(200, json={"error": "quota exceeded"}))
        result = await client.request_translation("Hello", "Tamil")
        await client.aclose()

        assert result == Fallback("Hello", ORACLE_UNAVAILABLE, "quota exceeded")

    @pytest.mark.asyncio
    async def test_missing_translated_text_is_malformed(self):
        client = _make_client(lambda request: httpx.Response(200, json={"success": True}))
        result = await client.request_translation("Hello", "Hindi")
        await client.aclose()

        assert result.reason == MALFORMED_RESPONSE
        assert result.text == "Hello"
        client.notifier.assert_called_once()

    @pytest.mark.asyncio
    async def test_non_string_translated_text_is_malformed(self):
        client = _make_client(lambda request: httpx.Response(200, json={"translatedText": 42}))
        result = await client.request_translation("Hello", "Hindi")
        await client.aclose()
        assert result.reason == MALFORMED_RESPONSE

    @pytest.mark.asyncio
    async def test_non_json_body_is_malformed(self):
        client = _make_client(lambda request: httpx.Response(200, text="<html>oops</html>"))
        result = await client.request_translation("Hello", "Hindi")
        await client.aclose()
        assert result.reason == MALFORMED_RESPONSE

    @pytest.mark.asyncio
    async def test_network_error_falls_back(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = _make_client(handler)
        result = await client.request_translation("Hello", "Hindi")
        await client.aclose()

        assert result.text == "Hello"
        assert result.reason == ORACLE_UNAVAILABLE
        assert "connection refused" in result.detail

    @pytest.mark.asyncio
    async def test_caller_handler_suppresses_notifier(self):
        on_error = MagicMock()
        client = _make_client(lambda request: httpx.Response(503, text="unavailable"))
        result = await client.request_translation("Hello", "Hindi", on_error=on_error)
        await client.aclose()

        assert result.text == "Hello"
        on_error.assert_called_once()
        assert on_error.call_args[0][0].reason == ORACLE_UNAVAILABLE
        client.notifier.assert_not_called()

    @pytest.mark.asyncio
    async def test_raising_handler_does_not_escape(self):
        on_error = MagicMock(side_effect=RuntimeError("handler bug"))
        client = _make_client(lambda request: httpx.Response(500))
        result = await client.request_translation("Hello", "Hindi", on_error=on_error)
        await client.aclose()
        assert result.text == "Hello"


# ── retries ────────────────────────────────────────────────────────────────

class TestRetries:

    @pytest.mark.asyncio
    async def test_no_retry_by_default(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(503)

        client = _make_client(handler)
        await client.request_translation("Hello", "Hindi")
        await client.aclose()
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_retries_server_errors(self):
        responses = [httpx.Response(503), httpx.Response(200, json={"translatedText": "होम"})]
        calls = []

        def handler(request):
            calls.append(request)
            return responses.pop(0)

        client = _make_client(handler, max_retries=2)
        result = await client.request_translation("Home", "Hindi")
        await client.aclose()

        assert result == Translated("होम")
        assert len(calls) == 2
        client.notifier.assert_not_called()

    @pytest.mark.asyncio
    async def test_retries_network_errors_then_gives_up(self):
        calls = []

        def handler(request):
            calls.append(request)
            raise httpx.ReadTimeout("timed out", request=request)

        client = _make_client(handler, max_retries=2)
        result = await client.request_translation("Home", "Hindi")
        await client.aclose()

        assert result.reason == ORACLE_UNAVAILABLE
        assert len(calls) == 3

    @pytest.mark.asyncio
    async def test_client_errors_are_not_retried(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(400, json={"error": "Missing required parameters"})

        client = _make_client(handler, max_retries=3)
        await client.request_translation("Home", "Hindi")
        await client.aclose()
        assert len(calls) == 1


# ── batch translation ──────────────────────────────────────────────────────

class TestBatchTranslation:

    @pytest.mark.asyncio
    async def test_batch_success(self):
        seen = []

        def handler(request):
            seen.append(json.loads(request.content))
            return httpx.Response(200, json={"translatedTexts": ["होम", "समुदाय"]})

        client = _make_client(handler)
        results = await client.request_batch_translation(["Home", "Community"], "Hindi")
        await client.aclose()

        assert results == [Translated("होम"), Translated("समुदाय")]
        assert seen == [{"texts": ["Home", "Community"], "targetLanguage": "Hindi"}]

    @pytest.mark.asyncio
    async def test_batch_uses_batch_path(self):
        paths = []

        def handler(request):
            paths.append(request.url.path)
            return httpx.Response(200, json={"translatedTexts": ["a"]})

        async with _make_client(handler) as client:
            await client.request_batch_translation(["x"], "Tamil")
        assert paths == [BATCH_TRANSLATE_PATH]

    @pytest.mark.asyncio
    async def test_batch_length_mismatch_falls_back(self):
        client = _make_client(lambda request: httpx.Response(200, json={"translatedTexts": ["होम"]}))
        results = await client.request_batch_translation(["Home", "Community"], "Hindi")
        await client.aclose()

        assert [r.text for r in results] == ["Home", "Community"]
        assert all(r.reason == MALFORMED_RESPONSE for r in results)
        client.notifier.assert_called_once()

    @pytest.mark.asyncio
    async def test_blank_item_keeps_source_text(self):
        client = _make_client(lambda request: httpx.Response(200, json={"translatedTexts": ["होम", ""]}))
        results = await client.request_batch_translation(["Home", "Community"], "Hindi")
        await client.aclose()

        assert results[0] == Translated("होम")
        assert results[1].text == "Community"
        assert results[1].is_fallback

    @pytest.mark.asyncio
    async def test_empty_batch_makes_no_request(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={"translatedTexts": []})

        async with _make_client(handler) as client:
            assert await client.request_batch_translation([], "Hindi") == []
        assert calls == []
