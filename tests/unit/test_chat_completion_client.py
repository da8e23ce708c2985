"""
Unit tests for ChatCompletionClient (HTTP mocked with httpx.MockTransport).
"""
import json

import httpx
import pytest

from findit.core.exceptions import LanguageModelError
from findit.infrastructure.external.chat_completion_client import (
    ChatCompletionClient,
    extract_json_block,
)

MESSAGES = [{"role": "user", "content": "안녕"}]


def _completion(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def _client(handler, api_key="sk-test"):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ChatCompletionClient(
        api_key=api_key,
        http_client=http_client,
        base_url="https://llm.test/v1/",
        model="gpt-3.5-turbo",
        timeout=5,
        max_retries=2,
        backoff_seconds=0,
    )


class TestExtractJsonBlock:
    def test_plain(self):
        assert extract_json_block('["a"]') == '["a"]'

    def test_json_fence(self):
        assert extract_json_block('```json\n["프린터"]\n```') == '["프린터"]'

    def test_bare_fence(self):
        assert extract_json_block('Here:\n```\n{"a": 1}\n```') == '{"a": 1}'


class TestComplete:
    """Tests for ChatCompletionClient.complete"""

    @pytest.mark.asyncio
    async def test_request_shape(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["auth"] = request.headers.get("authorization")
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=_completion("  답변  "))

        content = await _client(handler).complete(MESSAGES, temperature=0.2, max_tokens=100)

        assert content == "답변"
        assert seen["url"] == "https://llm.test/v1/chat/completions"
        assert seen["auth"] == "Bearer sk-test"
        assert seen["body"]["model"] == "gpt-3.5-turbo"
        assert seen["body"]["messages"] == MESSAGES
        assert seen["body"]["temperature"] == 0.2
        assert seen["body"]["max_tokens"] == 100

    @pytest.mark.asyncio
    async def test_max_tokens_omitted_by_default(self):
        seen = {}

        def handler(request):
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=_completion("ok"))

        await _client(handler).complete(MESSAGES)
        assert "max_tokens" not in seen["body"]

    @pytest.mark.asyncio
    async def test_empty_content_raises(self):
        with pytest.raises(LanguageModelError, match="비어"):
            await _client(lambda request: httpx.Response(200, json=_completion("   "))).complete(MESSAGES)

    @pytest.mark.asyncio
    async def test_missing_choices_raises(self):
        with pytest.raises(LanguageModelError):
            await _client(lambda request: httpx.Response(200, json={})).complete(MESSAGES)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            ["not", "an", "object"],
            {"choices": [None]},
            {"choices": "x"},
            {"choices": [{"message": "hello"}]},
            {"choices": [{"message": {"content": [{"type": "text", "text": "hi"}]}}]},
        ],
    )
    async def test_malformed_body_raises_language_model_error(self, body):
        with pytest.raises(LanguageModelError) as exc_info:
            await _client(lambda request: httpx.Response(200, json=body)).complete(MESSAGES)
        assert exc_info.value.retryable is False

    @pytest.mark.asyncio
    async def test_missing_key_raises(self):
        with pytest.raises(LanguageModelError, match="not configured"):
            await _client(lambda request: httpx.Response(200, json=_completion("x")), api_key="").complete(
                MESSAGES
            )

    @pytest.mark.asyncio
    async def test_rate_limit_retried(self):
        statuses = iter([429, 200])

        def handler(request):
            status = next(statuses)
            return httpx.Response(status, json=_completion("ok") if status == 200 else {})

        assert await _client(handler).complete(MESSAGES) == "ok"

    @pytest.mark.asyncio
    async def test_timeout_not_retried(self):
        calls = []

        def handler(request):
            calls.append(request)
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(LanguageModelError):
            await _client(handler).complete(MESSAGES, timeout=1)
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_error_status_exposed(self):
        with pytest.raises(LanguageModelError) as exc_info:
            await _client(lambda request: httpx.Response(401, json={})).complete(MESSAGES)
        assert exc_info.value.status_code == 401


class TestCompleteJson:
    @pytest.mark.asyncio
    async def test_parses_fenced_array(self):
        client = _client(lambda request: httpx.Response(200, json=_completion('```json\n["영수증"]\n```')))
        assert await client.complete_json(MESSAGES) == ["영수증"]

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self):
        client = _client(lambda request: httpx.Response(200, json=_completion("영수증입니다")))
        with pytest.raises(LanguageModelError, match="not valid JSON"):
            await client.complete_json(MESSAGES)

    @pytest.mark.asyncio
    async def test_malformed_body_raises_language_model_error(self):
        client = _client(lambda request: httpx.Response(200, json={"choices": [None]}))
        with pytest.raises(LanguageModelError):
            await client.complete_json(MESSAGES)
