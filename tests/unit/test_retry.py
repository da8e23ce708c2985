"""
Unit tests for the vendor retry helper.
"""
import httpx
import pytest

from findit.core.exceptions import LanguageModelError, VisionServiceError
from findit.infrastructure.external.retry import backoff_delay, retry_request


def _sender(handler):
    """Build a zero-arg send() over a MockTransport and count the attempts."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    calls = {"count": 0}

    async def send():
        calls["count"] += 1
        return await client.post("https://api.test/endpoint", json={})

    return send, calls


class TestBackoffDelay:
    def test_linear(self):
        assert backoff_delay(0, 1.0) == 1.0
        assert backoff_delay(1, 1.0) == 2.0
        assert backoff_delay(2, 0.5) == 1.5


class TestRetryRequest:
    """Tests for retry_request"""

    @pytest.mark.asyncio
    async def test_success_first_attempt(self):
        send, calls = _sender(lambda request: httpx.Response(200, json={"ok": True}))
        response = await retry_request(send, error_cls=VisionServiceError, backoff_seconds=0)
        assert response.json() == {"ok": True}
        assert calls["count"] == 1

    @pytest.mark.asyncio
    async def test_retries_rate_limit_then_succeeds(self):
        statuses = iter([429, 503, 200])
        send, calls = _sender(lambda request: httpx.Response(next(statuses), json={}))
        response = await retry_request(send, error_cls=VisionServiceError, backoff_seconds=0)
        assert response.status_code == 200
        assert calls["count"] == 3

    @pytest.mark.asyncio
    async def test_gives_up_after_max_retries(self):
        send, calls = _sender(lambda request: httpx.Response(429, json={}))
        with pytest.raises(VisionServiceError) as exc_info:
            await retry_request(send, error_cls=VisionServiceError, max_retries=2, backoff_seconds=0)
        assert calls["count"] == 3
        assert exc_info.value.status_code == 429
        assert exc_info.value.retryable is True

    @pytest.mark.asyncio
    async def test_non_retryable_status_fails_immediately(self):
        send, calls = _sender(lambda request: httpx.Response(500, text="boom"))
        with pytest.raises(LanguageModelError) as exc_info:
            await retry_request(send, error_cls=LanguageModelError, backoff_seconds=0)
        assert calls["count"] == 1
        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Internal Server Error"
        assert exc_info.value.retryable is False

    @pytest.mark.asyncio
    async def test_timeout_retried_when_enabled(self):
        outcomes = iter(["timeout", "ok"])

        def handler(request):
            if next(outcomes) == "timeout":
                raise httpx.ReadTimeout("timed out", request=request)
            return httpx.Response(200, json={})

        send, calls = _sender(handler)
        response = await retry_request(send, error_cls=VisionServiceError, backoff_seconds=0)
        assert response.status_code == 200
        assert calls["count"] == 2

    @pytest.mark.asyncio
    async def test_timeout_aborts_when_disabled(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        send, calls = _sender(handler)
        with pytest.raises(LanguageModelError) as exc_info:
            await retry_request(
                send, error_cls=LanguageModelError, backoff_seconds=0, retry_on_timeout=False
            )
        assert calls["count"] == 1
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_transport_error_not_retried(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        send, calls = _sender(handler)
        with pytest.raises(VisionServiceError) as exc_info:
            await retry_request(send, error_cls=VisionServiceError, backoff_seconds=0)
        assert calls["count"] == 1
        assert exc_info.value.retryable is False

    @pytest.mark.asyncio
    async def test_waits_grow_linearly_between_attempts(self, monkeypatch):
        delays = []

        async def fake_sleep(seconds):
            delays.append(seconds)

        monkeypatch.setattr("asyncio.sleep", fake_sleep)
        send, calls = _sender(lambda request: httpx.Response(429, json={}))
        with pytest.raises(VisionServiceError):
            await retry_request(send, error_cls=VisionServiceError, max_retries=2, backoff_seconds=1.0)
        assert calls["count"] == 3
        assert delays == [1.0, 2.0]

    @pytest.mark.asyncio
    async def test_no_wait_after_success(self, monkeypatch):
        delays = []

        async def fake_sleep(seconds):
            delays.append(seconds)

        monkeypatch.setattr("asyncio.sleep", fake_sleep)
        statuses = iter([503, 200])
        send, calls = _sender(lambda request: httpx.Response(next(statuses), json={}))
        response = await retry_request(send, error_cls=VisionServiceError, backoff_seconds=0.5)
        assert response.status_code == 200
        assert delays == [0.5]
