"""Fixed-count retry with linear backoff for vendor HTTP calls."""
import asyncio
import logging
from typing import Awaitable, Callable, Collection, Type

import httpx
from tenacity import AsyncRetrying, RetryCallState, retry_if_exception_type, stop_after_attempt

from ...core.exceptions import ExternalServiceError
from ...domain.constants.media_constants import RETRYABLE_STATUS_CODES

logger = logging.getLogger(__name__)

SendRequest = Callable[[], Awaitable[httpx.Response]]


class _RetryableStatus(Exception):
    """Carries a 429/503 response through the retry loop."""

    def __init__(self, response: httpx.Response):
        super().__init__(f"HTTP {response.status_code}")
        self.response = response


def backoff_delay(attempt: int, backoff_seconds: float) -> float:
    """Delay before the retry that follows ``attempt`` (0-based): 1x, 2x, ..."""
    return (attempt + 1) * backoff_seconds


async def _sleep(seconds: float) -> None:
    await asyncio.sleep(seconds)


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception()
    if isinstance(exc, _RetryableStatus):
        reason = f"API error {exc.response.status_code}"
    else:
        reason = "Request timed out"
    logger.warning(
        f"{reason} (attempt {retry_state.attempt_number}), "
        f"retrying in {retry_state.next_action.sleep:.1f}s"
    )


async def retry_request(
    send: SendRequest,
    *,
    error_cls: Type[ExternalServiceError],
    max_retries: int = 2,
    backoff_seconds: float = 1.0,
    retry_statuses: Collection[int] = RETRYABLE_STATUS_CODES,
    retry_on_timeout: bool = True,
) -> httpx.Response:
    """
    Send a request, retrying on rate-limit/unavailable responses and timeouts.

    Args:
        send: Zero-argument coroutine factory performing one HTTP attempt
        error_cls: ExternalServiceError subclass raised on final failure
        max_retries: Retries after the first attempt (total attempts = max_retries + 1)
        backoff_seconds: Base of the linear backoff
        retry_statuses: HTTP status codes that trigger a retry
        retry_on_timeout: Whether a timed-out attempt is retried

    Returns:
        The successful (2xx) response

    Raises:
        error_cls: On non-retryable status, exhausted retries, or transport failure
    """
    retry_on = retry_if_exception_type(_RetryableStatus)
    if retry_on_timeout:
        retry_on = retry_on | retry_if_exception_type(httpx.TimeoutException)

    retryer = AsyncRetrying(
        retry=retry_on,
        stop=stop_after_attempt(max_retries + 1),
        wait=lambda retry_state: backoff_delay(retry_state.attempt_number - 1, backoff_seconds),
        before_sleep=_log_retry,
        sleep=_sleep,
        reraise=True,
    )

    try:
        async for attempt in retryer:
            with attempt:
                response = await send()
                if response.status_code in retry_statuses:
                    raise _RetryableStatus(response)
    except _RetryableStatus as e:
        response = e.response
    except httpx.TimeoutException as e:
        logger.error("Request timed out, giving up")
        raise error_cls("Request timed out", retryable=True) from e
    except httpx.HTTPError as e:
        logger.error(f"Transport error: {e}")
        raise error_cls(f"Transport error: {e}", retryable=False) from e

    if response.is_success:
        return response

    status_code = response.status_code
    logger.error(f"API error {status_code}: {response.text[:200]}")
    raise error_cls(
        response.reason_phrase or f"HTTP {status_code}",
        status_code=status_code,
        retryable=status_code in retry_statuses,
        details={"body": response.text[:200]},
    )
