"""OpenAI-compatible chat completion client."""
import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from ...core.config import get_settings
from ...core.exceptions import LanguageModelError
from ..http_client_factory import get_shared_http_client
from .retry import retry_request

logger = logging.getLogger(__name__)

Message = Dict[str, str]


def extract_json_block(content: str) -> str:
    """Strip a markdown code fence around a JSON answer, if present."""
    json_content = content
    if "```json" in json_content:
        json_start = json_content.find("```json") + 7
        json_end = json_content.find("```", json_start)
        json_content = json_content[json_start:json_end].strip()
    elif "```" in json_content:
        json_start = json_content.find("```") + 3
        json_end = json_content.find("```", json_start)
        json_content = json_content[json_start:json_end].strip()
    return json_content.strip()


def _message_content(result: Any) -> str:
    """
    ``choices[0].message.content`` of a completion body.

    Missing pieces give ""; a body of the wrong shape raises LanguageModelError.
    """
    if not isinstance(result, dict):
        raise LanguageModelError("Chat completion returned an unexpected body", retryable=False)
    choices = result.get("choices") or [{}]
    if not isinstance(choices, list) or not isinstance(choices[0], dict):
        raise LanguageModelError("Chat completion returned malformed choices", retryable=False)
    message = choices[0].get("message") or {}
    if not isinstance(message, dict):
        raise LanguageModelError("Chat completion returned a malformed message", retryable=False)
    content = message.get("content") or ""
    if not isinstance(content, str):
        raise LanguageModelError("Chat completion content is not text", retryable=False)
    return content


class ChatCompletionClient:
    """
    Thin client for the ``/chat/completions`` endpoint.

    Each call has a single timeout; a timed-out call is aborted, not retried.
    Rate-limit (429) and unavailable (503) responses are retried with linear
    backoff. Failures raise LanguageModelError so callers can pick their own
    fallback.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        backoff_seconds: Optional[float] = None,
    ):
        settings = get_settings()
        self.api_key = api_key if api_key is not None else settings.openai_api_key
        self.base_url = (base_url or settings.openai_base_url).rstrip("/")
        self.model = model or settings.openai_model
        self.timeout = timeout if timeout is not None else settings.llm_timeout_seconds
        self.max_retries = max_retries if max_retries is not None else settings.api_max_retries
        self.backoff_seconds = (
            backoff_seconds if backoff_seconds is not None else settings.api_retry_backoff_seconds
        )
        self._http_client = http_client

        if not self.api_key:
            logger.warning("OPENAI_API_KEY not found in environment variables")

    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            return get_shared_http_client()
        return self._http_client

    @property
    def completions_url(self) -> str:
        return f"{self.base_url}/chat/completions"

    async def complete(
        self,
        messages: List[Message],
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> str:
        """
        Request a completion and return the assistant message text.

        Args:
            messages: Chat messages ({"role", "content"})
            temperature: Sampling temperature
            max_tokens: Optional cap on generated tokens
            timeout: Per-call override of the configured timeout

        Returns:
            Stripped assistant content

        Raises:
            LanguageModelError: On missing key, HTTP failure, timeout or empty content
        """
        if not self.api_key:
            raise LanguageModelError("OpenAI API key not configured", retryable=False)

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
        }
        if max_tokens is not None:
            payload["max_tokens"] = max_tokens
        call_timeout = timeout if timeout is not None else self.timeout

        async def send() -> httpx.Response:
            return await self.http_client.post(
                self.completions_url,
                headers=headers,
                json=payload,
                timeout=call_timeout,
            )

        logger.debug(f"Calling chat completion API with model: {self.model}")
        response = await retry_request(
            send,
            error_cls=LanguageModelError,
            max_retries=self.max_retries,
            backoff_seconds=self.backoff_seconds,
            retry_on_timeout=False,
        )

        try:
            result = response.json()
        except ValueError as e:
            raise LanguageModelError("Chat completion returned invalid JSON", retryable=False) from e

        content = _message_content(result)
        if not content.strip():
            logger.warning("Empty response from chat completion API")
            raise LanguageModelError("OpenAI 응답이 비어 있습니다.", retryable=False)
        return content.strip()

    async def complete_json(self, messages: List[Message], **kwargs: Any) -> Any:
        """
        Request a completion and parse it as JSON.

        Raises:
            LanguageModelError: If the call fails or the content is not valid JSON
        """
        content = await self.complete(messages, **kwargs)
        try:
            return json.loads(extract_json_block(content))
        except json.JSONDecodeError as e:
            raise LanguageModelError(f"Response is not valid JSON: {content[:100]}", retryable=False) from e
