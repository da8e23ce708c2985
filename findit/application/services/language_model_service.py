"""Answer synthesis and task suggestion on top of the chat completion client."""
import logging
from typing import List, Optional

from ...core.config import get_settings
from ...core.exceptions import LanguageModelError
from ...domain.constants.image_types import ImageType
from ...domain.constants.media_constants import (
    EMPTY_LLM_RESPONSE_MESSAGE,
    NO_TEXT_PROVIDED_MESSAGE,
)
from ...domain.models.task import TaskSuggestion
from ...infrastructure.external.chat_completion_client import ChatCompletionClient
from .llm_prompts import (
    TASK_SUGGESTION_SYSTEM_PROMPT,
    answer_system_prompt,
    task_suggestion_user_prompt,
)
from .task_suggestion_parser import parse_task_suggestions

logger = logging.getLogger(__name__)


class LanguageModelService:
    """
    Language-model calls used by the media pipeline.

    Both methods swallow API failures and return a user-facing fallback, so a
    failed completion never aborts the surrounding flow.
    """

    def __init__(
        self,
        chat_client: ChatCompletionClient,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        task_timeout: Optional[float] = None,
    ):
        settings = get_settings()
        self.chat_client = chat_client
        self.temperature = temperature if temperature is not None else settings.llm_temperature
        self.max_tokens = max_tokens if max_tokens is not None else settings.llm_max_tokens
        self.task_timeout = task_timeout if task_timeout is not None else settings.llm_timeout_seconds

    async def get_info_from_text(
        self,
        text: Optional[str],
        image_type: ImageType = ImageType.OTHER,
    ) -> str:
        """
        Synthesize a markdown answer from the analysis text.

        Args:
            text: Analysis summary, optionally ending with a question
            image_type: Selects the type-specific system prompt

        Returns:
            Markdown answer, or a fallback message on failure
        """
        if not text:
            return NO_TEXT_PROVIDED_MESSAGE

        messages = [
            {"role": "system", "content": answer_system_prompt(image_type)},
            {"role": "user", "content": text},
        ]
        try:
            return await self.chat_client.complete(
                messages,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except LanguageModelError as e:
            logger.error(f"Chat completion failed while extracting info: {e.message}")
            if e.status_code is not None:
                return f"OpenAI API 오류: {e.status_code} {e.message}"
            return EMPTY_LLM_RESPONSE_MESSAGE

    async def suggest_tasks(self, ocr_text: Optional[str]) -> List[TaskSuggestion]:
        """
        Suggest follow-up tasks for the recognised text.

        Returns:
            Parsed suggestions, or [] on empty input or any failure
        """
        if not ocr_text:
            return []

        messages = [
            {"role": "system", "content": TASK_SUGGESTION_SYSTEM_PROMPT},
            {"role": "user", "content": task_suggestion_user_prompt(ocr_text)},
        ]
        try:
            content = await self.chat_client.complete(
                messages,
                temperature=self.temperature,
                timeout=self.task_timeout,
            )
        except LanguageModelError as e:
            logger.error(f"Task suggestion error: {e.message}")
            return []

        suggestions = parse_task_suggestions(content)
        logger.info(f"Parsed {len(suggestions)} task suggestion(s)")
        return suggestions
