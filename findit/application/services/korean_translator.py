"""English -> Korean translation of detected object names, cached in memory."""
import logging
from copy import deepcopy
from typing import Dict, List, Optional

from ...core.exceptions import LanguageModelError
from ...domain.constants.language_mapping import ENGLISH_TO_KOREAN, build_reverse_mapping
from ...infrastructure.external.chat_completion_client import ChatCompletionClient

logger = logging.getLogger(__name__)

TRANSLATION_SYSTEM_PROMPT = (
    "You are a helpful assistant that provides Korean translations for English words. "
    "Return only a JSON array of strings."
)


def _translation_prompt(english: str) -> str:
    return (
        "다음 영어 단어의 한글 번역을 JSON 배열로 반환해주세요. \n"
        "일반적으로 사용되는 번역어들을 포함해주세요.\n"
        '예시: "printer" -> ["프린터", "인쇄기"]\n'
        f'단어: "{english}"'
    )


class KoreanTranslator:
    """
    Translate object names, asking the language model only for unseen words.
    
    Both directions are cached: every answer is merged into the English ->
    Korean and Korean -> English maps without duplicates.
    """

    def __init__(
        self,
        chat_client: ChatCompletionClient,
        seed_mapping: Optional[Dict[str, List[str]]] = None,
        temperature: float = 0.7,
        max_tokens: int = 500,
    ):
        self.chat_client = chat_client
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._english_to_korean: Dict[str, List[str]] = deepcopy(
            seed_mapping if seed_mapping is not None else ENGLISH_TO_KOREAN
        )
        self._korean_to_english: Dict[str, List[str]] = build_reverse_mapping(self._english_to_korean)

    def cached(self, english: str) -> Optional[List[str]]:
        return self._english_to_korean.get(english.lower())

    def to_english(self, korean: str) -> List[str]:
        return list(self._korean_to_english.get(korean, []))

    def _remember(self, english: str, translations: List[str]) -> None:
        key = english.lower()
        for korean in translations:
            reverse = self._korean_to_english.setdefault(korean, [])
            if key not in reverse:
                reverse.append(key)
        forward = self._english_to_korean.setdefault(key, [])
        for korean in translations:
            if korean not in forward:
                forward.append(korean)

    async def translate(self, english: str) -> List[str]:
        """
        Korean translations of ``english``; [] when none could be obtained.
        """
        if not english or not english.strip():
            return []
        cached = self.cached(english)
        if cached:
            return list(cached)

        messages = [
            {"role": "system", "content": TRANSLATION_SYSTEM_PROMPT},
            {"role": "user", "content": _translation_prompt(english)},
        ]
        try:
            result = await self.chat_client.complete_json(
                messages, temperature=self.temperature, max_tokens=self.max_tokens
            )
        except LanguageModelError as e:
            logger.error(f"Error translating '{english}' to Korean: {e.message}")
            return []

        if not isinstance(result, list):
            logger.error(f"Translation for '{english}' is not a JSON array")
            return []
        translations = [str(item).strip() for item in result if str(item).strip()]
        self._remember(english, translations)
        return translations

    async def translate_many(self, names: List[str]) -> Dict[str, List[str]]:
        """
        Translate distinct names sequentially; names with no translation are omitted.
        """
        translations: Dict[str, List[str]] = {}
        for name in names:
            if name in translations:
                continue
            korean = await self.translate(name)
            if korean:
                translations[name] = korean
        return translations
