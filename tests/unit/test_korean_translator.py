"""
Unit tests for KoreanTranslator.
"""
from unittest.mock import AsyncMock

import pytest

from findit.application.services.korean_translator import KoreanTranslator
from findit.core.exceptions import LanguageModelError
from findit.domain.constants.language_mapping import ENGLISH_TO_KOREAN


@pytest.fixture
def chat_client():
    return AsyncMock()


class TestKoreanTranslator:
    """Tests for KoreanTranslator.translate / translate_many"""

    @pytest.mark.asyncio
    async def test_seeded_word_uses_cache(self, chat_client):
        translator = KoreanTranslator(chat_client)
        assert await translator.translate("Printer") == ["프린터", "인쇄기"]
        chat_client.complete_json.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_word_asks_model_and_caches(self, chat_client):
        chat_client.complete_json.return_value = ["스테이플러", " 호치키스 "]
        translator = KoreanTranslator(chat_client, seed_mapping={})

        assert await translator.translate("Stapler") == ["스테이플러", "호치키스"]
        assert await translator.translate("stapler") == ["스테이플러", "호치키스"]
        assert chat_client.complete_json.await_count == 1
        assert translator.to_english("호치키스") == ["stapler"]

    @pytest.mark.asyncio
    async def test_cache_merges_without_duplicates(self, chat_client):
        chat_client.complete_json.return_value = ["문서", "서류"]
        translator = KoreanTranslator(chat_client, seed_mapping={"document": []})
        await translator.translate("document")
        translator._remember("document", ["서류", "문건"])
        assert translator.cached("document") == ["문서", "서류", "문건"]
        assert translator.to_english("서류") == ["document"]

    @pytest.mark.asyncio
    async def test_model_error_returns_empty(self, chat_client):
        chat_client.complete_json.side_effect = LanguageModelError("boom")
        translator = KoreanTranslator(chat_client, seed_mapping={})
        assert await translator.translate("widget") == []

    @pytest.mark.asyncio
    async def test_non_list_answer_returns_empty(self, chat_client):
        chat_client.complete_json.return_value = {"translation": "위젯"}
        translator = KoreanTranslator(chat_client, seed_mapping={})
        assert await translator.translate("widget") == []

    @pytest.mark.asyncio
    async def test_blank_word(self, chat_client):
        translator = KoreanTranslator(chat_client)
        assert await translator.translate("  ") == []
        chat_client.complete_json.assert_not_called()

    @pytest.mark.asyncio
    async def test_seed_mapping_not_mutated(self, chat_client):
        chat_client.complete_json.return_value = ["복사기"]
        translator = KoreanTranslator(chat_client)
        translator._remember("printer", ["복사기"])
        assert "복사기" not in ENGLISH_TO_KOREAN["printer"]

    @pytest.mark.asyncio
    async def test_translate_many_omits_missing(self, chat_client):
        chat_client.complete_json.side_effect = LanguageModelError("boom")
        translator = KoreanTranslator(chat_client)
        result = await translator.translate_many(["Receipt", "Gizmo", "Receipt"])
        assert result == {"Receipt": ["영수증"]}
        assert chat_client.complete_json.await_count == 1
