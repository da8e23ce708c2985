"""
Unit tests for Settings, exceptions and the session wiring.
"""
import os
from unittest.mock import patch

from findit.api.v1.dependencies import get_media_session, reset_media_session
from findit.core.config import Settings, get_settings
from findit.core.exceptions import (
    LanguageModelError,
    MediaTooLargeError,
    VisionServiceError,
    get_user_message,
)


class TestSettings:
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()
        assert settings.vision_api_url == "https://vision.googleapis.com/v1/images:annotate"
        assert settings.openai_model == "gpt-3.5-turbo"
        assert settings.llm_temperature == 0.7
        assert settings.llm_max_tokens == 500
        assert settings.llm_timeout_seconds == 30.0
        assert settings.api_max_retries == 2
        assert settings.missing_api_keys() == ["GOOGLE_CLOUD_VISION_API_KEY", "OPENAI_API_KEY"]

    def test_env_overrides(self, mock_env):
        with patch.dict(os.environ, {"CORS_ORIGINS": "http://a.test, ,http://b.test"}):
            settings = Settings()
        assert settings.google_vision_api_key == "test_vision_key_placeholder"
        assert settings.api_retry_backoff_seconds == 0.0
        assert settings.cors_origins == ["http://a.test", "http://b.test"]
        assert settings.missing_api_keys() == []

    def test_singleton_reset(self, mock_env):
        assert get_settings() is get_settings()
        assert get_settings().openai_api_key == "test_openai_key_placeholder"


class TestExceptions:
    def test_vendor_errors(self):
        vision = VisionServiceError("bad")
        assert vision.service_name == "GoogleVision"
        assert vision.retryable is True
        llm = LanguageModelError("bad", status_code=429, retryable=False)
        assert llm.service_name == "OpenAI"
        assert llm.status_code == 429
        assert llm.retryable is False

    def test_user_message(self):
        assert "100MB" in get_user_message(MediaTooLargeError(100))
        assert get_user_message(RuntimeError("secret")) == "오류가 발생했습니다. 다시 시도해주세요."


def test_media_session_is_shared(mock_env):
    reset_media_session()
    try:
        session = get_media_session()
        assert session is get_media_session()
        assert session.vision_client.api_key == "test_vision_key_placeholder"
        assert session.translator.chat_client is session.language_model.chat_client
    finally:
        reset_media_session()
