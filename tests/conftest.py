"""
Shared pytest fixtures for findit tests.
"""
import os
from io import BytesIO
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from PIL import Image

from findit.core.config import reset_settings


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "GOOGLE_CLOUD_VISION_API_KEY": "test_vision_key_placeholder",
        "OPENAI_API_KEY": "test_openai_key_placeholder",
        "API_RETRY_BACKOFF_SECONDS": "0",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        reset_settings()
        yield env_vars
    reset_settings()


@pytest.fixture
def mock_settings(tmp_path):
    """Fixture to mock get_settings for tests. Patches the modules that read it per request."""
    mock = MagicMock()
    mock.google_vision_api_key = "test_vision_key"
    mock.vision_api_url = "https://vision.test/v1/images:annotate"
    mock.vision_timeout_seconds = 60.0
    mock.openai_api_key = "test_openai_key"
    mock.openai_base_url = "https://llm.test/v1"
    mock.openai_model = "gpt-3.5-turbo"
    mock.llm_temperature = 0.7
    mock.llm_max_tokens = 500
    mock.llm_timeout_seconds = 30.0
    mock.api_max_retries = 2
    mock.api_retry_backoff_seconds = 0.0
    mock.media_upload_dir = str(tmp_path / "uploads")
    mock.media_upload_max_mb = 1
    mock.video_frames_per_second = 1.0
    mock.log_level = "INFO"
    mock.cors_origins = []
    mock.missing_api_keys.return_value = []

    # Patch at use sites (modules import get_settings at load time)
    with patch("findit.api.v1.media_controller.get_settings", return_value=mock):
        yield mock


def make_image_bytes(width: int = 64, height: int = 48, fmt: str = "PNG", color=(200, 30, 30)) -> bytes:
    buffer = BytesIO()
    Image.new("RGB", (width, height), color).save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    return make_image_bytes()


@pytest.fixture
def image_file(tmp_path, png_bytes):
    path = tmp_path / "photo.png"
    path.write_bytes(png_bytes)
    return path


@pytest.fixture
def vision_client():
    """AsyncMock standing in for GoogleVisionClient."""
    client = AsyncMock()
    client.extract_text.return_value = None
    client.annotate.return_value = None
    return client


@pytest.fixture
def language_model():
    """AsyncMock standing in for LanguageModelService."""
    service = AsyncMock()
    service.get_info_from_text.return_value = "## 답변"
    service.suggest_tasks.return_value = []
    return service


@pytest.fixture
def translator():
    """AsyncMock standing in for KoreanTranslator."""
    mock = AsyncMock()
    mock.translate_many.return_value = {}
    return mock
