# Standard library imports
import logging
from typing import Optional

# Local application imports
from ...application.services.korean_translator import KoreanTranslator
from ...application.services.language_model_service import LanguageModelService
from ...application.use_cases.media import MediaSession
from ...core.config import get_settings
from ...infrastructure.external import ChatCompletionClient, GoogleVisionClient
from ...infrastructure.media import VideoFrameSampler

logger = logging.getLogger(__name__)

# Global session instance (singleton pattern); state lives for the process lifetime
_media_session: Optional[MediaSession] = None


def build_media_session() -> MediaSession:
    """
    Wire the vendor clients and services into a new MediaSession.
    
    Returns:
        MediaSession using the shared HTTP client and current settings
    """
    settings = get_settings()
    chat_client = ChatCompletionClient()
    return MediaSession(
        vision_client=GoogleVisionClient(),
        language_model=LanguageModelService(chat_client),
        translator=KoreanTranslator(
            chat_client,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
        ),
        frame_sampler=VideoFrameSampler(frames_per_second=settings.video_frames_per_second),
    )


def get_media_session() -> MediaSession:
    """
    FastAPI dependency returning the process-wide MediaSession.
    """
    global _media_session
    if _media_session is None:
        _media_session = build_media_session()
        logger.info("Created media session")
    return _media_session


def reset_media_session() -> None:
    global _media_session
    _media_session = None
