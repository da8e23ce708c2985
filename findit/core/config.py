# Standard library imports
import os
from typing import Final, List, Optional


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Google Cloud Vision Configuration
        self.google_vision_api_key: Final[str] = os.getenv("GOOGLE_CLOUD_VISION_API_KEY", "")
        self.vision_api_url: Final[str] = os.getenv(
            "VISION_API_URL",
            "https://vision.googleapis.com/v1/images:annotate"
        )
        self.vision_timeout_seconds: Final[float] = float(os.getenv("VISION_TIMEOUT_SECONDS", "60"))
        
        # Chat/LLM Configuration
        self.openai_api_key: Final[str] = os.getenv("OPENAI_API_KEY", "")
        self.openai_base_url: Final[str] = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
        self.openai_model: Final[str] = os.getenv("OPENAI_MODEL", "gpt-3.5-turbo")
        self.llm_temperature: Final[float] = float(os.getenv("LLM_TEMPERATURE", "0.7"))
        self.llm_max_tokens: Final[int] = int(os.getenv("LLM_MAX_TOKENS", "500"))
        self.llm_timeout_seconds: Final[float] = float(os.getenv("LLM_TIMEOUT_SECONDS", "30"))
        
        # Retry Configuration (shared by both vendor APIs)
        self.api_max_retries: Final[int] = int(os.getenv("API_MAX_RETRIES", "2"))
        self.api_retry_backoff_seconds: Final[float] = float(
            os.getenv("API_RETRY_BACKOFF_SECONDS", "1.0")
        )
        
        # Media Uploads
        self.media_upload_dir: Final[str] = os.getenv("MEDIA_UPLOAD_DIR", "uploads")
        self.media_upload_max_mb: Final[int] = int(os.getenv("MEDIA_UPLOAD_MAX_MB", "100"))
        self.video_frames_per_second: Final[float] = float(os.getenv("VIDEO_FRAMES_PER_SECOND", "1"))
        
        # Server
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
        self.cors_origins: Final[List[str]] = _split_csv(
            os.getenv("CORS_ORIGINS", "http://localhost:8081,http://localhost:19006")
        )
    
    def missing_api_keys(self) -> List[str]:
        """Names of the vendor API keys that are not configured."""
        missing = []
        if not self.google_vision_api_key:
            missing.append("GOOGLE_CLOUD_VISION_API_KEY")
        if not self.openai_api_key:
            missing.append("OPENAI_API_KEY")
        return missing


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
