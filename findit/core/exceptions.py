"""
Custom exception hierarchy for the Findit backend.

Used by the vendor API clients, the media use cases and the API layer. All
application exceptions inherit from FinditError and can carry a user-facing
message.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class FinditError(Exception):
    """Base exception for all Findit errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or "오류가 발생했습니다. 다시 시도해주세요."
        self.details = details or {}


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class ValidationError(FinditError):
    """Raised when input validation fails."""
    pass


class UnsupportedMediaError(ValidationError):
    """Raised when an uploaded file cannot be read as an image or video."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("user_message", "지원하지 않는 미디어 형식입니다.")
        super().__init__(message, **kwargs)


class MediaTooLargeError(ValidationError):
    """Raised when an upload exceeds the configured size limit."""

    def __init__(self, max_mb: int):
        super().__init__(
            f"Upload exceeds {max_mb} MB",
            user_message=f"파일이 너무 큽니다. 최대 {max_mb}MB까지 업로드할 수 있습니다.",
            details={"max_mb": max_mb},
        )
        self.max_mb = max_mb


# -----------------------------------------------------------------------------
# Media state
# -----------------------------------------------------------------------------


class MediaNotFoundError(FinditError):
    """Raised when a media id is not registered in the session."""

    def __init__(self, media_id: Optional[str]):
        super().__init__(
            f"Media not found: {media_id}",
            user_message="미디어를 찾을 수 없습니다.",
            details={"media_id": media_id},
        )
        self.media_id = media_id


# -----------------------------------------------------------------------------
# External services
# -----------------------------------------------------------------------------


class ExternalServiceError(FinditError):
    """Base exception for external service errors."""

    def __init__(
        self,
        message: str,
        service_name: Optional[str] = None,
        retryable: bool = True,
        status_code: Optional[int] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.service_name = service_name
        self.retryable = retryable
        self.status_code = status_code


class VisionServiceError(ExternalServiceError):
    """Raised when the Google Cloud Vision API call fails."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("retryable", True)
        super().__init__(
            message,
            service_name="GoogleVision",
            user_message="이미지 분석에 실패했습니다.",
            **kwargs,
        )


class LanguageModelError(ExternalServiceError):
    """Raised when the chat-completion API call fails or returns nothing."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("retryable", True)
        super().__init__(
            message,
            service_name="OpenAI",
            user_message="OpenAI 응답이 없거나, 예기치 않은 오류로 인해 정보를 추출하지 못했습니다.",
            **kwargs,
        )


# -----------------------------------------------------------------------------
# Safe user-facing message
# -----------------------------------------------------------------------------

def get_user_message(exc: BaseException) -> str:
    """
    Korean message to show the user for any exception.
    Non-Findit exceptions get the generic retry message.
    """
    if isinstance(exc, FinditError) and getattr(exc, "user_message", None):
        return exc.user_message
    return "오류가 발생했습니다. 다시 시도해주세요."
