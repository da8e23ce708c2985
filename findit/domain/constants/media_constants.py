"""
Shared constants for media uploads and analysis.

Used by the media controller, the image optimizer and the media use cases.
"""

# -----------------------------------------------------------------------------
# Upload rules
# -----------------------------------------------------------------------------
ALLOWED_IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".webp"})
ALLOWED_VIDEO_EXTENSIONS = frozenset({".mp4", ".mov", ".webm", ".avi", ".mkv"})

# -----------------------------------------------------------------------------
# Vision API payload limits (API hard limit is 20 MB)
# -----------------------------------------------------------------------------
VISION_RESIZE_WIDTH = 1024
VISION_JPEG_QUALITY = 80
VISION_MAX_PAYLOAD_MB = 18.0
VISION_FALLBACK_WIDTH = 512
VISION_FALLBACK_JPEG_QUALITY = 60

RETRYABLE_STATUS_CODES = frozenset({429, 503})

# -----------------------------------------------------------------------------
# User-facing fallback strings
# -----------------------------------------------------------------------------
NO_TEXT_PROVIDED_MESSAGE = "정보를 추출할 텍스트가 제공되지 않았습니다."
EMPTY_LLM_RESPONSE_MESSAGE = "OpenAI 응답이 없거나, 예기치 않은 오류로 인해 정보를 추출하지 못했습니다."
SELECT_MEDIA_FIRST_MESSAGE = "미디어를 먼저 선택해주세요."
MEDIA_PROCESSING_ERROR_MESSAGE = "미디어 처리 중 오류가 발생했습니다."
QUESTION_PROCESSING_ERROR_MESSAGE = "음성 질문 처리 중 오류가 발생했습니다."
TASK_PROCESSING_ERROR_MESSAGE = "작업 처리 중 오류가 발생했습니다."
IMAGE_ANALYSIS_FAILED_MESSAGE = "이미지 분석에 실패했습니다."
