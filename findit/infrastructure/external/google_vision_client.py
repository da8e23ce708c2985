"""Google Cloud Vision client for OCR and full image annotation."""
import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

import httpx

from ...core.config import get_settings
from ...core.exceptions import VisionServiceError
from ...domain.models.analysis import AnalysisResult
from ...domain.models.ocr import OcrResult
from ..http_client_factory import get_shared_http_client
from .retry import retry_request

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GoogleVisionClient:
    """
    Client for the Google Cloud Vision ``images:annotate`` endpoint.

    This client handles:
    - Building annotate requests from base64 image content
    - One timeout per attempt, up to ``max_retries`` retries on 429/503 or timeout
    - Converting the response into domain models

    Public methods never raise for API failures; they log and return None,
    leaving the caller to fall back.
    """

    ANNOTATE_FEATURES: List[str] = [
        "TEXT_DETECTION",
        "OBJECT_LOCALIZATION",
        "LABEL_DETECTION",
        "FACE_DETECTION",
        "LANDMARK_DETECTION",
        "LOGO_DETECTION",
        "SAFE_SEARCH_DETECTION",
        "IMAGE_PROPERTIES",
        "WEB_DETECTION",
    ]
    OCR_FEATURES: List[str] = ["TEXT_DETECTION"]

    def __init__(
        self,
        api_key: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        backoff_seconds: Optional[float] = None,
    ):
        settings = get_settings()
        self.api_key = api_key if api_key is not None else settings.google_vision_api_key
        self.api_url = api_url or settings.vision_api_url
        self.timeout = timeout if timeout is not None else settings.vision_timeout_seconds
        self.max_retries = max_retries if max_retries is not None else settings.api_max_retries
        self.backoff_seconds = (
            backoff_seconds if backoff_seconds is not None else settings.api_retry_backoff_seconds
        )
        self._http_client = http_client

        if not self.api_key:
            logger.warning("GOOGLE_CLOUD_VISION_API_KEY not found in environment variables")

    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            return get_shared_http_client()
        return self._http_client

    def _build_request(self, image_b64: str, features: List[str]) -> Dict[str, Any]:
        return {
            "requests": [
                {
                    "image": {"content": image_b64},
                    "features": [{"type": feature} for feature in features],
                }
            ]
        }

    async def _annotate_raw(self, image_b64: str, features: List[str]) -> Dict[str, Any]:
        """
        Send one annotate request and return the first response entry.

        Raises:
            VisionServiceError: On missing key, HTTP failure, or an error payload
        """
        if not self.api_key:
            raise VisionServiceError("Vision API key not configured", retryable=False)

        payload = self._build_request(image_b64, features)

        async def send() -> httpx.Response:
            return await self.http_client.post(
                self.api_url,
                params={"key": self.api_key},
                json=payload,
                timeout=self.timeout,
            )

        response = await retry_request(
            send,
            error_cls=VisionServiceError,
            max_retries=self.max_retries,
            backoff_seconds=self.backoff_seconds,
            retry_on_timeout=True,
        )

        try:
            data = response.json()
        except ValueError as e:
            raise VisionServiceError("Vision API returned invalid JSON", retryable=False) from e

        if not isinstance(data, dict):
            raise VisionServiceError("Vision API returned an unexpected body", retryable=False)
        responses = data.get("responses") or []
        if not isinstance(responses, list):
            raise VisionServiceError("Vision API returned malformed responses", retryable=False)
        if not responses:
            raise VisionServiceError("Vision API returned no responses", retryable=False)

        result = responses[0]
        if not isinstance(result, dict):
            raise VisionServiceError("Vision API returned a malformed response entry", retryable=False)
        if "error" in result:
            error = result["error"]
            if not isinstance(error, dict):
                error = {"message": error}
            raise VisionServiceError(
                f"Vision API error: {error.get('message', error)}",
                status_code=error.get("code"),
                retryable=False,
            )
        return result

    async def _parse(self, image_b64: str, features: List[str], parse: Callable[[Dict[str, Any]], T]) -> T:
        """Annotate and convert the response entry, treating parse failures as service errors."""
        result = await self._annotate_raw(image_b64, features)
        try:
            return parse(result)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise VisionServiceError(
                f"Vision API response could not be parsed: {e}", retryable=False
            ) from e

    async def annotate(self, image_b64: str) -> Optional[AnalysisResult]:
        """
        Run the full feature set on an image.

        Args:
            image_b64: Base64-encoded image bytes (no data URL prefix)

        Returns:
            AnalysisResult, or None if the call failed
        """
        try:
            return await self._parse(
                image_b64, self.ANNOTATE_FEATURES, AnalysisResult.from_annotate_response
            )
        except VisionServiceError as e:
            logger.error(f"Image annotation failed: {e.message}")
            return None

    async def extract_text(self, image_b64: str) -> Optional[OcrResult]:
        """
        Run text detection only.

        Returns:
            OcrResult (with no text boxes when nothing was found), or None on failure
        """
        try:
            return await self._parse(
                image_b64,
                self.OCR_FEATURES,
                lambda result: OcrResult.from_text_annotations(result.get("textAnnotations") or []),
            )
        except VisionServiceError as e:
            logger.error(f"Text detection failed: {e.message}")
            return None
