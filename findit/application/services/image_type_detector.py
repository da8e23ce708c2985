"""Keyword-based document type detection from OCR text."""
import logging
from typing import Dict, Optional

from ...domain.constants.image_types import IMAGE_TYPE_KEYWORDS, ImageType

logger = logging.getLogger(__name__)


def score_image_types(text: Optional[str]) -> Dict[ImageType, int]:
    """Count keyword hits per image type (case-insensitive substring match)."""
    haystack = (text or "").lower()
    scores: Dict[ImageType, int] = {}
    for image_type, keywords in IMAGE_TYPE_KEYWORDS.items():
        if not keywords:
            continue
        scores[image_type] = sum(1 for keyword in keywords if keyword.lower() in haystack)
    return scores


def detect_image_type(text: Optional[str]) -> ImageType:
    """
    Pick the image type whose keywords appear most often in ``text``.
    
    Ties go to the type declared first in IMAGE_TYPE_KEYWORDS. Empty text or
    no keyword hits yield OTHER.
    """
    if not text or not text.strip():
        return ImageType.OTHER

    best_type = ImageType.OTHER
    best_score = 0
    for image_type, score in score_image_types(text).items():
        if score > best_score:
            best_type = image_type
            best_score = score

    logger.debug(f"Detected image type {best_type.value} (score {best_score})")
    return best_type
