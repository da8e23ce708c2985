"""Shrink and re-encode images before they are sent to the Vision API."""
import base64
import logging
from dataclasses import dataclass
from io import BytesIO
from typing import Tuple

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from ...core.exceptions import UnsupportedMediaError
from ...domain.constants.media_constants import (
    VISION_FALLBACK_JPEG_QUALITY,
    VISION_FALLBACK_WIDTH,
    VISION_JPEG_QUALITY,
    VISION_MAX_PAYLOAD_MB,
    VISION_RESIZE_WIDTH,
)

logger = logging.getLogger(__name__)


@dataclass
class OptimizedImage:
    b64: str
    width: int
    height: int
    size_mb: float


def estimate_size_mb(b64: str) -> float:
    """Decoded size of a base64 payload in megabytes."""
    return (len(b64) * 3) / 4 / (1024 * 1024)


def _resize_to_width(image: Image.Image, width: int) -> Image.Image:
    if image.width <= width:
        return image
    height = max(1, round(image.height * width / image.width))
    return image.resize((width, height), Image.LANCZOS)


def _encode_jpeg(image: Image.Image, quality: int) -> str:
    buffer = BytesIO()
    image.save(buffer, format="JPEG", quality=quality)
    return base64.b64encode(buffer.getvalue()).decode("utf-8")


def _load_image(data: bytes) -> Image.Image:
    try:
        image = Image.open(BytesIO(data))
        image.load()
    except (UnidentifiedImageError, OSError) as e:
        raise UnsupportedMediaError(f"Cannot decode image: {e}") from e
    # Camera photos carry their rotation in EXIF
    image = ImageOps.exif_transpose(image)
    if image.mode != "RGB":
        image = image.convert("RGB")
    return image


def optimize_for_vision(data: bytes) -> OptimizedImage:
    """
    Resize and JPEG-encode an image for the annotate request.
    
    Args:
        data: Raw image file bytes
        
    Returns:
        OptimizedImage with base64 JPEG content and final dimensions
        
    Raises:
        UnsupportedMediaError: If the bytes are not a readable image
    """
    image = _load_image(data)
    resized = _resize_to_width(image, VISION_RESIZE_WIDTH)
    b64 = _encode_jpeg(resized, VISION_JPEG_QUALITY)
    size_mb = estimate_size_mb(b64)
    logger.info(f"Image size: {size_mb:.2f}MB ({resized.width}x{resized.height})")

    if size_mb > VISION_MAX_PAYLOAD_MB:
        logger.warning("Image is too large, compressing further")
        resized = _resize_to_width(image, VISION_FALLBACK_WIDTH)
        b64 = _encode_jpeg(resized, VISION_FALLBACK_JPEG_QUALITY)
        size_mb = estimate_size_mb(b64)

    return OptimizedImage(b64=b64, width=resized.width, height=resized.height, size_mb=size_mb)


def image_dimensions(data: bytes) -> Tuple[int, int]:
    image = _load_image(data)
    return image.width, image.height


def encode_frame(frame: np.ndarray, quality: int = VISION_JPEG_QUALITY) -> bytes:
    """
    Encode a BGR video frame as JPEG bytes.
    
    Args:
        frame: numpy array of shape (H, W, 3) in BGR format
        quality: JPEG quality
    """
    rgb_frame = frame[:, :, ::-1]
    pil_image = Image.fromarray(rgb_frame.astype(np.uint8))
    buffer = BytesIO()
    pil_image.save(buffer, format="JPEG", quality=quality)
    return buffer.getvalue()
