"""
Unit tests for image re-encoding before Vision calls.
"""
import base64
from io import BytesIO
from unittest.mock import patch

import numpy as np
import pytest
from PIL import Image

from findit.core.exceptions import UnsupportedMediaError
from findit.infrastructure.media.image_optimizer import (
    encode_frame,
    estimate_size_mb,
    image_dimensions,
    optimize_for_vision,
)


def _image_bytes(width, height, mode="RGB", fmt="PNG"):
    buffer = BytesIO()
    Image.new(mode, (width, height)).save(buffer, format=fmt)
    return buffer.getvalue()


def _decode(b64):
    return Image.open(BytesIO(base64.b64decode(b64)))


class TestOptimizeForVision:
    """Tests for optimize_for_vision"""

    def test_downscales_wide_image_to_1024(self):
        result = optimize_for_vision(_image_bytes(2048, 1024))
        assert (result.width, result.height) == (1024, 512)
        decoded = _decode(result.b64)
        assert decoded.format == "JPEG"
        assert decoded.size == (1024, 512)

    def test_small_image_not_upscaled(self):
        result = optimize_for_vision(_image_bytes(300, 200))
        assert (result.width, result.height) == (300, 200)

    def test_converts_alpha_to_rgb(self):
        result = optimize_for_vision(_image_bytes(40, 40, mode="RGBA"))
        assert _decode(result.b64).mode == "RGB"

    def test_size_is_reported(self):
        result = optimize_for_vision(_image_bytes(100, 100))
        assert result.size_mb == pytest.approx(estimate_size_mb(result.b64))
        assert result.size_mb > 0

    def test_oversized_payload_falls_back_to_512(self):
        with patch("findit.infrastructure.media.image_optimizer.VISION_MAX_PAYLOAD_MB", 0.0):
            result = optimize_for_vision(_image_bytes(2048, 1024))
        assert (result.width, result.height) == (512, 256)

    def test_invalid_bytes_raise(self):
        with pytest.raises(UnsupportedMediaError):
            optimize_for_vision(b"definitely not an image")


class TestHelpers:
    def test_estimate_size_mb(self):
        assert estimate_size_mb("A" * 4 * 1024 * 1024) == pytest.approx(3.0)

    def test_image_dimensions(self):
        assert image_dimensions(_image_bytes(120, 80, fmt="JPEG")) == (120, 80)

    def test_encode_frame_swaps_bgr(self):
        frame = np.zeros((10, 20, 3), dtype=np.uint8)
        frame[:, :, 0] = 255  # pure blue in BGR
        image = Image.open(BytesIO(encode_frame(frame, quality=95)))
        assert image.size == (20, 10)
        red, green, blue = image.getpixel((5, 5))
        assert blue > 200 and red < 50
