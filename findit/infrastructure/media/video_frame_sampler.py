"""
Video Frame Sampler
-------------------

Reads an uploaded video with OpenCV and keeps a fixed number of frames per
second of footage, each encoded as JPEG for OCR.
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

import cv2

from ...core.exceptions import UnsupportedMediaError
from .image_optimizer import encode_frame

logger = logging.getLogger(__name__)


@dataclass
class SampledFrame:
    time_ms: int
    jpeg_bytes: bytes


class VideoFrameSampler:
    """Sample frames from a video file at ``frames_per_second``."""

    def __init__(self, frames_per_second: float = 1.0, max_frames: Optional[int] = None):
        if frames_per_second <= 0:
            raise ValueError("frames_per_second must be positive")
        self.frames_per_second = frames_per_second
        self.max_frames = max_frames

    def sample(self, video_path: str) -> List[SampledFrame]:
        """
        Read the video and return the sampled frames in time order.
        
        Raises:
            UnsupportedMediaError: If the file is missing or cannot be decoded
        """
        if not video_path or not os.path.isfile(video_path):
            raise UnsupportedMediaError(f"Video file not found: {video_path}")

        cap = cv2.VideoCapture(video_path)
        if not cap.isOpened():
            raise UnsupportedMediaError(f"Could not open video: {video_path}")

        try:
            fps = cap.get(cv2.CAP_PROP_FPS) or 30.0
            step = max(1, round(fps / self.frames_per_second))
            frames: List[SampledFrame] = []
            frame_index = 0
            while True:
                ret, frame = cap.read()
                if not ret or frame is None:
                    break
                if frame_index % step == 0:
                    if frame.ndim == 3 and frame.shape[2] == 4:
                        frame = cv2.cvtColor(frame, cv2.COLOR_BGRA2BGR)
                    time_ms = int(round(frame_index * 1000 / fps))
                    frames.append(SampledFrame(time_ms=time_ms, jpeg_bytes=encode_frame(frame)))
                    if self.max_frames is not None and len(frames) >= self.max_frames:
                        break
                frame_index += 1
        finally:
            cap.release()

        logger.info(f"Sampled {len(frames)} frame(s) from {os.path.basename(video_path)} at {fps:.1f} fps")
        return frames
