"""Local media handling: image re-encoding and video frame sampling"""

from .image_optimizer import OptimizedImage, encode_frame, optimize_for_vision
from .video_frame_sampler import SampledFrame, VideoFrameSampler

__all__ = [
    "OptimizedImage",
    "encode_frame",
    "optimize_for_vision",
    "SampledFrame",
    "VideoFrameSampler",
]
