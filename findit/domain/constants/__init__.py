"""Constants for image types, task priorities and media handling"""

from .image_types import (
    IMAGE_TYPE_COLORS,
    IMAGE_TYPE_ICONS,
    IMAGE_TYPE_KEYWORDS,
    IMAGE_TYPE_NAMES,
    IMAGE_TYPE_PROMPTS,
    ImageType,
)
from .priorities import PRIORITY_COLORS, TaskPriority, normalize_priority, priority_color

__all__ = [
    "ImageType",
    "IMAGE_TYPE_PROMPTS",
    "IMAGE_TYPE_KEYWORDS",
    "IMAGE_TYPE_ICONS",
    "IMAGE_TYPE_NAMES",
    "IMAGE_TYPE_COLORS",
    "TaskPriority",
    "PRIORITY_COLORS",
    "normalize_priority",
    "priority_color",
]
