# Standard library imports
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..constants.image_types import ImageType
from .analysis import AnalysisResult
from .ocr import FrameText, OcrResult
from .task import TaskSuggestion


class MediaKind(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


@dataclass
class MediaItem:
    """A photo or video the user picked, stored on local disk."""
    id: str
    path: str
    kind: MediaKind = MediaKind.IMAGE
    filename: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("Media path is required")


@dataclass
class MediaState:
    """Transient per-media analysis state; one instance per media item."""
    is_loading_ocr: bool = False
    ocr_result: Optional[OcrResult] = None
    image_type: ImageType = ImageType.OTHER
    task_suggestions: List[TaskSuggestion] = field(default_factory=list)
    analysis_result: Optional[AnalysisResult] = None
    frame_texts: Optional[List[FrameText]] = None
    info_result: Optional[str] = None
    last_question: Optional[str] = None
