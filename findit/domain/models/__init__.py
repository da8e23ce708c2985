from .analysis import (
    AnalysisResult,
    DetectedObject,
    DominantColor,
    Face,
    Label,
    Landmark,
    Logo,
    SafeSearch,
    SimilarImage,
    Vertex,
    WebEntity,
)
from .media import MediaItem, MediaKind, MediaState
from .ocr import FrameText, OcrResult, TextBox
from .task import TaskSuggestion

__all__ = [
    "AnalysisResult",
    "DetectedObject",
    "DominantColor",
    "Face",
    "Label",
    "Landmark",
    "Logo",
    "SafeSearch",
    "SimilarImage",
    "Vertex",
    "WebEntity",
    "MediaItem",
    "MediaKind",
    "MediaState",
    "FrameText",
    "OcrResult",
    "TextBox",
    "TaskSuggestion",
]
