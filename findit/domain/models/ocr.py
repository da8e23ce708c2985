# Standard library imports
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .analysis import Vertex


@dataclass
class TextBox:
    description: str
    vertices: List[Vertex] = field(default_factory=list)


@dataclass
class FrameText:
    """Text recognised in one sampled video frame."""
    time_ms: int
    text: str

    @property
    def seconds_label(self) -> str:
        seconds = self.time_ms / 1000
        if seconds.is_integer():
            return f"{int(seconds)}초"
        return f"{seconds}초"


@dataclass
class OcrResult:
    full_text: str
    text_boxes: List[TextBox] = field(default_factory=list)

    @property
    def has_text(self) -> bool:
        return len(self.text_boxes) > 0

    @classmethod
    def from_text_annotations(cls, annotations: List[Dict[str, Any]]) -> "OcrResult":
        """First annotation is the whole text block, the rest are word boxes."""
        if not annotations:
            return cls(full_text="", text_boxes=[])
        boxes = [
            TextBox(
                description=item.get("description", ""),
                vertices=[Vertex.from_dict(v) for v in (item.get("boundingPoly") or {}).get("vertices", [])],
            )
            for item in annotations[1:]
        ]
        return cls(full_text=annotations[0].get("description", ""), text_boxes=boxes)

    @classmethod
    def from_frames(cls, frames: List[FrameText]) -> "OcrResult":
        # Frame boxes carry no geometry; one zeroed quad per frame
        full_text = "\n\n".join(f"[{frame.seconds_label}] {frame.text}" for frame in frames)
        boxes = [
            TextBox(description=frame.text, vertices=[Vertex() for _ in range(4)])
            for frame in frames
        ]
        return cls(full_text=full_text, text_boxes=boxes)
