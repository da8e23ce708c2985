"""Task priority labels returned by the task suggestion prompt."""
from enum import Enum
from typing import Dict, Optional


class TaskPriority(str, Enum):
    HIGH = "중요"
    MEDIUM = "보통"
    LOW = "낮음"


PRIORITY_COLORS: Dict[TaskPriority, str] = {
    TaskPriority.HIGH: "#FF4444",
    TaskPriority.MEDIUM: "#FFBB33",
    TaskPriority.LOW: "#00C851",
}
UNKNOWN_PRIORITY_COLOR = "#757575"

# The prompt asks for Korean labels but the model sometimes answers in English
_ALIASES: Dict[str, TaskPriority] = {
    "중요": TaskPriority.HIGH,
    "high": TaskPriority.HIGH,
    "보통": TaskPriority.MEDIUM,
    "medium": TaskPriority.MEDIUM,
    "낮음": TaskPriority.LOW,
    "low": TaskPriority.LOW,
}


def normalize_priority(raw: Optional[str]) -> TaskPriority:
    """Map a raw priority label to a TaskPriority, defaulting to MEDIUM."""
    if not raw:
        return TaskPriority.MEDIUM
    return _ALIASES.get(raw.strip().lower(), TaskPriority.MEDIUM)


def priority_color(priority: str) -> str:
    try:
        return PRIORITY_COLORS[TaskPriority(priority)]
    except ValueError:
        return UNKNOWN_PRIORITY_COLOR
