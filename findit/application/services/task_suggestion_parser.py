"""Parse ``[priority] title`` lines from a task suggestion completion."""
import re
from typing import List, Optional

from ...domain.constants.priorities import normalize_priority
from ...domain.models.task import TaskSuggestion

# Leading list markers the model sometimes adds: "1.", "2)", "-", "*", "•"
_LIST_MARKER_RE = re.compile(r"^(?:\d+[.)]\s*|[-*•]\s*)")
_PRIORITY_RE = re.compile(r"\[(.*?)\]")


def _strip_list_marker(line: str) -> str:
    return _LIST_MARKER_RE.sub("", line, count=1).strip()


def parse_task_line(line: str) -> Optional[TaskSuggestion]:
    """Parse one line; returns None when it is not a ``[priority] title`` line."""
    trimmed = _strip_list_marker(line.strip())
    if not trimmed.startswith("[") or "]" not in trimmed:
        return None

    match = _PRIORITY_RE.match(trimmed)
    priority = normalize_priority(match.group(1) if match else None)
    title = trimmed.split("]", 1)[1].strip()
    if not title:
        return None
    return TaskSuggestion(task=title, priority=priority)


def parse_task_suggestions(content: Optional[str]) -> List[TaskSuggestion]:
    """
    Convert the raw completion into task suggestions, in response order.
    
    Lines that do not start with a bracketed priority are ignored, including
    explanatory text the model adds around the list.
    """
    if not content:
        return []
    suggestions: List[TaskSuggestion] = []
    for line in content.split("\n"):
        suggestion = parse_task_line(line)
        if suggestion is not None:
            suggestions.append(suggestion)
    return suggestions
