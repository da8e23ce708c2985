# Standard library imports
from dataclasses import dataclass

from ..constants.priorities import TaskPriority


@dataclass
class TaskSuggestion:
    task: str
    priority: TaskPriority = TaskPriority.MEDIUM

    def __post_init__(self) -> None:
        if not self.task or not self.task.strip():
            raise ValueError("Task title is required")
