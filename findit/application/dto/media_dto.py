from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ...domain.constants.image_types import IMAGE_TYPE_NAMES, ImageType
from ...domain.constants.priorities import TaskPriority, priority_color
from ...domain.models.media import MediaItem, MediaKind, MediaState
from ...domain.models.task import TaskSuggestion


class TaskSuggestionSchema(BaseModel):
    """A suggested follow-up task"""
    task: str = Field(..., min_length=1)
    priority: TaskPriority = TaskPriority.MEDIUM
    color: Optional[str] = None  # Badge colour for the priority; filled on responses

    @classmethod
    def from_domain(cls, suggestion: TaskSuggestion) -> "TaskSuggestionSchema":
        return cls(
            task=suggestion.task,
            priority=suggestion.priority,
            color=priority_color(suggestion.priority.value),
        )

    def to_domain(self) -> TaskSuggestion:
        return TaskSuggestion(task=self.task, priority=self.priority)


class TextBoxSchema(BaseModel):
    description: str
    vertices: List[Dict[str, float]] = Field(default_factory=list)


class OcrResultSchema(BaseModel):
    full_text: str
    text_boxes: List[TextBoxSchema] = Field(default_factory=list)


class MediaStateResponse(BaseModel):
    """DTO for one media item and its analysis state"""
    id: str
    kind: MediaKind
    filename: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    is_loading_ocr: bool = False
    ocr_result: Optional[OcrResultSchema] = None
    image_type: ImageType = ImageType.OTHER
    image_type_name: str = ""
    task_suggestions: List[TaskSuggestionSchema] = Field(default_factory=list)
    info_result: Optional[str] = None
    last_question: Optional[str] = None

    @classmethod
    def from_domain(cls, item: MediaItem, state: MediaState) -> "MediaStateResponse":
        ocr = None
        if state.ocr_result is not None:
            ocr = OcrResultSchema(
                full_text=state.ocr_result.full_text,
                text_boxes=[
                    TextBoxSchema(
                        description=box.description,
                        vertices=[{"x": v.x, "y": v.y} for v in box.vertices],
                    )
                    for box in state.ocr_result.text_boxes
                ],
            )
        return cls(
            id=item.id,
            kind=item.kind,
            filename=item.filename,
            width=item.width,
            height=item.height,
            is_loading_ocr=state.is_loading_ocr,
            ocr_result=ocr,
            image_type=state.image_type,
            image_type_name=IMAGE_TYPE_NAMES[state.image_type],
            task_suggestions=[TaskSuggestionSchema.from_domain(s) for s in state.task_suggestions],
            info_result=state.info_result,
            last_question=state.last_question,
        )


class ChangeImageTypeRequest(BaseModel):
    image_type: ImageType


class InfoRequest(BaseModel):
    """Request model for the main "get info" action"""
    media_id: Optional[str] = None  # Defaults to the first uploaded media item
    question: Optional[str] = None


class QuestionRequest(BaseModel):
    question: str


class AnswerResponse(BaseModel):
    media_id: Optional[str] = None
    answer: str


class ImageTypeInfo(BaseModel):
    type: ImageType
    name: str
    icon: str
    color: str
