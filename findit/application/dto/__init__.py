from .media_dto import (
    AnswerResponse,
    ChangeImageTypeRequest,
    ImageTypeInfo,
    InfoRequest,
    MediaStateResponse,
    OcrResultSchema,
    QuestionRequest,
    TaskSuggestionSchema,
    TextBoxSchema,
)

__all__ = [
    "AnswerResponse",
    "ChangeImageTypeRequest",
    "ImageTypeInfo",
    "InfoRequest",
    "MediaStateResponse",
    "OcrResultSchema",
    "QuestionRequest",
    "TaskSuggestionSchema",
    "TextBoxSchema",
]
