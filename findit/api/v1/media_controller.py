"""
Media analysis API.

Endpoints:
  POST   /media                         upload + OCR/classify/suggest
  GET    /media                         list media states
  GET    /media/{media_id}              one media state
  DELETE /media/{media_id}              forget a media item
  PUT    /media/{media_id}/type         override the detected image type
  POST   /media/info                    full analysis answer (optional question)
  POST   /media/{media_id}/question     follow-up question
  POST   /media/{media_id}/tasks/select answer a suggested task
  GET    /image-types                   type catalogue for the client
"""
import logging
import uuid
from pathlib import Path
from typing import List

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status

from ...application.dto.media_dto import (
    AnswerResponse,
    ChangeImageTypeRequest,
    ImageTypeInfo,
    InfoRequest,
    MediaStateResponse,
    QuestionRequest,
    TaskSuggestionSchema,
)
from ...application.use_cases.media import MediaSession
from ...core.config import get_settings
from ...core.exceptions import (
    MediaNotFoundError,
    MediaTooLargeError,
    UnsupportedMediaError,
    ValidationError,
)
from ...domain.constants.image_types import (
    IMAGE_TYPE_COLORS,
    IMAGE_TYPE_ICONS,
    IMAGE_TYPE_NAMES,
    ImageType,
)
from ...domain.constants.media_constants import (
    ALLOWED_IMAGE_EXTENSIONS,
    ALLOWED_VIDEO_EXTENSIONS,
)
from ...domain.models.media import MediaKind
from ...infrastructure.media.image_optimizer import image_dimensions
from .dependencies import get_media_session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["media"])


def _upload_dir() -> Path:
    upload_dir = Path(get_settings().media_upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    return upload_dir


def _media_kind(filename: str) -> MediaKind:
    ext = Path(filename).suffix.lower()
    if ext in ALLOWED_IMAGE_EXTENSIONS:
        return MediaKind.IMAGE
    if ext in ALLOWED_VIDEO_EXTENSIONS:
        return MediaKind.VIDEO
    raise UnsupportedMediaError(f"Unsupported extension: {ext}")


async def _save_upload(file: UploadFile) -> Path:
    """Stream the upload to disk, enforcing the configured size limit."""
    settings = get_settings()
    max_bytes = settings.media_upload_max_mb * 1024 * 1024
    ext = Path(file.filename or "").suffix.lower()
    final_path = (_upload_dir() / f"{uuid.uuid4().hex}{ext}").resolve()

    size = 0
    with open(final_path, "wb") as f:
        while True:
            chunk = await file.read(1024 * 1024)
            if not chunk:
                break
            size += len(chunk)
            if size > max_bytes:
                f.close()
                final_path.unlink(missing_ok=True)
                raise MediaTooLargeError(settings.media_upload_max_mb)
            f.write(chunk)
    return final_path


def _not_found(exc: MediaNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.user_message)


def _state_response(session: MediaSession, media_id: str) -> MediaStateResponse:
    return MediaStateResponse.from_domain(session.get_media(media_id), session.get_state(media_id))


@router.post("/media", response_model=MediaStateResponse, status_code=status.HTTP_201_CREATED)
async def upload_media(
    file: UploadFile = File(...),
    process: bool = Query(True, description="Run OCR, classification and task suggestion right away"),
    session: MediaSession = Depends(get_media_session),
) -> MediaStateResponse:
    """
    Upload a photo or video and run the OCR pipeline on it.

    Returns:
        MediaStateResponse with OCR text, detected type and task suggestions
    """
    if not file.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing file name.")

    try:
        kind = _media_kind(file.filename)
        saved_path = await _save_upload(file)
    except MediaTooLargeError as e:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=e.user_message)
    except UnsupportedMediaError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.user_message)

    width = height = None
    if kind == MediaKind.IMAGE:
        try:
            width, height = image_dimensions(saved_path.read_bytes())
        except UnsupportedMediaError as e:
            saved_path.unlink(missing_ok=True)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.user_message)

    item = session.add_media(
        str(saved_path),
        kind=kind,
        filename=file.filename,
        width=width,
        height=height,
    )
    session.select(item.id)
    if process:
        await session.process(item.id)
    return _state_response(session, item.id)


@router.get("/media", response_model=List[MediaStateResponse])
async def list_media(session: MediaSession = Depends(get_media_session)) -> List[MediaStateResponse]:
    return [_state_response(session, item.id) for item in session.list_media()]


@router.post("/media/info", response_model=AnswerResponse)
async def get_info(
    request: InfoRequest,
    session: MediaSession = Depends(get_media_session),
) -> AnswerResponse:
    """
    Analyze a media item in full and synthesize an answer.

    Defaults to the first uploaded media item when no media_id is given.
    """
    try:
        item = session.resolve_info_target(request.media_id)
        answer = await session.get_info(item.id, request.question)
    except MediaNotFoundError as e:
        raise _not_found(e)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.user_message)
    return AnswerResponse(media_id=item.id, answer=answer)


@router.get("/media/{media_id}", response_model=MediaStateResponse)
async def get_media(media_id: str, session: MediaSession = Depends(get_media_session)) -> MediaStateResponse:
    try:
        return _state_response(session, media_id)
    except MediaNotFoundError as e:
        raise _not_found(e)


@router.delete("/media/{media_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_media(media_id: str, session: MediaSession = Depends(get_media_session)) -> None:
    try:
        item = session.remove_media(media_id)
    except MediaNotFoundError as e:
        raise _not_found(e)
    Path(item.path).unlink(missing_ok=True)


@router.put("/media/{media_id}/type", response_model=MediaStateResponse)
async def change_image_type(
    media_id: str,
    request: ChangeImageTypeRequest,
    session: MediaSession = Depends(get_media_session),
) -> MediaStateResponse:
    try:
        session.change_type(media_id, request.image_type)
        return _state_response(session, media_id)
    except MediaNotFoundError as e:
        raise _not_found(e)


@router.post("/media/{media_id}/question", response_model=AnswerResponse)
async def ask_question(
    media_id: str,
    request: QuestionRequest,
    session: MediaSession = Depends(get_media_session),
) -> AnswerResponse:
    """Answer a typed or transcribed follow-up question about one media item."""
    try:
        answer = await session.answer_question(media_id, request.question)
    except MediaNotFoundError as e:
        raise _not_found(e)
    return AnswerResponse(media_id=media_id, answer=answer)


@router.post("/media/{media_id}/tasks/select", response_model=AnswerResponse)
async def select_task(
    media_id: str,
    request: TaskSuggestionSchema,
    session: MediaSession = Depends(get_media_session),
) -> AnswerResponse:
    try:
        session.select(media_id)
        answer = await session.select_task(request.to_domain(), media_id)
    except MediaNotFoundError as e:
        raise _not_found(e)
    return AnswerResponse(media_id=media_id, answer=answer)


@router.get("/image-types", response_model=List[ImageTypeInfo])
async def list_image_types() -> List[ImageTypeInfo]:
    return [
        ImageTypeInfo(
            type=image_type,
            name=IMAGE_TYPE_NAMES[image_type],
            icon=IMAGE_TYPE_ICONS[image_type],
            color=IMAGE_TYPE_COLORS[image_type],
        )
        for image_type in ImageType
    ]
