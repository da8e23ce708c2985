# Standard library imports
import asyncio
import base64
import logging
import uuid
from pathlib import Path
from typing import Dict, List, Optional

# Local application imports
from ....core.exceptions import MediaNotFoundError, ValidationError, VisionServiceError
from ....domain.constants.image_types import ImageType
from ....domain.constants.media_constants import (
    IMAGE_ANALYSIS_FAILED_MESSAGE,
    MEDIA_PROCESSING_ERROR_MESSAGE,
    QUESTION_PROCESSING_ERROR_MESSAGE,
    SELECT_MEDIA_FIRST_MESSAGE,
    TASK_PROCESSING_ERROR_MESSAGE,
)
from ....domain.models.analysis import AnalysisResult
from ....domain.models.media import MediaItem, MediaKind, MediaState
from ....domain.models.ocr import FrameText, OcrResult
from ....domain.models.task import TaskSuggestion
from ....infrastructure.external.google_vision_client import GoogleVisionClient
from ....infrastructure.media.image_optimizer import optimize_for_vision
from ....infrastructure.media.video_frame_sampler import VideoFrameSampler
from ...services.analysis_text_builder import (
    append_question,
    build_image_analysis_text,
    build_video_analysis_text,
    task_prompt,
    video_error_text,
)
from ...services.image_type_detector import detect_image_type
from ...services.korean_translator import KoreanTranslator
from ...services.language_model_service import LanguageModelService

logger = logging.getLogger(__name__)


class MediaSession:
    """
    Per-user media analysis session.

    Holds the picked media items and, for each one, exactly one MediaState
    (loading flag, OCR result, detected type, task suggestions, answers).
    Every operation runs its vendor calls one after another; failures are
    logged and turned into fallback values on the state or the returned text.
    """

    def __init__(
        self,
        vision_client: GoogleVisionClient,
        language_model: LanguageModelService,
        translator: KoreanTranslator,
        frame_sampler: Optional[VideoFrameSampler] = None,
    ) -> None:
        self.vision_client = vision_client
        self.language_model = language_model
        self.translator = translator
        self.frame_sampler = frame_sampler or VideoFrameSampler()

        self._media: Dict[str, MediaItem] = {}
        self._states: Dict[str, MediaState] = {}
        self.selected_media_id: Optional[str] = None

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def add_media(
        self,
        path: str,
        kind: MediaKind = MediaKind.IMAGE,
        filename: Optional[str] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> MediaItem:
        """Register a media item and create its empty state."""
        media_id = uuid.uuid4().hex
        item = MediaItem(
            id=media_id,
            path=path,
            kind=kind,
            filename=filename,
            width=width,
            height=height,
        )
        self._media[media_id] = item
        self._states[media_id] = MediaState()
        logger.info(f"Added {kind.value} media {media_id} ({filename or path})")
        return item

    def remove_media(self, media_id: str) -> MediaItem:
        item = self.get_media(media_id)
        del self._media[media_id]
        del self._states[media_id]
        if self.selected_media_id == media_id:
            self.selected_media_id = None
        return item

    def list_media(self) -> List[MediaItem]:
        return list(self._media.values())

    def get_media(self, media_id: Optional[str]) -> MediaItem:
        if not media_id or media_id not in self._media:
            raise MediaNotFoundError(media_id)
        return self._media[media_id]

    def get_state(self, media_id: str) -> MediaState:
        self.get_media(media_id)
        return self._states[media_id]

    def select(self, media_id: str) -> MediaItem:
        item = self.get_media(media_id)
        self.selected_media_id = media_id
        return item

    def change_type(self, media_id: str, image_type: ImageType) -> MediaState:
        """Manually override the detected image type."""
        state = self.get_state(media_id)
        state.image_type = image_type
        return state

    # ------------------------------------------------------------------
    # Vendor call helpers
    # ------------------------------------------------------------------

    async def _encode_image(self, item: MediaItem) -> str:
        data = await asyncio.to_thread(Path(item.path).read_bytes)
        optimized = await asyncio.to_thread(optimize_for_vision, data)
        return optimized.b64

    async def _analyze_image(self, item: MediaItem, image_b64: Optional[str] = None) -> Optional[AnalysisResult]:
        """Annotate an image; cached on the state after the first success."""
        state = self._states[item.id]
        if state.analysis_result is not None:
            return state.analysis_result
        try:
            if image_b64 is None:
                image_b64 = await self._encode_image(item)
            result = await self.vision_client.annotate(image_b64)
        except Exception as e:
            logger.error(f"Error analyzing image {item.id}: {e}", exc_info=True)
            return None
        state.analysis_result = result
        return result

    async def _extract_video_text(self, item: MediaItem) -> List[FrameText]:
        """OCR every sampled frame; frames without text are dropped."""
        state = self._states[item.id]
        if state.frame_texts is not None:
            return state.frame_texts

        frames = await asyncio.to_thread(self.frame_sampler.sample, item.path)
        frame_texts: List[FrameText] = []
        for frame in frames:
            frame_b64 = base64.b64encode(frame.jpeg_bytes).decode("utf-8")
            ocr = await self.vision_client.extract_text(frame_b64)
            if ocr and ocr.full_text.strip():
                frame_texts.append(FrameText(time_ms=frame.time_ms, text=ocr.full_text.strip()))
        state.frame_texts = frame_texts
        return frame_texts

    async def _object_translations(self, analysis: AnalysisResult) -> Dict[str, List[str]]:
        names = list(dict.fromkeys(obj.name for obj in analysis.objects))
        return await self.translator.translate_many(names)

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    async def process_image(self, media_id: str) -> MediaState:
        """
        OCR an image, classify it, annotate it and suggest tasks.

        Returns:
            The updated MediaState (OCR result None and type OTHER on failure)
        """
        item = self.get_media(media_id)
        state = self._states[media_id]
        state.is_loading_ocr = True
        try:
            logger.info(f"Analyzing uploaded image {media_id}")
            image_b64 = await self._encode_image(item)
            ocr_result = await self.vision_client.extract_text(image_b64)

            if ocr_result and ocr_result.has_text:
                logger.info(f"Detected {len(ocr_result.text_boxes)} text box(es) in {media_id}")
                state.ocr_result = ocr_result
                detected_type = detect_image_type(ocr_result.full_text)
                state.image_type = detected_type
                logger.info(f"Image {media_id} classified as {detected_type.value}")

                analysis = await self._analyze_image(item, image_b64)
                if analysis:
                    if analysis.objects:
                        translations = await self._object_translations(analysis)
                        if translations:
                            logger.info(f"Detected objects: {translations}")
                    if analysis.labels:
                        logger.info(
                            "Detected labels: "
                            + ", ".join(f"{label.description} ({label.confidence * 100:.1f}%)" for label in analysis.labels)
                        )

                suggestions = await self.language_model.suggest_tasks(ocr_result.full_text)
                if suggestions:
                    state.task_suggestions = suggestions
            else:
                logger.info(f"No text detected in {media_id}")
                state.ocr_result = None
                state.image_type = ImageType.OTHER
        except Exception as e:
            logger.error(f"Image OCR error ({media_id}): {e}", exc_info=True)
            state.ocr_result = None
            state.image_type = ImageType.OTHER
        finally:
            state.is_loading_ocr = False
        return state

    async def process_video(self, media_id: str) -> MediaState:
        """
        OCR sampled video frames, classify the combined text and suggest tasks.
        """
        item = self.get_media(media_id)
        state = self._states[media_id]
        state.is_loading_ocr = True
        try:
            frame_texts = await self._extract_video_text(item)
            if frame_texts:
                ocr_result = OcrResult.from_frames(frame_texts)
                state.ocr_result = ocr_result
                detected_type = detect_image_type(ocr_result.full_text)
                state.image_type = detected_type
                logger.info(f"Video {media_id} classified as {detected_type.value}")

                suggestions = await self.language_model.suggest_tasks(ocr_result.full_text)
                if suggestions:
                    state.task_suggestions = suggestions
            else:
                state.ocr_result = None
                state.image_type = ImageType.OTHER
        except Exception as e:
            logger.error(f"Video OCR error ({media_id}): {e}", exc_info=True)
            state.ocr_result = None
            state.image_type = ImageType.OTHER
        finally:
            state.is_loading_ocr = False
        return state

    async def process(self, media_id: str) -> MediaState:
        item = self.get_media(media_id)
        if item.kind == MediaKind.VIDEO:
            return await self.process_video(media_id)
        return await self.process_image(media_id)

    async def _video_section(self, item: MediaItem) -> str:
        try:
            return build_video_analysis_text(await self._extract_video_text(item))
        except Exception as e:
            logger.error(f"Error analyzing video {item.id}: {e}", exc_info=True)
            return video_error_text()

    def resolve_info_target(self, media_id: Optional[str] = None) -> MediaItem:
        """
        Media item get_info answers about: media_id, or the first media item.

        Raises:
            ValidationError: If no media has been added
            MediaNotFoundError: If media_id is unknown
        """
        if not self._media:
            raise ValidationError(SELECT_MEDIA_FIRST_MESSAGE, user_message=SELECT_MEDIA_FIRST_MESSAGE)
        if media_id:
            return self.get_media(media_id)
        return next(iter(self._media.values()))

    async def get_info(self, media_id: Optional[str] = None, question: Optional[str] = None) -> str:
        """
        Build the full analysis text for a media item and ask for an answer.

        Args:
            media_id: Target media; defaults to the first media item
            question: Optional user question appended to the analysis

        Returns:
            Markdown answer or a fallback message

        Raises:
            ValidationError: If no media has been added
            MediaNotFoundError: If media_id is unknown
        """
        item = self.resolve_info_target(media_id)
        state = self._states[item.id]
        state.info_result = None

        try:
            if item.kind == MediaKind.VIDEO:
                analysis_text = await self._video_section(item)
            else:
                analysis = await self._analyze_image(item)
                if not analysis:
                    raise VisionServiceError(IMAGE_ANALYSIS_FAILED_MESSAGE)
                translations = await self._object_translations(analysis)
                analysis_text = build_image_analysis_text(analysis, translations, detailed=True)

            analysis_text = append_question(analysis_text, question)
            answer = await self.language_model.get_info_from_text(analysis_text, state.image_type)
        except Exception as e:
            logger.error(f"Error processing media {item.id}: {e}", exc_info=True)
            answer = MEDIA_PROCESSING_ERROR_MESSAGE

        state.info_result = answer
        state.last_question = question.strip() if question and question.strip() else None
        return answer

    async def answer_question(self, media_id: str, question: str) -> str:
        """
        Answer a follow-up (typed or transcribed) question about one media item.

        Uses the short analysis summary: document type, text and labels.
        """
        item = self.get_media(media_id)
        if not question or not question.strip():
            return ""
        state = self._states[item.id]
        state.last_question = question.strip()
        state.info_result = None

        try:
            if item.kind == MediaKind.VIDEO:
                analysis_text = await self._video_section(item)
            else:
                analysis = await self._analyze_image(item)
                if not analysis:
                    raise VisionServiceError(IMAGE_ANALYSIS_FAILED_MESSAGE)
                analysis_text = build_image_analysis_text(analysis, detailed=False)

            analysis_text += f"\n질문: {question.strip()}"
            answer = await self.language_model.get_info_from_text(analysis_text, state.image_type)
        except Exception as e:
            logger.error(f"Error processing question for {item.id}: {e}", exc_info=True)
            answer = QUESTION_PROCESSING_ERROR_MESSAGE

        state.info_result = answer
        return answer

    async def select_task(self, task: TaskSuggestion, media_id: Optional[str] = None) -> str:
        """
        Answer a suggested task using the raw recognised text of the media item.

        Args:
            task: The suggestion the user picked
            media_id: Target media; defaults to the selected media item
        """
        item = self.get_media(media_id or self.selected_media_id)
        state = self._states[item.id]
        state.last_question = task.task
        state.info_result = None

        try:
            analysis_text = ""
            if item.kind == MediaKind.VIDEO:
                try:
                    frame_texts = await self._extract_video_text(item)
                    analysis_text = "\n".join(frame.text for frame in frame_texts)
                except Exception as e:
                    logger.error(f"Error analyzing video {item.id}: {e}", exc_info=True)
            else:
                analysis = await self._analyze_image(item)
                if analysis and analysis.text:
                    analysis_text = analysis.text

            answer = await self.language_model.get_info_from_text(
                task_prompt(analysis_text, task.task), state.image_type
            )
        except Exception as e:
            logger.error(f"Error processing task for {item.id}: {e}", exc_info=True)
            answer = TASK_PROCESSING_ERROR_MESSAGE

        state.info_result = answer
        return answer
