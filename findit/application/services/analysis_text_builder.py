"""
Build the plain-text analysis summary that is sent to the language model.

The summary is a sequence of bracketed Korean section headers followed by
their content, e.g.::

    [문서 유형]
    영수증

    [텍스트 분석 결과]
    ...

Sections with no data are omitted entirely.
"""
import math
import re
from typing import Dict, Iterable, List, Optional, Tuple

from ...domain.models.analysis import AnalysisResult, Face, Vertex
from ...domain.models.ocr import FrameText

# Checked in order; the first match wins
DOCUMENT_TYPE_MARKERS: List[Tuple[str, str]] = [
    ("receipt", "영수증"),
    ("id card", "신분증"),
    ("business card", "명함"),
    ("document", "문서"),
]
RECEIPT_DOCUMENT_TYPE = "영수증"

_TOTAL_AMOUNT_PATTERNS = [
    re.compile(r"총\s*[가-힣]*\s*금액\s*:?\s*(\d+[,\d]*원)", re.IGNORECASE),
    re.compile(r"합계\s*:?\s*(\d+[,\d]*원)", re.IGNORECASE),
    re.compile(r"total\s*:?\s*(\d+[,\d]*원)", re.IGNORECASE),
]

# Face attribute -> Korean label, in display order
_FACE_FIELDS: List[Tuple[str, str]] = [
    ("joy_likelihood", "기쁨"),
    ("sorrow_likelihood", "슬픔"),
    ("anger_likelihood", "분노"),
    ("surprise_likelihood", "놀람"),
    ("headwear_likelihood", "모자 착용"),
]

NO_VIDEO_TEXT_SECTION = "[비디오에서 텍스트를 찾을 수 없습니다.]\n\n"
VIDEO_ERROR_SECTION = "[비디오 분석 중 오류가 발생했습니다.]\n\n"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _percent(value: float) -> int:
    return _round_half_up(value * 100)


def detect_document_type(result: AnalysisResult) -> str:
    """Return the Korean document type implied by objects/labels, or ""."""
    names = {obj.name.lower() for obj in result.objects}
    labels = {label.description.lower() for label in result.labels}
    for marker, document_type in DOCUMENT_TYPE_MARKERS:
        if marker in names or marker in labels:
            return document_type
    return ""


def extract_total_amount(text: Optional[str]) -> Optional[str]:
    """Find the receipt total (e.g. "12,000원") in OCR text."""
    if not text:
        return None
    for pattern in _TOTAL_AMOUNT_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(1)
    return None


def object_position(box: List[Vertex]) -> Tuple[int, int, int, int]:
    """
    Percent position (left, top, right, bottom) of a normalized bounding box.
    """
    if not box:
        return (0, 0, 0, 0)
    xs = [v.x for v in box]
    ys = [v.y for v in box]
    return (_percent(min(xs)), _percent(min(ys)), _percent(max(xs)), _percent(max(ys)))


def _face_lines(index: int, face: Face) -> str:
    text = f"얼굴 {index + 1}:\n"
    for attr, label in _FACE_FIELDS:
        likelihood = getattr(face, attr)
        if likelihood != "UNLIKELY":
            text += f"- {label}: {likelihood}\n"
    return text


def build_image_analysis_text(
    result: AnalysisResult,
    translations: Optional[Dict[str, List[str]]] = None,
    detailed: bool = True,
) -> str:
    """
    Summarize an annotate result for the language model.

    Args:
        result: Vision annotate result
        translations: Object name -> Korean translations; objects without a
            translation are left out of the object section
        detailed: False keeps only document type, text and labels (the
            follow-up question flow)

    Returns:
        Summary text (may be empty)
    """
    translations = translations or {}
    text = ""

    document_type = detect_document_type(result)
    if document_type:
        text += f"[문서 유형]\n{document_type}\n\n"
        if detailed and document_type == RECEIPT_DOCUMENT_TYPE:
            total_amount = extract_total_amount(result.text)
            if total_amount:
                text += f"[결제 금액]\n{total_amount}\n\n"

    if detailed and result.objects:
        text += "[감지된 물체]\n"
        for obj in result.objects:
            korean = translations.get(obj.name) or translations.get(obj.name.lower()) or []
            if not korean:
                continue
            left, top, right, bottom = object_position(obj.bounding_box)
            text += f"- {obj.name} ({', '.join(korean)})\n"
            text += f"  위치: 왼쪽 {left}%, 위 {top}%, 오른쪽 {right}%, 아래 {bottom}%\n"
        text += "\n"

    if result.text:
        text += f"[텍스트 분석 결과]\n{result.text}\n\n"

    if result.labels:
        text += "[이미지 라벨]\n"
        for label in result.labels:
            text += f"- {label.description} (신뢰도: {_percent(label.confidence)}%)\n"
        text += "\n"

    if not detailed:
        return text

    if result.faces:
        text += "[얼굴 감지 결과]\n"
        for index, face in enumerate(result.faces):
            text += _face_lines(index, face)
        text += "\n"

    if result.landmarks:
        text += "[감지된 랜드마크]\n"
        for landmark in result.landmarks:
            text += f"- {landmark.description} (신뢰도: {_percent(landmark.confidence)}%)\n"
        text += "\n"

    if result.logos:
        text += "[감지된 로고]\n"
        for logo in result.logos:
            text += f"- {logo.description} (신뢰도: {_percent(logo.confidence)}%)\n"
        text += "\n"

    return text


def build_video_analysis_text(frames: Iterable[FrameText]) -> str:
    """Summarize per-frame OCR text of a video."""
    frames = list(frames)
    if not frames:
        return NO_VIDEO_TEXT_SECTION
    text = "[비디오 텍스트 분석 결과]\n"
    for frame in frames:
        text += f"[{frame.seconds_label}] {frame.text}\n"
    return text + "\n"


def video_error_text() -> str:
    return VIDEO_ERROR_SECTION


def append_question(text: str, question: Optional[str]) -> str:
    """Append the user's question, if any, as a trailing ``질문:`` line."""
    if question and question.strip():
        return f"{text}\n질문: {question.strip()}"
    return text


def task_prompt(text: str, task: str) -> str:
    """Prompt used when the user picks one of the suggested tasks."""
    return f"{text}\n\n질문: {task}"
