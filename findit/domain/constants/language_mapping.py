"""Seed English -> Korean translations for common Vision object names."""
from typing import Dict, List

ENGLISH_TO_KOREAN: Dict[str, List[str]] = {
    "person": ["사람"],
    "man": ["남자", "남성"],
    "woman": ["여자", "여성"],
    "laptop": ["노트북"],
    "computer": ["컴퓨터"],
    "computer keyboard": ["키보드"],
    "computer monitor": ["모니터"],
    "mobile phone": ["휴대폰", "핸드폰"],
    "printer": ["프린터", "인쇄기"],
    "table": ["테이블", "탁자"],
    "desk": ["책상"],
    "chair": ["의자"],
    "book": ["책"],
    "paper": ["종이"],
    "document": ["문서"],
    "receipt": ["영수증"],
    "business card": ["명함"],
    "id card": ["신분증"],
    "bottle": ["병"],
    "cup": ["컵"],
    "food": ["음식"],
    "packaged goods": ["포장 상품"],
    "box": ["상자"],
    "car": ["자동차"],
    "watch": ["시계"],
    "glasses": ["안경"],
    "bag": ["가방"],
}


def build_reverse_mapping(mapping: Dict[str, List[str]]) -> Dict[str, List[str]]:
    reverse: Dict[str, List[str]] = {}
    for english, korean_words in mapping.items():
        for korean in korean_words:
            reverse.setdefault(korean, [])
            if english not in reverse[korean]:
                reverse[korean].append(english)
    return reverse
