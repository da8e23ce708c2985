"""
Unit tests for keyword-based image type detection.
"""
from findit.application.services.image_type_detector import detect_image_type, score_image_types
from findit.domain.constants.image_types import ImageType


class TestDetectImageType:
    def test_empty_text_is_other(self):
        assert detect_image_type("") == ImageType.OTHER
        assert detect_image_type(None) == ImageType.OTHER
        assert detect_image_type("   ") == ImageType.OTHER

    def test_no_keywords_is_other(self):
        assert detect_image_type("hello world") == ImageType.OTHER

    def test_contract(self):
        assert detect_image_type("부동산 임대차 계약서\n계약기간: 2년\n서명") == ImageType.CONTRACT

    def test_payment(self):
        assert detect_image_type("영수증\n매장: 강남점\n결제 금액 12,000원") == ImageType.PAYMENT

    def test_document(self):
        assert detect_image_type("연구 보고서\n작성자: 홍길동\n요약") == ImageType.DOCUMENT

    def test_product(self):
        assert detect_image_type("영양정보 1회 제공량 30g 열량 120kcal 나트륨 단백질") == ImageType.PRODUCT

    def test_highest_score_wins(self):
        text = "계약서 영수증 결제 금액 지출"
        scores = score_image_types(text)
        assert scores[ImageType.PAYMENT] > scores[ImageType.CONTRACT]
        assert detect_image_type(text) == ImageType.PAYMENT

    def test_tie_goes_to_first_declared(self):
        # one contract keyword, one document keyword
        assert detect_image_type("서명 요약") == ImageType.CONTRACT

    def test_other_not_scored(self):
        assert ImageType.OTHER not in score_image_types("anything")
