"""
Unit tests for task suggestion parsing.
"""
from findit.application.services.task_suggestion_parser import parse_task_line, parse_task_suggestions
from findit.domain.constants.priorities import TaskPriority


class TestParseTaskLine:
    def test_basic(self):
        suggestion = parse_task_line("[중요] 계약 만료일 확인")
        assert suggestion.task == "계약 만료일 확인"
        assert suggestion.priority == TaskPriority.HIGH

    def test_numbered_marker(self):
        suggestion = parse_task_line("1. [낮음] 영수증 스캔 보관")
        assert suggestion.task == "영수증 스캔 보관"
        assert suggestion.priority == TaskPriority.LOW

    def test_bullet_marker(self):
        assert parse_task_line("- [보통] 지출 내역 정리").priority == TaskPriority.MEDIUM
        assert parse_task_line("• [중요] 서명 확인").task == "서명 확인"

    def test_unknown_priority_defaults_to_medium(self):
        assert parse_task_line("[긴급] 바로 처리").priority == TaskPriority.MEDIUM

    def test_non_task_lines(self):
        assert parse_task_line("다음은 제안된 작업입니다:") is None
        assert parse_task_line("") is None
        assert parse_task_line("[중요 닫는 괄호 없음") is None

    def test_empty_title_skipped(self):
        assert parse_task_line("[중요]   ") is None


class TestParseTaskSuggestions:
    def test_keeps_order_and_skips_noise(self):
        content = (
            "다음 작업을 제안합니다:\n"
            "[중요] 결제 금액 확인\n"
            "\n"
            "2. [보통] 카드 명세서와 대조\n"
            "[낮음] 영수증 보관\n"
            "이상입니다."
        )
        suggestions = parse_task_suggestions(content)
        assert [s.task for s in suggestions] == ["결제 금액 확인", "카드 명세서와 대조", "영수증 보관"]
        assert [s.priority for s in suggestions] == [TaskPriority.HIGH, TaskPriority.MEDIUM, TaskPriority.LOW]

    def test_empty(self):
        assert parse_task_suggestions("") == []
        assert parse_task_suggestions(None) == []
