"""Tests for the enums module."""

from formmapper.enums import AnswerRule, ExtractionErrorKind
from formmapper.exceptions import EmptyInputError, ExtractionError, ParseFailureError


class TestAnswerRule:
    """Tests for AnswerRule enum."""

    def test_all_rules_defined(self):
        rules = {r.value for r in AnswerRule}
        assert rules == {"free_text", "single_choice", "multi_choice", "display_value"}

    def test_comparison_with_string(self):
        assert AnswerRule.FREE_TEXT == "free_text"
        assert "display_value" == AnswerRule.DISPLAY_VALUE


class TestExtractionErrorKind:
    """Tests for ExtractionErrorKind and the exceptions carrying it."""

    def test_values_are_strings(self):
        assert ExtractionErrorKind.EMPTY_INPUT == "empty_input"
        assert ExtractionErrorKind.PARSE_FAILURE == "parse_failure"

    def test_exceptions_carry_kind(self):
        assert EmptyInputError().kind == ExtractionErrorKind.EMPTY_INPUT
        assert ParseFailureError().kind == ExtractionErrorKind.PARSE_FAILURE
        assert issubclass(EmptyInputError, ExtractionError)
        assert issubclass(ParseFailureError, ExtractionError)

    def test_default_messages(self):
        assert str(EmptyInputError()) == "No HTML content provided"
        assert str(ParseFailureError()) == "Failed to parse HTML"
