"""Enums for tag values used throughout the application."""

from enum import StrEnum


class AnswerRule(StrEnum):
    """Detection rule that produced a question's answer."""

    FREE_TEXT = "free_text"
    SINGLE_CHOICE = "single_choice"
    MULTI_CHOICE = "multi_choice"
    DISPLAY_VALUE = "display_value"


class ExtractionErrorKind(StrEnum):
    """Terminal failure kinds of an extraction run."""

    EMPTY_INPUT = "empty_input"
    PARSE_FAILURE = "parse_failure"
