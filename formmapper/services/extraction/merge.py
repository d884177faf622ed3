"""Merge policy for answers that share a question title."""

from formmapper.enums import AnswerRule
from formmapper.services.extraction.models import DetectedAnswer, ExtractedAnswer


def merge_answer(
    existing: ExtractedAnswer | None,
    candidate: DetectedAnswer,
) -> ExtractedAnswer | None:
    """
    Decide which value to store for a title after seeing a new candidate.

    Later answers overwrite earlier ones, except that a display-value answer
    never replaces an answer already recorded for the same title.

    Args:
        existing: Value already stored for the title, or None if absent
        candidate: Answer detected in the current block

    Returns:
        The value to store, or None to leave the mapping untouched
    """
    if candidate.rule is AnswerRule.DISPLAY_VALUE and existing is not None:
        return None
    return candidate.value
