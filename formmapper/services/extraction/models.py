"""Data models for form answer extraction."""

from dataclasses import dataclass, field

from formmapper.enums import AnswerRule

# A single text scalar, or an ordered list for multi-select answers
ExtractedAnswer = str | list[str]


@dataclass(frozen=True)
class DetectedAnswer:
    """An answer tagged with the rule that detected it."""

    rule: AnswerRule
    value: ExtractedAnswer


@dataclass
class QuestionBlock:
    """A single titled question found in the source document."""

    title: str
    answer: DetectedAnswer | None
    index: int


@dataclass
class ExtractionResult:
    """Result of answer extraction from a saved form page.

    ``answers`` is ordered by first appearance of each title; duplicate titles
    resolve through ``merge_answer``.
    """

    answers: dict[str, ExtractedAnswer]
    blocks: list[QuestionBlock] = field(default_factory=list)
    metadata: dict = field(default_factory=dict)
