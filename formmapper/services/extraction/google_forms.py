"""Google Forms answer extraction from saved page source."""

import logging
import re
from collections.abc import Callable

from bs4 import BeautifulSoup, Tag

from formmapper.config import settings
from formmapper.enums import AnswerRule
from formmapper.exceptions import EmptyInputError, ParseFailureError
from formmapper.services.extraction.merge import merge_answer
from formmapper.services.extraction.models import (
    DetectedAnswer,
    ExtractedAnswer,
    ExtractionResult,
    QuestionBlock,
)

logger = logging.getLogger(__name__)

# Trailing "*" the form renders after required question titles
REQUIRED_MARKER = re.compile(r"\s*\*$")


class GoogleFormsExtractor:
    """Extract question titles and answers from a rendered Google Form."""

    QUESTION_SELECTOR = '[role="listitem"]'
    TITLE_SELECTOR = ".M7eMe"
    TEXTBOX_SELECTOR = '[role="textbox"]'
    CHECKED_RADIO_SELECTOR = '[role="radio"][aria-checked="true"]'
    CHECKED_CHECKBOX_SELECTOR = '[role="checkbox"][aria-checked="true"]'
    DISPLAY_VALUE_SELECTOR = ".Mh5jwe.JqSWld"

    def __init__(self, parser: str | None = None):
        self.parser = parser or settings.html_parser

    def extract(self, html_content: str) -> ExtractionResult:
        """
        Parse saved form HTML and extract answers keyed by question title.

        Args:
            html_content: Page source copied from the form's view page

        Returns:
            ExtractionResult with ordered answers, titled blocks, and metadata

        Raises:
            EmptyInputError: If no HTML content was supplied
            ParseFailureError: If the HTML could not be parsed or traversed
        """
        if not html_content or not html_content.strip():
            raise EmptyInputError()

        try:
            soup = BeautifulSoup(html_content, self.parser)
            candidates = soup.select(self.QUESTION_SELECTOR)
            blocks = self._extract_blocks(candidates)
        except Exception as e:
            raise ParseFailureError() from e

        answers: dict[str, ExtractedAnswer] = {}
        for block in blocks:
            if block.answer is None:
                continue
            value = merge_answer(answers.get(block.title), block.answer)
            if value is not None:
                answers[block.title] = value

        logger.debug(
            f"Extracted {len(answers)} answers from {len(blocks)} titled blocks "
            f"({len(candidates)} candidates)"
        )

        return ExtractionResult(
            answers=answers,
            blocks=blocks,
            metadata={
                "source_type": "google_form",
                "candidate_count": len(candidates),
                "block_count": len(blocks),
                "answered_count": len(answers),
            },
        )

    def _extract_blocks(self, candidates: list[Tag]) -> list[QuestionBlock]:
        """Build a QuestionBlock for every candidate with a non-empty title."""
        blocks: list[QuestionBlock] = []
        for index, item in enumerate(candidates):
            title = self._extract_title(item)
            if not title:
                continue
            blocks.append(QuestionBlock(title=title, answer=self._detect_answer(item), index=index))
        return blocks

    def _extract_title(self, item: Tag) -> str:
        """Extract the question title, without the required marker."""
        title_tag = item.select_one(self.TITLE_SELECTOR)
        if title_tag is None:
            return ""
        title = title_tag.get_text().strip()
        return REQUIRED_MARKER.sub("", title, count=1).strip()

    def _detect_answer(self, item: Tag) -> DetectedAnswer | None:
        """Try each answer rule in priority order; the first match wins."""
        rules: tuple[Callable[[Tag], DetectedAnswer | None], ...] = (
            self._detect_free_text,
            self._detect_single_choice,
            self._detect_multi_choice,
            self._detect_display_value,
        )
        for rule in rules:
            answer = rule(item)
            if answer is not None:
                return answer
        return None

    def _detect_free_text(self, item: Tag) -> DetectedAnswer | None:
        textbox = item.select_one(self.TEXTBOX_SELECTOR)
        if textbox is None:
            return None
        return DetectedAnswer(AnswerRule.FREE_TEXT, textbox.get_text().strip())

    def _detect_single_choice(self, item: Tag) -> DetectedAnswer | None:
        radio = item.select_one(self.CHECKED_RADIO_SELECTOR)
        if radio is None:
            return None
        # An unlabeled selected option still counts as answered, with ""
        value = radio.get("data-value") or radio.get("aria-label") or ""
        return DetectedAnswer(AnswerRule.SINGLE_CHOICE, value.strip())

    def _detect_multi_choice(self, item: Tag) -> DetectedAnswer | None:
        values = []
        for checkbox in item.select(self.CHECKED_CHECKBOX_SELECTOR):
            value = (checkbox.get("data-value") or checkbox.get("aria-label") or "").strip()
            if value:
                values.append(value)

        if not values:
            return None
        if len(values) == 1:
            return DetectedAnswer(AnswerRule.MULTI_CHOICE, values[0])
        return DetectedAnswer(AnswerRule.MULTI_CHOICE, values)

    def _detect_display_value(self, item: Tag) -> DetectedAnswer | None:
        display = item.select_one(self.DISPLAY_VALUE_SELECTOR)
        if display is None:
            return None
        text = display.get_text().strip()
        if not text:
            return None
        return DetectedAnswer(AnswerRule.DISPLAY_VALUE, text)


def extract_form_data(html_content: str, parser: str | None = None) -> ExtractionResult:
    """Extract answers from saved form HTML with a fresh extractor."""
    return GoogleFormsExtractor(parser=parser).extract(html_content)
