"""Form answer extraction services."""

from formmapper.services.extraction.google_forms import GoogleFormsExtractor, extract_form_data
from formmapper.services.extraction.merge import merge_answer
from formmapper.services.extraction.models import (
    DetectedAnswer,
    ExtractedAnswer,
    ExtractionResult,
    QuestionBlock,
)

__all__ = [
    "DetectedAnswer",
    "ExtractedAnswer",
    "ExtractionResult",
    "GoogleFormsExtractor",
    "QuestionBlock",
    "extract_form_data",
    "merge_answer",
]
