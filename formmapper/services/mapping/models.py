"""Data models for field mapping."""

from dataclasses import dataclass

from formmapper.services.extraction.models import ExtractedAnswer


@dataclass
class FieldRecord:
    """One extracted question as it moves through the mapping step.

    ``value`` is fixed at creation; ``target_key`` and ``included`` are user
    editable.
    """

    id: str
    original_title: str
    value: ExtractedAnswer
    target_key: str
    included: bool = True

    @property
    def display_value(self) -> str:
        """Render the value for listing, lists as ``[a, b]``."""
        if isinstance(self.value, list):
            return f"[{', '.join(self.value)}]"
        return self.value
