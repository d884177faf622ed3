"""Field mapping state and final document projection."""

import itertools
import json
import logging

from formmapper.services.extraction.models import ExtractedAnswer, ExtractionResult
from formmapper.services.mapping.models import FieldRecord

logger = logging.getLogger(__name__)

FinalDocument = dict[str, ExtractedAnswer]


def _copy_value(value: ExtractedAnswer) -> ExtractedAnswer:
    """Copy list answers so records and documents never share them."""
    return list(value) if isinstance(value, list) else value


class MappingProjector:
    """Holds the field records of one session and derives the final document.

    Records live in an id-keyed arena so that identity for mutation stays
    independent of titles, which are not guaranteed unique after renaming.
    Ids come from a counter that never rewinds, so they are not reused within
    the projector's lifetime.
    """

    ID_PREFIX = "field-"

    def __init__(self):
        self._records: dict[str, FieldRecord] = {}
        self._ids = itertools.count()

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> list[FieldRecord]:
        """Current records in stored order."""
        return list(self._records.values())

    def get(self, field_id: str) -> FieldRecord | None:
        return self._records.get(field_id)

    def load_batch(self, result: ExtractionResult) -> None:
        """Replace all records with one per extracted answer, in result order."""
        records: dict[str, FieldRecord] = {}
        for title, value in result.answers.items():
            field_id = f"{self.ID_PREFIX}{next(self._ids)}"
            records[field_id] = FieldRecord(
                id=field_id,
                original_title=title,
                value=_copy_value(value),
                target_key=title,
            )
        self._records = records
        logger.debug(f"Loaded {len(records)} field records")

    def set_inclusion(self, field_id: str, included: bool) -> None:
        """Toggle whether a record is part of the final document."""
        record = self._records.get(field_id)
        if record is None:
            return
        record.included = included

    def set_target_key(self, field_id: str, key: str) -> None:
        """Rename a record's output key. Empty keys are allowed."""
        record = self._records.get(field_id)
        if record is None:
            return
        record.target_key = key

    def reset_target_keys(self) -> None:
        """Restore every target key to its extracted title."""
        for record in self._records.values():
            record.target_key = record.original_title

    def clear(self) -> None:
        self._records = {}

    def derive_document(self) -> FinalDocument:
        """
        Build the final key/value document from current state.

        Only included records are used. When two included records share a
        target key, the later one in stored order wins.
        """
        document: FinalDocument = {}
        for record in self._records.values():
            if record.included:
                document[record.target_key] = _copy_value(record.value)
        return document

    def render_document(self, indent: int = 2) -> str:
        """Render the derived document as indented JSON text."""
        return json.dumps(self.derive_document(), indent=indent, ensure_ascii=False)
