"""Field mapping services."""

from formmapper.services.mapping.models import FieldRecord
from formmapper.services.mapping.projector import FinalDocument, MappingProjector

__all__ = [
    "FieldRecord",
    "FinalDocument",
    "MappingProjector",
]
