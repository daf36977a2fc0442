"""Domain models and enumerations."""

from mediashare.domain.enums import ObjectKind, SortDirection
from mediashare.domain.models import PaginationEnvelope, StoredMedia, ToggleResult

__all__ = [
    "ObjectKind",
    "PaginationEnvelope",
    "SortDirection",
    "StoredMedia",
    "ToggleResult",
]
