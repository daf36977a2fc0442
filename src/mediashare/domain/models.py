"""Domain models - pure Python classes independent of database."""

import math
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar
from uuid import UUID

from mediashare.domain.enums import ObjectKind

T = TypeVar("T")


@dataclass(frozen=True)
class ToggleResult:
    """Resulting state of a relationship toggle."""

    active: bool
    subject_id: UUID
    object_id: UUID
    object_kind: ObjectKind


@dataclass
class PaginationEnvelope(Generic[T]):
    """One page of a listing query."""

    items: list[T]
    total_pages: int
    current_page: int
    total_items: int = 0
    limit: int = 0

    @staticmethod
    def page_count(total_items: int, limit: int) -> int:
        """Number of pages needed to show total_items at limit items per page."""
        if limit < 1:
            raise ValueError("limit must be positive")
        return math.ceil(total_items / limit)

    def map(self, func: Any) -> "PaginationEnvelope[Any]":
        """Return a copy with every item transformed by func."""
        return PaginationEnvelope(
            items=[func(item) for item in self.items],
            total_pages=self.total_pages,
            current_page=self.current_page,
            total_items=self.total_items,
            limit=self.limit,
        )


@dataclass
class StoredMedia:
    """Opaque reference to stored media, as returned by media storage."""

    reference: str
    storage_type: str  # "local" or "url"
    kind: str  # "video" or "thumbnail"
    file_size_bytes: int | None = None
    checksum: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
