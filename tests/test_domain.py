"""Tests for domain models."""

import pytest

from mediashare.domain.enums import ObjectKind, SortDirection
from mediashare.domain.models import PaginationEnvelope


def test_object_kind_enum() -> None:
    """Test ObjectKind enum values."""
    assert ObjectKind.VIDEO == "video"
    assert ObjectKind.COMMENT == "comment"
    assert ObjectKind.TWEET == "tweet"
    assert ObjectKind.CHANNEL == "channel"


@pytest.mark.parametrize(
    ("sort_type", "expected"),
    [
        ("desc", SortDirection.DESC),
        ("DESC", SortDirection.DESC),
        ("asc", SortDirection.ASC),
        ("descending", SortDirection.ASC),
        ("", SortDirection.ASC),
        (None, SortDirection.ASC),
    ],
)
def test_sort_direction_from_sort_type(sort_type: str | None, expected: SortDirection) -> None:
    assert SortDirection.from_sort_type(sort_type) == expected


@pytest.mark.parametrize(
    ("total", "limit", "pages"),
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 10, 3), (25, 1, 25), (3, 100, 1)],
)
def test_page_count(total: int, limit: int, pages: int) -> None:
    assert PaginationEnvelope.page_count(total, limit) == pages


def test_page_count_rejects_zero_limit() -> None:
    with pytest.raises(ValueError):
        PaginationEnvelope.page_count(5, 0)


def test_envelope_map_keeps_paging() -> None:
    envelope = PaginationEnvelope(items=[1, 2, 3], total_pages=4, current_page=2, total_items=12, limit=3)

    mapped = envelope.map(str)

    assert mapped.items == ["1", "2", "3"]
    assert mapped.total_pages == 4
    assert mapped.current_page == 2
    assert mapped.total_items == 12
    assert mapped.limit == 3
