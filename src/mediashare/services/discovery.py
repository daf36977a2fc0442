"""Paginated discovery queries for videos and comments.

Listing parameters arrive as untrusted strings. The builder turns them into a
``QueryDescriptor`` (plain data, no store access) using a closed set of sort
and filter fields per listing target. The executor maps that descriptor onto
ORM columns, so caller input is never interpolated into a query.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import String, func, or_, select
from sqlalchemy.exc import DBAPIError
from sqlalchemy.orm import Session

from mediashare.config import settings
from mediashare.db.models import Base, CommentModel, VideoModel
from mediashare.domain.enums import SortDirection
from mediashare.domain.models import PaginationEnvelope
from mediashare.errors import InvalidParameterError, StoreUnavailableError
from mediashare.logging import get_logger
from mediashare.services.identifiers import parse_optional_reference

logger = get_logger(__name__)

DEFAULT_PAGE = 1


@dataclass(frozen=True)
class TextMatch:
    """Case-insensitive substring match of term against any of fields."""

    term: str
    fields: tuple[str, ...]


@dataclass(frozen=True)
class FieldEquals:
    """Exact match of a logical filter field."""

    field: str
    value: Any


@dataclass(frozen=True)
class QueryDescriptor:
    """Normalized, bounded listing query."""

    page: int
    skip: int
    limit: int
    filters: tuple[TextMatch | FieldEquals, ...]
    sort_field: str
    sort_direction: SortDirection


@dataclass(frozen=True)
class ListingTarget:
    """What a listing can sort and filter on, mapped to model attributes."""

    name: str
    model: type[Base]
    sort_fields: Mapping[str, str]
    text_fields: tuple[str, ...]
    filter_fields: Mapping[str, str] = field(default_factory=dict)
    default_sort: str = "created_at"

    def column(self, attribute: str) -> Any:
        return getattr(self.model, attribute)


VIDEO_LISTING = ListingTarget(
    name="video",
    model=VideoModel,
    sort_fields={
        "createdAt": "created_at",
        "created_at": "created_at",
        "updatedAt": "updated_at",
        "updated_at": "updated_at",
        "title": "title",
        "duration": "duration",
    },
    text_fields=("title", "description"),
    filter_fields={"owner": "owner_id", "published": "is_published"},
)

COMMENT_LISTING = ListingTarget(
    name="comment",
    model=CommentModel,
    sort_fields={"createdAt": "created_at", "created_at": "created_at"},
    text_fields=("text",),
    filter_fields={"owner": "author_id", "video": "video_id"},
)


def parse_positive_int(value: int | str | None, field_name: str, default: int) -> int:
    """Parse a positive integer parameter, rejecting rather than clamping bad input."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    if isinstance(value, bool):
        raise InvalidParameterError(f"{field_name} must be a positive integer", field_name, value)
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str) and value.strip().isdecimal():
        parsed = int(value.strip())
    else:
        raise InvalidParameterError(f"{field_name} must be a positive integer", field_name, value)

    if parsed <= 0:
        raise InvalidParameterError(f"{field_name} must be a positive integer", field_name, value)
    return parsed


class DiscoveryQueryBuilder:
    """Builds query descriptors for one listing target."""

    def __init__(
        self,
        target: ListingTarget,
        default_limit: int | None = None,
        max_limit: int | None = None,
    ) -> None:
        self.target = target
        self.default_limit = settings.default_page_size if default_limit is None else default_limit
        self.max_limit = settings.max_page_size if max_limit is None else max_limit
        if self.default_limit < 1 or self.max_limit < self.default_limit:
            raise ValueError(
                f"Invalid page sizes: default_limit={self.default_limit}, "
                f"max_limit={self.max_limit}"
            )

    def build(
        self,
        page: int | str | None = None,
        limit: int | str | None = None,
        query: str | None = None,
        sort_by: str | None = None,
        sort_type: str | None = None,
        owner_filter: str | None = None,
        filters: Mapping[str, Any] | None = None,
    ) -> QueryDescriptor:
        """Normalize raw listing parameters.

        Args:
            page: 1-based page number, default 1.
            limit: Page size, default settings.default_page_size.
            query: Free-text search over the target's text fields.
            sort_by: Sort field name from the target's closed set.
            sort_type: "desc" for descending, anything else ascending.
            owner_filter: Advisory owner reference, dropped if malformed.
            filters: Trusted exact-match filters keyed by logical field.

        Raises:
            InvalidParameterError: On malformed page, limit, sort field or filter.
        """
        page_number = parse_positive_int(page, "page", DEFAULT_PAGE)
        page_size = parse_positive_int(limit, "limit", self.default_limit)
        if page_size > self.max_limit:
            raise InvalidParameterError(
                f"limit must not exceed {self.max_limit}", field="limit", value=limit
            )

        criteria: list[TextMatch | FieldEquals] = []

        term = query.strip() if query else ""
        if term:
            criteria.append(TextMatch(term=term, fields=self.target.text_fields))

        owner_id = parse_optional_reference(owner_filter)
        if owner_id is not None and "owner" in self.target.filter_fields:
            criteria.append(FieldEquals(field="owner", value=owner_id))

        for name, value in (filters or {}).items():
            if name not in self.target.filter_fields:
                raise InvalidParameterError(
                    f"Cannot filter {self.target.name} listings by {name}", field=name
                )
            criteria.append(FieldEquals(field=name, value=value))

        if sort_by:
            sort_field = self.target.sort_fields.get(sort_by.strip())
            if sort_field is None:
                allowed = ", ".join(sorted(self.target.sort_fields))
                raise InvalidParameterError(
                    f"sortBy must be one of: {allowed}", field="sortBy", value=sort_by
                )
            direction = SortDirection.from_sort_type(sort_type)
        else:
            sort_field = self.target.default_sort
            direction = SortDirection.DESC

        return QueryDescriptor(
            page=page_number,
            skip=(page_number - 1) * page_size,
            limit=page_size,
            filters=tuple(criteria),
            sort_field=sort_field,
            sort_direction=direction,
        )


class DiscoveryExecutor:
    """Runs query descriptors against the database."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def execute(self, target: ListingTarget, descriptor: QueryDescriptor) -> PaginationEnvelope[Any]:
        """Fetch one page plus the total match count.

        current_page echoes the requested page, so a page past the end comes
        back empty with the real total_pages. Such a page is never sent to the
        store, whose offset may not hold an arbitrarily large skip.
        """
        criteria = [self._criterion(target, f) for f in descriptor.filters]

        sort_column = target.column(descriptor.sort_field)
        if isinstance(sort_column.type, String):
            sort_column = func.lower(sort_column)
        # Primary key as tie-break keeps equal sort values in a stable order
        tie_break = target.column("id")
        if descriptor.sort_direction == SortDirection.DESC:
            order_by = (sort_column.desc(), tie_break.desc())
        else:
            order_by = (sort_column.asc(), tie_break.asc())

        page_query = (
            select(target.model)
            .where(*criteria)
            .order_by(*order_by)
            .offset(descriptor.skip)
            .limit(descriptor.limit)
        )
        count_query = select(func.count()).select_from(target.model).where(*criteria)

        try:
            total = self.session.execute(count_query).scalar_one()
            if descriptor.skip < total:
                items = list(self.session.execute(page_query).scalars().all())
            else:
                items = []
        except DBAPIError as e:
            logger.error("discovery_query_failed", target=target.name, error=str(e))
            raise StoreUnavailableError(f"Could not list {target.name}s") from e

        logger.debug(
            "discovery_query_executed",
            target=target.name,
            page=descriptor.page,
            limit=descriptor.limit,
            total=total,
        )

        return PaginationEnvelope(
            items=items,
            total_pages=PaginationEnvelope.page_count(total, descriptor.limit),
            current_page=descriptor.page,
            total_items=total,
            limit=descriptor.limit,
        )

    def _criterion(self, target: ListingTarget, criterion: TextMatch | FieldEquals) -> Any:
        if isinstance(criterion, TextMatch):
            return or_(
                *(
                    target.column(name).icontains(criterion.term, autoescape=True)
                    for name in criterion.fields
                )
            )
        return target.column(target.filter_fields[criterion.field]) == criterion.value
