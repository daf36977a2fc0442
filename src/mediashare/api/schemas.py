"""API request/response models shared between routers."""

from collections.abc import Callable
from datetime import datetime
from typing import Any, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from mediashare.domain.models import PaginationEnvelope, ToggleResult

ItemT = TypeVar("ItemT")


class UserResponse(BaseModel):
    """Public user (channel) details."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    full_name: str | None = None
    created_at: datetime


class VideoResponse(BaseModel):
    """Video response model."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    owner_id: UUID
    title: str
    description: str
    media_ref: str
    thumbnail_ref: str | None
    duration: float
    is_published: bool
    created_at: datetime
    updated_at: datetime | None = None


class CommentResponse(BaseModel):
    """Comment response model."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    video_id: UUID
    author_id: UUID
    text: str
    created_at: datetime
    updated_at: datetime | None = None


class TweetResponse(BaseModel):
    """Tweet response model."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    author_id: UUID
    text: str
    created_at: datetime
    updated_at: datetime | None = None


class PlaylistResponse(BaseModel):
    """Playlist response model."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    owner_id: UUID
    name: str
    description: str
    videos: list[UUID]
    created_at: datetime
    updated_at: datetime | None = None


class PageResponse(BaseModel, Generic[ItemT]):
    """One page of a listing."""

    items: list[ItemT]
    total_pages: int
    current_page: int
    total_items: int
    limit: int


class ToggleResponse(BaseModel):
    """Resulting state of a like or subscription toggle."""

    active: bool
    object_id: UUID
    object_kind: str

    @classmethod
    def from_result(cls, result: ToggleResult) -> "ToggleResponse":
        return cls(
            active=result.active,
            object_id=result.object_id,
            object_kind=result.object_kind.value,
        )


class MessageResponse(BaseModel):
    """Plain message response."""

    message: str


def page_response(
    envelope: PaginationEnvelope[Any], convert: Callable[[Any], ItemT]
) -> PageResponse[ItemT]:
    """Convert a pagination envelope of ORM rows into a response page."""
    converted = envelope.map(convert)
    return PageResponse(
        items=converted.items,
        total_pages=converted.total_pages,
        current_page=converted.current_page,
        total_items=converted.total_items,
        limit=converted.limit,
    )
