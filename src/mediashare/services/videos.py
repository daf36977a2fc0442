"""Video service."""

from typing import Any
from uuid import UUID

from sqlalchemy.orm import Session

from mediashare.db.models import VideoModel
from mediashare.db.session import commit
from mediashare.domain.models import PaginationEnvelope
from mediashare.errors import NotFoundError
from mediashare.logging import get_logger
from mediashare.services.discovery import VIDEO_LISTING, DiscoveryExecutor, DiscoveryQueryBuilder
from mediashare.services.identifiers import validate_reference
from mediashare.services.ownership import authorize

logger = get_logger(__name__)


def list_videos(
    session: Session,
    page: int | str | None = None,
    limit: int | str | None = None,
    query: str | None = None,
    sort_by: str | None = None,
    sort_type: str | None = None,
    user_id: str | None = None,
    published: bool | None = None,
) -> PaginationEnvelope[VideoModel]:
    """Search and page through videos.

    Args:
        session: Database session.
        page: 1-based page number.
        limit: Page size.
        query: Case-insensitive search over title and description.
        sort_by: createdAt, updatedAt, title or duration.
        sort_type: "desc" for descending.
        user_id: Only videos owned by this user (ignored when malformed).
        published: Only published (True) or unpublished (False) videos.

    Raises:
        InvalidParameterError: On malformed paging or sort input.
    """
    filters: dict[str, Any] = {}
    if published is not None:
        filters["published"] = published

    descriptor = DiscoveryQueryBuilder(VIDEO_LISTING).build(
        page=page,
        limit=limit,
        query=query,
        sort_by=sort_by,
        sort_type=sort_type,
        owner_filter=user_id,
        filters=filters,
    )
    return DiscoveryExecutor(session).execute(VIDEO_LISTING, descriptor)


def publish_video(
    session: Session,
    owner_id: UUID,
    title: str,
    media_ref: str,
    description: str = "",
    thumbnail_ref: str | None = None,
    duration: float = 0.0,
) -> VideoModel:
    """Create a video owned by owner_id."""
    video = VideoModel(
        owner_id=owner_id,
        title=title,
        description=description,
        media_ref=media_ref,
        thumbnail_ref=thumbnail_ref,
        duration=duration,
    )
    session.add(video)
    commit(session)

    logger.info("video_published", video_id=str(video.id), owner_id=str(owner_id))
    return video


def get_video(session: Session, video_ref: str | UUID) -> VideoModel:
    """Get a video by reference.

    Raises:
        InvalidReferenceError: If video_ref is malformed.
        NotFoundError: If no such video exists.
    """
    video_id = validate_reference(video_ref, field="video_id")
    video = session.get(VideoModel, video_id)
    if video is None:
        raise NotFoundError("Video not found", field="video_id", value=str(video_id))
    return video


def update_video(
    session: Session,
    acting_subject: UUID,
    video_ref: str | UUID,
    title: str | None = None,
    description: str | None = None,
    thumbnail_ref: str | None = None,
) -> VideoModel:
    """Update a video's details. Empty values leave a field unchanged."""
    video = get_video(session, video_ref)
    authorize(acting_subject, video.owner_id, resource="video")

    if title:
        video.title = title
    if description:
        video.description = description
    if thumbnail_ref:
        video.thumbnail_ref = thumbnail_ref
    commit(session)

    logger.info("video_updated", video_id=str(video.id))
    return video


def delete_video(session: Session, acting_subject: UUID, video_ref: str | UUID) -> None:
    """Delete a video. Its comments are left in place."""
    video = get_video(session, video_ref)
    authorize(acting_subject, video.owner_id, resource="video")

    session.delete(video)
    commit(session)

    logger.info("video_deleted", video_id=str(video.id))


def toggle_publish_status(
    session: Session, acting_subject: UUID, video_ref: str | UUID
) -> VideoModel:
    """Flip a video between published and unpublished."""
    video = get_video(session, video_ref)
    authorize(acting_subject, video.owner_id, resource="video")

    video.is_published = not video.is_published
    commit(session)

    logger.info("video_publish_toggled", video_id=str(video.id), is_published=video.is_published)
    return video
