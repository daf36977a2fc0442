"""Comment service."""

from uuid import UUID

from sqlalchemy.orm import Session

from mediashare.db.models import CommentModel
from mediashare.db.session import commit
from mediashare.domain.models import PaginationEnvelope
from mediashare.errors import NotFoundError
from mediashare.logging import get_logger
from mediashare.services.discovery import (
    COMMENT_LISTING,
    DiscoveryExecutor,
    DiscoveryQueryBuilder,
)
from mediashare.services.identifiers import validate_reference
from mediashare.services.ownership import authorize
from mediashare.services.videos import get_video

logger = get_logger(__name__)


def list_video_comments(
    session: Session,
    video_ref: str | UUID,
    page: int | str | None = None,
    limit: int | str | None = None,
) -> PaginationEnvelope[CommentModel]:
    """Page through a video's comments, newest first.

    Comments survive their video, so the video itself is not looked up.
    """
    video_id = validate_reference(video_ref, field="video_id")
    descriptor = DiscoveryQueryBuilder(COMMENT_LISTING).build(
        page=page,
        limit=limit,
        filters={"video": video_id},
    )
    return DiscoveryExecutor(session).execute(COMMENT_LISTING, descriptor)


def add_comment(
    session: Session, author_id: UUID, video_ref: str | UUID, text: str
) -> CommentModel:
    """Post a comment on an existing video."""
    video = get_video(session, video_ref)

    comment = CommentModel(video_id=video.id, author_id=author_id, text=text)
    session.add(comment)
    commit(session)

    logger.info("comment_added", comment_id=str(comment.id), video_id=str(video.id))
    return comment


def get_comment(session: Session, comment_ref: str | UUID) -> CommentModel:
    comment_id = validate_reference(comment_ref, field="comment_id")
    comment = session.get(CommentModel, comment_id)
    if comment is None:
        raise NotFoundError("Comment not found", field="comment_id", value=str(comment_id))
    return comment


def update_comment(
    session: Session, acting_subject: UUID, comment_ref: str | UUID, text: str
) -> CommentModel:
    comment = get_comment(session, comment_ref)
    authorize(acting_subject, comment.author_id, resource="comment")

    comment.text = text
    commit(session)

    logger.info("comment_updated", comment_id=str(comment.id))
    return comment


def delete_comment(session: Session, acting_subject: UUID, comment_ref: str | UUID) -> None:
    comment = get_comment(session, comment_ref)
    authorize(acting_subject, comment.author_id, resource="comment")

    session.delete(comment)
    commit(session)

    logger.info("comment_deleted", comment_id=str(comment.id))
