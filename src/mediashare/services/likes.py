"""Like service: toggling likes on videos, comments and tweets."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from mediashare.db.models import VideoModel
from mediashare.domain.enums import ObjectKind
from mediashare.domain.models import ToggleResult
from mediashare.services.identifiers import validate_reference
from mediashare.services.relationships import SqlRelationshipStore
from mediashare.services.toggle import ToggleEngine
from mediashare.services.users import get_user

LIKEABLE_KINDS = (ObjectKind.VIDEO, ObjectKind.COMMENT, ObjectKind.TWEET)


def toggle_like(
    session: Session,
    subject_id: UUID,
    object_ref: str | UUID,
    object_kind: ObjectKind,
) -> ToggleResult:
    """Like the object if the subject has not yet, otherwise unlike it.

    Raises:
        InvalidReferenceError: If the object reference is malformed.
        NotFoundError: If the subject is not a known user.
    """
    if object_kind not in LIKEABLE_KINDS:
        raise ValueError(f"{object_kind.value} cannot be liked")
    object_id = validate_reference(object_ref, field=f"{object_kind.value}_id")
    subject = get_user(session, subject_id, field="subject_id")

    return ToggleEngine(SqlRelationshipStore(session)).toggle(subject.id, object_id, object_kind)


def get_liked_videos(session: Session, subject_id: UUID) -> list[VideoModel]:
    """Videos the subject likes, most recently liked first.

    Likes pointing at deleted videos are skipped.
    """
    store = SqlRelationshipStore(session)
    video_ids = store.list_object_ids(subject_id, ObjectKind.VIDEO)
    if not video_ids:
        return []

    videos = session.execute(select(VideoModel).where(VideoModel.id.in_(video_ids))).scalars()
    by_id = {video.id: video for video in videos}
    return [by_id[video_id] for video_id in video_ids if video_id in by_id]
