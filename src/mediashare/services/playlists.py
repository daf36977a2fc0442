"""Playlist service.

A playlist holds an ordered list of video ids. Adding appends, even when the
video is already listed; removing drops every occurrence.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from mediashare.db.models import PlaylistModel
from mediashare.db.session import commit
from mediashare.errors import NotFoundError
from mediashare.logging import get_logger
from mediashare.services.identifiers import validate_reference
from mediashare.services.ownership import authorize
from mediashare.services.videos import get_video

logger = get_logger(__name__)


def create_playlist(
    session: Session, owner_id: UUID, name: str, description: str = ""
) -> PlaylistModel:
    playlist = PlaylistModel(owner_id=owner_id, name=name, description=description, videos=[])
    session.add(playlist)
    commit(session)

    logger.info("playlist_created", playlist_id=str(playlist.id), owner_id=str(owner_id))
    return playlist


def list_user_playlists(session: Session, user_ref: str | UUID) -> list[PlaylistModel]:
    user_id = validate_reference(user_ref, field="user_id")
    result = session.execute(
        select(PlaylistModel)
        .where(PlaylistModel.owner_id == user_id)
        .order_by(PlaylistModel.created_at.desc(), PlaylistModel.id.desc())
    )
    return list(result.scalars().all())


def get_playlist(session: Session, playlist_ref: str | UUID) -> PlaylistModel:
    """Get a playlist by reference.

    Raises:
        InvalidReferenceError: If playlist_ref is malformed.
        NotFoundError: If no such playlist exists.
    """
    playlist_id = validate_reference(playlist_ref, field="playlist_id")
    playlist = session.get(PlaylistModel, playlist_id)
    if playlist is None:
        raise NotFoundError("Playlist not found", field="playlist_id", value=str(playlist_id))
    return playlist


def add_video_to_playlist(
    session: Session,
    acting_subject: UUID,
    playlist_ref: str | UUID,
    video_ref: str | UUID,
) -> PlaylistModel:
    """Append a video to the end of a playlist."""
    playlist = get_playlist(session, playlist_ref)
    authorize(acting_subject, playlist.owner_id, resource="playlist")
    video = get_video(session, video_ref)

    # Reassign so the JSON column is flagged dirty
    playlist.videos = [*playlist.videos, str(video.id)]
    commit(session)

    logger.info("playlist_video_added", playlist_id=str(playlist.id), video_id=str(video.id))
    return playlist


def remove_video_from_playlist(
    session: Session,
    acting_subject: UUID,
    playlist_ref: str | UUID,
    video_ref: str | UUID,
) -> PlaylistModel:
    """Remove every occurrence of a video from a playlist."""
    playlist = get_playlist(session, playlist_ref)
    authorize(acting_subject, playlist.owner_id, resource="playlist")
    video_id = str(validate_reference(video_ref, field="video_id"))

    playlist.videos = [entry for entry in playlist.videos if entry != video_id]
    commit(session)

    logger.info("playlist_video_removed", playlist_id=str(playlist.id), video_id=video_id)
    return playlist


def update_playlist(
    session: Session,
    acting_subject: UUID,
    playlist_ref: str | UUID,
    name: str | None = None,
    description: str | None = None,
) -> PlaylistModel:
    playlist = get_playlist(session, playlist_ref)
    authorize(acting_subject, playlist.owner_id, resource="playlist")

    if name is not None:
        playlist.name = name
    if description is not None:
        playlist.description = description
    commit(session)

    logger.info("playlist_updated", playlist_id=str(playlist.id))
    return playlist


def delete_playlist(session: Session, acting_subject: UUID, playlist_ref: str | UUID) -> None:
    playlist = get_playlist(session, playlist_ref)
    authorize(acting_subject, playlist.owner_id, resource="playlist")

    session.delete(playlist)
    commit(session)

    logger.info("playlist_deleted", playlist_id=str(playlist.id))
