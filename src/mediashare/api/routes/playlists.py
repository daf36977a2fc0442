"""Playlist endpoints."""

from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from mediashare.api.deps import CurrentSubjectDep, SessionDep
from mediashare.api.errors import to_http_exception
from mediashare.api.schemas import MessageResponse, PlaylistResponse
from mediashare.errors import MediaShareError
from mediashare.services import playlists as playlist_service

router = APIRouter(prefix="/playlists", tags=["Playlists"])


class CreatePlaylistRequest(BaseModel):
    """Request to create a playlist."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(default="", max_length=5000)


class UpdatePlaylistRequest(BaseModel):
    """Request to update a playlist."""

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=5000)


@router.post(
    "",
    response_model=PlaylistResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create playlist",
)
def create_playlist(
    request: CreatePlaylistRequest, session: SessionDep, subject: CurrentSubjectDep
) -> PlaylistResponse:
    try:
        playlist = playlist_service.create_playlist(
            session, subject, request.name, request.description
        )
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return PlaylistResponse.model_validate(playlist)


@router.get(
    "/user/{user_id}",
    response_model=list[PlaylistResponse],
    summary="List user playlists",
)
def list_user_playlists(user_id: str, session: SessionDep) -> list[PlaylistResponse]:
    try:
        playlists = playlist_service.list_user_playlists(session, user_id)
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return [PlaylistResponse.model_validate(p) for p in playlists]


@router.get("/{playlist_id}", response_model=PlaylistResponse, summary="Get playlist")
def get_playlist(playlist_id: str, session: SessionDep) -> PlaylistResponse:
    try:
        playlist = playlist_service.get_playlist(session, playlist_id)
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return PlaylistResponse.model_validate(playlist)


@router.patch("/{playlist_id}", response_model=PlaylistResponse, summary="Update playlist")
def update_playlist(
    playlist_id: str,
    request: UpdatePlaylistRequest,
    session: SessionDep,
    subject: CurrentSubjectDep,
) -> PlaylistResponse:
    """Rename or re-describe a playlist. Owner only."""
    try:
        playlist = playlist_service.update_playlist(
            session, subject, playlist_id, name=request.name, description=request.description
        )
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return PlaylistResponse.model_validate(playlist)


@router.delete("/{playlist_id}", response_model=MessageResponse, summary="Delete playlist")
def delete_playlist(
    playlist_id: str, session: SessionDep, subject: CurrentSubjectDep
) -> MessageResponse:
    """Delete a playlist. Owner only."""
    try:
        playlist_service.delete_playlist(session, subject, playlist_id)
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return MessageResponse(message="Playlist deleted successfully")


@router.patch(
    "/add/{video_id}/{playlist_id}",
    response_model=PlaylistResponse,
    summary="Add video to playlist",
)
def add_video_to_playlist(
    video_id: str,
    playlist_id: str,
    session: SessionDep,
    subject: CurrentSubjectDep,
) -> PlaylistResponse:
    """Append a video to a playlist. Owner only."""
    try:
        playlist = playlist_service.add_video_to_playlist(session, subject, playlist_id, video_id)
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return PlaylistResponse.model_validate(playlist)


@router.patch(
    "/remove/{video_id}/{playlist_id}",
    response_model=PlaylistResponse,
    summary="Remove video from playlist",
)
def remove_video_from_playlist(
    video_id: str,
    playlist_id: str,
    session: SessionDep,
    subject: CurrentSubjectDep,
) -> PlaylistResponse:
    """Remove every occurrence of a video from a playlist. Owner only."""
    try:
        playlist = playlist_service.remove_video_from_playlist(
            session, subject, playlist_id, video_id
        )
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return PlaylistResponse.model_validate(playlist)
