"""Video endpoints."""

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from mediashare.api.deps import CurrentSubjectDep, MediaStorageDep, SessionDep
from mediashare.api.errors import to_http_exception
from mediashare.api.schemas import MessageResponse, PageResponse, VideoResponse, page_response
from mediashare.errors import MediaShareError
from mediashare.services import videos as video_service
from mediashare.services.media import MediaStorageError

router = APIRouter(prefix="/videos", tags=["Videos"])


class PublishVideoRequest(BaseModel):
    """Request to publish a video."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(default="", max_length=5000)
    video_url: str = Field(..., min_length=1, max_length=2048, description="Source of the video file")
    thumbnail_url: str | None = Field(None, max_length=2048)
    duration: float = Field(default=0.0, ge=0)


class UpdateVideoRequest(BaseModel):
    """Request to update a video. Omitted or empty fields are left unchanged."""

    title: str | None = Field(None, max_length=255)
    description: str | None = Field(None, max_length=5000)
    thumbnail_url: str | None = Field(None, max_length=2048)


@router.get(
    "",
    response_model=PageResponse[VideoResponse],
    summary="List videos",
    description="Search, sort and page through videos.",
)
def list_videos(
    session: SessionDep,
    page: str | None = Query(None, description="1-based page number"),
    limit: str | None = Query(None, description="Page size"),
    query: str | None = Query(None, description="Search title and description"),
    sort_by: str | None = Query(None, alias="sortBy"),
    sort_type: str | None = Query(None, alias="sortType"),
    user_id: str | None = Query(None, alias="userId", description="Only this owner's videos"),
    is_published: bool | None = Query(None, alias="isPublished"),
) -> PageResponse[VideoResponse]:
    """List videos."""
    try:
        envelope = video_service.list_videos(
            session,
            page=page,
            limit=limit,
            query=query,
            sort_by=sort_by,
            sort_type=sort_type,
            user_id=user_id,
            published=is_published,
        )
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return page_response(envelope, VideoResponse.model_validate)


@router.post(
    "",
    response_model=VideoResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Publish video",
)
def publish_video(
    request: PublishVideoRequest,
    session: SessionDep,
    subject: CurrentSubjectDep,
    media: MediaStorageDep,
) -> VideoResponse:
    """Store the media and create the video record."""
    try:
        stored_video = media.store(request.video_url, "video")
        stored_thumbnail = (
            media.store(request.thumbnail_url, "thumbnail") if request.thumbnail_url else None
        )
    except MediaStorageError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e

    try:
        video = video_service.publish_video(
            session,
            owner_id=subject,
            title=request.title,
            description=request.description,
            media_ref=stored_video.reference,
            thumbnail_ref=stored_thumbnail.reference if stored_thumbnail else None,
            duration=request.duration,
        )
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return VideoResponse.model_validate(video)


@router.get("/{video_id}", response_model=VideoResponse, summary="Get video")
def get_video(video_id: str, session: SessionDep) -> VideoResponse:
    try:
        video = video_service.get_video(session, video_id)
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return VideoResponse.model_validate(video)


@router.patch("/{video_id}", response_model=VideoResponse, summary="Update video")
def update_video(
    video_id: str,
    request: UpdateVideoRequest,
    session: SessionDep,
    subject: CurrentSubjectDep,
) -> VideoResponse:
    """Update a video's title, description or thumbnail. Owner only."""
    try:
        video = video_service.update_video(
            session,
            subject,
            video_id,
            title=request.title,
            description=request.description,
            thumbnail_ref=request.thumbnail_url,
        )
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return VideoResponse.model_validate(video)


@router.delete("/{video_id}", response_model=MessageResponse, summary="Delete video")
def delete_video(video_id: str, session: SessionDep, subject: CurrentSubjectDep) -> MessageResponse:
    """Delete a video. Owner only."""
    try:
        video_service.delete_video(session, subject, video_id)
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return MessageResponse(message="Video deleted successfully")


@router.patch(
    "/{video_id}/publish",
    response_model=VideoResponse,
    summary="Toggle publish status",
)
def toggle_publish_status(
    video_id: str, session: SessionDep, subject: CurrentSubjectDep
) -> VideoResponse:
    """Flip a video between published and unpublished. Owner only."""
    try:
        video = video_service.toggle_publish_status(session, subject, video_id)
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return VideoResponse.model_validate(video)
