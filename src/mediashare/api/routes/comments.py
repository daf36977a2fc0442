"""Comment endpoints."""

from fastapi import APIRouter, Query, status
from pydantic import BaseModel, Field

from mediashare.api.deps import CurrentSubjectDep, SessionDep
from mediashare.api.errors import to_http_exception
from mediashare.api.schemas import CommentResponse, MessageResponse, PageResponse, page_response
from mediashare.errors import MediaShareError
from mediashare.services import comments as comment_service

router = APIRouter(prefix="/comments", tags=["Comments"])


class CommentRequest(BaseModel):
    """Request to add or edit a comment."""

    text: str = Field(..., min_length=1, max_length=5000)


@router.get(
    "/{video_id}",
    response_model=PageResponse[CommentResponse],
    summary="List video comments",
)
def list_video_comments(
    video_id: str,
    session: SessionDep,
    page: str | None = Query(None),
    limit: str | None = Query(None),
) -> PageResponse[CommentResponse]:
    """Page through a video's comments, newest first."""
    try:
        envelope = comment_service.list_video_comments(session, video_id, page=page, limit=limit)
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return page_response(envelope, CommentResponse.model_validate)


@router.post(
    "/{video_id}",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add comment",
)
def add_comment(
    video_id: str,
    request: CommentRequest,
    session: SessionDep,
    subject: CurrentSubjectDep,
) -> CommentResponse:
    try:
        comment = comment_service.add_comment(session, subject, video_id, request.text)
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return CommentResponse.model_validate(comment)


@router.patch("/c/{comment_id}", response_model=CommentResponse, summary="Update comment")
def update_comment(
    comment_id: str,
    request: CommentRequest,
    session: SessionDep,
    subject: CurrentSubjectDep,
) -> CommentResponse:
    """Edit a comment. Author only."""
    try:
        comment = comment_service.update_comment(session, subject, comment_id, request.text)
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return CommentResponse.model_validate(comment)


@router.delete("/c/{comment_id}", response_model=MessageResponse, summary="Delete comment")
def delete_comment(
    comment_id: str, session: SessionDep, subject: CurrentSubjectDep
) -> MessageResponse:
    """Delete a comment. Author only."""
    try:
        comment_service.delete_comment(session, subject, comment_id)
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return MessageResponse(message="Comment deleted successfully")
