"""Like endpoints."""

from uuid import UUID

from fastapi import APIRouter
from sqlalchemy.orm import Session

from mediashare.api.deps import CurrentSubjectDep, SessionDep
from mediashare.api.errors import to_http_exception
from mediashare.api.schemas import ToggleResponse, VideoResponse
from mediashare.domain.enums import ObjectKind
from mediashare.errors import MediaShareError
from mediashare.services import likes as like_service

router = APIRouter(prefix="/likes", tags=["Likes"])


def _toggle(session: Session, subject: UUID, ref: str, kind: ObjectKind) -> ToggleResponse:
    try:
        result = like_service.toggle_like(session, subject, ref, kind)
    except MediaShareError as e:
        raise to_http_exception(e) from e
    return ToggleResponse.from_result(result)


@router.post("/toggle/v/{video_id}", response_model=ToggleResponse, summary="Toggle video like")
def toggle_video_like(video_id: str, session: SessionDep, subject: CurrentSubjectDep) -> ToggleResponse:
    return _toggle(session, subject, video_id, ObjectKind.VIDEO)


@router.post("/toggle/c/{comment_id}", response_model=ToggleResponse, summary="Toggle comment like")
def toggle_comment_like(
    comment_id: str, session: SessionDep, subject: CurrentSubjectDep
) -> ToggleResponse:
    return _toggle(session, subject, comment_id, ObjectKind.COMMENT)


@router.post("/toggle/t/{tweet_id}", response_model=ToggleResponse, summary="Toggle tweet like")
def toggle_tweet_like(tweet_id: str, session: SessionDep, subject: CurrentSubjectDep) -> ToggleResponse:
    return _toggle(session, subject, tweet_id, ObjectKind.TWEET)


@router.get("/videos", response_model=list[VideoResponse], summary="List liked videos")
def get_liked_videos(session: SessionDep, subject: CurrentSubjectDep) -> list[VideoResponse]:
    """Videos the current user likes, most recently liked first."""
    videos = like_service.get_liked_videos(session, subject)
    return [VideoResponse.model_validate(v) for v in videos]
