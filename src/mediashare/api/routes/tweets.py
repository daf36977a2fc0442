"""Tweet endpoints."""

from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from mediashare.api.deps import CurrentSubjectDep, SessionDep
from mediashare.api.errors import to_http_exception
from mediashare.api.schemas import MessageResponse, TweetResponse
from mediashare.errors import MediaShareError
from mediashare.services import tweets as tweet_service

router = APIRouter(prefix="/tweets", tags=["Tweets"])


class TweetRequest(BaseModel):
    """Request to create or edit a tweet."""

    text: str = Field(..., min_length=1, max_length=280)


@router.post(
    "",
    response_model=TweetResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create tweet",
)
def create_tweet(request: TweetRequest, session: SessionDep, subject: CurrentSubjectDep) -> TweetResponse:
    try:
        tweet = tweet_service.create_tweet(session, subject, request.text)
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return TweetResponse.model_validate(tweet)


@router.get("/user/{user_id}", response_model=list[TweetResponse], summary="List user tweets")
def list_user_tweets(user_id: str, session: SessionDep) -> list[TweetResponse]:
    try:
        tweets = tweet_service.list_user_tweets(session, user_id)
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return [TweetResponse.model_validate(t) for t in tweets]


@router.patch("/{tweet_id}", response_model=TweetResponse, summary="Update tweet")
def update_tweet(
    tweet_id: str,
    request: TweetRequest,
    session: SessionDep,
    subject: CurrentSubjectDep,
) -> TweetResponse:
    """Edit a tweet. Author only."""
    try:
        tweet = tweet_service.update_tweet(session, subject, tweet_id, request.text)
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return TweetResponse.model_validate(tweet)


@router.delete("/{tweet_id}", response_model=MessageResponse, summary="Delete tweet")
def delete_tweet(tweet_id: str, session: SessionDep, subject: CurrentSubjectDep) -> MessageResponse:
    """Delete a tweet. Author only."""
    try:
        tweet_service.delete_tweet(session, subject, tweet_id)
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return MessageResponse(message="Tweet deleted successfully")
