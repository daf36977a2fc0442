"""Tweet service."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from mediashare.db.models import TweetModel
from mediashare.db.session import commit
from mediashare.errors import NotFoundError
from mediashare.logging import get_logger
from mediashare.services.identifiers import validate_reference
from mediashare.services.ownership import authorize
from mediashare.services.users import get_user

logger = get_logger(__name__)


def create_tweet(session: Session, author_ref: str | UUID, text: str) -> TweetModel:
    """Create a tweet.

    Raises:
        NotFoundError: If the author does not exist.
    """
    author = get_user(session, author_ref)

    tweet = TweetModel(author_id=author.id, text=text)
    session.add(tweet)
    commit(session)

    logger.info("tweet_created", tweet_id=str(tweet.id), author_id=str(author.id))
    return tweet


def list_user_tweets(session: Session, user_ref: str | UUID) -> list[TweetModel]:
    """List a user's tweets, newest first."""
    user_id = validate_reference(user_ref, field="user_id")
    result = session.execute(
        select(TweetModel)
        .where(TweetModel.author_id == user_id)
        .order_by(TweetModel.created_at.desc(), TweetModel.id.desc())
    )
    return list(result.scalars().all())


def get_tweet(session: Session, tweet_ref: str | UUID) -> TweetModel:
    tweet_id = validate_reference(tweet_ref, field="tweet_id")
    tweet = session.get(TweetModel, tweet_id)
    if tweet is None:
        raise NotFoundError("Tweet not found", field="tweet_id", value=str(tweet_id))
    return tweet


def update_tweet(
    session: Session, acting_subject: UUID, tweet_ref: str | UUID, text: str
) -> TweetModel:
    """Replace a tweet's text.

    Raises:
        ForbiddenError: If acting_subject is not the author.
    """
    tweet = get_tweet(session, tweet_ref)
    authorize(acting_subject, tweet.author_id, resource="tweet")

    tweet.text = text
    commit(session)

    logger.info("tweet_updated", tweet_id=str(tweet.id))
    return tweet


def delete_tweet(session: Session, acting_subject: UUID, tweet_ref: str | UUID) -> None:
    """Delete a tweet.

    Raises:
        ForbiddenError: If acting_subject is not the author.
    """
    tweet = get_tweet(session, tweet_ref)
    authorize(acting_subject, tweet.author_id, resource="tweet")

    session.delete(tweet)
    commit(session)

    logger.info("tweet_deleted", tweet_id=str(tweet.id))
