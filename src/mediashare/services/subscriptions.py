"""Subscription service: channel subscriptions between users."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from mediashare.db.models import UserModel
from mediashare.domain.enums import ObjectKind
from mediashare.domain.models import ToggleResult
from mediashare.services.identifiers import validate_reference
from mediashare.services.relationships import SqlRelationshipStore
from mediashare.services.toggle import ToggleEngine
from mediashare.services.users import get_user


def toggle_subscription(
    session: Session, subscriber_ref: str | UUID, channel_ref: str | UUID
) -> ToggleResult:
    """Subscribe to a channel, or unsubscribe if already subscribed.

    Raises:
        InvalidReferenceError: If the channel reference is malformed.
        NotFoundError: If the subscriber or the channel does not exist.
    """
    channel_id = validate_reference(channel_ref, field="channel_id")
    subscriber = get_user(session, subscriber_ref, field="subscriber_id")
    channel = get_user(session, channel_id, field="channel_id")

    engine = ToggleEngine(SqlRelationshipStore(session))
    return engine.toggle(subscriber.id, channel.id, ObjectKind.CHANNEL)


def _users_in_order(session: Session, user_ids: list[UUID]) -> list[UserModel]:
    if not user_ids:
        return []
    users = session.execute(select(UserModel).where(UserModel.id.in_(user_ids))).scalars()
    by_id = {user.id: user for user in users}
    return [by_id[user_id] for user_id in user_ids if user_id in by_id]


def get_channel_subscribers(session: Session, channel_ref: str | UUID) -> list[UserModel]:
    """Users subscribed to a channel, most recent first."""
    channel_id = validate_reference(channel_ref, field="channel_id")
    store = SqlRelationshipStore(session)
    return _users_in_order(session, store.list_subject_ids(channel_id, ObjectKind.CHANNEL))


def get_subscribed_channels(session: Session, subscriber_ref: str | UUID) -> list[UserModel]:
    """Channels a user is subscribed to, most recent first."""
    subscriber_id = validate_reference(subscriber_ref, field="subscriber_id")
    store = SqlRelationshipStore(session)
    return _users_in_order(session, store.list_object_ids(subscriber_id, ObjectKind.CHANNEL))
