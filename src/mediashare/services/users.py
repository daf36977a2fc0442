"""User (channel) service."""

from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from mediashare.db.models import UserModel
from mediashare.db.session import commit
from mediashare.errors import ConflictError, NotFoundError
from mediashare.logging import get_logger
from mediashare.services.identifiers import validate_reference

logger = get_logger(__name__)


def create_user(
    session: Session,
    username: str,
    email: str,
    full_name: str | None = None,
) -> UserModel:
    """Create a user.

    Raises:
        ConflictError: If the username or email is already taken.
    """
    existing = session.execute(
        select(UserModel).where(or_(UserModel.username == username, UserModel.email == email))
    ).scalar_one_or_none()
    if existing is not None:
        taken = "username" if existing.username == username else "email"
        raise ConflictError(f"A user with this {taken} already exists", field=taken)

    user = UserModel(username=username, email=email, full_name=full_name)
    session.add(user)
    commit(session)

    logger.info("user_created", user_id=str(user.id), username=username)
    return user


def get_user(session: Session, user_ref: str | UUID, field: str = "user_id") -> UserModel:
    """Get a user by reference.

    Raises:
        InvalidReferenceError: If user_ref is malformed.
        NotFoundError: If no such user exists.
    """
    user_id = validate_reference(user_ref, field=field)
    user = session.get(UserModel, user_id)
    if user is None:
        raise NotFoundError("User not found", field=field, value=str(user_id))
    return user
