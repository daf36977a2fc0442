"""FastAPI dependencies."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from mediashare.api.errors import to_http_exception
from mediashare.db.session import get_session
from mediashare.errors import InvalidReferenceError
from mediashare.services.identifiers import validate_reference
from mediashare.services.media import MediaStorage

# Database session dependency
SessionDep = Annotated[Session, Depends(get_session)]


def get_current_subject(x_user_id: Annotated[str | None, Header()] = None) -> UUID:
    """Resolve the authenticated subject.

    Authentication happens upstream; the gateway forwards the subject id in
    the X-User-Id header.
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    try:
        return validate_reference(x_user_id, field="X-User-Id")
    except InvalidReferenceError as e:
        raise to_http_exception(e) from e


CurrentSubjectDep = Annotated[UUID, Depends(get_current_subject)]


def get_media_storage() -> MediaStorage:
    """Get the media storage instance."""
    return MediaStorage()


MediaStorageDep = Annotated[MediaStorage, Depends(get_media_storage)]
