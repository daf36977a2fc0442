"""Ownership guard for authored resources."""

from uuid import UUID

from mediashare.errors import ForbiddenError
from mediashare.logging import get_logger

logger = get_logger(__name__)


def authorize(acting_subject: UUID, resource_owner: UUID, resource: str = "resource") -> None:
    """Allow a write only when the acting subject owns the resource.

    Raises:
        ForbiddenError: If acting_subject is not resource_owner.
    """
    if acting_subject != resource_owner:
        logger.warning(
            "ownership_check_failed",
            resource=resource,
            acting_subject=str(acting_subject),
        )
        raise ForbiddenError(f"Only the owner may modify this {resource}", field=resource)
