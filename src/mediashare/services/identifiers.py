"""Entity reference validation.

Caller-supplied identifiers are validated here before they are embedded in
any query, so malformed input never reaches the store.
"""

from uuid import UUID

from mediashare.errors import InvalidReferenceError


def validate_reference(ref: str | UUID | None, field: str = "id") -> UUID:
    """Parse a caller-supplied reference into an entity identifier.

    Args:
        ref: Raw reference (usually a path or query parameter).
        field: Name of the parameter, reported back on failure.

    Returns:
        The parsed UUID.

    Raises:
        InvalidReferenceError: If ref is not a well-formed identifier.
    """
    if isinstance(ref, UUID):
        return ref
    if not isinstance(ref, str) or not ref.strip():
        raise InvalidReferenceError(f"Missing {field}", field=field, value=ref)
    try:
        return UUID(ref.strip())
    except ValueError:
        raise InvalidReferenceError(f"Invalid {field}: {ref!r}", field=field, value=ref) from None


def parse_optional_reference(ref: str | UUID | None) -> UUID | None:
    """Parse an advisory reference, returning None when it is absent or malformed."""
    if ref is None:
        return None
    try:
        return validate_reference(ref)
    except InvalidReferenceError:
        return None
