"""Domain error taxonomy.

Every error is terminal for the request that raised it. Each one carries the
field and offending value (when there is one) so the HTTP layer can build a
client-facing message without parsing strings.
"""

from typing import Any


class MediaShareError(Exception):
    """Base class for all domain errors."""

    status_code: int = 500
    code: str = "internal_error"

    def __init__(self, message: str, field: str | None = None, value: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        """Serialize for an API error body."""
        return {"error": self.code, "message": self.message, "field": self.field}


class InvalidReferenceError(MediaShareError):
    """Raised when a string is not a well-formed entity identifier."""

    status_code = 400
    code = "invalid_reference"


class InvalidParameterError(MediaShareError):
    """Raised for malformed pagination, sort or filter input."""

    status_code = 400
    code = "invalid_parameter"


class NotFoundError(MediaShareError):
    """Raised when a referenced entity does not exist."""

    status_code = 404
    code = "not_found"


class ForbiddenError(MediaShareError):
    """Raised when the acting subject does not own the resource it mutates."""

    status_code = 403
    code = "forbidden"


class ConflictError(MediaShareError):
    """Raised when a store constraint violation escapes the toggle retry loop."""

    status_code = 409
    code = "conflict"


class StoreUnavailableError(MediaShareError):
    """Raised when the underlying store fails."""

    status_code = 503
    code = "store_unavailable"
