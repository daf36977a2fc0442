"""Conversion of domain errors into HTTP errors."""

from fastapi import HTTPException

from mediashare.errors import MediaShareError


def to_http_exception(exc: MediaShareError) -> HTTPException:
    """Build the HTTPException a route raises for a domain error."""
    return HTTPException(status_code=exc.status_code, detail=exc.to_dict())
