"""Domain enumerations."""

from enum import StrEnum


class ObjectKind(StrEnum):
    """Kind of entity on the object side of a relationship edge."""

    VIDEO = "video"
    COMMENT = "comment"
    TWEET = "tweet"
    CHANNEL = "channel"


class SortDirection(StrEnum):
    """Ordering direction of a listing query."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_sort_type(cls, sort_type: str | None) -> "SortDirection":
        """Map a caller-supplied sort type: "desc" is descending, anything else ascending."""
        if sort_type is not None and sort_type.strip().lower() == "desc":
            return cls.DESC
        return cls.ASC
