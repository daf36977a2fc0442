"""Application services."""

from mediashare.services.discovery import (
    COMMENT_LISTING,
    VIDEO_LISTING,
    DiscoveryExecutor,
    DiscoveryQueryBuilder,
    ListingTarget,
    QueryDescriptor,
)
from mediashare.services.identifiers import parse_optional_reference, validate_reference
from mediashare.services.media import MediaStorage, MediaStorageError
from mediashare.services.ownership import authorize
from mediashare.services.relationships import (
    Edge,
    EdgeExistsError,
    RelationshipStore,
    SqlRelationshipStore,
)
from mediashare.services.toggle import ToggleEngine

__all__ = [
    "COMMENT_LISTING",
    "DiscoveryExecutor",
    "DiscoveryQueryBuilder",
    "Edge",
    "EdgeExistsError",
    "ListingTarget",
    "MediaStorage",
    "MediaStorageError",
    "QueryDescriptor",
    "RelationshipStore",
    "SqlRelationshipStore",
    "ToggleEngine",
    "VIDEO_LISTING",
    "authorize",
    "parse_optional_reference",
    "validate_reference",
]
