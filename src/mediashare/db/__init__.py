"""Database layer."""

from mediashare.db.models import (
    Base,
    CommentModel,
    PlaylistModel,
    RelationshipEdgeModel,
    TweetModel,
    UserModel,
    VideoModel,
)
from mediashare.db.session import commit, get_session, get_session_context, init_db

__all__ = [
    "Base",
    "commit",
    "get_session",
    "get_session_context",
    "init_db",
    # Models
    "CommentModel",
    "PlaylistModel",
    "RelationshipEdgeModel",
    "TweetModel",
    "UserModel",
    "VideoModel",
]
