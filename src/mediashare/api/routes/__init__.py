"""API route modules."""

from mediashare.api.routes import (
    comments,
    health,
    likes,
    playlists,
    subscriptions,
    tweets,
    users,
    videos,
)

__all__ = [
    "comments",
    "health",
    "likes",
    "playlists",
    "subscriptions",
    "tweets",
    "users",
    "videos",
]
