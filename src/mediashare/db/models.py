"""SQLAlchemy ORM models."""

from datetime import datetime, timezone
from uuid import UUID as PyUUID
from uuid import uuid4

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    Float,
    ForeignKey,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship
from sqlalchemy.sql import func, true


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class UserModel(Base):
    """User ORM model. A user is also a channel others can subscribe to."""

    __tablename__ = "users"

    id: Mapped[PyUUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    username: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    full_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, server_default=func.now()
    )

    # Relationships
    videos: Mapped[list["VideoModel"]] = relationship("VideoModel", back_populates="owner")


class VideoModel(Base):
    """Video ORM model."""

    __tablename__ = "videos"

    id: Mapped[PyUUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    owner_id: Mapped[PyUUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")
    media_ref: Mapped[str] = mapped_column(String(2048), nullable=False)
    thumbnail_ref: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    duration: Mapped[float] = mapped_column(Float, nullable=False, default=0.0, server_default="0")
    is_published: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true(), index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, server_default=func.now(), index=True
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), onupdate=_utcnow
    )

    # Relationships
    owner: Mapped["UserModel"] = relationship("UserModel", back_populates="videos")


class CommentModel(Base):
    """Comment ORM model.

    No foreign key to videos: a comment outlives the video it was posted on.
    """

    __tablename__ = "comments"

    id: Mapped[PyUUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    video_id: Mapped[PyUUID] = mapped_column(Uuid, nullable=False, index=True)
    author_id: Mapped[PyUUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, server_default=func.now(), index=True
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), onupdate=_utcnow
    )


class TweetModel(Base):
    """Tweet ORM model."""

    __tablename__ = "tweets"

    id: Mapped[PyUUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    author_id: Mapped[PyUUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, server_default=func.now(), index=True
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), onupdate=_utcnow
    )

    # Relationships
    author: Mapped["UserModel"] = relationship("UserModel")


class PlaylistModel(Base):
    """Playlist ORM model.

    ``videos`` is an ordered list of video id strings and may hold duplicates.
    """

    __tablename__ = "playlists"

    id: Mapped[PyUUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    owner_id: Mapped[PyUUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")
    videos: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, server_default=func.now()
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), onupdate=_utcnow
    )


class RelationshipEdgeModel(Base):
    """Like or subscription edge between a subject and an object.

    The unique constraint is what makes toggling race-free: it is the only
    serialization point between concurrent toggles of the same tuple.
    """

    __tablename__ = "relationship_edges"

    id: Mapped[PyUUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    subject_id: Mapped[PyUUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    object_id: Mapped[PyUUID] = mapped_column(Uuid, nullable=False, index=True)
    object_kind: Mapped[str] = mapped_column(String(20), nullable=False)  # ObjectKind
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, server_default=func.now()
    )

    # Constraints
    __table_args__ = (
        UniqueConstraint("subject_id", "object_id", "object_kind", name="uq_relationship_edge"),
    )
