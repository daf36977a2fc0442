"""Relationship store adapter.

Persistence-facing edge operations used by the toggle engine. Each operation
is a single-row statement committed on its own, so an aborted request can
never leave a half-applied edge behind.
"""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.orm import Session

from mediashare.db.models import RelationshipEdgeModel
from mediashare.domain.enums import ObjectKind
from mediashare.errors import ConflictError, NotFoundError, StoreUnavailableError
from mediashare.logging import get_logger

logger = get_logger(__name__)

# SQLSTATEs for unique_violation and foreign_key_violation
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


class EdgeExistsError(Exception):
    """Raised by insert_edge when the (subject, object, kind) edge already exists."""

    pass


@dataclass(frozen=True)
class Edge:
    """A stored relationship edge."""

    id: UUID
    subject_id: UUID
    object_id: UUID
    object_kind: ObjectKind


class RelationshipStore(Protocol):
    """Operations the toggle engine needs from a store.

    insert_edge must be atomic and uniqueness-constrained on
    (subject_id, object_id, object_kind); delete_edge must be atomic and
    report whether it removed anything.
    """

    def find_edge(self, subject_id: UUID, object_id: UUID, object_kind: ObjectKind) -> Edge | None:
        ...

    def insert_edge(self, subject_id: UUID, object_id: UUID, object_kind: ObjectKind) -> Edge:
        ...

    def delete_edge(self, edge_id: UUID) -> bool:
        ...


def _sqlstate(exc: IntegrityError) -> str | None:
    # psycopg2 exposes pgcode, psycopg 3 exposes sqlstate
    for attr in ("pgcode", "sqlstate"):
        code = getattr(exc.orig, attr, None)
        if code:
            return code
    return None


def is_unique_violation(exc: IntegrityError) -> bool:
    """Tell a unique-constraint violation apart from other integrity errors."""
    code = _sqlstate(exc)
    if code is not None:
        return code == UNIQUE_VIOLATION
    message = str(exc.orig).lower()
    return "unique" in message or "duplicate key" in message


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    code = _sqlstate(exc)
    if code is not None:
        return code == FOREIGN_KEY_VIOLATION
    return "foreign key" in str(exc.orig).lower()


def _to_edge(model: RelationshipEdgeModel) -> Edge:
    return Edge(
        id=model.id,
        subject_id=model.subject_id,
        object_id=model.object_id,
        object_kind=ObjectKind(model.object_kind),
    )


class SqlRelationshipStore:
    """Relationship store backed by the relationship_edges table."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_edge(self, subject_id: UUID, object_id: UUID, object_kind: ObjectKind) -> Edge | None:
        try:
            model = self.session.execute(
                select(RelationshipEdgeModel).where(
                    RelationshipEdgeModel.subject_id == subject_id,
                    RelationshipEdgeModel.object_id == object_id,
                    RelationshipEdgeModel.object_kind == object_kind.value,
                )
            ).scalar_one_or_none()
        except DBAPIError as e:
            self.session.rollback()
            logger.error("edge_lookup_failed", error=str(e))
            raise StoreUnavailableError("Relationship store unavailable") from e

        return _to_edge(model) if model is not None else None

    def insert_edge(self, subject_id: UUID, object_id: UUID, object_kind: ObjectKind) -> Edge:
        model = RelationshipEdgeModel(
            subject_id=subject_id,
            object_id=object_id,
            object_kind=object_kind.value,
        )
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            if is_unique_violation(e):
                raise EdgeExistsError(str(object_id)) from e
            if is_foreign_key_violation(e):
                # subject_id is the only foreign key on the edge
                raise NotFoundError(
                    "User not found", field="subject_id", value=str(subject_id)
                ) from e
            logger.error("edge_insert_rejected", object_kind=object_kind.value, error=str(e))
            raise ConflictError(
                f"Edge to {object_kind.value} rejected by the store",
                field="object_id",
                value=str(object_id),
            ) from e
        except DBAPIError as e:
            self.session.rollback()
            logger.error("edge_insert_failed", error=str(e))
            raise StoreUnavailableError("Relationship store unavailable") from e

        return _to_edge(model)

    def delete_edge(self, edge_id: UUID) -> bool:
        try:
            result = self.session.execute(
                delete(RelationshipEdgeModel).where(RelationshipEdgeModel.id == edge_id)
            )
            self.session.commit()
        except DBAPIError as e:
            self.session.rollback()
            logger.error("edge_delete_failed", error=str(e))
            raise StoreUnavailableError("Relationship store unavailable") from e

        return result.rowcount > 0

    def list_object_ids(self, subject_id: UUID, object_kind: ObjectKind) -> list[UUID]:
        """Ids of every object of a kind the subject has an edge to, newest first."""
        rows = self.session.execute(
            select(RelationshipEdgeModel.object_id)
            .where(
                RelationshipEdgeModel.subject_id == subject_id,
                RelationshipEdgeModel.object_kind == object_kind.value,
            )
            .order_by(RelationshipEdgeModel.created_at.desc(), RelationshipEdgeModel.id)
        )
        return list(rows.scalars().all())

    def list_subject_ids(self, object_id: UUID, object_kind: ObjectKind) -> list[UUID]:
        """Ids of every subject with an edge to the object, newest first."""
        rows = self.session.execute(
            select(RelationshipEdgeModel.subject_id)
            .where(
                RelationshipEdgeModel.object_id == object_id,
                RelationshipEdgeModel.object_kind == object_kind.value,
            )
            .order_by(RelationshipEdgeModel.created_at.desc(), RelationshipEdgeModel.id)
        )
        return list(rows.scalars().all())
