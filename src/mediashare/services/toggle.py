"""Race-free relationship toggling.

A toggle never reads before it writes. It first tries to insert the edge and
lets the store's unique constraint decide whether the edge already existed.
Only a rejected insert leads to a delete, addressed by the edge's own id:

    insert ok                 -> active
    insert rejected, delete   -> inactive
    insert rejected, no edge  -> another caller removed it, start over

A delete that finds no edge does not report "already inactive": the
vanished edge was removed by a concurrent caller, so this call starts over
with a fresh insert instead. Starting over keeps every successful call to
exactly one insert or one delete, so N concurrent toggles of the same
tuple leave the edge present exactly when N is odd. There is no in-process
lock; it would not cover a second service instance.
"""

from uuid import UUID

from mediashare.config import settings
from mediashare.domain.enums import ObjectKind
from mediashare.domain.models import ToggleResult
from mediashare.errors import ConflictError
from mediashare.logging import get_logger
from mediashare.services.identifiers import validate_reference
from mediashare.services.relationships import EdgeExistsError, RelationshipStore

logger = get_logger(__name__)


class ToggleEngine:
    """Toggles likes and subscriptions over a relationship store."""

    def __init__(self, store: RelationshipStore, max_attempts: int | None = None) -> None:
        self.store = store
        self.max_attempts = settings.toggle_max_attempts if max_attempts is None else max_attempts
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")

    def toggle(
        self,
        subject: str | UUID,
        object_ref: str | UUID,
        object_kind: ObjectKind,
    ) -> ToggleResult:
        """Create the edge if absent, remove it if present.

        Args:
            subject: Authenticated acting subject.
            object_ref: Reference to the liked entity or subscribed channel.
            object_kind: Kind of the object.

        Returns:
            ToggleResult with active=True if the edge now exists.

        Raises:
            InvalidReferenceError: If either reference is malformed.
            ConflictError: If the edge kept flipping under us for max_attempts rounds.
        """
        subject_id = validate_reference(subject, field="subject_id")
        object_id = validate_reference(object_ref, field=f"{object_kind.value}_id")

        for attempt in range(1, self.max_attempts + 1):
            try:
                self.store.insert_edge(subject_id, object_id, object_kind)
            except EdgeExistsError:
                pass
            else:
                return self._result(True, subject_id, object_id, object_kind, attempt)

            edge = self.store.find_edge(subject_id, object_id, object_kind)
            if edge is not None and self.store.delete_edge(edge.id):
                return self._result(False, subject_id, object_id, object_kind, attempt)

            logger.debug(
                "toggle_edge_vanished",
                object_kind=object_kind.value,
                object_id=str(object_id),
                attempt=attempt,
            )

        logger.error(
            "toggle_attempts_exhausted",
            object_kind=object_kind.value,
            object_id=str(object_id),
            attempts=self.max_attempts,
        )
        raise ConflictError(
            f"Could not settle {object_kind.value} relationship after {self.max_attempts} attempts",
            field=f"{object_kind.value}_id",
            value=str(object_id),
        )

    def _result(
        self,
        active: bool,
        subject_id: UUID,
        object_id: UUID,
        object_kind: ObjectKind,
        attempt: int,
    ) -> ToggleResult:
        logger.info(
            "edge_toggled",
            subject_id=str(subject_id),
            object_id=str(object_id),
            object_kind=object_kind.value,
            active=active,
            attempt=attempt,
        )
        return ToggleResult(
            active=active,
            subject_id=subject_id,
            object_id=object_id,
            object_kind=object_kind,
        )
