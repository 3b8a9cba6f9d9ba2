"""Entity lifecycle: creation, soft-delete, restore and stale-write detection.

Every persisted record carries the same audit fields (see
:class:`app.models.base.AuditColumns`). The functions below are the only
supported way to mutate them; services call them explicitly around their own
business logic instead of relying on ORM hooks. Nothing here performs I/O or
touches ``version`` after creation: the storage layer increments it on every
successful write.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Optional, Protocol

from app.domain.errors import ConcurrencyConflict, InvalidStateTransition, ValidationError

MAX_ACTOR_LENGTH = 100


class EntityStatus(str, Enum):
    """Lifecycle states shared by every entity."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    DELETED = "DELETED"
    PENDING = "PENDING"
    SUSPENDED = "SUSPENDED"


class Auditable(Protocol):
    """Structural type of any record carrying the audit fields."""

    id: Optional[uuid.UUID]
    status: Optional[EntityStatus]
    created_at: Optional[datetime]
    created_by: Optional[str]
    updated_at: Optional[datetime]
    updated_by: Optional[str]
    deleted_at: Optional[datetime]
    deleted_by: Optional[str]
    version: Optional[int]


def utcnow() -> datetime:
    """Return the current time as a naive UTC datetime."""

    return datetime.now(timezone.utc).replace(tzinfo=None)


def _require_actor(actor: Any) -> str:
    if not isinstance(actor, str) or not actor.strip():
        raise ValidationError("An actor is required to audit this change")
    actor = actor.strip()
    if len(actor) > MAX_ACTOR_LENGTH:
        raise ValidationError(
            f"Actor identifier cannot exceed {MAX_ACTOR_LENGTH} characters"
        )
    return actor


def _not_before(candidate: datetime, floor: Optional[datetime]) -> datetime:
    # Clock skew between writers must not break created <= updated <= deleted.
    if floor is not None and candidate < floor:
        return floor
    return candidate


def initialize(
    entity: Auditable,
    actor: str,
    *,
    validate: Callable[[Any], None] | None = None,
) -> Auditable:
    """Stamp a new record before its first persistence.

    ``validate`` is the calling service's domain validation; it is expected to
    raise :class:`ValidationError` for missing or malformed fields.
    """

    if entity.created_at is not None:
        raise InvalidStateTransition(
            "Record has already been initialized",
            entity_id=entity.id,
        )

    actor = _require_actor(actor)
    if validate is not None:
        validate(entity)

    entity.id = uuid.uuid4()
    entity.status = EntityStatus.ACTIVE
    entity.created_at = utcnow()
    entity.created_by = actor
    entity.updated_at = None
    entity.updated_by = None
    entity.deleted_at = None
    entity.deleted_by = None
    entity.version = 0
    return entity


def record_update(entity: Auditable, actor: str, expected_version: int) -> Auditable:
    """Stamp a mutation, refusing it when the caller's version is stale."""

    actor = _require_actor(actor)
    if expected_version is None or expected_version != entity.version:
        raise ConcurrencyConflict(
            expected_version=expected_version,
            actual_version=entity.version,
            entity_id=entity.id,
        )

    entity.updated_at = _not_before(utcnow(), entity.created_at)
    entity.updated_by = actor
    return entity


def soft_delete(entity: Auditable, actor: str) -> Auditable:
    """Mark a record as logically removed."""

    if is_deleted(entity):
        raise InvalidStateTransition(
            "Record is already deleted",
            entity_id=entity.id,
        )

    actor = _require_actor(actor)
    entity.status = EntityStatus.DELETED
    entity.deleted_at = _not_before(
        utcnow(), entity.updated_at or entity.created_at
    )
    entity.deleted_by = actor
    return entity


def restore(entity: Auditable) -> Auditable:
    """Bring a soft-deleted record back to ACTIVE."""

    if not is_deleted(entity):
        raise InvalidStateTransition(
            "Only deleted records can be restored",
            entity_id=entity.id,
        )

    entity.status = EntityStatus.ACTIVE
    entity.deleted_at = None
    entity.deleted_by = None
    return entity


def transition(entity: Auditable, new_status: EntityStatus) -> EntityStatus:
    """Apply a domain status change and return the previous status.

    DELETED is entered and left only through :func:`soft_delete` and
    :func:`restore`.
    """

    new_status = EntityStatus(new_status)
    if new_status is EntityStatus.DELETED:
        raise InvalidStateTransition("Use soft delete to delete a record")
    if is_deleted(entity):
        raise InvalidStateTransition(
            "Deleted records must be restored before changing status",
            entity_id=entity.id,
        )

    previous = EntityStatus(entity.status)
    entity.status = new_status
    return previous


def is_active(entity: Auditable) -> bool:
    return entity.status == EntityStatus.ACTIVE


def is_deleted(entity: Auditable) -> bool:
    return entity.status == EntityStatus.DELETED


__all__ = [
    "Auditable",
    "EntityStatus",
    "initialize",
    "record_update",
    "soft_delete",
    "restore",
    "transition",
    "is_active",
    "is_deleted",
    "utcnow",
]
