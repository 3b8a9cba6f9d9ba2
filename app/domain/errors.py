"""Error taxonomy shared by the lifecycle manager, repositories and services."""

from __future__ import annotations

from typing import Any


class LifecycleError(Exception):
    """Base class for recoverable errors surfaced to the immediate caller."""

    code = "lifecycle_error"

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context


class ValidationError(LifecycleError):
    """Required domain fields are missing or invalid."""

    code = "validation_error"


class InvalidStateTransition(LifecycleError):
    """The requested lifecycle transition is not allowed from the current status."""

    code = "invalid_state_transition"


class ConcurrencyConflict(LifecycleError):
    """The submitted version no longer matches the stored version."""

    code = "concurrency_conflict"

    def __init__(
        self,
        message: str = "Record was modified by another writer; reload and retry",
        *,
        expected_version: int | None = None,
        actual_version: int | None = None,
        **context: Any,
    ) -> None:
        super().__init__(message, **context)
        self.expected_version = expected_version
        self.actual_version = actual_version


class EntityNotFound(LifecycleError):
    """No record exists for the requested identifier."""

    code = "not_found"


class DuplicateEntity(LifecycleError):
    """A uniqueness constraint declared by the entity would be violated."""

    code = "duplicate_entity"


__all__ = [
    "LifecycleError",
    "ValidationError",
    "InvalidStateTransition",
    "ConcurrencyConflict",
    "EntityNotFound",
    "DuplicateEntity",
]
