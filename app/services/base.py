"""Shared service layer: lifecycle operations wrapped around a repository."""

from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Generic, List, Optional, Type

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain import lifecycle
from app.domain.errors import (
    ConcurrencyConflict,
    DuplicateEntity,
    InvalidStateTransition,
    LifecycleError,
)
from app.domain.lifecycle import EntityStatus
from app.repositories.base import ModelT, SQLAlchemyRepository
from app.telemetry import record_concurrency_conflict, record_lifecycle_event

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger("app.audit")


class LifecycleService(Generic[ModelT]):
    """Create/read/update/status/delete/restore for one entity type.

    Subclasses set ``repository_class`` and may override the hooks
    ``normalise``, ``validate``, ``check_constraints`` and
    ``after_status_change``. Every mutation is one transaction: any
    :class:`LifecycleError` rolls the session back before propagating.
    """

    repository_class: Type[SQLAlchemyRepository[ModelT]]
    unique_fields: tuple[str, ...] = ()

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repository = self.repository_class(session)

    @property
    def entity_name(self) -> str:
        return self.repository.entity_name

    # Hooks

    def normalise(self, fields: dict[str, Any]) -> dict[str, Any]:
        return fields

    def validate(self, entity: ModelT) -> None:
        """Raise ValidationError when domain fields are missing or invalid."""

    async def check_constraints(self, entity: ModelT) -> None:
        with self.session.no_autoflush:
            for field in self.unique_fields:
                value = getattr(entity, field)
                if value is None:
                    continue
                existing = await self.repository.find_one_by(**{field: value})
                if existing is not None and existing.id != entity.id:
                    label = field.replace("_", " ")
                    raise DuplicateEntity(
                        f"{self.entity_name} with this {label} already exists",
                        field=field,
                    )

    async def after_status_change(
        self,
        entity: ModelT,
        previous: Optional[EntityStatus],
        reason: Optional[str],
        actor: str,
    ) -> None:
        """Called inside the transaction after the status of ``entity`` changed."""

    # Queries

    async def get(self, entity_id: uuid.UUID) -> ModelT:
        return await self.repository.get_or_raise(entity_id)

    async def list(self, include_deleted: bool = False, **filters: Any) -> List[ModelT]:
        return await self.repository.list(include_deleted=include_deleted, **filters)

    # Mutations

    async def create(self, actor: str, **fields: Any) -> ModelT:
        entity = self.repository.model(**self.normalise(dict(fields)))
        async with self._mutation("create"):
            lifecycle.initialize(entity, actor, validate=self.validate)
            await self.check_constraints(entity)
            await self.repository.add(entity)
        audit_logger.info(
            "%s %s created by %s", self.entity_name, entity.id, actor
        )
        return entity

    async def update(
        self,
        entity_id: uuid.UUID,
        actor: str,
        expected_version: int,
        **changes: Any,
    ) -> ModelT:
        entity = await self.get(entity_id)
        async with self._mutation("update"):
            self._ensure_not_deleted(entity)
            lifecycle.record_update(entity, actor, expected_version)
            for field, value in self.normalise(dict(changes)).items():
                setattr(entity, field, value)
            self.validate(entity)
            await self.check_constraints(entity)
            await self.repository.save(entity)
        audit_logger.info(
            "%s %s updated by %s (version %s)",
            self.entity_name,
            entity.id,
            actor,
            entity.version,
        )
        return entity

    async def change_status(
        self,
        entity_id: uuid.UUID,
        actor: str,
        expected_version: int,
        new_status: EntityStatus,
        reason: Optional[str] = None,
    ) -> ModelT:
        entity = await self.get(entity_id)
        async with self._mutation("status"):
            lifecycle.record_update(entity, actor, expected_version)
            previous = lifecycle.transition(entity, new_status)
            await self.after_status_change(entity, previous, reason, actor)
            await self.repository.save(entity)
        audit_logger.info(
            "%s %s moved %s -> %s by %s",
            self.entity_name,
            entity.id,
            previous.value,
            entity.status.value,
            actor,
        )
        return entity

    async def delete(
        self,
        entity_id: uuid.UUID,
        actor: str,
        expected_version: Optional[int] = None,
    ) -> ModelT:
        entity = await self.get(entity_id)
        async with self._mutation("delete"):
            if lifecycle.is_deleted(entity):
                raise InvalidStateTransition(
                    "Record is already deleted", entity_id=entity.id
                )
            previous = EntityStatus(entity.status)
            lifecycle.record_update(entity, actor, self._expected(entity, expected_version))
            lifecycle.soft_delete(entity, actor)
            await self.after_status_change(entity, previous, "Soft deleted", actor)
            await self.repository.save(entity)
        audit_logger.info("%s %s deleted by %s", self.entity_name, entity.id, actor)
        return entity

    async def restore(
        self,
        entity_id: uuid.UUID,
        actor: str,
        expected_version: Optional[int] = None,
    ) -> ModelT:
        entity = await self.get(entity_id)
        async with self._mutation("restore"):
            if not lifecycle.is_deleted(entity):
                raise InvalidStateTransition(
                    "Only deleted records can be restored", entity_id=entity.id
                )
            lifecycle.record_update(entity, actor, self._expected(entity, expected_version))
            lifecycle.restore(entity)
            await self.after_status_change(
                entity, EntityStatus.DELETED, "Restored", actor
            )
            await self.repository.save(entity)
        audit_logger.info("%s %s restored by %s", self.entity_name, entity.id, actor)
        return entity

    # Internals

    @staticmethod
    def _expected(entity: ModelT, expected_version: Optional[int]) -> int:
        # Without a caller version the ORM still guards the flush itself.
        return entity.version if expected_version is None else expected_version

    @staticmethod
    def _is_new_or_changed(entity: ModelT, attribute: str) -> bool:
        """True for unsaved records and for pending changes to ``attribute``."""

        state = inspect(entity)
        if not state.persistent:
            return True
        return state.attrs[attribute].history.has_changes()

    @staticmethod
    def _ensure_not_deleted(entity: ModelT) -> None:
        if lifecycle.is_deleted(entity):
            raise InvalidStateTransition(
                "Deleted records must be restored before they can be modified",
                entity_id=entity.id,
            )

    @asynccontextmanager
    async def _mutation(self, operation: str) -> AsyncIterator[None]:
        """Commit on success; roll back and re-raise lifecycle errors."""

        try:
            yield
        except LifecycleError as exc:
            await self.repository.rollback()
            if isinstance(exc, ConcurrencyConflict):
                record_concurrency_conflict(self.entity_name)
                logger.warning(
                    "%s on %s rejected: %s", operation, self.entity_name, exc.message
                )
            raise

        await self.repository.commit()
        record_lifecycle_event(self.entity_name, operation)


__all__ = ["LifecycleService"]
