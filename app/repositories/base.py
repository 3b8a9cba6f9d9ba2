"""Persistence contract and its SQLAlchemy implementation."""

from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from app.domain.errors import (
    ConcurrencyConflict,
    DuplicateEntity,
    EntityNotFound,
    ValidationError,
)
from app.domain.lifecycle import EntityStatus
from app.models.base import AuditColumns

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=AuditColumns)

# Postgres reports unique violations as SQLSTATE 23505; sqlite only in the message.
UNIQUE_VIOLATION = "23505"


def _is_unique_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    if getattr(orig, "sqlstate", None) == UNIQUE_VIOLATION:
        return True
    return "unique" in str(orig).lower()


class RepositoryInterface(ABC, Generic[ModelT]):
    """Persistence contract for audited entities"""

    @abstractmethod
    async def add(self, entity: ModelT) -> ModelT:
        ...

    @abstractmethod
    async def get(self, entity_id: uuid.UUID) -> Optional[ModelT]:
        ...

    @abstractmethod
    async def list(self, include_deleted: bool = False, **filters: Any) -> List[ModelT]:
        ...

    @abstractmethod
    async def find_one_by(self, **filters: Any) -> Optional[ModelT]:
        ...

    @abstractmethod
    async def save(self, entity: ModelT) -> ModelT:
        ...

    @abstractmethod
    async def commit(self) -> None:
        ...

    @abstractmethod
    async def rollback(self) -> None:
        ...

    async def get_or_raise(self, entity_id: uuid.UUID) -> ModelT:
        entity = await self.get(entity_id)
        if entity is None:
            raise EntityNotFound(
                f"{self.entity_name} not found",
                entity_id=entity_id,
            )
        return entity

    @property
    def entity_name(self) -> str:
        return "Record"


class SQLAlchemyRepository(RepositoryInterface[ModelT]):
    """SQLAlchemy implementation shared by every entity type.

    Soft-deleted rows are skipped by :meth:`list` only; lookups by id or by
    unique fields still see them.
    """

    model: Type[ModelT]

    def __init__(self, session: AsyncSession):
        self.session = session

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    async def add(self, entity: ModelT) -> ModelT:
        self.session.add(entity)
        await self._flush(entity.id)
        return entity

    async def get(self, entity_id: uuid.UUID) -> Optional[ModelT]:
        result = await self.session.execute(
            select(self.model).where(self.model.id == entity_id)
        )
        return result.scalar_one_or_none()

    async def list(self, include_deleted: bool = False, **filters: Any) -> List[ModelT]:
        query = select(self.model).filter_by(**filters)
        if not include_deleted:
            query = query.where(self.model.status != EntityStatus.DELETED)
        result = await self.session.execute(query.order_by(self.model.created_at))
        return list(result.scalars().all())

    async def find_one_by(self, **filters: Any) -> Optional[ModelT]:
        result = await self.session.execute(
            select(self.model).filter_by(**filters).limit(1)
        )
        return result.scalar_one_or_none()

    async def save(self, entity: ModelT) -> ModelT:
        await self._flush(entity.id)
        return entity

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()

    async def _flush(self, entity_id: Optional[uuid.UUID]) -> None:
        try:
            await self.session.flush()
        except StaleDataError as exc:
            await self.session.rollback()
            logger.warning(
                "Stale write rejected for %s %s", self.entity_name, entity_id
            )
            raise ConcurrencyConflict(entity_id=entity_id) from exc
        except IntegrityError as exc:
            await self.session.rollback()
            if _is_unique_violation(exc):
                raise DuplicateEntity(
                    f"{self.entity_name} conflicts with an existing record",
                    entity_id=entity_id,
                ) from exc
            logger.warning(
                "Constraint violation for %s %s: %s", self.entity_name, entity_id, exc.orig
            )
            raise ValidationError(
                f"{self.entity_name} violates a database constraint",
                entity_id=entity_id,
            ) from exc


__all__ = ["RepositoryInterface", "SQLAlchemyRepository"]
