"""Declarative base and the audit columns carried by every table."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Column, DateTime, Integer, String, Uuid
from sqlalchemy import Enum as SqlEnum
from sqlalchemy.orm import DeclarativeBase, declared_attr

from app.domain.lifecycle import EntityStatus


class Base(DeclarativeBase):
    """Base class for all models."""


def _next_version(current: int | None) -> int:
    return 0 if current is None else current + 1


class AuditColumns:
    """Column-only mixin: the audit fields plus optimistic locking.

    Behaviour lives in :mod:`app.domain.lifecycle`; SQLAlchemy bumps
    ``version`` on every flush and adds ``WHERE version = :old`` to the
    UPDATE, raising ``StaleDataError`` when another writer got there first.
    """

    id = Column(Uuid, primary_key=True)
    status = Column(
        SqlEnum(EntityStatus, native_enum=False, length=20),
        nullable=False,
        default=EntityStatus.ACTIVE,
        index=True,
    )
    created_at = Column(DateTime, nullable=False)
    created_by = Column(String(100), nullable=True)
    updated_at = Column(DateTime, nullable=True)
    updated_by = Column(String(100), nullable=True)
    deleted_at = Column(DateTime, nullable=True)
    deleted_by = Column(String(100), nullable=True)
    version = Column(Integer, nullable=False, default=0)

    @declared_attr  # type: ignore[arg-type]
    def __mapper_args__(cls) -> dict[str, Any]:  # noqa: N805
        return {
            "version_id_col": cls.version,
            "version_id_generator": _next_version,
        }

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}{{id={self.id}, status={self.status}, "
            f"created_at={self.created_at}}}"
        )


__all__ = ["Base", "AuditColumns"]
