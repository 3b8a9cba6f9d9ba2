"""SQLAlchemy model for aircraft type parameterization."""

from __future__ import annotations

from enum import Enum

from sqlalchemy import Column
from sqlalchemy import Enum as SqlEnum
from sqlalchemy import String, Text

from app.models.base import AuditColumns, Base


class AircraftCategory(str, Enum):
    """Broad usage category of an aircraft type."""

    COMMERCIAL = "COMMERCIAL"
    CARGO = "CARGO"
    PRIVATE = "PRIVATE"
    MILITARY = "MILITARY"


class AircraftType(AuditColumns, Base):
    __tablename__ = "aircraft_types"

    code = Column(String(20), nullable=False, unique=True, index=True)
    name = Column(String(100), nullable=False)
    category = Column(
        SqlEnum(AircraftCategory, native_enum=False, length=20),
        nullable=False,
        default=AircraftCategory.COMMERCIAL,
    )
    description = Column(Text, nullable=True)


__all__ = ["AircraftType", "AircraftCategory"]
