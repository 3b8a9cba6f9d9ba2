"""SQLAlchemy model for scheduled aircraft maintenance."""

from __future__ import annotations

from enum import Enum

from sqlalchemy import Column, Date
from sqlalchemy import Enum as SqlEnum
from sqlalchemy import ForeignKey, Text, Uuid

from app.models.base import AuditColumns, Base


class MaintenanceType(str, Enum):
    """Kinds of maintenance events tracked per aircraft."""

    ROUTINE = "ROUTINE"
    A_CHECK = "A_CHECK"
    B_CHECK = "B_CHECK"
    C_CHECK = "C_CHECK"
    D_CHECK = "D_CHECK"
    UNSCHEDULED = "UNSCHEDULED"


class MaintenanceSchedule(AuditColumns, Base):
    __tablename__ = "maintenance_schedules"

    aircraft_id = Column(
        Uuid,
        ForeignKey("aircraft.id"),
        nullable=False,
        index=True,
    )
    maintenance_type = Column(
        SqlEnum(MaintenanceType, native_enum=False, length=20),
        nullable=False,
    )
    scheduled_date = Column(Date, nullable=False, index=True)
    completed_date = Column(Date, nullable=True)
    notes = Column(Text, nullable=True)

    @property
    def is_completed(self) -> bool:
        return self.completed_date is not None


__all__ = ["MaintenanceSchedule", "MaintenanceType"]
