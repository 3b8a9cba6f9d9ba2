"""SQLAlchemy models for fleet aircraft and their status history."""

from __future__ import annotations

from sqlalchemy import Column, Date
from sqlalchemy import Enum as SqlEnum
from sqlalchemy import ForeignKey, Integer, String, Text, Uuid

from app.domain.errors import ValidationError
from app.domain.lifecycle import EntityStatus, is_active
from app.domain.services import AircraftDomainService
from app.models.base import AuditColumns, Base


class Aircraft(AuditColumns, Base):
    """An airframe in the fleet.

    Children (status history, maintenance, flights) point back through
    ``aircraft_id``; the aircraft itself holds no collections.
    """

    __tablename__ = "aircraft"

    manufacturer = Column(String(100), nullable=False, index=True)
    model = Column(String(100), nullable=False)
    registration_code = Column(String(10), nullable=False, unique=True, index=True)
    serial_number = Column(String(50), nullable=False, unique=True, index=True)
    manufacturing_date = Column(Date, nullable=True)
    acquisition_date = Column(Date, nullable=True)
    hours_in_use = Column(Integer, nullable=False, default=0)
    cycles_completed = Column(Integer, nullable=False, default=0)
    capacity = Column(Integer, nullable=False)
    aircraft_type_id = Column(
        Uuid,
        ForeignKey("aircraft_types.id"),
        nullable=False,
        index=True,
    )

    @property
    def is_operational(self) -> bool:
        return AircraftDomainService.is_operational(is_active(self), self.hours_in_use)

    @property
    def needs_maintenance(self) -> bool:
        return AircraftDomainService.needs_maintenance(self.hours_in_use)

    @property
    def age_in_years(self) -> int:
        return AircraftDomainService.age_in_years(self.manufacturing_date)

    @property
    def display_name(self) -> str:
        return AircraftDomainService.display_name(
            self.manufacturer, self.model, self.registration_code
        )

    def increment_hours(self, hours: int) -> None:
        if hours < 0:
            raise ValidationError("Hours cannot be negative")
        self.hours_in_use = (self.hours_in_use or 0) + hours

    def increment_cycles(self) -> None:
        self.cycles_completed = (self.cycles_completed or 0) + 1

    def reset_operational_data(self) -> None:
        self.hours_in_use = 0
        self.cycles_completed = 0


class AircraftStatusHistory(AuditColumns, Base):
    """Append-only record of an aircraft status change.

    ``created_at``/``created_by`` double as the change timestamp and author.
    """

    __tablename__ = "aircraft_status_history"

    aircraft_id = Column(
        Uuid,
        ForeignKey("aircraft.id"),
        nullable=False,
        index=True,
    )
    previous_status = Column(
        SqlEnum(EntityStatus, native_enum=False, length=20),
        nullable=True,
    )
    new_status = Column(
        SqlEnum(EntityStatus, native_enum=False, length=20),
        nullable=False,
    )
    reason = Column(Text, nullable=True)


__all__ = ["Aircraft", "AircraftStatusHistory"]
