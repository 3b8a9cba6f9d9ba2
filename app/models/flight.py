"""SQLAlchemy model for scheduled flights."""

from __future__ import annotations

from sqlalchemy import Column, DateTime, Float, ForeignKey, String, Uuid

from app.models.base import AuditColumns, Base


class Flight(AuditColumns, Base):
    __tablename__ = "flights"

    flight_number = Column(String(10), nullable=False, unique=True, index=True)
    aircraft_id = Column(
        Uuid,
        ForeignKey("aircraft.id"),
        nullable=False,
        index=True,
    )
    origin = Column(String(4), nullable=False)
    destination = Column(String(4), nullable=False)
    departure_time = Column(DateTime, nullable=False, index=True)
    arrival_time = Column(DateTime, nullable=False)
    completed_at = Column(DateTime, nullable=True)
    block_hours = Column(Float, nullable=True)

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None


__all__ = ["Flight"]
