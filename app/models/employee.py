"""SQLAlchemy model for HR and crew records."""

from __future__ import annotations

from enum import Enum

from sqlalchemy import Column, Date
from sqlalchemy import Enum as SqlEnum
from sqlalchemy import String

from app.models.base import AuditColumns, Base


class EmployeePosition(str, Enum):
    """Crew and ground positions."""

    CAPTAIN = "CAPTAIN"
    FIRST_OFFICER = "FIRST_OFFICER"
    FLIGHT_ATTENDANT = "FLIGHT_ATTENDANT"
    MAINTENANCE_ENGINEER = "MAINTENANCE_ENGINEER"
    DISPATCHER = "DISPATCHER"
    GROUND_STAFF = "GROUND_STAFF"


class Employee(AuditColumns, Base):
    __tablename__ = "employees"

    employee_number = Column(String(20), nullable=False, unique=True, index=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    position = Column(
        SqlEnum(EmployeePosition, native_enum=False, length=30),
        nullable=False,
    )
    hire_date = Column(Date, nullable=False)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


__all__ = ["Employee", "EmployeePosition"]
