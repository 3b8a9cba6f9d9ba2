"""SQLAlchemy models for the airline operations backend."""

from .base import AuditColumns, Base
from .aircraft import Aircraft, AircraftStatusHistory  # noqa: F401
from .aircraft_type import AircraftCategory, AircraftType  # noqa: F401
from .employee import Employee, EmployeePosition  # noqa: F401
from .flight import Flight  # noqa: F401
from .log import RequestLog  # noqa: F401
from .maintenance import MaintenanceSchedule, MaintenanceType  # noqa: F401
from .user import User  # noqa: F401

__all__ = [
    "Base",
    "AuditColumns",
    "Aircraft",
    "AircraftStatusHistory",
    "AircraftType",
    "AircraftCategory",
    "Employee",
    "EmployeePosition",
    "Flight",
    "MaintenanceSchedule",
    "MaintenanceType",
    "RequestLog",
    "User",
]
