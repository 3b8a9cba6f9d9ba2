"""Domain services, one per entity type."""

from .base import LifecycleService
from .employees import EmployeeService
from .fleet import AircraftService, AircraftTypeService, MaintenanceScheduleService
from .flights import FlightService
from .users import UserService

__all__ = [
    "LifecycleService",
    "AircraftService",
    "AircraftTypeService",
    "MaintenanceScheduleService",
    "FlightService",
    "EmployeeService",
    "UserService",
]
