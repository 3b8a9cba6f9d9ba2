"""Repositories wrapping SQLAlchemy sessions."""

from .base import RepositoryInterface, SQLAlchemyRepository
from .entities import (
    AircraftRepository,
    AircraftStatusHistoryRepository,
    AircraftTypeRepository,
    EmployeeRepository,
    FlightRepository,
    MaintenanceScheduleRepository,
    UserRepository,
)

__all__ = [
    "RepositoryInterface",
    "SQLAlchemyRepository",
    "AircraftRepository",
    "AircraftStatusHistoryRepository",
    "AircraftTypeRepository",
    "EmployeeRepository",
    "FlightRepository",
    "MaintenanceScheduleRepository",
    "UserRepository",
]
