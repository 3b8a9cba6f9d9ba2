"""Pydantic schemas used as views in the MVC architecture."""

from .aircraft import (
    AircraftCreateRequest,
    AircraftResetRequest,
    AircraftResponse,
    AircraftStatusHistoryResponse,
    AircraftTypeCreateRequest,
    AircraftTypeResponse,
    AircraftTypeUpdateRequest,
    AircraftUpdateRequest,
)
from .audit import AuditedResponse, StatusChangeRequest, VersionedRequest
from .auth import LoginRequest, TokenResponse
from .common import ErrorResponse
from .employees import EmployeeCreateRequest, EmployeeResponse, EmployeeUpdateRequest
from .flights import (
    FlightCompleteRequest,
    FlightCreateRequest,
    FlightResponse,
    FlightUpdateRequest,
)
from .maintenance import (
    MaintenanceCompleteRequest,
    MaintenanceCreateRequest,
    MaintenanceResponse,
    MaintenanceUpdateRequest,
)
from .users import UserRegistrationRequest, UserResponse

__all__ = [
    "AuditedResponse",
    "VersionedRequest",
    "StatusChangeRequest",
    "AircraftTypeCreateRequest",
    "AircraftTypeUpdateRequest",
    "AircraftTypeResponse",
    "AircraftCreateRequest",
    "AircraftUpdateRequest",
    "AircraftResetRequest",
    "AircraftResponse",
    "AircraftStatusHistoryResponse",
    "MaintenanceCreateRequest",
    "MaintenanceUpdateRequest",
    "MaintenanceCompleteRequest",
    "MaintenanceResponse",
    "FlightCreateRequest",
    "FlightUpdateRequest",
    "FlightCompleteRequest",
    "FlightResponse",
    "EmployeeCreateRequest",
    "EmployeeUpdateRequest",
    "EmployeeResponse",
    "UserRegistrationRequest",
    "UserResponse",
    "LoginRequest",
    "TokenResponse",
    "ErrorResponse",
]
