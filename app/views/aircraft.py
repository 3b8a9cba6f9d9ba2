"""Pydantic schemas for aircraft types, aircraft and their history."""

from __future__ import annotations

import uuid
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from app.domain.lifecycle import EntityStatus
from app.models.aircraft_type import AircraftCategory
from app.views.audit import AuditedResponse, VersionedRequest


class AircraftTypeCreateRequest(BaseModel):
    """Payload for creating an aircraft type."""

    code: str = Field(..., min_length=1, max_length=20)
    name: str = Field(..., min_length=1, max_length=100)
    category: AircraftCategory = AircraftCategory.COMMERCIAL
    description: Optional[str] = None


class AircraftTypeUpdateRequest(VersionedRequest):
    """Payload for updating an aircraft type."""

    code: Optional[str] = Field(None, min_length=1, max_length=20)
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    category: Optional[AircraftCategory] = None
    description: Optional[str] = None


class AircraftTypeResponse(AuditedResponse):
    code: str
    name: str
    category: AircraftCategory
    description: Optional[str] = None


class AircraftCreateRequest(BaseModel):
    """Payload for registering an aircraft in the fleet."""

    manufacturer: str = Field(..., max_length=100)
    model: str = Field(..., max_length=100)
    registration_code: str = Field(..., max_length=10)
    serial_number: str = Field(..., max_length=50)
    manufacturing_date: Optional[date] = None
    acquisition_date: Optional[date] = None
    hours_in_use: int = 0
    cycles_completed: int = 0
    capacity: int
    aircraft_type_id: uuid.UUID


class AircraftUpdateRequest(VersionedRequest):
    """Payload for updating an aircraft; only supplied fields change."""

    manufacturer: Optional[str] = Field(None, max_length=100)
    model: Optional[str] = Field(None, max_length=100)
    registration_code: Optional[str] = Field(None, max_length=10)
    serial_number: Optional[str] = Field(None, max_length=50)
    manufacturing_date: Optional[date] = None
    acquisition_date: Optional[date] = None
    hours_in_use: Optional[int] = None
    cycles_completed: Optional[int] = None
    capacity: Optional[int] = None
    aircraft_type_id: Optional[uuid.UUID] = None


class AircraftResetRequest(VersionedRequest):
    reason: str = Field(..., min_length=1, max_length=500)


class AircraftResponse(AuditedResponse):
    manufacturer: str
    model: str
    registration_code: str
    serial_number: str
    manufacturing_date: Optional[date] = None
    acquisition_date: Optional[date] = None
    hours_in_use: int
    cycles_completed: int
    capacity: int
    aircraft_type_id: uuid.UUID
    display_name: str
    age_in_years: int
    is_operational: bool
    needs_maintenance: bool


class AircraftStatusHistoryResponse(AuditedResponse):
    aircraft_id: uuid.UUID
    previous_status: Optional[EntityStatus] = None
    new_status: EntityStatus
    reason: Optional[str] = None


__all__ = [
    "AircraftTypeCreateRequest",
    "AircraftTypeUpdateRequest",
    "AircraftTypeResponse",
    "AircraftCreateRequest",
    "AircraftUpdateRequest",
    "AircraftResetRequest",
    "AircraftResponse",
    "AircraftStatusHistoryResponse",
]
