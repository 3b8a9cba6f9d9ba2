"""Pydantic schemas for flights."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.views.audit import AuditedResponse, VersionedRequest


def _naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Return a naive UTC datetime for persistence."""

    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class FlightCreateRequest(BaseModel):
    """Payload for scheduling a flight; the number is generated when omitted."""

    flight_number: Optional[str] = Field(None, min_length=2, max_length=10)
    aircraft_id: uuid.UUID
    origin: str = Field(..., max_length=4)
    destination: str = Field(..., max_length=4)
    departure_time: datetime
    arrival_time: datetime

    @field_validator("departure_time", "arrival_time")
    @classmethod
    def normalise_times(cls, value: datetime) -> datetime:
        return _naive_utc(value)


class FlightUpdateRequest(VersionedRequest):
    flight_number: Optional[str] = Field(None, min_length=2, max_length=10)
    aircraft_id: Optional[uuid.UUID] = None
    origin: Optional[str] = Field(None, max_length=4)
    destination: Optional[str] = Field(None, max_length=4)
    departure_time: Optional[datetime] = None
    arrival_time: Optional[datetime] = None

    @field_validator("departure_time", "arrival_time")
    @classmethod
    def normalise_times(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _naive_utc(value)


class FlightCompleteRequest(VersionedRequest):
    block_hours: float = Field(..., gt=0, le=30)


class FlightResponse(AuditedResponse):
    flight_number: str
    aircraft_id: uuid.UUID
    origin: str
    destination: str
    departure_time: datetime
    arrival_time: datetime
    completed_at: Optional[datetime] = None
    block_hours: Optional[float] = None
    is_completed: bool


__all__ = [
    "FlightCreateRequest",
    "FlightUpdateRequest",
    "FlightCompleteRequest",
    "FlightResponse",
]
