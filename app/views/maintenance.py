"""Pydantic schemas for maintenance schedules."""

from __future__ import annotations

import uuid
from datetime import date
from typing import Optional

from pydantic import BaseModel

from app.models.maintenance import MaintenanceType
from app.views.audit import AuditedResponse, VersionedRequest


class MaintenanceCreateRequest(BaseModel):
    aircraft_id: uuid.UUID
    maintenance_type: MaintenanceType
    scheduled_date: date
    notes: Optional[str] = None


class MaintenanceUpdateRequest(VersionedRequest):
    maintenance_type: Optional[MaintenanceType] = None
    scheduled_date: Optional[date] = None
    notes: Optional[str] = None


class MaintenanceCompleteRequest(VersionedRequest):
    completed_date: Optional[date] = None


class MaintenanceResponse(AuditedResponse):
    aircraft_id: uuid.UUID
    maintenance_type: MaintenanceType
    scheduled_date: date
    completed_date: Optional[date] = None
    notes: Optional[str] = None
    is_completed: bool


__all__ = [
    "MaintenanceCreateRequest",
    "MaintenanceUpdateRequest",
    "MaintenanceCompleteRequest",
    "MaintenanceResponse",
]
