"""Shared schema pieces for audited resources."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.domain.lifecycle import EntityStatus


class AuditedResponse(BaseModel):
    """Audit and locking fields returned with every record."""

    id: uuid.UUID
    status: EntityStatus
    created_at: datetime
    created_by: Optional[str] = None
    updated_at: Optional[datetime] = None
    updated_by: Optional[str] = None
    deleted_at: Optional[datetime] = None
    deleted_by: Optional[str] = None
    version: int

    model_config = ConfigDict(from_attributes=True)


class VersionedRequest(BaseModel):
    """Mutations must echo the version they were based on."""

    version: int = Field(..., ge=0, description="Version the change was based on")


class StatusChangeRequest(VersionedRequest):
    """Payload for a domain status transition."""

    status: EntityStatus
    reason: Optional[str] = Field(None, max_length=500)


__all__ = ["AuditedResponse", "VersionedRequest", "StatusChangeRequest"]
