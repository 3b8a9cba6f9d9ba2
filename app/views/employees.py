"""Pydantic schemas for employee records."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from app.models.employee import EmployeePosition
from app.views.audit import AuditedResponse, VersionedRequest


class EmployeeCreateRequest(BaseModel):
    employee_number: str = Field(..., min_length=1, max_length=20)
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    position: EmployeePosition
    hire_date: date


class EmployeeUpdateRequest(VersionedRequest):
    employee_number: Optional[str] = Field(None, min_length=1, max_length=20)
    first_name: Optional[str] = Field(None, min_length=1, max_length=50)
    last_name: Optional[str] = Field(None, min_length=1, max_length=50)
    email: Optional[EmailStr] = None
    position: Optional[EmployeePosition] = None
    hire_date: Optional[date] = None


class EmployeeResponse(AuditedResponse):
    employee_number: str
    first_name: str
    last_name: str
    full_name: str
    email: str
    position: EmployeePosition
    hire_date: date


__all__ = ["EmployeeCreateRequest", "EmployeeUpdateRequest", "EmployeeResponse"]
