"""Pydantic schemas for user interactions."""

from __future__ import annotations

import re

from pydantic import AliasChoices, BaseModel, EmailStr, Field, field_validator

from app.views.audit import AuditedResponse


class UserRegistrationRequest(BaseModel):
    """Request model for user registration."""

    email: EmailStr
    first_name: str = Field(
        ...,
        min_length=1,
        max_length=50,
        validation_alias=AliasChoices("firstName", "first_name"),
    )
    last_name: str = Field(
        ...,
        min_length=1,
        max_length=50,
        validation_alias=AliasChoices("lastName", "last_name"),
    )
    password: str = Field(..., min_length=8, max_length=128)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not re.search(r"[A-Z]", value):
            raise ValueError("Password must contain at least one uppercase letter")
        if not re.search(r"[a-z]", value):
            raise ValueError("Password must contain at least one lowercase letter")
        if not re.search(r"\d", value):
            raise ValueError("Password must contain at least one digit")
        return value

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_names(cls, value: str) -> str:
        if not re.match(r"^[a-zA-Z\s\-']+$", value):
            raise ValueError(
                "Name can only contain letters, spaces, hyphens, and apostrophes"
            )
        return value.strip()


class UserResponse(AuditedResponse):
    """Serialized representation of a user account."""

    email: str
    first_name: str = Field(..., serialization_alias="firstName")
    last_name: str = Field(..., serialization_alias="lastName")


__all__ = ["UserRegistrationRequest", "UserResponse"]
