"""SQLAlchemy model for administrative users."""

from __future__ import annotations

from sqlalchemy import Column, String

from app.models.base import AuditColumns, Base


class User(AuditColumns, Base):
    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    password_hash = Column(String(256), nullable=False)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


__all__ = ["User"]
