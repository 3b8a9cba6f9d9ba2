"""Persisted HTTP request log."""

from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String

from app.domain.lifecycle import utcnow

from .base import Base


class RequestLog(Base):
    """One handled request, with the actor that issued it.

    Append-only infrastructure record; it does not carry the audit columns.
    """

    __tablename__ = "request_logs"

    id = Column(Integer, primary_key=True, index=True)
    timestamp = Column(DateTime, nullable=False, default=utcnow, index=True)
    method = Column(String(10), nullable=False)
    route = Column(String(256), nullable=True, index=True)
    url = Column(String(2048), nullable=False)
    status_code = Column(Integer, nullable=False)
    client_ip = Column(String(64), nullable=True)
    duration_ms = Column(Integer, nullable=True)
    actor = Column(String(100), nullable=True, index=True)
    session_token = Column(String(1024), nullable=True)
    session_fingerprint = Column(String(64), nullable=True, index=True)


__all__ = ["RequestLog"]
