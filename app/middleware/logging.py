"""Structured logging middleware for FastAPI requests."""

from __future__ import annotations

import base64
import hashlib
import json
import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, ClassVar, Optional

from cryptography.fernet import Fernet
from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from app.config.settings import settings
from app.utils import AuthenticationError, decode_access_token

logger = logging.getLogger("app.middleware.structured")

COLOR_RESET = "\u001b[0m"
COLOR_GREEN = "\u001b[32m"
COLOR_CYAN = "\u001b[36m"
COLOR_YELLOW = "\u001b[33m"
COLOR_RED = "\u001b[31m"


@dataclass(slots=True)
class SessionContext:
    """Who issued the request, plus an opaque encrypted session token."""

    actor: str
    token: str
    fingerprint: str


class StructuredLoggingMiddleware(BaseHTTPMiddleware):
    """Emit one coloured log line per request, tagged with the acting user."""

    _cipher: ClassVar[Optional[Fernet]] = None

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start_time = time.perf_counter()
        log_payload: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc),
            "method": request.method,
            "url": str(request.url),
            "client_ip": request.client.host if request.client else None,
        }

        try:
            response = await call_next(request)
        except Exception as exc:
            log_payload["status_code"] = 500
            log_payload["duration_ms"] = self._elapsed_ms(start_time)
            log_payload["error"] = repr(exc)
            logger.exception(self._format_console_message(log_payload))
            raise

        log_payload["route"] = self._resolve_route(request)
        log_payload["status_code"] = response.status_code
        log_payload["duration_ms"] = self._elapsed_ms(start_time)

        session_context = self._build_session_context(request, log_payload["timestamp"])
        if session_context is not None:
            log_payload["actor"] = session_context.actor

        logger.info(self._format_console_message(log_payload))
        await self._persist_log(log_payload, session_context)
        return response

    @staticmethod
    def _elapsed_ms(start_time: float) -> float:
        return round((time.perf_counter() - start_time) * 1000, 2)

    @staticmethod
    def _resolve_route(request: Request) -> Optional[str]:
        route = request.scope.get("route")
        return getattr(route, "path", None)

    async def _persist_log(
        self,
        payload: dict[str, Any],
        session_context: SessionContext | None,
    ) -> None:
        """Store the request log entry when persistence is enabled."""

        if not settings.persist_request_logs:
            return

        if payload.get("status_code") == 307:
            logger.debug("Skipping persistence for redirect response")
            return

        from app.database import session_scope
        from app.models.log import RequestLog

        log_entry = RequestLog(
            timestamp=payload["timestamp"].replace(tzinfo=None),
            method=payload["method"],
            route=payload.get("route"),
            url=payload["url"][:2048],
            status_code=payload.get("status_code", 0),
            client_ip=payload.get("client_ip"),
            duration_ms=int(payload.get("duration_ms") or 0),
            actor=session_context.actor if session_context else None,
            session_token=session_context.token if session_context else None,
            session_fingerprint=session_context.fingerprint if session_context else None,
        )

        try:
            async with session_scope() as session:
                session.add(log_entry)
                await session.commit()
        except SQLAlchemyError:
            logger.exception("Failed to persist request log entry")

    def _build_session_context(
        self,
        request: Request,
        request_timestamp: datetime,
    ) -> SessionContext | None:
        """Resolve the acting user and encrypt the session descriptor."""

        actor: Optional[str] = None
        started_at = request_timestamp

        user = getattr(request.state, "user", None)
        if user is not None:
            actor = getattr(user, "email", None)

        token = self._extract_bearer_token(request)
        if token:
            try:
                token_payload = decode_access_token(token)
            except AuthenticationError:
                token_payload = None
            if token_payload is not None:
                actor = actor or token_payload.actor or token_payload.sub
                if token_payload.iat is not None:
                    started_at = token_payload.iat.astimezone(timezone.utc)

        if actor is None:
            return None

        identifier_source = f"{actor}:{int(started_at.timestamp())}"
        fingerprint = hashlib.sha256(identifier_source.encode("utf-8")).hexdigest()

        metadata = {
            "session": fingerprint,
            "actor": actor,
            "started_at": started_at.isoformat(),
        }
        if request.client:
            metadata["client_ip"] = request.client.host
        user_agent = request.headers.get("user-agent")
        if user_agent:
            metadata["user_agent"] = user_agent[:256]

        return SessionContext(
            actor=actor,
            token=self._encrypt_session_metadata(metadata),
            fingerprint=fingerprint,
        )

    @classmethod
    def _encrypt_session_metadata(cls, metadata: dict[str, Any]) -> str:
        cipher = cls._get_cipher()
        payload_bytes = json.dumps(metadata, default=str, separators=(",", ":")).encode(
            "utf-8"
        )
        return cipher.encrypt(payload_bytes).decode("utf-8")

    @classmethod
    def _get_cipher(cls) -> Fernet:
        """Return a cached Fernet cipher initialised from the JWT secret."""

        if cls._cipher is None:
            secret_bytes = (
                settings.security.jwt_secret_key.get_secret_value().encode("utf-8")
            )
            digest = hashlib.sha256(secret_bytes).digest()
            cls._cipher = Fernet(base64.urlsafe_b64encode(digest))
        return cls._cipher

    @staticmethod
    def _extract_bearer_token(request: Request) -> Optional[str]:
        auth_header = request.headers.get("authorization")
        if not auth_header:
            return None

        scheme, _, token = auth_header.partition(" ")
        if scheme.lower() != "bearer" or not token:
            return None

        return token

    @staticmethod
    def _format_console_message(payload: dict[str, Any]) -> str:
        """Return request metadata wrapped with ANSI color codes."""

        status = payload.get("status_code") or 0
        if 200 <= status < 300:
            color = COLOR_GREEN
        elif 400 <= status < 500:
            color = COLOR_YELLOW
        elif status >= 500:
            color = COLOR_RED
        else:
            color = COLOR_CYAN

        fields = [
            ("timestamp", payload["timestamp"].isoformat()),
            ("method", payload.get("method")),
            ("url", payload.get("url")),
            ("status", payload.get("status_code")),
            ("duration_ms", payload.get("duration_ms")),
            ("actor", payload.get("actor")),
        ]
        message = ", ".join(
            f"{name}={value if value is not None else '-'}" for name, value in fields
        )

        return f"{color}{message}{COLOR_RESET}"
