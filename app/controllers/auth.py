"""Authentication controller providing login endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from app.config.settings import settings
from app.controllers.dependencies import SessionDep
from app.services import UserService
from app.telemetry import increment_login
from app.utils import create_access_token
from app.views import LoginRequest, TokenResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
async def login(
    payload: LoginRequest,
    session: SessionDep,
) -> TokenResponse:
    """Validate credentials and issue a JWT access token."""

    user = await UserService(session).authenticate(payload.email, payload.password)
    if user is None:
        raise HTTPException(status_code=401, detail="Invalid email or password")

    access_token = create_access_token(subject=str(user.id), user=user)
    expires_in = settings.security.access_token_expires_minutes * 60

    increment_login()

    return TokenResponse(
        access_token=access_token,
        expires_in=expires_in,
        name=user.full_name,
    )
