"""Common FastAPI dependencies reused across controllers."""

from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import Depends, HTTPException, Query, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_session
from app.domain import lifecycle
from app.models.user import User as UserModel
from app.repositories import UserRepository
from app.utils import AuthenticationError, decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")
SessionDep = Annotated[AsyncSession, Depends(get_session)]
IncludeDeletedQuery = Annotated[
    bool,
    Query(description="Include soft-deleted records in the listing"),
]
VersionQuery = Annotated[
    int | None,
    Query(ge=0, description="Version the change was based on"),
]


async def get_current_user(
    request: Request,
    token: Annotated[str, Depends(oauth2_scheme)],
    session: SessionDep,
) -> UserModel:
    """Resolve and validate the user referenced by the bearer token."""

    try:
        payload = decode_access_token(token)
        user_id = uuid.UUID(payload.sub)
    except (AuthenticationError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        ) from None

    user = await UserRepository(session).get(user_id)
    if user is None or not lifecycle.is_active(user):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )

    request.state.user = user
    return user


CurrentUserDep = Annotated[UserModel, Depends(get_current_user)]


async def get_actor(current_user: CurrentUserDep) -> str:
    """Audit identity attributed to mutations made by the current user."""

    return current_user.email


ActorDep = Annotated[str, Depends(get_actor)]


__all__ = [
    "get_current_user",
    "get_actor",
    "oauth2_scheme",
    "SessionDep",
    "CurrentUserDep",
    "ActorDep",
    "IncludeDeletedQuery",
    "VersionQuery",
]
