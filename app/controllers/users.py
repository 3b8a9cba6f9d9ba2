"""User controller: registration and profile lookups."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, status

from app.controllers.dependencies import CurrentUserDep, SessionDep
from app.services import UserService
from app.views import UserRegistrationRequest, UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    payload: UserRegistrationRequest,
    session: SessionDep,
) -> UserResponse:
    user = await UserService(session).register(
        email=payload.email,
        first_name=payload.first_name,
        last_name=payload.last_name,
        password=payload.password,
    )
    return UserResponse.model_validate(user)


@router.get("/me", response_model=UserResponse)
async def get_current_user_profile(
    current_user: CurrentUserDep,
) -> UserResponse:
    return UserResponse.model_validate(current_user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: uuid.UUID,
    session: SessionDep,
    _current_user: CurrentUserDep,
) -> UserResponse:
    user = await UserService(session).get(user_id)
    return UserResponse.model_validate(user)


@router.get("/", response_model=list[UserResponse], include_in_schema=False)
async def list_users(
    session: SessionDep,
    _current_user: CurrentUserDep,
) -> list[UserResponse]:
    users = await UserService(session).list()
    return [UserResponse.model_validate(user) for user in users]
