"""Aircraft type controller (fleet parameterization)."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Response, status

from app.controllers.dependencies import (
    ActorDep,
    CurrentUserDep,
    IncludeDeletedQuery,
    SessionDep,
    VersionQuery,
)
from app.services import AircraftTypeService
from app.views import (
    AircraftTypeCreateRequest,
    AircraftTypeResponse,
    AircraftTypeUpdateRequest,
    StatusChangeRequest,
)

router = APIRouter(prefix="/aircraft-types", tags=["aircraft-types"])


@router.post("/", response_model=AircraftTypeResponse, status_code=status.HTTP_201_CREATED)
async def create_aircraft_type(
    payload: AircraftTypeCreateRequest,
    session: SessionDep,
    actor: ActorDep,
) -> AircraftTypeResponse:
    aircraft_type = await AircraftTypeService(session).create(actor, **payload.model_dump())
    return AircraftTypeResponse.model_validate(aircraft_type)


@router.get("/", response_model=list[AircraftTypeResponse])
async def list_aircraft_types(
    session: SessionDep,
    _current_user: CurrentUserDep,
    include_deleted: IncludeDeletedQuery = False,
) -> list[AircraftTypeResponse]:
    types = await AircraftTypeService(session).list(include_deleted=include_deleted)
    return [AircraftTypeResponse.model_validate(item) for item in types]


@router.get("/{type_id}", response_model=AircraftTypeResponse)
async def get_aircraft_type(
    type_id: uuid.UUID,
    session: SessionDep,
    _current_user: CurrentUserDep,
) -> AircraftTypeResponse:
    aircraft_type = await AircraftTypeService(session).get(type_id)
    return AircraftTypeResponse.model_validate(aircraft_type)


@router.put("/{type_id}", response_model=AircraftTypeResponse)
async def update_aircraft_type(
    type_id: uuid.UUID,
    payload: AircraftTypeUpdateRequest,
    session: SessionDep,
    actor: ActorDep,
) -> AircraftTypeResponse:
    aircraft_type = await AircraftTypeService(session).update(
        type_id,
        actor,
        payload.version,
        **payload.model_dump(exclude_unset=True, exclude={"version"}),
    )
    return AircraftTypeResponse.model_validate(aircraft_type)


@router.patch("/{type_id}/status", response_model=AircraftTypeResponse)
async def change_aircraft_type_status(
    type_id: uuid.UUID,
    payload: StatusChangeRequest,
    session: SessionDep,
    actor: ActorDep,
) -> AircraftTypeResponse:
    aircraft_type = await AircraftTypeService(session).change_status(
        type_id, actor, payload.version, payload.status, payload.reason
    )
    return AircraftTypeResponse.model_validate(aircraft_type)


@router.delete("/{type_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_aircraft_type(
    type_id: uuid.UUID,
    session: SessionDep,
    actor: ActorDep,
    version: VersionQuery = None,
) -> Response:
    await AircraftTypeService(session).delete(type_id, actor, version)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{type_id}/restore", response_model=AircraftTypeResponse)
async def restore_aircraft_type(
    type_id: uuid.UUID,
    session: SessionDep,
    actor: ActorDep,
    version: VersionQuery = None,
) -> AircraftTypeResponse:
    aircraft_type = await AircraftTypeService(session).restore(type_id, actor, version)
    return AircraftTypeResponse.model_validate(aircraft_type)
