"""Aircraft controller: fleet CRUD, status history and operational counters."""

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
from app.services import AircraftService, FlightService
from app.views import (
    AircraftCreateRequest,
    AircraftResetRequest,
    AircraftResponse,
    AircraftStatusHistoryResponse,
    AircraftUpdateRequest,
    FlightResponse,
    StatusChangeRequest,
)

router = APIRouter(prefix="/aircraft", tags=["aircraft"])


@router.post("/", response_model=AircraftResponse, status_code=status.HTTP_201_CREATED)
async def create_aircraft(
    payload: AircraftCreateRequest,
    session: SessionDep,
    actor: ActorDep,
) -> AircraftResponse:
    """Register a new aircraft"""
    aircraft = await AircraftService(session).create(actor, **payload.model_dump())
    return AircraftResponse.model_validate(aircraft)


@router.get("/", response_model=list[AircraftResponse])
async def list_aircraft(
    session: SessionDep,
    _current_user: CurrentUserDep,
    include_deleted: IncludeDeletedQuery = False,
) -> list[AircraftResponse]:
    """List aircraft; soft-deleted airframes only on request"""
    fleet = await AircraftService(session).list(include_deleted=include_deleted)
    return [AircraftResponse.model_validate(aircraft) for aircraft in fleet]


@router.get("/maintenance-due", response_model=list[AircraftResponse])
async def list_maintenance_due(
    session: SessionDep,
    _current_user: CurrentUserDep,
) -> list[AircraftResponse]:
    """List aircraft inside the post-interval maintenance window"""
    fleet = await AircraftService(session).maintenance_due()
    return [AircraftResponse.model_validate(aircraft) for aircraft in fleet]


@router.get("/{aircraft_id}", response_model=AircraftResponse)
async def get_aircraft(
    aircraft_id: uuid.UUID,
    session: SessionDep,
    _current_user: CurrentUserDep,
) -> AircraftResponse:
    """Get aircraft by ID, including soft-deleted ones"""
    aircraft = await AircraftService(session).get(aircraft_id)
    return AircraftResponse.model_validate(aircraft)


@router.get("/{aircraft_id}/status-history", response_model=list[AircraftStatusHistoryResponse])
async def get_aircraft_status_history(
    aircraft_id: uuid.UUID,
    session: SessionDep,
    _current_user: CurrentUserDep,
) -> list[AircraftStatusHistoryResponse]:
    history = await AircraftService(session).status_history(aircraft_id)
    return [AircraftStatusHistoryResponse.model_validate(entry) for entry in history]


@router.get("/{aircraft_id}/flights", response_model=list[FlightResponse])
async def list_aircraft_flights(
    aircraft_id: uuid.UUID,
    session: SessionDep,
    _current_user: CurrentUserDep,
    include_deleted: IncludeDeletedQuery = False,
) -> list[FlightResponse]:
    await AircraftService(session).get(aircraft_id)
    flights = await FlightService(session).list_for_aircraft(aircraft_id, include_deleted)
    return [FlightResponse.model_validate(flight) for flight in flights]


@router.put("/{aircraft_id}", response_model=AircraftResponse)
async def update_aircraft(
    aircraft_id: uuid.UUID,
    payload: AircraftUpdateRequest,
    session: SessionDep,
    actor: ActorDep,
) -> AircraftResponse:
    """Update an aircraft; stale versions are rejected with 409"""
    aircraft = await AircraftService(session).update(
        aircraft_id,
        actor,
        payload.version,
        **payload.model_dump(exclude_unset=True, exclude={"version"}),
    )
    return AircraftResponse.model_validate(aircraft)


@router.patch("/{aircraft_id}/status", response_model=AircraftResponse)
async def change_aircraft_status(
    aircraft_id: uuid.UUID,
    payload: StatusChangeRequest,
    session: SessionDep,
    actor: ActorDep,
) -> AircraftResponse:
    aircraft = await AircraftService(session).change_status(
        aircraft_id, actor, payload.version, payload.status, payload.reason
    )
    return AircraftResponse.model_validate(aircraft)


@router.post("/{aircraft_id}/reset", response_model=AircraftResponse)
async def reset_aircraft_operational_data(
    aircraft_id: uuid.UUID,
    payload: AircraftResetRequest,
    session: SessionDep,
    actor: ActorDep,
) -> AircraftResponse:
    """Zero hours and cycles after a major overhaul"""
    aircraft = await AircraftService(session).reset_operational_data(
        aircraft_id, actor, payload.version, payload.reason
    )
    return AircraftResponse.model_validate(aircraft)


@router.delete("/{aircraft_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_aircraft(
    aircraft_id: uuid.UUID,
    session: SessionDep,
    actor: ActorDep,
    version: VersionQuery = None,
) -> Response:
    """Soft-delete an aircraft"""
    await AircraftService(session).delete(aircraft_id, actor, version)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{aircraft_id}/restore", response_model=AircraftResponse)
async def restore_aircraft(
    aircraft_id: uuid.UUID,
    session: SessionDep,
    actor: ActorDep,
    version: VersionQuery = None,
) -> AircraftResponse:
    """Restore a soft-deleted aircraft"""
    aircraft = await AircraftService(session).restore(aircraft_id, actor, version)
    return AircraftResponse.model_validate(aircraft)
