"""Flight controller: scheduling and completion."""

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
from app.services import FlightService
from app.views import (
    FlightCompleteRequest,
    FlightCreateRequest,
    FlightResponse,
    FlightUpdateRequest,
    StatusChangeRequest,
)

router = APIRouter(prefix="/flights", tags=["flights"])


@router.post("/", response_model=FlightResponse, status_code=status.HTTP_201_CREATED)
async def schedule_flight(
    payload: FlightCreateRequest,
    session: SessionDep,
    actor: ActorDep,
) -> FlightResponse:
    """Schedule a flight, generating a number when none is supplied"""
    flight = await FlightService(session).create(actor, **payload.model_dump())
    return FlightResponse.model_validate(flight)


@router.get("/", response_model=list[FlightResponse])
async def list_flights(
    session: SessionDep,
    _current_user: CurrentUserDep,
    include_deleted: IncludeDeletedQuery = False,
) -> list[FlightResponse]:
    flights = await FlightService(session).list(include_deleted=include_deleted)
    return [FlightResponse.model_validate(flight) for flight in flights]


@router.get("/{flight_id}", response_model=FlightResponse)
async def get_flight(
    flight_id: uuid.UUID,
    session: SessionDep,
    _current_user: CurrentUserDep,
) -> FlightResponse:
    flight = await FlightService(session).get(flight_id)
    return FlightResponse.model_validate(flight)


@router.put("/{flight_id}", response_model=FlightResponse)
async def update_flight(
    flight_id: uuid.UUID,
    payload: FlightUpdateRequest,
    session: SessionDep,
    actor: ActorDep,
) -> FlightResponse:
    flight = await FlightService(session).update(
        flight_id,
        actor,
        payload.version,
        **payload.model_dump(exclude_unset=True, exclude={"version"}),
    )
    return FlightResponse.model_validate(flight)


@router.post("/{flight_id}/complete", response_model=FlightResponse)
async def complete_flight(
    flight_id: uuid.UUID,
    payload: FlightCompleteRequest,
    session: SessionDep,
    actor: ActorDep,
) -> FlightResponse:
    """Close the flight and add its block time to the aircraft"""
    flight = await FlightService(session).complete(
        flight_id, actor, payload.version, payload.block_hours
    )
    return FlightResponse.model_validate(flight)


@router.patch("/{flight_id}/status", response_model=FlightResponse)
async def change_flight_status(
    flight_id: uuid.UUID,
    payload: StatusChangeRequest,
    session: SessionDep,
    actor: ActorDep,
) -> FlightResponse:
    flight = await FlightService(session).change_status(
        flight_id, actor, payload.version, payload.status, payload.reason
    )
    return FlightResponse.model_validate(flight)


@router.delete("/{flight_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_flight(
    flight_id: uuid.UUID,
    session: SessionDep,
    actor: ActorDep,
    version: VersionQuery = None,
) -> Response:
    await FlightService(session).delete(flight_id, actor, version)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{flight_id}/restore", response_model=FlightResponse)
async def restore_flight(
    flight_id: uuid.UUID,
    session: SessionDep,
    actor: ActorDep,
    version: VersionQuery = None,
) -> FlightResponse:
    flight = await FlightService(session).restore(flight_id, actor, version)
    return FlightResponse.model_validate(flight)
