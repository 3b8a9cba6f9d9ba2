"""Maintenance schedule controller."""

from __future__ import annotations

import uuid
from datetime import date
from typing import Annotated, Optional

from fastapi import APIRouter, Query, Response, status

from app.controllers.dependencies import (
    ActorDep,
    CurrentUserDep,
    IncludeDeletedQuery,
    SessionDep,
    VersionQuery,
)
from app.services import MaintenanceScheduleService
from app.views import (
    MaintenanceCompleteRequest,
    MaintenanceCreateRequest,
    MaintenanceResponse,
    MaintenanceUpdateRequest,
    StatusChangeRequest,
)

router = APIRouter(prefix="/maintenance", tags=["maintenance"])


@router.post("/", response_model=MaintenanceResponse, status_code=status.HTTP_201_CREATED)
async def schedule_maintenance(
    payload: MaintenanceCreateRequest,
    session: SessionDep,
    actor: ActorDep,
) -> MaintenanceResponse:
    schedule = await MaintenanceScheduleService(session).create(actor, **payload.model_dump())
    return MaintenanceResponse.model_validate(schedule)


@router.get("/", response_model=list[MaintenanceResponse])
async def list_maintenance(
    session: SessionDep,
    _current_user: CurrentUserDep,
    include_deleted: IncludeDeletedQuery = False,
    aircraft_id: Optional[uuid.UUID] = None,
) -> list[MaintenanceResponse]:
    filters = {"aircraft_id": aircraft_id} if aircraft_id else {}
    schedules = await MaintenanceScheduleService(session).list(
        include_deleted=include_deleted, **filters
    )
    return [MaintenanceResponse.model_validate(item) for item in schedules]


@router.get("/open", response_model=list[MaintenanceResponse])
async def list_open_maintenance(
    session: SessionDep,
    _current_user: CurrentUserDep,
    before: Annotated[Optional[date], Query(description="Scheduled on or before")] = None,
) -> list[MaintenanceResponse]:
    """Open work orders scheduled on or before ``before`` (today by default)"""
    schedules = await MaintenanceScheduleService(session).list_open(before)
    return [MaintenanceResponse.model_validate(item) for item in schedules]


@router.get("/{schedule_id}", response_model=MaintenanceResponse)
async def get_maintenance(
    schedule_id: uuid.UUID,
    session: SessionDep,
    _current_user: CurrentUserDep,
) -> MaintenanceResponse:
    schedule = await MaintenanceScheduleService(session).get(schedule_id)
    return MaintenanceResponse.model_validate(schedule)


@router.put("/{schedule_id}", response_model=MaintenanceResponse)
async def update_maintenance(
    schedule_id: uuid.UUID,
    payload: MaintenanceUpdateRequest,
    session: SessionDep,
    actor: ActorDep,
) -> MaintenanceResponse:
    schedule = await MaintenanceScheduleService(session).update(
        schedule_id,
        actor,
        payload.version,
        **payload.model_dump(exclude_unset=True, exclude={"version"}),
    )
    return MaintenanceResponse.model_validate(schedule)


@router.post("/{schedule_id}/complete", response_model=MaintenanceResponse)
async def complete_maintenance(
    schedule_id: uuid.UUID,
    payload: MaintenanceCompleteRequest,
    session: SessionDep,
    actor: ActorDep,
) -> MaintenanceResponse:
    schedule = await MaintenanceScheduleService(session).complete(
        schedule_id, actor, payload.version, payload.completed_date
    )
    return MaintenanceResponse.model_validate(schedule)


@router.patch("/{schedule_id}/status", response_model=MaintenanceResponse)
async def change_maintenance_status(
    schedule_id: uuid.UUID,
    payload: StatusChangeRequest,
    session: SessionDep,
    actor: ActorDep,
) -> MaintenanceResponse:
    schedule = await MaintenanceScheduleService(session).change_status(
        schedule_id, actor, payload.version, payload.status, payload.reason
    )
    return MaintenanceResponse.model_validate(schedule)


@router.delete("/{schedule_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_maintenance(
    schedule_id: uuid.UUID,
    session: SessionDep,
    actor: ActorDep,
    version: VersionQuery = None,
) -> Response:
    await MaintenanceScheduleService(session).delete(schedule_id, actor, version)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{schedule_id}/restore", response_model=MaintenanceResponse)
async def restore_maintenance(
    schedule_id: uuid.UUID,
    session: SessionDep,
    actor: ActorDep,
    version: VersionQuery = None,
) -> MaintenanceResponse:
    schedule = await MaintenanceScheduleService(session).restore(schedule_id, actor, version)
    return MaintenanceResponse.model_validate(schedule)
