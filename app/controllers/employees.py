"""Employee controller."""

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
from app.services import EmployeeService
from app.views import (
    EmployeeCreateRequest,
    EmployeeResponse,
    EmployeeUpdateRequest,
    StatusChangeRequest,
)

router = APIRouter(prefix="/employees", tags=["employees"])


@router.post("/", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    payload: EmployeeCreateRequest,
    session: SessionDep,
    actor: ActorDep,
) -> EmployeeResponse:
    employee = await EmployeeService(session).create(actor, **payload.model_dump())
    return EmployeeResponse.model_validate(employee)


@router.get("/", response_model=list[EmployeeResponse])
async def list_employees(
    session: SessionDep,
    _current_user: CurrentUserDep,
    include_deleted: IncludeDeletedQuery = False,
) -> list[EmployeeResponse]:
    employees = await EmployeeService(session).list(include_deleted=include_deleted)
    return [EmployeeResponse.model_validate(employee) for employee in employees]


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: uuid.UUID,
    session: SessionDep,
    _current_user: CurrentUserDep,
) -> EmployeeResponse:
    employee = await EmployeeService(session).get(employee_id)
    return EmployeeResponse.model_validate(employee)


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: uuid.UUID,
    payload: EmployeeUpdateRequest,
    session: SessionDep,
    actor: ActorDep,
) -> EmployeeResponse:
    employee = await EmployeeService(session).update(
        employee_id,
        actor,
        payload.version,
        **payload.model_dump(exclude_unset=True, exclude={"version"}),
    )
    return EmployeeResponse.model_validate(employee)


@router.patch("/{employee_id}/status", response_model=EmployeeResponse)
async def change_employee_status(
    employee_id: uuid.UUID,
    payload: StatusChangeRequest,
    session: SessionDep,
    actor: ActorDep,
) -> EmployeeResponse:
    employee = await EmployeeService(session).change_status(
        employee_id, actor, payload.version, payload.status, payload.reason
    )
    return EmployeeResponse.model_validate(employee)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: uuid.UUID,
    session: SessionDep,
    actor: ActorDep,
    version: VersionQuery = None,
) -> Response:
    await EmployeeService(session).delete(employee_id, actor, version)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{employee_id}/restore", response_model=EmployeeResponse)
async def restore_employee(
    employee_id: uuid.UUID,
    session: SessionDep,
    actor: ActorDep,
    version: VersionQuery = None,
) -> EmployeeResponse:
    employee = await EmployeeService(session).restore(employee_id, actor, version)
    return EmployeeResponse.model_validate(employee)
