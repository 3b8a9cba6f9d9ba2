"""Concrete repositories, one per entity type."""

from __future__ import annotations

import uuid
from datetime import date
from typing import List

from sqlalchemy import select

from app.domain.lifecycle import EntityStatus
from app.domain.services import MAINTENANCE_INTERVAL_HOURS, MAINTENANCE_WINDOW_HOURS
from app.models import (
    Aircraft,
    AircraftStatusHistory,
    AircraftType,
    Employee,
    Flight,
    MaintenanceSchedule,
    User,
)
from app.repositories.base import SQLAlchemyRepository


class AircraftTypeRepository(SQLAlchemyRepository[AircraftType]):
    model = AircraftType


class AircraftRepository(SQLAlchemyRepository[Aircraft]):
    model = Aircraft

    async def list_maintenance_due(self) -> List[Aircraft]:
        """Non-deleted aircraft inside the post-interval maintenance window."""

        result = await self.session.execute(
            select(Aircraft)
            .where(
                Aircraft.status != EntityStatus.DELETED,
                Aircraft.hours_in_use >= MAINTENANCE_INTERVAL_HOURS,
                Aircraft.hours_in_use % MAINTENANCE_INTERVAL_HOURS
                < MAINTENANCE_WINDOW_HOURS,
            )
            .order_by(Aircraft.registration_code)
        )
        return list(result.scalars().all())


class AircraftStatusHistoryRepository(SQLAlchemyRepository[AircraftStatusHistory]):
    model = AircraftStatusHistory

    async def list_for_aircraft(self, aircraft_id: uuid.UUID) -> List[AircraftStatusHistory]:
        result = await self.session.execute(
            select(AircraftStatusHistory)
            .where(AircraftStatusHistory.aircraft_id == aircraft_id)
            .order_by(AircraftStatusHistory.created_at.desc())
        )
        return list(result.scalars().all())


class MaintenanceScheduleRepository(SQLAlchemyRepository[MaintenanceSchedule]):
    model = MaintenanceSchedule

    async def list_open_before(self, cutoff: date) -> List[MaintenanceSchedule]:
        result = await self.session.execute(
            select(MaintenanceSchedule)
            .where(
                MaintenanceSchedule.status != EntityStatus.DELETED,
                MaintenanceSchedule.completed_date.is_(None),
                MaintenanceSchedule.scheduled_date <= cutoff,
            )
            .order_by(MaintenanceSchedule.scheduled_date)
        )
        return list(result.scalars().all())


class FlightRepository(SQLAlchemyRepository[Flight]):
    model = Flight


class EmployeeRepository(SQLAlchemyRepository[Employee]):
    model = Employee


class UserRepository(SQLAlchemyRepository[User]):
    model = User


__all__ = [
    "AircraftTypeRepository",
    "AircraftRepository",
    "AircraftStatusHistoryRepository",
    "MaintenanceScheduleRepository",
    "FlightRepository",
    "EmployeeRepository",
    "UserRepository",
]
