"""Fleet services: aircraft types, aircraft and maintenance schedules."""

from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Any, List, Optional

from app.domain import lifecycle
from app.domain.errors import InvalidStateTransition, ValidationError
from app.domain.lifecycle import EntityStatus
from app.domain.services import AircraftDomainService
from app.models import Aircraft, AircraftStatusHistory, AircraftType, MaintenanceSchedule
from app.repositories import (
    AircraftRepository,
    AircraftStatusHistoryRepository,
    AircraftTypeRepository,
    MaintenanceScheduleRepository,
)
from app.services.base import LifecycleService

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger("app.audit")


def _strip(fields: dict[str, Any], *names: str) -> None:
    for name in names:
        value = fields.get(name)
        if isinstance(value, str):
            fields[name] = value.strip()


def _require_length(value: Optional[str], label: str, minimum: int, maximum: int) -> None:
    if not value:
        raise ValidationError(f"{label} is required")
    if not minimum <= len(value) <= maximum:
        raise ValidationError(
            f"{label} must be between {minimum} and {maximum} characters"
        )


class AircraftTypeService(LifecycleService[AircraftType]):
    repository_class = AircraftTypeRepository
    unique_fields = ("code",)

    def normalise(self, fields: dict[str, Any]) -> dict[str, Any]:
        _strip(fields, "code", "name", "description")
        if isinstance(fields.get("code"), str):
            fields["code"] = fields["code"].upper()
        return fields

    def validate(self, entity: AircraftType) -> None:
        _require_length(entity.code, "Code", 2, 20)
        _require_length(entity.name, "Name", 2, 100)


class AircraftService(LifecycleService[Aircraft]):
    repository_class = AircraftRepository
    unique_fields = ("registration_code", "serial_number")

    def __init__(self, session):
        super().__init__(session)
        self.history = AircraftStatusHistoryRepository(session)
        self.types = AircraftTypeRepository(session)

    def normalise(self, fields: dict[str, Any]) -> dict[str, Any]:
        _strip(fields, "manufacturer", "model", "registration_code", "serial_number")
        if isinstance(fields.get("registration_code"), str):
            fields["registration_code"] = fields["registration_code"].upper()
        return fields

    async def create(self, actor: str, **fields: Any) -> Aircraft:
        fields.setdefault("hours_in_use", 0)
        fields.setdefault("cycles_completed", 0)
        return await super().create(actor, **fields)

    def validate(self, entity: Aircraft) -> None:
        _require_length(entity.manufacturer, "Manufacturer", 2, 100)
        _require_length(entity.model, "Model", 2, 100)
        if not AircraftDomainService.is_valid_registration(entity.registration_code):
            raise ValidationError(
                "Registration code must be 5-10 uppercase alphanumeric characters "
                "with optional hyphens"
            )
        _require_length(entity.serial_number, "Serial number", 1, 50)
        if entity.capacity is None:
            raise ValidationError("Capacity is required")
        if not 1 <= entity.capacity <= 1000:
            raise ValidationError("Capacity must be between 1 and 1000")
        if entity.hours_in_use is None or entity.cycles_completed is None:
            raise ValidationError("Hours in use and cycles completed are required")
        if entity.hours_in_use < 0:
            raise ValidationError("Hours in use cannot be negative")
        if entity.cycles_completed < 0:
            raise ValidationError("Cycles completed cannot be negative")
        today = date.today()
        if entity.manufacturing_date is not None and entity.manufacturing_date >= today:
            raise ValidationError("Manufacturing date must be in the past")
        if entity.acquisition_date is not None and entity.acquisition_date > today:
            raise ValidationError("Acquisition date must be in the past or present")
        if entity.aircraft_type_id is None:
            raise ValidationError("Aircraft type is required")

    async def check_constraints(self, entity: Aircraft) -> None:
        await super().check_constraints(entity)
        with self.session.no_autoflush:
            aircraft_type = await self.types.get(entity.aircraft_type_id)
        if aircraft_type is None or lifecycle.is_deleted(aircraft_type):
            raise ValidationError(
                "Aircraft type does not exist",
                aircraft_type_id=entity.aircraft_type_id,
            )

    async def after_status_change(
        self,
        entity: Aircraft,
        previous: Optional[EntityStatus],
        reason: Optional[str],
        actor: str,
    ) -> None:
        self._append_history(entity, previous, reason, actor)

    def _append_history(
        self,
        entity: Aircraft,
        previous: Optional[EntityStatus],
        reason: Optional[str],
        actor: str,
    ) -> AircraftStatusHistory:
        entry = AircraftStatusHistory(
            aircraft_id=entity.id,
            previous_status=previous,
            new_status=entity.status,
            reason=reason,
        )
        lifecycle.initialize(entry, actor)
        self.session.add(entry)
        return entry

    async def status_history(self, aircraft_id: uuid.UUID) -> List[AircraftStatusHistory]:
        await self.get(aircraft_id)
        return await self.history.list_for_aircraft(aircraft_id)

    async def maintenance_due(self) -> List[Aircraft]:
        return await self.repository.list_maintenance_due()

    async def reset_operational_data(
        self,
        aircraft_id: uuid.UUID,
        actor: str,
        expected_version: int,
        reason: str,
    ) -> Aircraft:
        """Zero hours and cycles after a major overhaul, keeping a history entry."""

        if not reason or not reason.strip():
            raise ValidationError("A reason is required to reset operational data")

        aircraft = await self.get(aircraft_id)
        async with self._mutation("reset"):
            self._ensure_not_deleted(aircraft)
            lifecycle.record_update(aircraft, actor, expected_version)
            hours, cycles = aircraft.hours_in_use, aircraft.cycles_completed
            aircraft.reset_operational_data()
            self._append_history(
                aircraft,
                EntityStatus(aircraft.status),
                f"Operational data reset ({hours} h, {cycles} cycles): {reason.strip()}",
                actor,
            )
            await self.repository.save(aircraft)
        audit_logger.info(
            "Aircraft %s operational data reset by %s", aircraft.id, actor
        )
        return aircraft

    async def record_flight(self, aircraft: Aircraft, actor: str, hours: int) -> Aircraft:
        """Add one cycle and ``hours`` to ``aircraft`` within the caller's transaction."""

        self._ensure_not_deleted(aircraft)
        lifecycle.record_update(aircraft, actor, aircraft.version)
        aircraft.increment_hours(hours)
        aircraft.increment_cycles()
        if aircraft.needs_maintenance:
            logger.info(
                "Aircraft %s reached %s hours and needs maintenance",
                aircraft.registration_code,
                aircraft.hours_in_use,
            )
        return await self.repository.save(aircraft)


class MaintenanceScheduleService(LifecycleService[MaintenanceSchedule]):
    repository_class = MaintenanceScheduleRepository

    def __init__(self, session):
        super().__init__(session)
        self.aircraft = AircraftRepository(session)

    def normalise(self, fields: dict[str, Any]) -> dict[str, Any]:
        _strip(fields, "notes")
        return fields

    def validate(self, entity: MaintenanceSchedule) -> None:
        if entity.aircraft_id is None:
            raise ValidationError("Aircraft is required")
        if entity.maintenance_type is None:
            raise ValidationError("Maintenance type is required")
        if entity.scheduled_date is None:
            raise ValidationError("Scheduled date is required")
        if (
            entity.completed_date is not None
            and entity.completed_date < entity.scheduled_date
        ):
            raise ValidationError("Completion date cannot precede the scheduled date")

    async def check_constraints(self, entity: MaintenanceSchedule) -> None:
        if not self._is_new_or_changed(entity, "aircraft_id"):
            return
        with self.session.no_autoflush:
            aircraft = await self.aircraft.get(entity.aircraft_id)
        if aircraft is None or lifecycle.is_deleted(aircraft):
            raise ValidationError(
                "Aircraft does not exist", aircraft_id=entity.aircraft_id
            )

    async def list_open(self, cutoff: Optional[date] = None) -> List[MaintenanceSchedule]:
        return await self.repository.list_open_before(cutoff or date.today())

    async def complete(
        self,
        schedule_id: uuid.UUID,
        actor: str,
        expected_version: int,
        completed_date: Optional[date] = None,
    ) -> MaintenanceSchedule:
        schedule = await self.get(schedule_id)
        if schedule.completed_date is not None:
            raise InvalidStateTransition(
                "Maintenance has already been completed", entity_id=schedule_id
            )
        return await self.update(
            schedule_id,
            actor,
            expected_version,
            completed_date=completed_date or date.today(),
        )


__all__ = ["AircraftTypeService", "AircraftService", "MaintenanceScheduleService"]
