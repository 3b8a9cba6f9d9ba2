"""Flight scheduling service."""

from __future__ import annotations

import logging
import uuid
from typing import Any, List

from app.domain import lifecycle
from app.domain.errors import InvalidStateTransition, ValidationError
from app.domain.services import FlightDomainService
from app.models import Flight
from app.repositories import FlightRepository
from app.services.base import LifecycleService
from app.services.fleet import AircraftService

audit_logger = logging.getLogger("app.audit")

_FLIGHT_NUMBER_ATTEMPTS = 5


class FlightService(LifecycleService[Flight]):
    repository_class = FlightRepository
    unique_fields = ("flight_number",)

    def __init__(self, session):
        super().__init__(session)
        self.aircraft = AircraftService(session)

    def normalise(self, fields: dict[str, Any]) -> dict[str, Any]:
        for name in ("flight_number", "origin", "destination"):
            value = fields.get(name)
            if isinstance(value, str):
                fields[name] = value.strip().upper()
        return fields

    def validate(self, entity: Flight) -> None:
        if not entity.flight_number:
            raise ValidationError("Flight number is required")
        for label, code in (("Origin", entity.origin), ("Destination", entity.destination)):
            if not FlightDomainService.is_valid_airport_code(code):
                raise ValidationError(f"{label} must be a 3 or 4 letter airport code")
        if entity.origin == entity.destination:
            raise ValidationError("Origin and destination must differ")
        if entity.departure_time is None or entity.arrival_time is None:
            raise ValidationError("Departure and arrival times are required")
        if not FlightDomainService.is_flight_time_valid(
            entity.departure_time, entity.arrival_time
        ):
            raise ValidationError("Arrival time must be after departure time")
        if entity.aircraft_id is None:
            raise ValidationError("Aircraft is required")

    async def check_constraints(self, entity: Flight) -> None:
        await super().check_constraints(entity)
        if not self._is_new_or_changed(entity, "aircraft_id"):
            return
        with self.session.no_autoflush:
            aircraft = await self.aircraft.repository.get(entity.aircraft_id)
        if aircraft is None or lifecycle.is_deleted(aircraft):
            raise ValidationError("Aircraft not found", aircraft_id=entity.aircraft_id)
        if not aircraft.is_operational:
            raise ValidationError(
                "Aircraft is not operational", aircraft_id=entity.aircraft_id
            )

    async def create(self, actor: str, **fields: Any) -> Flight:
        if not fields.get("flight_number"):
            fields["flight_number"] = await self._free_flight_number(
                fields.get("origin") or "", fields.get("destination") or ""
            )
        return await super().create(actor, **fields)

    async def _free_flight_number(self, origin: str, destination: str) -> str:
        for _ in range(_FLIGHT_NUMBER_ATTEMPTS):
            candidate = FlightDomainService.generate_flight_number(
                origin.strip(), destination.strip()
            )
            if await self.repository.find_one_by(flight_number=candidate) is None:
                return candidate
        raise ValidationError("Could not generate a free flight number; supply one")

    async def complete(
        self,
        flight_id: uuid.UUID,
        actor: str,
        expected_version: int,
        block_hours: float,
    ) -> Flight:
        """Close a flight and add its block time to the aircraft counters."""

        if block_hours is None or block_hours <= 0:
            raise ValidationError("Block hours must be positive")

        flight = await self.get(flight_id)
        async with self._mutation("complete"):
            self._ensure_not_deleted(flight)
            if flight.completed_at is not None:
                raise InvalidStateTransition(
                    "Flight has already been completed", entity_id=flight_id
                )
            lifecycle.record_update(flight, actor, expected_version)
            flight.completed_at = flight.updated_at
            flight.block_hours = block_hours

            with self.session.no_autoflush:
                aircraft = await self.aircraft.get(flight.aircraft_id)
            await self.aircraft.record_flight(
                aircraft,
                actor,
                FlightDomainService.block_hours_to_whole(block_hours),
            )
            await self.repository.save(flight)
        audit_logger.info(
            "Flight %s completed by %s (%.1f block hours)",
            flight.flight_number,
            actor,
            block_hours,
        )
        return flight

    async def list_for_aircraft(
        self, aircraft_id: uuid.UUID, include_deleted: bool = False
    ) -> List[Flight]:
        return await self.list(include_deleted=include_deleted, aircraft_id=aircraft_id)


__all__ = ["FlightService"]
