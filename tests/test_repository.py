"""Persistence behaviour: versioning, soft-delete visibility and stale writes."""

from __future__ import annotations

import uuid
from datetime import date, datetime, timedelta

import pytest

from app.domain.errors import (
    ConcurrencyConflict,
    DuplicateEntity,
    EntityNotFound,
    InvalidStateTransition,
    ValidationError,
)
from app.domain.lifecycle import EntityStatus
from app.models import AircraftCategory, MaintenanceType
from app.repositories import AircraftRepository, AircraftTypeRepository
from app.services import (
    AircraftService,
    AircraftTypeService,
    FlightService,
    MaintenanceScheduleService,
)

pytestmark = pytest.mark.asyncio

ACTOR = "ops.admin@example.com"


async def _aircraft_type(session, code="B738"):
    return await AircraftTypeService(session).create(
        ACTOR, code=code, name="Boeing 737-800", category=AircraftCategory.COMMERCIAL
    )


async def _aircraft(session, aircraft_type, registration="N12345", serial="SN-0001", **extra):
    fields = dict(
        manufacturer="Boeing",
        model="737-800",
        registration_code=registration,
        serial_number=serial,
        manufacturing_date=date(2015, 3, 1),
        capacity=180,
        aircraft_type_id=aircraft_type.id,
    )
    fields.update(extra)
    return await AircraftService(session).create(ACTOR, **fields)


async def test_version_increments_on_every_write(session):
    service = AircraftTypeService(session)
    aircraft_type = await _aircraft_type(session)
    assert aircraft_type.version == 0

    updated = await service.update(aircraft_type.id, ACTOR, 0, name="Boeing 737-800 NG")
    assert updated.version == 1
    assert updated.updated_by == ACTOR

    changed = await service.change_status(aircraft_type.id, ACTOR, 1, EntityStatus.INACTIVE)
    assert changed.version == 2
    assert changed.status == EntityStatus.INACTIVE


async def test_stale_version_is_rejected_and_nothing_changes(session, session_factory):
    type_id = (await _aircraft_type(session)).id
    service = AircraftTypeService(session)
    await service.update(type_id, ACTOR, 0, name="Renamed once")

    with pytest.raises(ConcurrencyConflict):
        await service.update(type_id, "other@example.com", 0, name="Lost update")

    async with session_factory() as fresh:
        stored = await AircraftTypeRepository(fresh).get(type_id)
    assert stored.name == "Renamed once"
    assert stored.version == 1
    assert stored.updated_by == ACTOR


async def test_concurrent_writers_one_wins(session_factory):
    async with session_factory() as setup:
        aircraft_type = await _aircraft_type(setup)

    async with session_factory() as first, session_factory() as second:
        await AircraftTypeService(first).get(aircraft_type.id)
        await AircraftTypeService(second).get(aircraft_type.id)

        await AircraftTypeService(first).update(aircraft_type.id, "alice", 0, name="First")
        with pytest.raises(ConcurrencyConflict):
            await AircraftTypeService(second).update(aircraft_type.id, "bob", 0, name="Second")

    async with session_factory() as check:
        stored = await AircraftTypeRepository(check).get(aircraft_type.id)
    assert stored.name == "First"
    assert stored.version == 1


async def test_soft_deleted_rows_hidden_from_list_but_not_get(session):
    service = AircraftTypeService(session)
    kept = await _aircraft_type(session, code="A320")
    removed = await _aircraft_type(session, code="A321")

    await service.delete(removed.id, ACTOR, 0)

    listed = await service.list()
    assert [item.id for item in listed] == [kept.id]

    everything = await service.list(include_deleted=True)
    assert {item.id for item in everything} == {kept.id, removed.id}

    fetched = await service.get(removed.id)
    assert fetched.status == EntityStatus.DELETED
    assert fetched.deleted_by == ACTOR
    assert fetched.version == 1


async def test_deleted_records_must_be_restored_before_updates(session):
    service = AircraftTypeService(session)
    type_id = (await _aircraft_type(session)).id
    await service.delete(type_id, ACTOR)

    with pytest.raises(InvalidStateTransition):
        await service.update(type_id, ACTOR, 1, name="Ghost")
    with pytest.raises(InvalidStateTransition):
        await service.delete(type_id, ACTOR, 1)

    restored = await service.restore(type_id, ACTOR, 1)
    assert restored.status == EntityStatus.ACTIVE
    assert restored.deleted_at is None
    assert restored.version == 2


async def test_unique_fields_and_missing_records(session):
    await _aircraft_type(session)

    with pytest.raises(DuplicateEntity):
        await _aircraft_type(session, code="b738")

    with pytest.raises(EntityNotFound):
        await AircraftTypeService(session).get(uuid.uuid4())


async def test_aircraft_requires_live_type(session):
    aircraft_type = await _aircraft_type(session)
    await AircraftTypeService(session).delete(aircraft_type.id, ACTOR)

    with pytest.raises(ValidationError):
        await _aircraft(session, aircraft_type)
    assert await AircraftRepository(session).list(include_deleted=True) == []


async def test_aircraft_status_changes_are_recorded(session):
    aircraft_type = await _aircraft_type(session)
    aircraft = await _aircraft(session, aircraft_type)
    service = AircraftService(session)

    await service.change_status(aircraft.id, ACTOR, 0, EntityStatus.SUSPENDED, "Bird strike")
    await service.delete(aircraft.id, ACTOR, 1)
    await service.restore(aircraft.id, ACTOR, 2)

    history = await service.status_history(aircraft.id)
    transitions = [(entry.previous_status, entry.new_status) for entry in history]
    assert transitions == [
        (EntityStatus.DELETED, EntityStatus.ACTIVE),
        (EntityStatus.SUSPENDED, EntityStatus.DELETED),
        (EntityStatus.ACTIVE, EntityStatus.SUSPENDED),
    ]
    assert history[-1].reason == "Bird strike"


async def test_reset_operational_data_requires_reason(session):
    aircraft_type = await _aircraft_type(session)
    aircraft = await _aircraft(session, aircraft_type, hours_in_use=5_020, cycles_completed=3_000)
    service = AircraftService(session)

    assert [item.id for item in await service.maintenance_due()] == [aircraft.id]

    with pytest.raises(ValidationError):
        await service.reset_operational_data(aircraft.id, ACTOR, 0, "  ")

    reset = await service.reset_operational_data(aircraft.id, ACTOR, 0, "C-check overhaul")
    assert reset.hours_in_use == 0
    assert reset.cycles_completed == 0
    assert reset.version == 1
    assert await service.maintenance_due() == []


async def test_completing_a_flight_updates_the_aircraft(session):
    aircraft_type = await _aircraft_type(session)
    aircraft = await _aircraft(session, aircraft_type, hours_in_use=100, cycles_completed=40)
    flights = FlightService(session)
    departure = datetime(2030, 1, 10, 9, 0)

    flight = await flights.create(
        ACTOR,
        aircraft_id=aircraft.id,
        origin="mad",
        destination="JFK",
        departure_time=departure,
        arrival_time=departure + timedelta(hours=8),
    )
    assert flight.flight_number.startswith("MJ")
    assert flight.origin == "MAD"

    completed = await flights.complete(flight.id, ACTOR, 0, 7.5)
    assert completed.is_completed
    assert completed.block_hours == 7.5
    assert completed.version == 1

    refreshed = await AircraftService(session).get(aircraft.id)
    assert refreshed.hours_in_use == 108
    assert refreshed.cycles_completed == 41
    assert refreshed.version == 1

    with pytest.raises(InvalidStateTransition):
        await flights.complete(flight.id, ACTOR, 1, 1.0)


async def test_flights_need_an_operational_aircraft(session):
    aircraft_type = await _aircraft_type(session)
    aircraft = await _aircraft(session, aircraft_type)
    await AircraftService(session).change_status(aircraft.id, ACTOR, 0, EntityStatus.INACTIVE)
    departure = datetime(2030, 1, 10, 9, 0)

    with pytest.raises(ValidationError, match="not operational"):
        await FlightService(session).create(
            ACTOR,
            flight_number="IB6251",
            aircraft_id=aircraft.id,
            origin="MAD",
            destination="JFK",
            departure_time=departure,
            arrival_time=departure + timedelta(hours=8),
        )


async def test_maintenance_completion_is_one_way(session):
    aircraft_type = await _aircraft_type(session)
    aircraft = await _aircraft(session, aircraft_type)
    service = MaintenanceScheduleService(session)

    schedule = await service.create(
        ACTOR,
        aircraft_id=aircraft.id,
        maintenance_type=MaintenanceType.A_CHECK,
        scheduled_date=date.today() - timedelta(days=2),
    )
    assert [item.id for item in await service.list_open()] == [schedule.id]

    done = await service.complete(schedule.id, ACTOR, 0)
    assert done.completed_date == date.today()
    assert await service.list_open() == []

    with pytest.raises(InvalidStateTransition):
        await service.complete(schedule.id, ACTOR, 1)


async def test_open_work_orders_survive_aircraft_removal(session):
    aircraft_type = await _aircraft_type(session)
    aircraft = await _aircraft(session, aircraft_type)
    service = MaintenanceScheduleService(session)
    schedule = await service.create(
        ACTOR,
        aircraft_id=aircraft.id,
        maintenance_type=MaintenanceType.B_CHECK,
        scheduled_date=date.today() - timedelta(days=1),
    )

    await AircraftService(session).delete(aircraft.id, ACTOR, 0)

    edited = await service.update(schedule.id, ACTOR, 0, notes="Parts on order")
    assert edited.version == 1
    done = await service.complete(schedule.id, ACTOR, 1)
    assert done.completed_date == date.today()


async def test_flights_keep_their_grounded_aircraft_until_reassigned(session):
    aircraft_type = await _aircraft_type(session)
    grounded = await _aircraft(session, aircraft_type)
    grounded_id = grounded.id
    departure = datetime(2030, 1, 10, 9, 0)
    flights = FlightService(session)
    flight = await flights.create(
        ACTOR,
        flight_number="IB6251",
        aircraft_id=grounded_id,
        origin="MAD",
        destination="JFK",
        departure_time=departure,
        arrival_time=departure + timedelta(hours=8),
    )
    flight_id = flight.id
    await AircraftService(session).change_status(grounded_id, ACTOR, 0, EntityStatus.INACTIVE)

    delayed = await flights.update(
        flight_id, ACTOR, 0, arrival_time=departure + timedelta(hours=9)
    )
    assert delayed.version == 1
    assert delayed.aircraft_id == grounded_id

    spare_id = (await _aircraft(session, aircraft_type, "N54321", "SN-0002")).id
    await AircraftService(session).change_status(spare_id, ACTOR, 0, EntityStatus.SUSPENDED)
    with pytest.raises(ValidationError, match="not operational"):
        await flights.update(flight_id, ACTOR, 1, aircraft_id=spare_id)


async def test_counters_cannot_be_cleared(session):
    aircraft_type = await _aircraft_type(session)
    aircraft_id = (await _aircraft(session, aircraft_type)).id
    service = AircraftService(session)

    with pytest.raises(ValidationError):
        await service.update(aircraft_id, ACTOR, 0, cycles_completed=None)

    stored = await service.get(aircraft_id)
    assert stored.cycles_completed == 0
    assert stored.version == 0
