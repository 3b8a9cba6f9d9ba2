"""Fleet, flight and HR rules."""

from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from app.domain.services import (
    AircraftDomainService,
    EmployeeDomainService,
    FlightDomainService,
)


@pytest.mark.parametrize(
    "code, expected",
    [
        ("N12345", True),
        ("EC-MIG", True),
        ("G-EUPT", True),
        ("N123", False),
        ("n12345", False),
        ("N1234567890", False),
        ("N 1234", False),
        ("", False),
    ],
)
def test_registration_codes(code, expected):
    assert AircraftDomainService.is_valid_registration(code) is expected


@pytest.mark.parametrize(
    "hours, expected",
    [
        (0, False),
        (4_999, False),
        (5_000, True),
        (5_099, True),
        (5_100, False),
        (9_999, False),
        (10_050, True),
    ],
)
def test_maintenance_window_follows_each_interval(hours, expected):
    assert AircraftDomainService.needs_maintenance(hours) is expected


def test_operational_requires_active_and_hours_below_ceiling():
    assert AircraftDomainService.is_operational(True, 49_999)
    assert not AircraftDomainService.is_operational(True, 50_000)
    assert not AircraftDomainService.is_operational(False, 10)


def test_age_and_display_name():
    assert AircraftDomainService.age_in_years(date(2010, 6, 1), today=date(2024, 1, 1)) == 14
    assert AircraftDomainService.age_in_years(None) == 0
    assert (
        AircraftDomainService.display_name("Boeing", "737-800", "N12345")
        == "Boeing 737-800 (N12345)"
    )


def test_flight_times_and_airports():
    departure = datetime(2024, 5, 1, 8, 0)
    assert FlightDomainService.is_flight_time_valid(departure, departure + timedelta(hours=2))
    assert not FlightDomainService.is_flight_time_valid(departure, departure)

    assert FlightDomainService.is_valid_airport_code("JFK")
    assert FlightDomainService.is_valid_airport_code("LEMD")
    assert not FlightDomainService.is_valid_airport_code("jfk")
    assert not FlightDomainService.is_valid_airport_code("LONDON")


def test_generated_flight_number_uses_route_initials():
    number = FlightDomainService.generate_flight_number("MAD", "jfk")

    assert number.startswith("MJ")
    assert 100 <= int(number[2:]) <= 9999


@pytest.mark.parametrize("block_hours, whole", [(2.0, 2), (2.1, 3), (0.5, 1), (11.99, 12)])
def test_block_hours_round_up(block_hours, whole):
    assert FlightDomainService.block_hours_to_whole(block_hours) == whole


def test_employee_helpers():
    assert EmployeeDomainService.is_valid_email("crew@airline.example")
    assert not EmployeeDomainService.is_valid_email("crew@")
    assert EmployeeDomainService.normalise_employee_number("  e-1001 ") == "E-1001"
