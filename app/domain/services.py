"""Aviation domain rules used by the entity services."""

from __future__ import annotations

import random
import re
from datetime import date, datetime
from typing import Optional

MAX_OPERATIONAL_HOURS = 50_000
MAINTENANCE_INTERVAL_HOURS = 5_000
MAINTENANCE_WINDOW_HOURS = 100

_REGISTRATION_PATTERN = re.compile(r"^[A-Z0-9-]{5,10}$")
_AIRPORT_CODE_PATTERN = re.compile(r"^[A-Z]{3,4}$")
_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


class AircraftDomainService:
    """Domain service for aircraft fleet rules"""

    @staticmethod
    def is_valid_registration(registration_code: str) -> bool:
        """Tail numbers are 5-10 uppercase alphanumerics with optional hyphens"""
        return bool(registration_code) and (
            _REGISTRATION_PATTERN.fullmatch(registration_code) is not None
        )

    @staticmethod
    def is_operational(active: bool, hours_in_use: int) -> bool:
        return active and (hours_in_use or 0) < MAX_OPERATIONAL_HOURS

    @staticmethod
    def needs_maintenance(hours_in_use: int) -> bool:
        """True during the first 100 hours after each 5000-hour boundary.

        A new airframe (below the first interval) never needs interval
        maintenance.
        """
        hours = hours_in_use or 0
        if hours < MAINTENANCE_INTERVAL_HOURS:
            return False
        return hours % MAINTENANCE_INTERVAL_HOURS < MAINTENANCE_WINDOW_HOURS

    @staticmethod
    def age_in_years(manufacturing_date: Optional[date], today: Optional[date] = None) -> int:
        if manufacturing_date is None:
            return 0
        today = today or date.today()
        return today.year - manufacturing_date.year

    @staticmethod
    def display_name(manufacturer: str, model: str, registration_code: str) -> str:
        return f"{manufacturer} {model} ({registration_code})"


class FlightDomainService:
    """Domain service for flight scheduling rules"""

    @staticmethod
    def is_flight_time_valid(departure_time: datetime, arrival_time: datetime) -> bool:
        """Arrival must come after departure"""
        return arrival_time > departure_time

    @staticmethod
    def is_valid_airport_code(code: str) -> bool:
        return bool(code) and _AIRPORT_CODE_PATTERN.fullmatch(code) is not None

    @staticmethod
    def generate_flight_number(origin: str, destination: str) -> str:
        """Generate a flight number from the route endpoints"""
        prefix = f"{origin[:1]}{destination[:1]}".upper()
        return f"{prefix}{random.randint(100, 9999)}"

    @staticmethod
    def block_hours_to_whole(block_hours: float) -> int:
        """Aircraft hour meters count whole hours; partial hours round up."""
        whole = int(block_hours)
        return whole if whole == block_hours else whole + 1


class EmployeeDomainService:
    """Domain service for HR records"""

    @staticmethod
    def is_valid_email(email: str) -> bool:
        """Validate email format"""
        return bool(email) and _EMAIL_PATTERN.match(email) is not None

    @staticmethod
    def normalise_employee_number(employee_number: str) -> str:
        return employee_number.strip().upper()
