"""FastAPI routers acting as controllers in the MVC architecture."""

from . import aircraft, aircraft_types, auth, employees, flights, maintenance, users

__all__ = [
    "aircraft",
    "aircraft_types",
    "auth",
    "employees",
    "flights",
    "maintenance",
    "users",
]
