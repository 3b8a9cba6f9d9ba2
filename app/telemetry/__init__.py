"""Telemetry helpers and metrics."""

from .metrics import (
    CONCURRENCY_CONFLICTS,
    ERROR_COUNTER,
    LIFECYCLE_EVENTS,
    LOGIN_COUNTER,
    REQUEST_COUNT,
    REQUEST_LATENCY,
    increment_login,
    observe_request,
    record_concurrency_conflict,
    record_lifecycle_event,
)

__all__ = [
    "CONCURRENCY_CONFLICTS",
    "ERROR_COUNTER",
    "LIFECYCLE_EVENTS",
    "LOGIN_COUNTER",
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "increment_login",
    "observe_request",
    "record_concurrency_conflict",
    "record_lifecycle_event",
]
