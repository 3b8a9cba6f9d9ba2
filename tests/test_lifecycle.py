"""Audit-field rules applied by the lifecycle functions, without a database."""

from __future__ import annotations

from datetime import timedelta

import pytest

from app.domain import lifecycle
from app.domain.errors import ConcurrencyConflict, InvalidStateTransition, ValidationError
from app.domain.lifecycle import EntityStatus
from app.models import Employee


def _new_record() -> Employee:
    return Employee(employee_number="E-100", first_name="Ada", last_name="Lovelace")


def test_initialize_stamps_audit_fields():
    record = lifecycle.initialize(_new_record(), "ops.admin@example.com")

    assert record.id is not None
    assert record.status == EntityStatus.ACTIVE
    assert record.created_at is not None
    assert record.created_by == "ops.admin@example.com"
    assert record.updated_at is None and record.updated_by is None
    assert record.deleted_at is None and record.deleted_by is None
    assert record.version == 0


def test_initialize_twice_is_rejected():
    record = lifecycle.initialize(_new_record(), "alice")

    with pytest.raises(InvalidStateTransition):
        lifecycle.initialize(record, "bob")
    assert record.created_by == "alice"


@pytest.mark.parametrize("actor", ["", "   ", None, "x" * 101])
def test_initialize_requires_a_usable_actor(actor):
    record = _new_record()

    with pytest.raises(ValidationError):
        lifecycle.initialize(record, actor)
    assert record.created_at is None


def test_initialize_runs_domain_validation_before_stamping():
    def reject(_entity):
        raise ValidationError("Position is required")

    record = _new_record()
    with pytest.raises(ValidationError, match="Position"):
        lifecycle.initialize(record, "alice", validate=reject)
    assert record.id is None
    assert record.created_at is None


def test_record_update_rejects_stale_version():
    record = lifecycle.initialize(_new_record(), "alice")
    record.version = 3

    with pytest.raises(ConcurrencyConflict) as excinfo:
        lifecycle.record_update(record, "bob", 2)

    assert excinfo.value.expected_version == 2
    assert excinfo.value.actual_version == 3
    assert record.updated_by is None


def test_record_update_never_precedes_creation():
    record = lifecycle.initialize(_new_record(), "alice")
    record.created_at = record.created_at + timedelta(hours=1)

    lifecycle.record_update(record, "bob", 0)

    assert record.updated_by == "bob"
    assert record.updated_at >= record.created_at


def test_soft_delete_then_restore():
    record = lifecycle.initialize(_new_record(), "alice")
    lifecycle.record_update(record, "bob", 0)

    lifecycle.soft_delete(record, "bob")
    assert lifecycle.is_deleted(record)
    assert record.deleted_by == "bob"
    assert record.deleted_at >= record.updated_at >= record.created_at

    with pytest.raises(InvalidStateTransition):
        lifecycle.soft_delete(record, "bob")

    lifecycle.restore(record)
    assert record.status == EntityStatus.ACTIVE
    assert record.deleted_at is None
    assert record.deleted_by is None


def test_restore_requires_deleted_record():
    record = lifecycle.initialize(_new_record(), "alice")

    with pytest.raises(InvalidStateTransition):
        lifecycle.restore(record)


def test_transition_returns_previous_status():
    record = lifecycle.initialize(_new_record(), "alice")

    previous = lifecycle.transition(record, EntityStatus.SUSPENDED)

    assert previous == EntityStatus.ACTIVE
    assert record.status == EntityStatus.SUSPENDED
    assert not lifecycle.is_active(record)


def test_transition_cannot_enter_or_leave_deleted():
    record = lifecycle.initialize(_new_record(), "alice")

    with pytest.raises(InvalidStateTransition):
        lifecycle.transition(record, EntityStatus.DELETED)

    lifecycle.soft_delete(record, "alice")
    with pytest.raises(InvalidStateTransition):
        lifecycle.transition(record, EntityStatus.ACTIVE)


def test_active_and_deleted_are_exclusive():
    record = lifecycle.initialize(_new_record(), "alice")
    assert lifecycle.is_active(record) and not lifecycle.is_deleted(record)

    lifecycle.soft_delete(record, "alice")
    assert lifecycle.is_deleted(record) and not lifecycle.is_active(record)
