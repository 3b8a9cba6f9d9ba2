"""End-to-end aircraft lifecycle over HTTP."""

from __future__ import annotations

import uuid

import pytest

ADMIN_EMAIL = "ops.admin@example.com"


@pytest.fixture
def aircraft_type_id(client) -> str:
    response = client.post(
        "/aircraft-types/",
        json={"code": "b738", "name": "Boeing 737-800", "category": "COMMERCIAL"},
    )
    assert response.status_code == 201
    assert response.json()["code"] == "B738"
    return response.json()["id"]


def _register(client, aircraft_type_id: str, registration: str = "N12345", **extra) -> dict:
    payload = {
        "manufacturer": "Boeing",
        "model": "737-800",
        "registration_code": registration,
        "serial_number": f"SN-{registration}",
        "manufacturing_date": "2015-03-01",
        "capacity": 180,
        "aircraft_type_id": aircraft_type_id,
    }
    payload.update(extra)
    return client.post("/aircraft/", json=payload)


def test_aircraft_lifecycle(client, aircraft_type_id):
    created = _register(client, aircraft_type_id)
    assert created.status_code == 201
    body = created.json()
    aircraft_id = body["id"]
    assert body["status"] == "ACTIVE"
    assert body["version"] == 0
    assert body["created_by"] == ADMIN_EMAIL
    assert body["updated_at"] is None
    assert body["display_name"] == "Boeing 737-800 (N12345)"
    assert body["is_operational"] is True
    assert body["needs_maintenance"] is False

    updated = client.put(f"/aircraft/{aircraft_id}", json={"version": 0, "capacity": 189})
    assert updated.status_code == 200
    assert updated.json()["capacity"] == 189
    assert updated.json()["version"] == 1
    assert updated.json()["updated_by"] == ADMIN_EMAIL

    stale = client.put(f"/aircraft/{aircraft_id}", json={"version": 0, "capacity": 150})
    assert stale.status_code == 409
    assert stale.json()["code"] == "concurrency_conflict"
    assert client.get(f"/aircraft/{aircraft_id}").json()["capacity"] == 189

    deleted = client.delete(f"/aircraft/{aircraft_id}", params={"version": 1})
    assert deleted.status_code == 204

    assert client.get("/aircraft/").json() == []
    listed = client.get("/aircraft/", params={"include_deleted": True}).json()
    assert [item["id"] for item in listed] == [aircraft_id]

    fetched = client.get(f"/aircraft/{aircraft_id}").json()
    assert fetched["status"] == "DELETED"
    assert fetched["deleted_by"] == ADMIN_EMAIL
    assert fetched["version"] == 2

    blocked = client.put(f"/aircraft/{aircraft_id}", json={"version": 2, "capacity": 150})
    assert blocked.status_code == 409
    assert blocked.json()["code"] == "invalid_state_transition"

    restored = client.post(f"/aircraft/{aircraft_id}/restore", params={"version": 2})
    assert restored.status_code == 200
    assert restored.json()["status"] == "ACTIVE"
    assert restored.json()["deleted_at"] is None
    assert restored.json()["version"] == 3

    history = client.get(f"/aircraft/{aircraft_id}/status-history").json()
    assert [(entry["previous_status"], entry["new_status"]) for entry in history] == [
        ("DELETED", "ACTIVE"),
        ("ACTIVE", "DELETED"),
    ]


def test_registration_rules(client, aircraft_type_id):
    assert _register(client, aircraft_type_id).status_code == 201

    duplicate = _register(client, aircraft_type_id, serial_number="SN-OTHER")
    assert duplicate.status_code == 409
    assert duplicate.json()["code"] == "duplicate_entity"

    invalid = _register(client, aircraft_type_id, registration="N1")
    assert invalid.status_code == 400
    assert invalid.json()["code"] == "validation_error"

    unknown_type = _register(client, str(uuid.uuid4()), registration="EC-MIG")
    assert unknown_type.status_code == 400


def test_missing_aircraft_is_404(client):
    response = client.get(f"/aircraft/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.json() == {"detail": "Aircraft not found", "code": "not_found"}


def test_status_change_and_maintenance_due(client, aircraft_type_id):
    due = _register(client, aircraft_type_id, registration="N500AA", hours_in_use=5_040).json()
    _register(client, aircraft_type_id, registration="N400AA", hours_in_use=4_900)

    listed = client.get("/aircraft/maintenance-due").json()
    assert [item["registration_code"] for item in listed] == ["N500AA"]

    suspended = client.patch(
        f"/aircraft/{due['id']}/status",
        json={"version": 0, "status": "SUSPENDED", "reason": "Awaiting A-check"},
    )
    assert suspended.status_code == 200
    assert suspended.json()["is_operational"] is False

    refused = client.patch(
        f"/aircraft/{due['id']}/status", json={"version": 1, "status": "DELETED"}
    )
    assert refused.status_code == 409

    reset = client.post(
        f"/aircraft/{due['id']}/reset",
        json={"version": 1, "reason": "Engine swap"},
    )
    assert reset.status_code == 200
    assert reset.json()["hours_in_use"] == 0
    assert client.get("/aircraft/maintenance-due").json() == []


def test_deleting_without_version_still_audits(client, aircraft_type_id):
    aircraft_id = _register(client, aircraft_type_id).json()["id"]

    assert client.delete(f"/aircraft/{aircraft_id}").status_code == 204
    again = client.delete(f"/aircraft/{aircraft_id}")
    assert again.status_code == 409
    assert again.json()["code"] == "invalid_state_transition"


def test_repeated_delete_and_restore_report_the_state(client, aircraft_type_id):
    aircraft_id = _register(client, aircraft_type_id).json()["id"]

    assert client.delete(f"/aircraft/{aircraft_id}", params={"version": 0}).status_code == 204
    resent = client.delete(f"/aircraft/{aircraft_id}", params={"version": 0})
    assert resent.status_code == 409
    assert resent.json()["code"] == "invalid_state_transition"

    restore = client.post(f"/aircraft/{aircraft_id}/restore", params={"version": 1})
    assert restore.status_code == 200
    resent = client.post(f"/aircraft/{aircraft_id}/restore", params={"version": 1})
    assert resent.status_code == 409
    assert resent.json()["code"] == "invalid_state_transition"
    assert client.get(f"/aircraft/{aircraft_id}").json()["version"] == 2


def test_null_counters_are_a_validation_error(client, aircraft_type_id):
    aircraft_id = _register(client, aircraft_type_id).json()["id"]

    for field in ("hours_in_use", "cycles_completed"):
        response = client.put(f"/aircraft/{aircraft_id}", json={"version": 0, field: None})
        assert response.status_code == 400
        assert response.json()["code"] == "validation_error"

    stored = client.get(f"/aircraft/{aircraft_id}").json()
    assert stored["hours_in_use"] == 0
    assert stored["version"] == 0


def test_registration_longer_than_column_is_rejected(client, aircraft_type_id):
    too_long = _register(client, aircraft_type_id, registration="N1234567890")
    assert too_long.status_code == 422

    aircraft_id = _register(client, aircraft_type_id).json()["id"]
    renamed = client.put(
        f"/aircraft/{aircraft_id}",
        json={"version": 0, "registration_code": "EC-ABCDEFGH"},
    )
    assert renamed.status_code == 422
