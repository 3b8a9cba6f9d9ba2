"""Registration, login and the actor attached to mutations."""

from __future__ import annotations

from app.utils import decode_access_token

PASSWORD = "Runway27Left"


def _register(client, email="dispatch.lead@example.com"):
    return client.post(
        "/users/",
        json={
            "email": email,
            "firstName": "Dana",
            "lastName": "Reyes",
            "password": PASSWORD,
        },
    )


def _login(client, email="dispatch.lead@example.com", password=PASSWORD):
    return client.post("/auth/login", json={"email": email, "password": password})


def test_register_and_login(anonymous_client):
    registered = _register(anonymous_client)
    assert registered.status_code == 201
    user = registered.json()
    assert user["firstName"] == "Dana"
    assert user["created_by"] == "dispatch.lead@example.com"
    assert "password_hash" not in user

    assert _register(anonymous_client).status_code == 409

    login = _login(anonymous_client)
    assert login.status_code == 200
    token = login.json()["accessToken"]
    assert login.json()["name"] == "Dana Reyes"
    assert decode_access_token(token).actor == "dispatch.lead@example.com"

    me = anonymous_client.get("/users/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "dispatch.lead@example.com"


def test_login_rejects_bad_credentials(anonymous_client):
    _register(anonymous_client)

    assert _login(anonymous_client, password="WrongPass1").status_code == 401
    assert _login(anonymous_client, email="nobody@example.com").status_code == 401


def test_protected_routes_need_a_token(anonymous_client):
    assert anonymous_client.get("/aircraft/").status_code == 401
    bad = anonymous_client.get("/aircraft/", headers={"Authorization": "Bearer nope"})
    assert bad.status_code == 401


def test_mutations_are_attributed_to_the_token_holder(anonymous_client):
    _register(anonymous_client)
    token = _login(anonymous_client).json()["accessToken"]
    headers = {"Authorization": f"Bearer {token}"}

    created = anonymous_client.post(
        "/aircraft-types/",
        json={"code": "E190", "name": "Embraer 190"},
        headers=headers,
    )

    assert created.status_code == 201
    assert created.json()["created_by"] == "dispatch.lead@example.com"


def test_health_and_metrics(anonymous_client):
    assert anonymous_client.get("/health").json()["status"] == "healthy"

    metrics = anonymous_client.get("/metrics")
    assert metrics.status_code == 200
    assert "http_requests_total" in metrics.text
