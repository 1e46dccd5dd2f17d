from __future__ import annotations

import pytest

from hr_portal.core.enums import UserStatus
from hr_portal.database.extensions import db
from hr_portal.database.tables import UserRow


def test_login_returns_token_and_user(client, seed):
    resp = client.post("/auth/login", json={"email": "manager@hrportal.example.com", "password": "manager123"})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["accessToken"]
    assert body["user"]["id"] == seed.manager_id
    assert body["user"]["role"] == "MANAGER"
    assert "passwordHash" not in body["user"]


def test_login_wrong_password(client, seed):
    resp = client.post("/auth/login", json={"email": "manager@hrportal.example.com", "password": "nope-nope"})

    assert resp.status_code == 401
    assert resp.get_json() == {
        "error": "unauthorized",
        "message": "Invalid credentials or account deactivated",
    }


def test_login_rejects_malformed_body(client, seed):
    assert client.post("/auth/login", data="email=x").status_code == 400
    assert client.post("/auth/login", json={"email": "manager@hrportal.example.com"}).status_code == 400


@pytest.mark.parametrize("email", ["manager", "manager@", "@hrportal.example.com", "manager hrportal.example.com"])
def test_login_rejects_invalid_email_format(client, seed, email):
    resp = client.post("/auth/login", json={"email": email, "password": "manager123"})

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "bad_request"


def test_login_email_is_case_insensitive(client, seed):
    resp = client.post("/auth/login", json={"email": "Manager@HRPortal.example.com", "password": "manager123"})

    assert resp.status_code == 200
    assert resp.get_json()["user"]["id"] == seed.manager_id


def test_me_returns_current_user(client, employee_headers, seed):
    resp = client.get("/auth/me", headers=employee_headers)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["id"] == seed.employee_id
    assert body["managerId"] == seed.manager_id
    assert body["departmentId"] == seed.department_id


def test_me_without_token(client, seed):
    resp = client.get("/auth/me")

    assert resp.status_code == 401
    assert resp.get_json()["error"] == "unauthorized"


def test_deactivated_user_loses_access(client, employee_headers, seed):
    row = db.session.get(UserRow, seed.employee_id)
    row.status = UserStatus.INACTIVE.value
    db.session.commit()

    assert client.get("/auth/me", headers=employee_headers).status_code == 401
    resp = client.post("/auth/login", json={"email": "employee@hrportal.example.com", "password": "employee123"})
    assert resp.status_code == 401


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok", "service": "hr-portal"}


def test_unknown_route_is_json_404(client):
    resp = client.get("/no-such-route")

    assert resp.status_code == 404
    assert resp.get_json()["error"] == "not_found"
