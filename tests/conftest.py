from __future__ import annotations

import pytest

from hr_portal.database.bootstrap import init_schema, seed_demo_data
from hr_portal.database.extensions import db
from hr_portal.main import create_app

SEED_YEAR = 2026


@pytest.fixture
def app():
    app = create_app("hr_portal.config.testing")
    with app.app_context():
        init_schema()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def seed(app):
    return seed_demo_data(year=SEED_YEAR)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(client, seed):
    def _login(email: str, password: str) -> dict:
        resp = client.post("/auth/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.get_json()
        return {"Authorization": f"Bearer {resp.get_json()['accessToken']}"}

    return _login


@pytest.fixture
def employee_headers(auth_headers):
    return auth_headers("employee@hrportal.example.com", "employee123")


@pytest.fixture
def manager_headers(auth_headers):
    return auth_headers("manager@hrportal.example.com", "manager123")


@pytest.fixture
def admin_headers(auth_headers):
    return auth_headers("admin@hrportal.example.com", "admin123")
