from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt
import pytest
from werkzeug.security import generate_password_hash

from hr_portal.core.enums import Role, UserStatus
from hr_portal.core.exceptions import AuthenticationError, ValidationError
from hr_portal.users.model import User
from hr_portal.users.service import AuthService
from hr_portal.users.tokens import TokenService

SECRET = "unit-test-secret-with-enough-length-for-hs256"


class InMemoryUsers:
    def __init__(self, *users):
        self._users = {u.user_id: u for u in users}

    def get_by_id(self, user_id):
        return self._users.get(user_id)

    def get_by_email(self, email):
        return next((u for u in self._users.values() if u.email == email.strip().lower()), None)

    def list_direct_report_ids(self, manager_id):
        return [u.user_id for u in self._users.values() if u.manager_id == manager_id]


def make_user(user_id, *, password="secret123", status=UserStatus.ACTIVE, role=Role.EMPLOYEE):
    return User(
        user_id=user_id,
        email=f"{user_id}@example.com",
        first_name=user_id.title(),
        last_name="Doe",
        password_hash=generate_password_hash(password),
        role=role,
        status=status,
    )


@pytest.fixture
def tokens():
    return TokenService(SECRET, lifetime_minutes=60)


@pytest.fixture
def svc(tokens):
    return AuthService(
        InMemoryUsers(make_user("jane", role=Role.MANAGER), make_user("gone", status=UserStatus.INACTIVE)),
        tokens,
    )


def test_login_issues_token_for_user(svc, tokens):
    result = svc.authenticate("jane@example.com", "secret123")

    claims = tokens.decode(result.access_token)
    assert result.user.user_id == "jane"
    assert claims.user_id == "jane"
    assert claims.role == Role.MANAGER


def test_login_is_case_insensitive_on_email(svc):
    assert svc.authenticate("  JANE@example.com ", "secret123").user.user_id == "jane"


@pytest.mark.parametrize(
    "email,password",
    [
        ("jane@example.com", "wrong-password"),
        ("nobody@example.com", "secret123"),
        ("gone@example.com", "secret123"),
    ],
)
def test_login_failures_share_one_message(svc, email, password):
    with pytest.raises(AuthenticationError) as exc:
        svc.authenticate(email, password)
    assert str(exc.value) == "Invalid credentials or account deactivated"


def test_login_requires_email(svc):
    with pytest.raises(ValidationError):
        svc.authenticate("  ", "secret123")


def test_get_active_user(svc):
    assert svc.get_active_user("jane").email == "jane@example.com"


@pytest.mark.parametrize("user_id", ["missing", "gone"])
def test_get_active_user_rejects_missing_or_inactive(svc, user_id):
    with pytest.raises(AuthenticationError):
        svc.get_active_user(user_id)


def test_token_lifetime_is_applied(tokens):
    now = datetime(2026, 1, 5, 8, 0, tzinfo=timezone.utc)
    token = tokens.issue(make_user("jane"), now=now)

    payload = jwt.decode(token, SECRET, algorithms=["HS256"], options={"verify_exp": False})

    assert payload["sub"] == "jane"
    assert payload["role"] == "EMPLOYEE"
    assert payload["exp"] - payload["iat"] == 3600


def test_expired_token_is_rejected(tokens):
    token = tokens.issue(make_user("jane"), now=datetime.now(timezone.utc) - timedelta(hours=2))

    with pytest.raises(AuthenticationError) as exc:
        tokens.decode(token)
    assert str(exc.value) == "Token has expired"


def test_token_signed_with_other_secret_is_rejected(tokens):
    other = TokenService("another-secret-that-is-also-long-enough", lifetime_minutes=60)
    token = other.issue(make_user("jane"))

    with pytest.raises(AuthenticationError) as exc:
        tokens.decode(token)
    assert str(exc.value) == "Invalid token"


def test_token_with_unknown_role_is_rejected(tokens):
    token = jwt.encode(
        {"sub": "jane", "role": "SUPERUSER", "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
        SECRET,
        algorithm="HS256",
    )
    with pytest.raises(AuthenticationError):
        tokens.decode(token)


def test_empty_secret_is_refused():
    with pytest.raises(ValueError):
        TokenService("")
