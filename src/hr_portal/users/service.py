from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash

from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError
from .model import User
from .repository import UserRepository
from .tokens import TokenService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    access_token: str
    user: User


class AuthService:
    """Use case: authenticate a user (login) and resolve the current user."""

    def __init__(self, users: UserRepository, tokens: TokenService):
        self._users = users
        self._tokens = tokens

    def authenticate(self, email: str, password: str) -> LoginResult:
        email = require_non_empty(email, "Email")
        user = self._users.get_by_email(email)
        if not user or not user.is_active:
            logger.warning("Login rejected for %s: unknown or inactive account", email)
            raise AuthenticationError("Invalid credentials or account deactivated")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # unsupported or corrupted hash values
            ok = False

        if not ok:
            logger.warning("Login rejected for %s: wrong password", email)
            raise AuthenticationError("Invalid credentials or account deactivated")

        logger.info("User %s logged in", user.user_id)
        return LoginResult(access_token=self._tokens.issue(user), user=user)

    def get_active_user(self, user_id: str) -> User:
        """Resolve the caller of a bearer token. Missing or deactivated users are rejected."""
        user = self._users.get_by_id(user_id)
        if not user or not user.is_active:
            raise AuthenticationError("Authentication required")
        return user
