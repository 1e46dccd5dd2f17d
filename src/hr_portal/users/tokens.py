from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from ..core.constants import DEFAULT_ACCESS_TOKEN_MINUTES, JWT_ALGORITHM
from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from .model import User


@dataclass(frozen=True)
class TokenClaims:
    user_id: str
    role: Role


class TokenService:
    """Issues and verifies signed bearer tokens (JWT, HS256)."""

    def __init__(self, secret: str, *, lifetime_minutes: int = DEFAULT_ACCESS_TOKEN_MINUTES):
        if not secret:
            raise ValueError("JWT secret must be configured")
        self._secret = secret
        self._lifetime = timedelta(minutes=int(lifetime_minutes))

    def issue(self, user: User, *, now: Optional[datetime] = None) -> str:
        now = now or datetime.now(timezone.utc)
        payload = {
            "sub": user.user_id,
            "role": user.role.value,
            "iat": now,
            "exp": now + self._lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)

    def decode(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token has expired")
        except jwt.InvalidTokenError:
            raise AuthenticationError("Invalid token")

        try:
            role = Role(payload.get("role"))
        except ValueError:
            raise AuthenticationError("Invalid token")

        return TokenClaims(
            user_id=str(payload["sub"]),
            role=role,
        )
