from __future__ import annotations

from functools import wraps

from flask import current_app, g, request

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError

CONTAINER_KEY = "hr_portal.container"


def get_container():
    return current_app.extensions[CONTAINER_KEY]


def _bearer_token() -> str:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme != "Bearer" or not token.strip():
        raise AuthenticationError("Missing or invalid Authorization header")
    return token.strip()


def bearer_required(view):
    """Verify the bearer token and load the caller into ``g.current_user``."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        container = get_container()
        claims = container.token_service.decode(_bearer_token())
        g.current_user = container.auth_service.get_active_user(claims.user_id)
        return view(*args, **kwargs)

    return wrapper


def roles_required(*roles: Role):
    """Restrict a view to the given roles. Must sit below ``bearer_required``."""
    allowed = frozenset(Role(r) for r in roles)

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = g.get("current_user")
            if user is None:
                raise AuthenticationError("Authentication required")
            if user.role not in allowed:
                raise AuthorizationError("Permission denied")
            return view(*args, **kwargs)

        return wrapper

    return decorator
