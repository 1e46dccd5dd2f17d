class DomainError(Exception):
    """Base exception for business rule violations.

    ``kind`` and ``status_code`` drive the JSON error response.
    """

    kind = "domain_error"
    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    kind = "bad_request"
    status_code = 400


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""

    kind = "not_found"
    status_code = 404


class AuthenticationError(DomainError):
    """Raised when credentials or bearer tokens are invalid."""

    kind = "unauthorized"
    status_code = 401


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    kind = "forbidden"
    status_code = 403
