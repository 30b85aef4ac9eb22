"""
Base exception classes for the Scholaris backend.

Module exceptions inherit from one of the bases below. Each base carries the
HTTP status it is reported with and a fallback error code, so a module only
has to pick the right parent and, usually, a more specific code.
"""

from typing import Optional, Any


class ScholarisError(Exception):
    """
    Base exception for all Scholaris errors.

    Raised directly it is reported as an internal error.
    """

    status_code: int = 500
    default_code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}


class ValidationError(ScholarisError):
    """Input validation failed."""

    status_code = 400
    default_code = "INVALID_REQUEST"


class AuthenticationError(ScholarisError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401
    default_code = "UNAUTHENTICATED"


class AuthorizationError(ScholarisError):
    """Authenticated, but not allowed to do this."""

    status_code = 403
    default_code = "FORBIDDEN"


class NotFoundError(ScholarisError):
    """Resource not found."""

    status_code = 404
    default_code = "NOT_FOUND"


class ConflictError(ScholarisError):
    """A unique field already holds the submitted value, or a concurrent write won."""

    status_code = 409
    default_code = "CONFLICT"


class ExternalServiceError(ScholarisError):
    """Error communicating with an external service."""

    status_code = 503
    default_code = "SERVICE_UNAVAILABLE"

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
