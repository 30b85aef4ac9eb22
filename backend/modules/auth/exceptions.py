"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ScholarisError,
    ValidationError,
)


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class StaleTokenError(AuthenticationError):
    """Raised when a token was issued before the latest login or logout."""

    def __init__(self):
        super().__init__(
            "Token has been invalidated. Please log in again.",
            code="TOKEN_INVALIDATED",
        )


class UserNotFoundError(AuthenticationError):
    """Raised when the authenticated user doesn't exist in the database."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class InvalidCredentialsError(AuthenticationError):
    """Raised on a failed login. Deliberately doesn't say which part was wrong."""

    def __init__(self):
        super().__init__("Invalid email or password", code="INVALID_CREDENTIALS")


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when registering with an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            "An account with this email already exists",
            code="EMAIL_ALREADY_REGISTERED",
            details={"email": email},
        )


class InvalidCategorySelectionError(ValidationError):
    """Raised when registration categories are missing or inconsistent."""

    def __init__(self, message: str, field: str):
        super().__init__(message, code="INVALID_CATEGORY", details={"field": field})


class TokenEpochConflictError(ConflictError):
    """Raised when concurrent logins keep racing on the same account."""

    def __init__(self, user_id: str):
        super().__init__(
            "Session state changed concurrently, please retry",
            code="SESSION_CONFLICT",
            details={"user_id": user_id},
        )


class SubscriptionRequiredError(AuthorizationError):
    """Raised when a gated resource is requested without an active subscription."""

    def __init__(self):
        super().__init__(
            "An active subscription is required to access this content",
            code="SUBSCRIPTION_REQUIRED",
            details={
                "subscription_status": "inactive",
                "redirect_to": "/subscription/plans",
            },
        )


class InsufficientPermissionsError(AuthorizationError):
    """Raised when user lacks required permissions."""

    def __init__(self, required_role: str, user_role: str):
        super().__init__(
            f"Insufficient permissions. Required: {required_role}, has: {user_role}",
            code="INSUFFICIENT_PERMISSIONS",
            details={"required_role": required_role, "user_role": user_role},
        )


class AdminRegistrationDisabledError(AuthorizationError):
    """Raised when admin self-registration is switched off."""

    def __init__(self):
        super().__init__("Admin registration is disabled", code="ADMIN_REGISTRATION_DISABLED")


class AuthConfigurationError(ScholarisError):
    """Raised when the server has no JWT secret configured."""

    def __init__(self):
        super().__init__(
            "Server authentication not configured",
            code="AUTH_NOT_CONFIGURED",
        )
