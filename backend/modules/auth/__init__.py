"""
Authentication module.

Handles registration, password login, JWT sessions with token epochs,
and the entitlement and admin gates.

Public API:
- IAuthService: Interface for auth operations
- UserAccount: Stored principal
- UserProfile: Profile returned to clients
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import (
    UserAccount,
    UserProfile,
    TokenPayload,
    TokenResponse,
    RegisterRequest,
    AdminRegisterRequest,
    LoginRequest,
)
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    StaleTokenError,
    UserNotFoundError,
    InvalidCredentialsError,
    EmailAlreadyRegisteredError,
    InvalidCategorySelectionError,
    SubscriptionRequiredError,
    InsufficientPermissionsError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "UserAccount",
    "UserProfile",
    "TokenPayload",
    "TokenResponse",
    "RegisterRequest",
    "AdminRegisterRequest",
    "LoginRequest",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "StaleTokenError",
    "UserNotFoundError",
    "InvalidCredentialsError",
    "EmailAlreadyRegisteredError",
    "InvalidCategorySelectionError",
    "SubscriptionRequiredError",
    "InsufficientPermissionsError",
]
