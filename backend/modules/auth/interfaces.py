"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks and future extraction to a microservice.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import Role

from .models import (
    AdminRegisterRequest,
    RegisterRequest,
    RegistrationResponse,
    TokenResponse,
    UserAccount,
    UserProfile,
)


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def register_user(self, request: RegisterRequest) -> RegistrationResponse:
        """
        Register a regular user under a parent/sub category pair.

        Raises:
            InvalidCategorySelectionError: If the categories are missing or inconsistent
            EmailAlreadyRegisteredError: If the email is taken
        """
        ...

    async def register_admin(self, request: AdminRegisterRequest) -> RegistrationResponse:
        """
        Register an admin principal.

        Raises:
            AdminRegistrationDisabledError: If admin registration is switched off
            EmailAlreadyRegisteredError: If the email is taken
        """
        ...

    async def login(self, email: str, password: str, role: Optional[Role] = None) -> TokenResponse:
        """
        Verify credentials and issue a token.

        Every successful login invalidates all earlier tokens.

        Args:
            email: Login email
            password: Plain-text password
            role: If given, the principal must have this role

        Raises:
            InvalidCredentialsError: On unknown email, wrong password or wrong role
        """
        ...

    async def logout(self, principal_id: str) -> None:
        """
        Invalidate every token issued to the principal so far.
        """
        ...

    async def authenticate(self, token: Optional[str]) -> UserAccount:
        """
        Validate a bearer token and load its principal.

        Raises:
            MissingTokenError, ExpiredTokenError, InvalidTokenError: On bad tokens
            UserNotFoundError: If the principal no longer exists
            StaleTokenError: If the token predates the latest login/logout
        """
        ...

    async def require_entitlement(self, token: Optional[str]) -> UserAccount:
        """
        Authenticate and require an active subscription.

        Raises:
            SubscriptionRequiredError: If the subscription isn't active
        """
        ...

    async def require_admin(self, token: Optional[str]) -> UserAccount:
        """
        Authenticate and require the admin role.

        Raises:
            InsufficientPermissionsError: If the principal isn't an admin
        """
        ...

    async def get_profile(self, principal_id: str) -> UserProfile:
        """
        Get the principal's profile with resolved categories.

        Raises:
            UserNotFoundError: If the principal doesn't exist
        """
        ...
