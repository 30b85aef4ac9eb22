"""
JWT Authentication middleware.

FastAPI dependencies that turn a bearer token into an AuthenticatedUser.
Token checks live in the auth service; failures are raised as
ScholarisError subclasses and mapped to 401/403 by the app's error
handler.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from shared.models import AuthenticatedUser
from modules.auth.interfaces import IAuthService

from ..dependencies import get_auth_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def _token(credentials: Optional[HTTPAuthorizationCredentials]) -> Optional[str]:
    return credentials.credentials if credentials else None


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    account = await auth.authenticate(_token(credentials))
    return account.to_authenticated_user()


async def require_entitlement(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires an active subscription.

    401 when not logged in, 403 when logged in without access.
    """
    account = await auth.require_entitlement(_token(credentials))
    return account.to_authenticated_user()


async def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires the admin role.

    401 when not logged in, 403 for non-admins.
    """
    account = await auth.require_admin(_token(credentials))
    return account.to_authenticated_user()

