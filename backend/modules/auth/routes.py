"""
Authentication API endpoints.

Registration and login for users and admins, logout and profile.
Mounted at the application root.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser, Role

from .interfaces import IAuthService
from .models import (
    AdminRegisterRequest,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    RegistrationResponse,
    TokenResponse,
    UserProfile,
)

router = APIRouter()


@router.post("/register", response_model=RegistrationResponse, status_code=201)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> RegistrationResponse:
    """
    Register a user under a parent category and one of its sub categories.
    """
    return await service.register_user(request)


@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> TokenResponse:
    """
    Log in and receive a bearer token.

    Any token issued before this login stops working.
    """
    return await service.login(request.email, request.password)


@router.post("/admin/register", response_model=RegistrationResponse, status_code=201)
async def register_admin(
    request: AdminRegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> RegistrationResponse:
    return await service.register_admin(request)


@router.post("/admin/login", response_model=TokenResponse)
async def admin_login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> TokenResponse:
    """
    Log in as an admin. Non-admin accounts get the same error as a wrong password.
    """
    return await service.login(request.email, request.password, role=Role.ADMIN)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> MessageResponse:
    """
    Invalidate all tokens issued to the current principal.
    """
    await service.logout(user.id)
    return MessageResponse(message="Logout successful. All tokens have been invalidated.")


@router.get("/profile", response_model=UserProfile)
async def get_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> UserProfile:
    return await service.get_profile(user.id)
