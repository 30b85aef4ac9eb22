"""
Authentication service implementation.

Issues and validates HS256 JWTs for users and admins. Each principal has
a token epoch; logging in or out bumps it, which invalidates every token
issued before.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings, get_settings
from shared.models import Role
from modules.billing.entitlement import has_active_access, summarize
from modules.categories.exceptions import CategoryNotFoundError
from modules.categories.interfaces import ICategoryService
from modules.categories.models import NavigationCategory

from .exceptions import (
    AdminRegistrationDisabledError,
    AuthConfigurationError,
    EmailAlreadyRegisteredError,
    ExpiredTokenError,
    InsufficientPermissionsError,
    InvalidCategorySelectionError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    StaleTokenError,
    SubscriptionRequiredError,
    TokenEpochConflictError,
    UserNotFoundError,
)
from .interfaces import IAuthService
from .models import (
    AccountSummary,
    AdminRegisterRequest,
    RegisterRequest,
    RegistrationResponse,
    TokenPayload,
    TokenResponse,
    UserAccount,
    UserProfile,
)
from .passwords import hash_password, verify_password
from .repository import UserRepository

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Principals live in the users table; admins are principals with
    role=admin.
    """

    def __init__(
        self,
        users: UserRepository,
        categories: ICategoryService,
        settings: Optional[Settings] = None,
    ):
        self._users = users
        self._categories = categories
        self._settings = settings or get_settings()

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    async def register_user(self, request: RegisterRequest) -> RegistrationResponse:
        if not request.parent_category_id:
            raise InvalidCategorySelectionError(
                "Parent category ID is required", field="parent_category_id"
            )
        parent = await self._find_category(request.parent_category_id)
        if parent is None:
            raise InvalidCategorySelectionError(
                "Invalid parent category ID", field="parent_category_id"
            )

        if not request.sub_category_id:
            raise InvalidCategorySelectionError(
                "Sub category ID is required", field="sub_category_id"
            )
        sub = await self._find_category(request.sub_category_id)
        if sub is None:
            raise InvalidCategorySelectionError(
                "Invalid sub category ID", field="sub_category_id"
            )
        if sub.parent_id != parent.id:
            raise InvalidCategorySelectionError(
                "Sub category does not belong to the selected parent category",
                field="sub_category_id",
            )

        self._ensure_email_available(request.email)

        account = self._users.create(
            name=request.name,
            email=request.email,
            password_hash=hash_password(request.password, self._settings.bcrypt_rounds),
            role=Role.USER,
            phone=request.phone,
            parent_category_id=parent.id,
            sub_category_id=sub.id,
        )
        logger.info("Registered user %s", account.id)
        return RegistrationResponse(
            message="User registered successfully",
            user=self._summary(account),
        )

    async def register_admin(self, request: AdminRegisterRequest) -> RegistrationResponse:
        if not self._settings.admin_registration_enabled:
            raise AdminRegistrationDisabledError()

        self._ensure_email_available(request.email)

        account = self._users.create(
            name=request.name,
            email=request.email,
            password_hash=hash_password(request.password, self._settings.bcrypt_rounds),
            role=Role.ADMIN,
        )
        logger.info("Registered admin %s", account.id)
        return RegistrationResponse(
            message="Admin registered successfully",
            user=self._summary(account),
        )

    async def _find_category(self, category_id: str):
        try:
            return await self._categories.get_node(category_id)
        except CategoryNotFoundError:
            return None

    def _ensure_email_available(self, email: str) -> None:
        if self._users.get_by_email(email) is not None:
            raise EmailAlreadyRegisteredError(email)

    # -------------------------------------------------------------------------
    # Sessions
    # -------------------------------------------------------------------------

    async def login(self, email: str, password: str, role: Optional[Role] = None) -> TokenResponse:
        account = self._users.get_by_email(email.strip().lower())
        if account is None or not verify_password(password, account.password_hash):
            raise InvalidCredentialsError()
        if role is not None and account.role != role:
            raise InvalidCredentialsError()

        epoch = self._users.increment_token_epoch(account.id)
        if epoch is None:
            raise TokenEpochConflictError(account.id)
        account = account.model_copy(update={"token_epoch": epoch})

        token, ttl = self._issue_token(account)
        logger.info("Login for %s %s", account.role.value, account.id)

        return TokenResponse(
            access_token=token,
            expires_in=int(ttl.total_seconds()),
            user=await self._build_profile(account),
        )

    async def logout(self, principal_id: str) -> None:
        if self._users.increment_token_epoch(principal_id) is None:
            raise TokenEpochConflictError(principal_id)
        logger.info("Logout for %s, all tokens invalidated", principal_id)

    def _signing_secret(self) -> str:
        if not self._settings.jwt_secret:
            raise AuthConfigurationError()
        return self._settings.jwt_secret

    def _issue_token(self, account: UserAccount) -> tuple[str, timedelta]:
        if account.role == Role.ADMIN:
            ttl = timedelta(hours=self._settings.admin_token_ttl_hours)
        else:
            ttl = timedelta(hours=self._settings.user_token_ttl_hours)

        now = datetime.now(timezone.utc)
        payload = {
            "sub": account.id,
            "role": account.role.value,
            "token_epoch": account.token_epoch,
            "iat": int(now.timestamp()),
            "exp": int((now + ttl).timestamp()),
        }
        token = jwt.encode(payload, self._signing_secret(), algorithm=self._settings.jwt_algorithm)
        return token, ttl

    # -------------------------------------------------------------------------
    # Request gates
    # -------------------------------------------------------------------------

    async def authenticate(self, token: Optional[str]) -> UserAccount:
        if not token:
            raise MissingTokenError()

        try:
            raw = jwt.decode(
                token,
                self._signing_secret(),
                algorithms=[self._settings.jwt_algorithm],
                options={"require": ["exp", "iat", "sub"]},
            )
            payload = TokenPayload(**raw)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")
        except PydanticValidationError:
            raise InvalidTokenError("Invalid token: malformed claims")

        account = self._users.get_by_id(payload.sub)
        if account is None:
            raise UserNotFoundError(payload.sub)
        if account.token_epoch != payload.token_epoch:
            raise StaleTokenError()
        return account

    async def require_entitlement(self, token: Optional[str]) -> UserAccount:
        account = await self.authenticate(token)
        if not has_active_access(account.subscription):
            raise SubscriptionRequiredError()
        return account

    async def require_admin(self, token: Optional[str]) -> UserAccount:
        account = await self.authenticate(token)
        if account.role != Role.ADMIN:
            raise InsufficientPermissionsError(Role.ADMIN.value, account.role.value)
        return account

    # -------------------------------------------------------------------------
    # Profile
    # -------------------------------------------------------------------------

    async def get_profile(self, principal_id: str) -> UserProfile:
        account = self._users.get_by_id(principal_id)
        if account is None:
            raise UserNotFoundError(principal_id)
        return await self._build_profile(account)

    async def _build_profile(self, account: UserAccount) -> UserProfile:
        return UserProfile(
            id=account.id,
            name=account.name,
            email=account.email,
            phone=account.phone,
            role=account.role,
            parent_category=await self._category_summary(account.parent_category_id),
            sub_category=await self._category_summary(account.sub_category_id),
            subscription=summarize(account.subscription),
            created_at=account.created_at,
        )

    async def _category_summary(self, category_id: Optional[str]) -> Optional[NavigationCategory]:
        if not category_id:
            return None
        node = await self._find_category(category_id)
        if node is None:
            return None
        return NavigationCategory(id=node.id, name=node.name, kind=node.kind)

    @staticmethod
    def _summary(account: UserAccount) -> AccountSummary:
        return AccountSummary(
            id=account.id,
            name=account.name,
            email=account.email,
            role=account.role,
        )
