"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from shared.models import AuthenticatedUser, Role
from modules.billing.models import Subscription, SubscriptionSummary
from modules.categories.models import NavigationCategory

MAX_PASSWORD_BYTES = 72  # bcrypt ignores anything past this


def _normalize_email(value: str) -> str:
    if isinstance(value, str):
        return value.strip().lower()
    return value


def _check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


class TokenPayload(BaseModel):
    """
    Decoded JWT token payload.

    token_epoch must equal the principal's stored epoch for the token to
    be accepted.
    """

    sub: str = Field(..., description="Subject (principal ID)")
    role: Role = Field(..., description="Role at issue time")
    token_epoch: int = Field(..., description="Principal's token epoch at issue time")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")


class UserAccount(BaseModel):
    """
    A stored principal, user or admin.

    This is the full record including the password hash; it never
    leaves the service layer.
    """

    id: str = Field(..., description="Principal ID (UUID)")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address (lowercased)")
    password_hash: str = Field(..., description="bcrypt hash")
    phone: Optional[str] = Field(None)
    role: Role = Field(default=Role.USER)
    parent_category_id: Optional[str] = Field(None)
    sub_category_id: Optional[str] = Field(None)
    subscription: Subscription = Field(default_factory=Subscription)
    token_epoch: int = Field(default=0)
    created_at: datetime
    updated_at: datetime

    def to_authenticated_user(self) -> AuthenticatedUser:
        return AuthenticatedUser(
            id=self.id,
            email=self.email,
            name=self.name,
            role=self.role,
            token_epoch=self.token_epoch,
        )


class RegisterRequest(BaseModel):
    """User registration request."""

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=MAX_PASSWORD_BYTES)
    phone: Optional[str] = Field(None, max_length=20)
    parent_category_id: Optional[str] = Field(None, description="Top-level category")
    sub_category_id: Optional[str] = Field(None, description="Child of parent_category_id")

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return _normalize_email(value)

    @field_validator("password")
    @classmethod
    def check_password_bytes(cls, value: str) -> str:
        return _check_password_bytes(value)


class AdminRegisterRequest(BaseModel):
    """Admin registration request."""

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=MAX_PASSWORD_BYTES)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return _normalize_email(value)

    @field_validator("password")
    @classmethod
    def check_password_bytes(cls, value: str) -> str:
        return _check_password_bytes(value)


class LoginRequest(BaseModel):
    """Login request for users and admins."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return _normalize_email(value)


class AccountSummary(BaseModel):
    """Public identity of a principal."""

    id: str
    name: str
    email: str
    role: Role


class UserProfile(BaseModel):
    """
    Full profile of the current principal.

    Categories are resolved to their names; the subscription is reduced
    to what the client needs to decide what to show.
    """

    id: str = Field(..., description="Principal ID (UUID)")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")
    phone: Optional[str] = Field(None)
    role: Role = Field(default=Role.USER)
    parent_category: Optional[NavigationCategory] = Field(None)
    sub_category: Optional[NavigationCategory] = Field(None)
    subscription: SubscriptionSummary
    created_at: datetime


class RegistrationResponse(BaseModel):
    message: str
    user: AccountSummary


class TokenResponse(BaseModel):
    """Successful login."""

    message: str = "Login successful"
    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Token lifetime in seconds")
    user: UserProfile


class MessageResponse(BaseModel):
    message: str
