"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class Role(str, Enum):
    """Principal roles."""

    USER = "user"
    ADMIN = "admin"


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated principal in the system.

    Built from a verified token and the stored principal record, and made
    available to route handlers via dependency injection.
    """

    id: str = Field(..., description="Principal ID (UUID)")
    email: str = Field(..., description="Email address")
    name: Optional[str] = Field(None, description="Display name")
    role: Role = Field(default=Role.USER, description="Principal role")
    token_epoch: int = Field(default=0, description="Token epoch the request was made with")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


class UploadedFile(BaseModel):
    """
    A file received in a multipart request.

    Route handlers read the upload into memory and hand services this
    model, so services never touch framework upload objects.
    """

    filename: str = Field(..., description="Client-supplied file name")
    content_type: str = Field(default="application/octet-stream", description="MIME type")
    data: bytes = Field(..., description="Raw file content")

    model_config = {"frozen": True}

    @property
    def size(self) -> int:
        return len(self.data)
