"""
Shared infrastructure for Scholaris backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base class for Supabase-backed repositories

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, ping_database, reset_client_cache
from .exceptions import (
    ScholarisError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
)
from .models import AuthenticatedUser, Role, UploadedFile

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "ping_database",
    "reset_client_cache",
    "ScholarisError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "AuthenticatedUser",
    "Role",
    "UploadedFile",
]
