"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations together with the
external collaborators (database, blob storage, AI, payments) they need.

Every FastAPI dependency goes through get_container, so tests swap the
whole graph with a single dependency override.
"""

from typing import TYPE_CHECKING, Optional

from fastapi import Depends
from supabase import Client

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from providers.base import AIClient, BlobStorage, PaymentGateway
    from modules.auth.interfaces import IAuthService
    from modules.billing.interfaces import IBillingService
    from modules.categories.interfaces import ICategoryService
    from modules.chat.interfaces import IChatService
    from modules.admin.interfaces import IAdminService
    from modules.quizzes.interfaces import IQuizService
    from modules.sponsors.interfaces import ISponsorService
    from modules.blogs.interfaces import IBlogService
    from modules.banners.interfaces import IBannerService
    from modules.updates.interfaces import IUpdateService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    Collaborators can be passed in explicitly; anything not passed is
    built from settings on first use. All instances are cached within
    the container. Use reset() to clear cached services for testing.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        db: Optional[Client] = None,
        storage: "Optional[BlobStorage]" = None,
        ai: "Optional[AIClient]" = None,
        payments: "Optional[PaymentGateway]" = None,
    ) -> None:
        self._settings = settings
        self._db = db
        self._storage = storage
        self._ai = ai
        self._payments = payments
        self._services: dict[str, object] = {}

    # -------------------------------------------------------------------------
    # Collaborators
    # -------------------------------------------------------------------------

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def db(self) -> Client:
        """Get the Supabase client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client()
        return self._db

    @property
    def storage(self) -> "BlobStorage":
        if self._storage is None:
            from providers.factory import build_blob_storage
            self._storage = build_blob_storage(self.settings, self.db)
        return self._storage

    @property
    def ai(self) -> "AIClient":
        if self._ai is None:
            from providers.factory import build_ai_client
            self._ai = build_ai_client(self.settings)
        return self._ai

    @property
    def payments(self) -> "PaymentGateway":
        if self._payments is None:
            from providers.factory import build_payment_gateway
            self._payments = build_payment_gateway(self.settings)
        return self._payments

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------

    @property
    def categories(self) -> "ICategoryService":
        """Get the category tree service instance."""
        if "categories" not in self._services:
            from modules.categories.repository import CategoryRepository
            from modules.categories.service import CategoryService
            self._services["categories"] = CategoryService(
                repository=CategoryRepository(self.db),
                storage=self.storage,
                settings=self.settings,
            )
        return self._services["categories"]

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if "auth" not in self._services:
            from modules.auth.repository import UserRepository
            from modules.auth.service import AuthService
            self._services["auth"] = AuthService(
                users=UserRepository(self.db),
                categories=self.categories,
                settings=self.settings,
            )
        return self._services["auth"]

    @property
    def billing(self) -> "IBillingService":
        """Get the billing service instance."""
        if "billing" not in self._services:
            from modules.billing.repository import BillingRepository
            from modules.billing.service import BillingService
            self._services["billing"] = BillingService(
                repository=BillingRepository(self.db),
                payments=self.payments,
                settings=self.settings,
            )
        return self._services["billing"]

    @property
    def chat(self) -> "IChatService":
        """Get the chat service instance."""
        if "chat" not in self._services:
            from modules.chat.repository import ChatRepository
            from modules.chat.service import ChatService
            self._services["chat"] = ChatService(
                repository=ChatRepository(self.db),
                ai=self.ai,
                settings=self.settings,
            )
        return self._services["chat"]

    @property
    def admin(self) -> "IAdminService":
        if "admin" not in self._services:
            from modules.admin.repository import AdminRepository
            from modules.admin.service import AdminService
            self._services["admin"] = AdminService(
                repository=AdminRepository(self.db),
                categories=self.categories,
            )
        return self._services["admin"]

    @property
    def quizzes(self) -> "IQuizService":
        if "quizzes" not in self._services:
            from modules.quizzes.repository import QuizRepository
            from modules.quizzes.service import QuizService
            self._services["quizzes"] = QuizService(QuizRepository(self.db))
        return self._services["quizzes"]

    @property
    def sponsors(self) -> "ISponsorService":
        if "sponsors" not in self._services:
            from modules.sponsors.repository import SponsorRepository
            from modules.sponsors.service import SponsorService
            self._services["sponsors"] = SponsorService(SponsorRepository(self.db))
        return self._services["sponsors"]

    @property
    def blogs(self) -> "IBlogService":
        if "blogs" not in self._services:
            from modules.blogs.repository import BlogRepository
            from modules.blogs.service import BlogService
            self._services["blogs"] = BlogService(BlogRepository(self.db), self.storage)
        return self._services["blogs"]

    @property
    def banners(self) -> "IBannerService":
        if "banners" not in self._services:
            from modules.banners.repository import BannerRepository
            from modules.banners.service import BannerService
            self._services["banners"] = BannerService(BannerRepository(self.db), self.storage)
        return self._services["banners"]

    @property
    def updates(self) -> "IUpdateService":
        if "updates" not in self._services:
            from modules.updates.repository import UpdateRepository
            from modules.updates.service import UpdateService
            self._services["updates"] = UpdateService(UpdateRepository(self.db), self.storage)
        return self._services["updates"]

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._services.clear()


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_settings_dependency(container: ServiceContainer = Depends(get_container)) -> Settings:
    """FastAPI dependency for settings."""
    return container.settings


def get_auth_service(container: ServiceContainer = Depends(get_container)) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return container.auth


def get_category_service(container: ServiceContainer = Depends(get_container)) -> "ICategoryService":
    """FastAPI dependency for category service."""
    return container.categories


def get_billing_service(container: ServiceContainer = Depends(get_container)) -> "IBillingService":
    """FastAPI dependency for billing service."""
    return container.billing


def get_chat_service(container: ServiceContainer = Depends(get_container)) -> "IChatService":
    """FastAPI dependency for chat service."""
    return container.chat


def get_admin_service(container: ServiceContainer = Depends(get_container)) -> "IAdminService":
    """FastAPI dependency for admin service."""
    return container.admin


def get_quiz_service(container: ServiceContainer = Depends(get_container)) -> "IQuizService":
    """FastAPI dependency for quiz service."""
    return container.quizzes


def get_sponsor_service(container: ServiceContainer = Depends(get_container)) -> "ISponsorService":
    """FastAPI dependency for sponsor service."""
    return container.sponsors


def get_blog_service(container: ServiceContainer = Depends(get_container)) -> "IBlogService":
    """FastAPI dependency for blog service."""
    return container.blogs


def get_banner_service(container: ServiceContainer = Depends(get_container)) -> "IBannerService":
    """FastAPI dependency for hero banner service."""
    return container.banners


def get_update_service(container: ServiceContainer = Depends(get_container)) -> "IUpdateService":
    """FastAPI dependency for latest update service."""
    return container.updates
