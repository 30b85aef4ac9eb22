"""
Admin module interface.
"""

from datetime import datetime
from typing import Optional, Protocol, runtime_checkable

from .models import (
    AnalyticsPeriod,
    DashboardOverview,
    ManagedUser,
    ManagedUserDetail,
    RevenueAnalytics,
    SubscriptionAnalytics,
    SubscriptionFilter,
    UpdateManagedUserRequest,
    UserAnalytics,
    UserListResponse,
)


@runtime_checkable
class IAdminService(Protocol):
    """Interface for the admin dashboard and user management."""

    async def overview(self) -> DashboardOverview:
        ...

    async def list_users(
        self,
        page: int = 1,
        limit: int = 20,
        search: Optional[str] = None,
        subscription: SubscriptionFilter = SubscriptionFilter.ALL,
    ) -> UserListResponse:
        """
        List regular users, newest first.

        Args:
            page: Page number (1-indexed)
            limit: Items per page
            search: Case-insensitive substring of name or email
            subscription: Keep only users with (or without) active access
        """
        ...

    async def get_user(self, user_id: str) -> ManagedUserDetail:
        """
        Raises:
            ManagedUserNotFoundError: If the user doesn't exist
        """
        ...

    async def delete_user(self, user_id: str) -> None:
        """
        Raises:
            ManagedUserNotFoundError: If the user doesn't exist
        """
        ...

    async def update_user(self, user_id: str, request: UpdateManagedUserRequest) -> ManagedUser:
        """
        Update name, phone or category assignment of a regular user.

        Raises:
            ManagedUserNotFoundError: If the user doesn't exist
            InvalidCategorySelectionError: If a category is unknown or the
                sub category is not under the parent
        """
        ...

    async def revenue_analytics(
        self,
        period: AnalyticsPeriod = AnalyticsPeriod.MONTHLY,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> RevenueAnalytics:
        """
        Payments in [start_date, end_date], bucketed by period.

        The window defaults to the last six months.

        Raises:
            InvalidDateRangeError: If start_date is after end_date
        """
        ...

    async def user_analytics(
        self,
        period: AnalyticsPeriod = AnalyticsPeriod.MONTHLY,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> UserAnalytics:
        """
        Sign-ups in the window plus current totals and category distribution.

        Raises:
            InvalidDateRangeError: If start_date is after end_date
        """
        ...

    async def subscription_analytics(self) -> SubscriptionAnalytics:
        ...
