"""
Admin module.

Dashboard statistics, analytics and user management for admins.

Public API:
- IAdminService: Interface for admin operations
- DashboardOverview, ManagedUser: Response models
- RevenueAnalytics, UserAnalytics, SubscriptionAnalytics: Analytics reports
"""

from .interfaces import IAdminService
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
from .exceptions import InvalidDateRangeError, ManagedUserNotFoundError

__all__ = [
    "IAdminService",
    "AnalyticsPeriod",
    "DashboardOverview",
    "ManagedUser",
    "ManagedUserDetail",
    "RevenueAnalytics",
    "SubscriptionAnalytics",
    "SubscriptionFilter",
    "UpdateManagedUserRequest",
    "UserAnalytics",
    "UserListResponse",
    "InvalidDateRangeError",
    "ManagedUserNotFoundError",
]
