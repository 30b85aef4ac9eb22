"""
Admin dashboard API endpoints.

All endpoints require the admin role.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_admin_service
from api.middleware.auth import require_admin
from shared.models import AuthenticatedUser

from .interfaces import IAdminService
from .models import (
    AnalyticsPeriod,
    DashboardOverview,
    DeleteUserResponse,
    ManagedUserDetail,
    RevenueAnalytics,
    SubscriptionAnalytics,
    SubscriptionFilter,
    UpdateManagedUserRequest,
    UpdateUserResponse,
    UserAnalytics,
    UserListResponse,
)

router = APIRouter()


@router.get("/dashboard/overview", response_model=DashboardOverview)
async def dashboard_overview(
    admin: AuthenticatedUser = Depends(require_admin),
    service: IAdminService = Depends(get_admin_service),
) -> DashboardOverview:
    """
    User counts, revenue and subscription statistics, plus recent activity.
    """
    return await service.overview()


@router.get("/users", response_model=UserListResponse)
async def list_users(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    search: Optional[str] = Query(default=None, description="Match on name or email"),
    subscription: SubscriptionFilter = Query(default=SubscriptionFilter.ALL),
    admin: AuthenticatedUser = Depends(require_admin),
    service: IAdminService = Depends(get_admin_service),
) -> UserListResponse:
    return await service.list_users(page, limit, search, subscription)


@router.get("/users/{user_id}", response_model=ManagedUserDetail)
async def get_user(
    user_id: str,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IAdminService = Depends(get_admin_service),
) -> ManagedUserDetail:
    return await service.get_user(user_id)


@router.delete("/users/{user_id}", response_model=DeleteUserResponse)
async def delete_user(
    user_id: str,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IAdminService = Depends(get_admin_service),
) -> DeleteUserResponse:
    await service.delete_user(user_id)
    return DeleteUserResponse(message="User deleted successfully")


@router.put("/users/{user_id}", response_model=UpdateUserResponse)
async def update_user(
    user_id: str,
    request: UpdateManagedUserRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IAdminService = Depends(get_admin_service),
) -> UpdateUserResponse:
    user = await service.update_user(user_id, request)
    return UpdateUserResponse(message="User updated successfully", user=user)


@router.get("/analytics/revenue", response_model=RevenueAnalytics)
async def revenue_analytics(
    period: AnalyticsPeriod = Query(default=AnalyticsPeriod.MONTHLY),
    start_date: Optional[datetime] = Query(default=None, description="Defaults to six months before end_date"),
    end_date: Optional[datetime] = Query(default=None, description="Defaults to now"),
    admin: AuthenticatedUser = Depends(require_admin),
    service: IAdminService = Depends(get_admin_service),
) -> RevenueAnalytics:
    return await service.revenue_analytics(period, start_date, end_date)


@router.get("/analytics/users", response_model=UserAnalytics)
async def user_analytics(
    period: AnalyticsPeriod = Query(default=AnalyticsPeriod.MONTHLY),
    start_date: Optional[datetime] = Query(default=None),
    end_date: Optional[datetime] = Query(default=None),
    admin: AuthenticatedUser = Depends(require_admin),
    service: IAdminService = Depends(get_admin_service),
) -> UserAnalytics:
    return await service.user_analytics(period, start_date, end_date)


@router.get("/analytics/subscriptions", response_model=SubscriptionAnalytics)
async def subscription_analytics(
    admin: AuthenticatedUser = Depends(require_admin),
    service: IAdminService = Depends(get_admin_service),
) -> SubscriptionAnalytics:
    """
    Subscription counts, recurring revenue and monthly new subscriptions.
    """
    return await service.subscription_analytics()
