"""
Admin dashboard service implementation.

Subscription state lives in a jsonb column and expiry is lazy, so all
statistics are computed in Python from the user rows using the same
entitlement rules the request gates use.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Optional

from modules.billing.entitlement import has_active_access, subscription_state
from modules.billing.models import SubscriptionState
from modules.auth.exceptions import InvalidCategorySelectionError
from modules.categories.exceptions import CategoryNotFoundError
from modules.categories.interfaces import ICategoryService

from . import analytics
from .exceptions import InvalidDateRangeError, ManagedUserNotFoundError
from .interfaces import IAdminService
from .models import (
    AnalyticsPeriod,
    CategoryRef,
    DashboardAnalytics,
    DashboardOverview,
    ManagedSubscription,
    ManagedUser,
    ManagedUserDetail,
    RecentActivity,
    RecentPayment,
    RecentUser,
    RevenueAnalytics,
    SubscriptionAnalytics,
    SubscriptionFilter,
    SubscriptionStats,
    UpdateManagedUserRequest,
    UserAnalytics,
    UserListResponse,
    UserRecord,
)
from .repository import AdminRepository

logger = logging.getLogger(__name__)

RECENT_ITEMS = 5


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


class AdminService(IAdminService):
    """Implementation of the admin dashboard service."""

    def __init__(self, repository: AdminRepository, categories: ICategoryService):
        self._repository = repository
        self._categories = categories

    async def overview(self) -> DashboardOverview:
        now = datetime.now(timezone.utc)
        users = self._repository.list_users()

        stats = SubscriptionStats()
        for user in users:
            state = subscription_state(user.subscription, now)
            if state == SubscriptionState.ACTIVE:
                stats.active += 1
            elif state == SubscriptionState.EXPIRED:
                stats.expired += 1
            elif state == SubscriptionState.CANCELLED:
                stats.cancelled += 1

        payments = [
            RecentPayment(
                user_id=user.id,
                user_name=user.name,
                amount=payment.amount,
                payment_id=payment.external_payment_id,
                date=payment.date,
            )
            for user in users
            for payment in user.subscription.payment_history
        ]
        total_revenue = round(sum(p.amount for p in payments), 2)

        month_start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        total_users = len(users)

        analytics = DashboardAnalytics(
            total_users=total_users,
            active_subscriptions=stats.active,
            total_revenue=total_revenue,
            new_users_this_month=sum(1 for u in users if _as_utc(u.created_at) >= month_start),
            subscription_rate=round(stats.active / total_users * 100, 1) if total_users else 0.0,
            average_revenue_per_user=round(total_revenue / total_users, 2) if total_users else 0.0,
        )

        recent_payments = sorted(payments, key=lambda p: _as_utc(p.date), reverse=True)[:RECENT_ITEMS]
        recent_users = [
            RecentUser(id=u.id, name=u.name, email=u.email, created_at=u.created_at)
            for u in users[:RECENT_ITEMS]
        ]

        return DashboardOverview(
            analytics=analytics,
            recent_activity=RecentActivity(new_users=recent_users, recent_payments=recent_payments),
            subscription_stats=stats,
        )

    async def list_users(
        self,
        page: int = 1,
        limit: int = 20,
        search: Optional[str] = None,
        subscription: SubscriptionFilter = SubscriptionFilter.ALL,
    ) -> UserListResponse:
        now = datetime.now(timezone.utc)
        users = self._repository.list_users()

        if search and search.strip():
            needle = search.strip().lower()
            users = [u for u in users if needle in u.name.lower() or needle in u.email.lower()]

        if subscription == SubscriptionFilter.ACTIVE:
            users = [u for u in users if has_active_access(u.subscription, now)]
        elif subscription == SubscriptionFilter.INACTIVE:
            users = [u for u in users if not has_active_access(u.subscription, now)]

        total = len(users)
        offset = (page - 1) * limit
        names = await self._category_names()

        return UserListResponse(
            items=[self._to_managed(u, names, now) for u in users[offset:offset + limit]],
            page=page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit) if limit else 0,
            has_more=page * limit < total,
        )

    async def get_user(self, user_id: str) -> ManagedUserDetail:
        user = self._repository.get_user(user_id)
        if user is None:
            raise ManagedUserNotFoundError(user_id)
        managed = self._to_managed(user, await self._category_names(), datetime.now(timezone.utc))
        return ManagedUserDetail(
            **managed.model_dump(),
            payment_history=list(user.subscription.payment_history),
        )

    async def update_user(self, user_id: str, request: UpdateManagedUserRequest) -> ManagedUser:
        user = self._repository.get_user(user_id)
        if user is None:
            raise ManagedUserNotFoundError(user_id)

        fields = request.model_dump(exclude_none=True)
        if "parent_category_id" in fields or "sub_category_id" in fields:
            await self._check_categories(
                fields.get("parent_category_id", user.parent_category_id),
                fields.get("sub_category_id", user.sub_category_id),
            )

        if fields:
            user = self._repository.update_user(user_id, fields)
            if user is None:
                raise ManagedUserNotFoundError(user_id)
            logger.info("Updated user %s: %s", user_id, ", ".join(sorted(fields)))

        return self._to_managed(user, await self._category_names(), datetime.now(timezone.utc))

    async def delete_user(self, user_id: str) -> None:
        if not self._repository.delete_user(user_id):
            raise ManagedUserNotFoundError(user_id)
        logger.info("Deleted user %s", user_id)

    async def revenue_analytics(
        self,
        period: AnalyticsPeriod = AnalyticsPeriod.MONTHLY,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> RevenueAnalytics:
        start, end = self._window(start_date, end_date)
        return analytics.revenue_analytics(self._repository.list_users(), period, start, end)

    async def user_analytics(
        self,
        period: AnalyticsPeriod = AnalyticsPeriod.MONTHLY,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> UserAnalytics:
        start, end = self._window(start_date, end_date)
        return analytics.user_analytics(
            self._repository.list_users(),
            await self._category_names(),
            period,
            start,
            end,
        )

    async def subscription_analytics(self) -> SubscriptionAnalytics:
        return analytics.subscription_analytics(self._repository.list_users())

    @staticmethod
    def _window(
        start_date: Optional[datetime],
        end_date: Optional[datetime],
    ) -> tuple[datetime, datetime]:
        default_start, default_end = analytics.default_window(end_date)
        start = _as_utc(start_date) if start_date else default_start
        end = default_end
        if start > end:
            raise InvalidDateRangeError(start, end)
        return start, end

    async def _check_categories(self, parent_id: Optional[str], sub_id: Optional[str]) -> None:
        """Both categories must exist, and the sub category must sit under the parent."""
        parent = await self._find_category(parent_id) if parent_id else None
        if parent_id and parent is None:
            raise InvalidCategorySelectionError("Invalid parent category ID", field="parent_category_id")

        sub = await self._find_category(sub_id) if sub_id else None
        if sub_id and sub is None:
            raise InvalidCategorySelectionError("Invalid sub category ID", field="sub_category_id")

        if sub is not None and sub.parent_id != parent_id:
            raise InvalidCategorySelectionError(
                "Sub category does not belong to the selected parent category",
                field="sub_category_id",
            )

    async def _find_category(self, category_id: str):
        try:
            return await self._categories.get_node(category_id)
        except CategoryNotFoundError:
            return None

    async def _category_names(self) -> dict[str, str]:
        return {c.id: c.name for c in await self._categories.list_navigation_categories()}

    @staticmethod
    def _to_managed(user: UserRecord, names: dict[str, str], now: datetime) -> ManagedUser:
        def ref(category_id: Optional[str]) -> Optional[CategoryRef]:
            if category_id and category_id in names:
                return CategoryRef(id=category_id, name=names[category_id])
            return None

        sub = user.subscription
        return ManagedUser(
            id=user.id,
            name=user.name,
            email=user.email,
            phone=user.phone,
            parent_category=ref(user.parent_category_id),
            sub_category=ref(user.sub_category_id),
            subscription=ManagedSubscription(
                is_active=has_active_access(sub, now),
                state=subscription_state(sub, now),
                plan=sub.plan,
                start_date=sub.start_date,
                end_date=sub.end_date,
            ),
            created_at=user.created_at,
            last_active=user.updated_at,
        )
