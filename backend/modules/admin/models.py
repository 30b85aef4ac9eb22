"""
Admin dashboard data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from modules.billing.models import PaymentRecord, Plan, Subscription, SubscriptionState


class SubscriptionFilter(str, Enum):
    """Subscription filter for the user listing."""

    ALL = "all"
    ACTIVE = "active"
    INACTIVE = "inactive"


class DashboardAnalytics(BaseModel):
    total_users: int
    active_subscriptions: int
    total_revenue: float = Field(..., description="Sum of all payments, major units")
    new_users_this_month: int
    subscription_rate: float = Field(..., description="Active subscriptions as a percentage of users")
    average_revenue_per_user: float


class RecentUser(BaseModel):
    id: str
    name: str
    email: str
    created_at: datetime


class RecentPayment(BaseModel):
    user_id: str
    user_name: str
    amount: float
    payment_id: str
    date: datetime


class RecentActivity(BaseModel):
    new_users: list[RecentUser] = Field(default_factory=list)
    recent_payments: list[RecentPayment] = Field(default_factory=list)


class SubscriptionStats(BaseModel):
    active: int = 0
    expired: int = 0
    cancelled: int = 0


class DashboardOverview(BaseModel):
    """Everything the admin dashboard landing page shows."""

    analytics: DashboardAnalytics
    recent_activity: RecentActivity
    subscription_stats: SubscriptionStats


class CategoryRef(BaseModel):
    id: str
    name: str


class ManagedSubscription(BaseModel):
    is_active: bool
    state: SubscriptionState
    plan: Plan
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


class ManagedUser(BaseModel):
    """A user as seen from the admin panel."""

    id: str
    name: str
    email: str
    phone: Optional[str] = None
    parent_category: Optional[CategoryRef] = None
    sub_category: Optional[CategoryRef] = None
    subscription: ManagedSubscription
    created_at: datetime
    last_active: datetime = Field(..., description="Last time the account record changed")


class ManagedUserDetail(ManagedUser):
    payment_history: list[PaymentRecord] = Field(default_factory=list)


class UserListResponse(BaseModel):
    items: list[ManagedUser]
    page: int
    limit: int
    total: int
    total_pages: int
    has_more: bool


class DeleteUserResponse(BaseModel):
    message: str


class UserRecord(BaseModel):
    """Row of the users table without credentials."""

    id: str
    name: str
    email: str
    phone: Optional[str] = None
    parent_category_id: Optional[str] = None
    sub_category_id: Optional[str] = None
    subscription: Subscription = Field(default_factory=Subscription)
    created_at: datetime
    updated_at: datetime


class UpdateManagedUserRequest(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    phone: Optional[str] = Field(None, max_length=20)
    parent_category_id: Optional[str] = None
    sub_category_id: Optional[str] = None


class UpdateUserResponse(BaseModel):
    message: str
    user: ManagedUser


# -----------------------------------------------------------------------------
# Analytics
# -----------------------------------------------------------------------------


class AnalyticsPeriod(str, Enum):
    """Bucket size for analytics series."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class Trend(str, Enum):
    UP = "up"
    DOWN = "down"
    FLAT = "flat"


class Growth(BaseModel):
    """Change against the window of the same length just before the requested one."""

    percentage: float
    trend: Trend


class RevenuePoint(BaseModel):
    date: str = Field(..., description="Bucket key, e.g. 2025-03, 2025-W11 or 2025-03-14")
    revenue: float
    payments: int
    average_order_value: float


class RevenueAnalytics(BaseModel):
    total: float
    period: AnalyticsPeriod
    start_date: datetime
    end_date: datetime
    data: list[RevenuePoint] = Field(default_factory=list)
    growth: Growth


class UserPoint(BaseModel):
    date: str
    new_users: int


class CategoryShare(BaseModel):
    category_id: Optional[str] = None
    category: Optional[str] = Field(None, description="Parent category name; None when unset")
    users: int
    percentage: float


class UserAnalytics(BaseModel):
    total_users: int
    active_users: int
    new_users: int
    period: AnalyticsPeriod
    start_date: datetime
    end_date: datetime
    growth: Growth
    data: list[UserPoint] = Field(default_factory=list)
    category_distribution: list[CategoryShare] = Field(default_factory=list)


class SubscriptionPoint(BaseModel):
    month: str
    new_subscriptions: int = Field(..., description="Users whose first payment fell in this month")
    renewals: int
    revenue: float


class SubscriptionAnalytics(BaseModel):
    total_subscriptions: int = Field(..., description="Users who have ever paid")
    active_subscriptions: int
    expired_subscriptions: int
    cancelled_subscriptions: int
    annual_recurring_revenue: float = Field(..., description="Latest payment of every active subscriber")
    monthly_recurring_revenue: float
    conversion_rate: float = Field(..., description="Active subscribers as a percentage of users")
    churn_rate: float = Field(..., description="Expired and cancelled as a percentage of paying users")
    data: list[SubscriptionPoint] = Field(default_factory=list)
    payment_methods: dict[str, int] = Field(default_factory=dict)
