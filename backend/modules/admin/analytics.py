"""
Analytics over user rows.

Pure functions; the service loads the users and hands them in. Payments
are read from each user's payment history, and subscription state uses
the same entitlement rules as the request gates.
"""

from collections import Counter, defaultdict
from datetime import datetime, timedelta, timezone
from typing import Optional

from modules.billing.entitlement import has_active_access, subscription_state
from modules.billing.models import SubscriptionState

from .models import (
    AnalyticsPeriod,
    CategoryShare,
    Growth,
    RevenueAnalytics,
    RevenuePoint,
    SubscriptionAnalytics,
    SubscriptionPoint,
    Trend,
    UserAnalytics,
    UserPoint,
    UserRecord,
)

PAYMENT_METHOD = "razorpay"


def _utc(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def bucket_key(moment: datetime, period: AnalyticsPeriod) -> str:
    moment = _utc(moment)
    if period == AnalyticsPeriod.DAILY:
        return moment.strftime("%Y-%m-%d")
    if period == AnalyticsPeriod.WEEKLY:
        year, week, _ = moment.isocalendar()
        return f"{year}-W{week:02d}"
    return moment.strftime("%Y-%m")


def growth(current: float, previous: float) -> Growth:
    """
    Percentage change from previous to current.

    Growth from nothing counts as 100%.
    """
    if previous:
        percentage = round((current - previous) / previous * 100, 1)
    else:
        percentage = 100.0 if current else 0.0
    if percentage > 0:
        trend = Trend.UP
    elif percentage < 0:
        trend = Trend.DOWN
    else:
        trend = Trend.FLAT
    return Growth(percentage=percentage, trend=trend)


def previous_window(start: datetime, end: datetime) -> tuple[datetime, datetime]:
    """The window of the same length ending where [start, end] begins."""
    return start - (end - start), start


def _in_window(moment: datetime, start: datetime, end: datetime) -> bool:
    return start <= _utc(moment) <= end


def _payments(users: list[UserRecord]):
    for user in users:
        for payment in user.subscription.payment_history:
            yield user, payment


def revenue_analytics(
    users: list[UserRecord],
    period: AnalyticsPeriod,
    start: datetime,
    end: datetime,
) -> RevenueAnalytics:
    start, end = _utc(start), _utc(end)
    prev_start, prev_end = previous_window(start, end)

    buckets: dict[str, list[float]] = defaultdict(list)
    previous_total = 0.0
    for _, payment in _payments(users):
        if _in_window(payment.date, start, end):
            buckets[bucket_key(payment.date, period)].append(payment.amount)
        elif prev_start <= _utc(payment.date) < prev_end:
            previous_total += payment.amount

    data = [
        RevenuePoint(
            date=key,
            revenue=round(sum(amounts), 2),
            payments=len(amounts),
            average_order_value=round(sum(amounts) / len(amounts), 2),
        )
        for key, amounts in sorted(buckets.items())
    ]
    total = round(sum(point.revenue for point in data), 2)

    return RevenueAnalytics(
        total=total,
        period=period,
        start_date=start,
        end_date=end,
        data=data,
        growth=growth(total, previous_total),
    )


def user_analytics(
    users: list[UserRecord],
    category_names: dict[str, str],
    period: AnalyticsPeriod,
    start: datetime,
    end: datetime,
    now: Optional[datetime] = None,
) -> UserAnalytics:
    start, end = _utc(start), _utc(end)
    prev_start, prev_end = previous_window(start, end)
    now = now or datetime.now(timezone.utc)

    joined = Counter(
        bucket_key(u.created_at, period) for u in users if _in_window(u.created_at, start, end)
    )
    new_users = sum(joined.values())
    previous_new = sum(1 for u in users if prev_start <= _utc(u.created_at) < prev_end)

    total = len(users)
    by_category = Counter(u.parent_category_id for u in users)
    distribution = [
        CategoryShare(
            category_id=category_id,
            category=category_names.get(category_id) if category_id else None,
            users=count,
            percentage=round(count / total * 100, 1),
        )
        for category_id, count in by_category.most_common()
    ]

    return UserAnalytics(
        total_users=total,
        active_users=sum(1 for u in users if has_active_access(u.subscription, now)),
        new_users=new_users,
        period=period,
        start_date=start,
        end_date=end,
        growth=growth(new_users, previous_new),
        data=[UserPoint(date=key, new_users=count) for key, count in sorted(joined.items())],
        category_distribution=distribution,
    )


def subscription_analytics(
    users: list[UserRecord],
    now: Optional[datetime] = None,
) -> SubscriptionAnalytics:
    now = now or datetime.now(timezone.utc)

    states = Counter(subscription_state(u.subscription, now) for u in users)
    paying = [u for u in users if u.subscription.payment_history]

    annual = sum(
        u.subscription.payment_history[-1].amount
        for u in paying
        if has_active_access(u.subscription, now)
    )

    months: dict[str, SubscriptionPoint] = {}
    for user in paying:
        first = min(user.subscription.payment_history, key=lambda p: _utc(p.date))
        for payment in user.subscription.payment_history:
            key = bucket_key(payment.date, AnalyticsPeriod.MONTHLY)
            point = months.setdefault(
                key, SubscriptionPoint(month=key, new_subscriptions=0, renewals=0, revenue=0.0)
            )
            if payment is first:
                point.new_subscriptions += 1
            else:
                point.renewals += 1
            point.revenue = round(point.revenue + payment.amount, 2)

    lapsed = states[SubscriptionState.EXPIRED] + states[SubscriptionState.CANCELLED]
    active = states[SubscriptionState.ACTIVE]

    return SubscriptionAnalytics(
        total_subscriptions=len(paying),
        active_subscriptions=active,
        expired_subscriptions=states[SubscriptionState.EXPIRED],
        cancelled_subscriptions=states[SubscriptionState.CANCELLED],
        annual_recurring_revenue=round(annual, 2),
        monthly_recurring_revenue=round(annual / 12, 2),
        conversion_rate=round(active / len(users) * 100, 1) if users else 0.0,
        churn_rate=round(lapsed / len(paying) * 100, 1) if paying else 0.0,
        data=[months[key] for key in sorted(months)],
        payment_methods={PAYMENT_METHOD: len(paying)},
    )


def default_window(now: Optional[datetime] = None, days: int = 182) -> tuple[datetime, datetime]:
    """Roughly the last six months."""
    end = _utc(now or datetime.now(timezone.utc))
    return end - timedelta(days=days), end
