"""
Entitlement rules.

Pure functions over a Subscription record. Expiry is evaluated lazily at
read time; nothing ever sweeps expired subscriptions.
"""

from datetime import datetime, timezone
from typing import Optional

from .models import Plan, Subscription, SubscriptionState, SubscriptionStatus, SubscriptionSummary


def _utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def has_active_access(subscription: Optional[Subscription], now: Optional[datetime] = None) -> bool:
    """True iff subscribed with an end date strictly in the future."""
    if subscription is None or not subscription.is_subscribed:
        return False
    if subscription.end_date is None:
        return False
    now = now or datetime.now(timezone.utc)
    return _utc(subscription.end_date) > _utc(now)


def subscription_state(
    subscription: Optional[Subscription],
    now: Optional[datetime] = None,
) -> SubscriptionState:
    """
    Classify a subscription record.

    - active: subscribed and end date in the future
    - expired: subscribed but end date passed or missing
    - cancelled: not subscribed, with payment history
    - unsubscribed: not subscribed, no payment history
    """
    if subscription is None:
        return SubscriptionState.UNSUBSCRIBED
    if subscription.is_subscribed:
        if has_active_access(subscription, now):
            return SubscriptionState.ACTIVE
        return SubscriptionState.EXPIRED
    if subscription.payment_history:
        return SubscriptionState.CANCELLED
    return SubscriptionState.UNSUBSCRIBED


def summarize(subscription: Optional[Subscription], now: Optional[datetime] = None) -> SubscriptionSummary:
    subscription = subscription or Subscription()
    return SubscriptionSummary(
        is_active=has_active_access(subscription, now),
        plan=subscription.plan or Plan.NONE,
        end_date=subscription.end_date,
    )


def to_status(subscription: Optional[Subscription], now: Optional[datetime] = None) -> SubscriptionStatus:
    subscription = subscription or Subscription()
    return SubscriptionStatus(
        is_subscribed=subscription.is_subscribed,
        is_active=has_active_access(subscription, now),
        state=subscription_state(subscription, now),
        plan=subscription.plan,
        start_date=subscription.start_date,
        end_date=subscription.end_date,
        payment_history=list(subscription.payment_history),
    )
