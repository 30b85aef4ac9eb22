"""Tests for the analytics calculations."""

from datetime import datetime, timedelta, timezone

from modules.admin.analytics import (
    bucket_key,
    growth,
    previous_window,
    revenue_analytics,
    subscription_analytics,
    user_analytics,
)
from modules.admin.models import AnalyticsPeriod, Trend, UserRecord
from modules.billing.models import PaymentRecord, Plan, Subscription

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def record(
    user_id: str,
    payments: list[tuple[datetime, float]] = (),
    created_at: datetime = NOW - timedelta(days=400),
    end_date: datetime = NOW + timedelta(days=100),
    parent_category_id=None,
) -> UserRecord:
    return UserRecord(
        id=user_id,
        name=user_id,
        email=f"{user_id}@example.com",
        parent_category_id=parent_category_id,
        subscription=Subscription(
            is_subscribed=bool(payments),
            plan=Plan.YEARLY if payments else Plan.NONE,
            end_date=end_date if payments else None,
            payment_history=[
                PaymentRecord(external_payment_id=f"pay_{user_id}_{i}", amount=amount, date=date)
                for i, (date, amount) in enumerate(payments)
            ],
        ),
        created_at=created_at,
        updated_at=created_at,
    )


class TestBucketKey:
    def test_keys_per_period(self):
        moment = datetime(2025, 3, 14, 9, 30, tzinfo=timezone.utc)
        assert bucket_key(moment, AnalyticsPeriod.DAILY) == "2025-03-14"
        assert bucket_key(moment, AnalyticsPeriod.WEEKLY) == "2025-W11"
        assert bucket_key(moment, AnalyticsPeriod.MONTHLY) == "2025-03"

    def test_iso_week_crosses_year(self):
        assert bucket_key(datetime(2024, 12, 30, tzinfo=timezone.utc), AnalyticsPeriod.WEEKLY) == "2025-W01"

    def test_naive_datetime_is_utc(self):
        assert bucket_key(datetime(2025, 1, 31, 23, 59), AnalyticsPeriod.MONTHLY) == "2025-01"


class TestGrowth:
    def test_up_down_flat(self):
        assert growth(150, 100).model_dump() == {"percentage": 50.0, "trend": Trend.UP}
        assert growth(50, 100).model_dump() == {"percentage": -50.0, "trend": Trend.DOWN}
        assert growth(100, 100).trend == Trend.FLAT

    def test_from_nothing(self):
        assert growth(10, 0).percentage == 100.0
        assert growth(0, 0).trend == Trend.FLAT

    def test_previous_window_has_same_length(self):
        start, end = NOW - timedelta(days=30), NOW
        assert previous_window(start, end) == (NOW - timedelta(days=60), start)


class TestRevenue:
    def test_groups_payments_by_month(self):
        users = [
            record("a", [(datetime(2025, 5, 2, tzinfo=timezone.utc), 499.0)]),
            record("b", [(datetime(2025, 5, 20, tzinfo=timezone.utc), 299.0)]),
            record("c", [(datetime(2025, 4, 10, tzinfo=timezone.utc), 499.0)]),
        ]

        report = revenue_analytics(users, AnalyticsPeriod.MONTHLY, NOW - timedelta(days=90), NOW)

        assert [(p.date, p.revenue, p.payments) for p in report.data] == [
            ("2025-04", 499.0, 1),
            ("2025-05", 798.0, 2),
        ]
        assert report.data[1].average_order_value == 399.0
        assert report.total == 1297.0

    def test_growth_against_previous_window(self):
        users = [
            record("a", [(NOW - timedelta(days=40), 400.0), (NOW - timedelta(days=5), 200.0)]),
        ]

        report = revenue_analytics(users, AnalyticsPeriod.MONTHLY, NOW - timedelta(days=30), NOW)

        assert report.total == 200.0
        assert report.growth.percentage == -50.0
        assert report.growth.trend == Trend.DOWN

    def test_no_payments(self):
        report = revenue_analytics([record("a")], AnalyticsPeriod.WEEKLY, NOW - timedelta(days=30), NOW)
        assert report.total == 0.0
        assert report.data == []
        assert report.growth.trend == Trend.FLAT


class TestUsers:
    def test_new_users_and_distribution(self):
        users = [
            record("a", created_at=NOW - timedelta(days=3), parent_category_id="cat-1"),
            record("b", created_at=NOW - timedelta(days=10), parent_category_id="cat-1"),
            record("c", created_at=NOW - timedelta(days=45)),
            record("d", created_at=NOW - timedelta(days=300), parent_category_id="cat-2"),
        ]

        report = user_analytics(
            users,
            {"cat-1": "Engineering"},
            AnalyticsPeriod.MONTHLY,
            NOW - timedelta(days=30),
            NOW,
            now=NOW,
        )

        assert report.total_users == 4
        assert report.new_users == 2
        assert report.growth.percentage == 100.0
        assert [(p.date, p.new_users) for p in report.data] == [("2025-05", 2)]
        assert report.category_distribution[0].category == "Engineering"
        assert report.category_distribution[0].percentage == 50.0
        unknown = next(s for s in report.category_distribution if s.category_id == "cat-2")
        assert unknown.category is None


class TestSubscriptions:
    def test_first_payment_counts_as_new_later_ones_as_renewals(self):
        users = [
            record("a", [
                (datetime(2024, 5, 10, tzinfo=timezone.utc), 499.0),
                (datetime(2025, 5, 10, tzinfo=timezone.utc), 599.0),
            ]),
            record("b", [(datetime(2025, 5, 12, tzinfo=timezone.utc), 599.0)]),
            record("c"),
        ]

        report = subscription_analytics(users, now=NOW)

        assert [(p.month, p.new_subscriptions, p.renewals, p.revenue) for p in report.data] == [
            ("2024-05", 1, 0, 499.0),
            ("2025-05", 1, 1, 1198.0),
        ]
        assert report.annual_recurring_revenue == 1198.0
        assert report.monthly_recurring_revenue == 99.83
        assert report.conversion_rate == 66.7
        assert report.churn_rate == 0.0

    def test_lapsed_subscribers_count_as_churn(self):
        users = [
            record("a", [(NOW - timedelta(days=400), 499.0)], end_date=NOW - timedelta(days=35)),
            record("b", [(NOW - timedelta(days=100), 499.0)]),
        ]

        report = subscription_analytics(users, now=NOW)

        assert report.expired_subscriptions == 1
        assert report.active_subscriptions == 1
        assert report.churn_rate == 50.0
        assert report.annual_recurring_revenue == 499.0
