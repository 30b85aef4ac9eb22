"""Tests for entitlement rules and payment signatures."""

from datetime import datetime, timedelta, timezone

import pytest

from modules.billing.entitlement import has_active_access, subscription_state, summarize, to_status
from modules.billing.models import PaymentRecord, Plan, Subscription, SubscriptionState
from modules.billing.signature import compute_signature, verify_payment_signature

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def subscription(is_subscribed=True, end_date=NOW + timedelta(days=10), paid=True) -> Subscription:
    return Subscription(
        is_subscribed=is_subscribed,
        plan=Plan.YEARLY,
        start_date=NOW - timedelta(days=355),
        end_date=end_date,
        payment_history=[
            PaymentRecord(external_payment_id="pay_1", amount=499.0, date=NOW - timedelta(days=355)),
        ] if paid else [],
    )


class TestHasActiveAccess:
    def test_active(self):
        assert has_active_access(subscription(), NOW) is True

    def test_end_date_in_the_past(self):
        assert has_active_access(subscription(end_date=NOW - timedelta(seconds=1)), NOW) is False

    def test_end_date_equal_to_now_is_not_active(self):
        """Access requires an end date strictly after now."""
        assert has_active_access(subscription(end_date=NOW), NOW) is False

    def test_not_subscribed(self):
        assert has_active_access(subscription(is_subscribed=False), NOW) is False

    def test_missing_end_date(self):
        assert has_active_access(subscription(end_date=None), NOW) is False

    def test_none(self):
        assert has_active_access(None, NOW) is False

    def test_naive_end_date_is_utc(self):
        naive = (NOW + timedelta(hours=1)).replace(tzinfo=None)
        assert has_active_access(subscription(end_date=naive), NOW) is True


class TestSubscriptionState:
    @pytest.mark.parametrize("record, expected", [
        (subscription(), SubscriptionState.ACTIVE),
        (subscription(end_date=NOW - timedelta(days=1)), SubscriptionState.EXPIRED),
        (subscription(is_subscribed=False), SubscriptionState.CANCELLED),
        (Subscription(), SubscriptionState.UNSUBSCRIBED),
        (None, SubscriptionState.UNSUBSCRIBED),
    ])
    def test_states(self, record, expected):
        assert subscription_state(record, NOW) == expected

    def test_summarize(self):
        summary = summarize(subscription(), NOW)
        assert summary.is_active is True
        assert summary.plan == Plan.YEARLY
        assert summary.end_date == NOW + timedelta(days=10)

    def test_summarize_empty(self):
        summary = summarize(None, NOW)
        assert summary.is_active is False
        assert summary.plan == Plan.NONE

    def test_to_status_keeps_history(self):
        status = to_status(subscription(end_date=NOW - timedelta(days=1)), NOW)
        assert status.is_subscribed is True
        assert status.is_active is False
        assert status.state == SubscriptionState.EXPIRED
        assert [p.external_payment_id for p in status.payment_history] == ["pay_1"]


class TestSignature:
    def test_known_vector(self):
        """HMAC-SHA256 over "order|payment" in lowercase hex."""
        signature = compute_signature("order_1", "pay_1", "secret")
        assert len(signature) == 64
        assert signature == signature.lower()
        assert verify_payment_signature("order_1", "pay_1", signature, "secret") is True

    def test_rejects_tampered_ids(self):
        signature = compute_signature("order_1", "pay_1", "secret")
        assert verify_payment_signature("order_2", "pay_1", signature, "secret") is False
        assert verify_payment_signature("order_1", "pay_2", signature, "secret") is False

    def test_rejects_wrong_secret(self):
        signature = compute_signature("order_1", "pay_1", "secret")
        assert verify_payment_signature("order_1", "pay_1", signature, "other") is False

    def test_rejects_empty_signature(self):
        assert verify_payment_signature("order_1", "pay_1", "", "secret") is False

    def test_rejects_every_single_bit_flip(self):
        """Flipping any one bit of any character must fail, never raise."""
        signature = compute_signature("order_1", "pay_1", "secret")
        for position, char in enumerate(signature):
            for bit in range(8):
                flipped = signature[:position] + chr(ord(char) ^ (1 << bit)) + signature[position + 1:]
                assert verify_payment_signature("order_1", "pay_1", flipped, "secret") is False

    def test_rejects_non_ascii_signature(self):
        assert verify_payment_signature("order_1", "pay_1", "é" * 64, "secret") is False
