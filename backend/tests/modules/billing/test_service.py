"""Tests for the billing service."""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import httpx
import pytest

from modules.billing.exceptions import BillingCustomerNotFoundError, InvalidPaymentSignatureError
from modules.billing.models import Plan, SubscriptionState
from modules.billing.repository import BillingRepository
from modules.billing.service import BillingService
from modules.billing.signature import compute_signature
from providers.exceptions import PaymentProviderError
from providers.razorpay import RazorpayGateway

from tests.factories import active_subscription, create_account
from tests.fakes import FakePaymentGateway

UNKNOWN_ID = "8a6e0804-2bd0-4672-b79d-d97027f9071a"


@pytest.fixture
def repository(db) -> BillingRepository:
    return BillingRepository(db)


@pytest.fixture
def service(repository, payments, settings) -> BillingService:
    return BillingService(repository, payments, settings)


def signed(settings, order_id="order_1", payment_id="pay_1") -> dict:
    return {
        "payment_id": payment_id,
        "order_id": order_id,
        "signature": compute_signature(order_id, payment_id, settings.razorpay_key_secret),
    }


class TestCreateOrder:
    @pytest.mark.asyncio
    async def test_create_order(self, service, payments, db):
        """Should create a yearly plan order with checkout prefill data."""
        account = create_account(db)

        order = await service.create_order(account.id)

        assert order.order_id == "order_1"
        assert order.amount == 49900
        assert order.currency == "INR"
        assert order.key_id == "rzp_test_key"
        assert order.receipt.startswith("receipt_")
        assert order.user.email == "student@example.com"
        assert payments.orders[0].notes == {"user_id": account.id}

    @pytest.mark.asyncio
    async def test_create_order_unknown_user(self, service):
        with pytest.raises(BillingCustomerNotFoundError):
            await service.create_order(UNKNOWN_ID)

    @pytest.mark.asyncio
    async def test_create_order_provider_failure(self, repository, settings, db):
        account = create_account(db)
        service = BillingService(repository, FakePaymentGateway(fail_orders=True), settings)

        with pytest.raises(PaymentProviderError):
            await service.create_order(account.id)


class TestVerifyAndActivate:
    @pytest.mark.asyncio
    async def test_activates_yearly_plan(self, service, repository, settings, db):
        account = create_account(db)
        before = datetime.now(timezone.utc)

        response = await service.verify_and_activate(account.id, **signed(settings))

        assert response.message == "Payment verified and subscription activated"
        status = response.subscription
        assert status.is_active is True
        assert status.state == SubscriptionState.ACTIVE
        assert status.plan == Plan.YEARLY
        assert status.end_date - status.start_date == timedelta(days=365)
        assert status.start_date >= before

        stored = repository.get_customer(account.id).subscription
        assert stored.is_subscribed is True
        assert len(stored.payment_history) == 1
        assert stored.payment_history[0].external_payment_id == "pay_1"
        assert stored.payment_history[0].amount == 499.0

    @pytest.mark.asyncio
    async def test_bad_signature_changes_nothing(self, service, repository, settings, db):
        """A forged signature should leave the subscription untouched."""
        account = create_account(db)
        payload = signed(settings)
        payload["signature"] = "0" * 64

        with pytest.raises(InvalidPaymentSignatureError):
            await service.verify_and_activate(account.id, **payload)

        stored = repository.get_customer(account.id).subscription
        assert stored.is_subscribed is False
        assert stored.payment_history == []

    @pytest.mark.asyncio
    async def test_renewal_appends_history(self, service, repository, settings, db):
        account = create_account(db, subscription=active_subscription())

        await service.verify_and_activate(account.id, **signed(settings, "order_2", "pay_2"))

        history = repository.get_customer(account.id).subscription.payment_history
        assert [p.external_payment_id for p in history] == ["pay_active", "pay_2"]

    @pytest.mark.asyncio
    async def test_missing_key_secret(self, repository, payments, settings, db):
        account = create_account(db)
        service = BillingService(
            repository,
            payments,
            settings.model_copy(update={"razorpay_key_secret": ""}),
        )

        with pytest.raises(PaymentProviderError, match="not configured"):
            await service.verify_and_activate(account.id, **signed(settings))

    @pytest.mark.asyncio
    async def test_unknown_user(self, service, settings):
        with pytest.raises(BillingCustomerNotFoundError):
            await service.verify_and_activate(UNKNOWN_ID, **signed(settings))


class TestCancel:
    @pytest.mark.asyncio
    async def test_cancel_ends_access_now(self, service, repository, db):
        account = create_account(db, subscription=active_subscription())

        response = await service.cancel(account.id)

        assert response.message == "Subscription cancelled successfully"
        assert response.subscription.is_active is False
        assert response.subscription.state == SubscriptionState.CANCELLED

        stored = repository.get_customer(account.id).subscription
        assert stored.is_subscribed is False
        assert stored.end_date <= datetime.now(timezone.utc)
        assert len(stored.payment_history) == 1

    @pytest.mark.asyncio
    async def test_cancel_calls_provider_for_recurring(self, service, payments, db):
        sub = active_subscription()
        sub.external_subscription_id = "sub_123"
        account = create_account(db, subscription=sub)

        await service.cancel(account.id)

        assert payments.cancelled == ["sub_123"]

    @pytest.mark.asyncio
    async def test_provider_failure_still_cancels_locally(self, repository, settings, db):
        sub = active_subscription()
        sub.external_subscription_id = "sub_123"
        account = create_account(db, subscription=sub)
        service = BillingService(repository, FakePaymentGateway(fail_cancel=True), settings)

        response = await service.cancel(account.id)

        assert response.subscription.is_active is False

    @pytest.mark.asyncio
    async def test_unreadable_provider_reply_still_cancels_locally(self, repository, settings, db):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>gateway</html>")

        gateway = RazorpayGateway(
            key_id="rzp_test_key",
            key_secret="test_key_secret",
            transport=httpx.MockTransport(handler),
        )
        sub = active_subscription()
        sub.external_subscription_id = "sub_123"
        account = create_account(db, subscription=sub)

        await BillingService(repository, gateway, settings).cancel(account.id)

        assert repository.get_customer(account.id).subscription.is_subscribed is False

    @pytest.mark.asyncio
    async def test_unexpected_provider_error_still_cancels_locally(self, repository, settings, db):
        gateway = FakePaymentGateway()
        gateway.cancel_subscription = AsyncMock(side_effect=RuntimeError("socket closed"))
        sub = active_subscription()
        sub.external_subscription_id = "sub_123"
        account = create_account(db, subscription=sub)

        response = await BillingService(repository, gateway, settings).cancel(account.id)

        assert response.subscription.state == SubscriptionState.CANCELLED
        assert repository.get_customer(account.id).subscription.is_subscribed is False


class TestGetStatus:
    @pytest.mark.asyncio
    async def test_status_without_subscription(self, service, db):
        account = create_account(db)

        status = await service.get_status(account.id)

        assert status.is_subscribed is False
        assert status.state == SubscriptionState.UNSUBSCRIBED
        assert status.plan == Plan.NONE

    @pytest.mark.asyncio
    async def test_status_active(self, service, db):
        account = create_account(db, subscription=active_subscription())
        status = await service.get_status(account.id)
        assert status.is_active is True
        assert status.payment_history[0].amount == 499.0
