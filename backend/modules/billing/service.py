"""
Billing service implementation.

Creates provider orders for the yearly plan, verifies checkout signatures
and maintains the subscription record on the users table.
"""

import logging
import time
from datetime import datetime, timedelta, timezone
from typing import Optional

from shared.config import Settings, get_settings
from providers.base import PaymentGateway
from providers.exceptions import PaymentProviderError

from .entitlement import to_status
from .exceptions import BillingCustomerNotFoundError, InvalidPaymentSignatureError
from .interfaces import IBillingService
from .models import (
    BillingCustomer,
    CustomerContact,
    OrderResponse,
    PaymentRecord,
    Plan,
    SubscriptionActionResponse,
    SubscriptionStatus,
)
from .repository import BillingRepository
from .signature import verify_payment_signature

logger = logging.getLogger(__name__)


class BillingService(IBillingService):
    """
    Implementation of the billing service.

    Signature verification is local (HMAC with the key secret); only order
    creation and subscription cancellation call the payment provider.
    """

    def __init__(
        self,
        repository: BillingRepository,
        payments: PaymentGateway,
        settings: Optional[Settings] = None,
    ):
        self._repository = repository
        self._payments = payments
        self._settings = settings or get_settings()

    def _get_customer(self, user_id: str) -> BillingCustomer:
        customer = self._repository.get_customer(user_id)
        if customer is None:
            raise BillingCustomerNotFoundError(user_id)
        return customer

    async def create_order(self, user_id: str) -> OrderResponse:
        customer = self._get_customer(user_id)

        receipt = f"receipt_{int(time.time() * 1000)}"
        order = await self._payments.create_order(
            amount_minor=self._settings.yearly_plan_amount_minor,
            receipt=receipt,
            notes={"user_id": user_id},
        )
        logger.info("Created order %s for user %s", order.id, user_id)

        return OrderResponse(
            order_id=order.id,
            amount=order.amount,
            currency=order.currency,
            receipt=order.receipt or receipt,
            key_id=self._payments.key_id,
            user=CustomerContact(
                name=customer.name,
                email=customer.email,
                phone=customer.phone,
            ),
        )

    async def verify_and_activate(
        self,
        user_id: str,
        payment_id: str,
        order_id: str,
        signature: str,
    ) -> SubscriptionActionResponse:
        secret = self._settings.razorpay_key_secret
        if not secret:
            raise PaymentProviderError(
                "Payment provider not configured. Set RAZORPAY_KEY_SECRET environment variable."
            )

        if not verify_payment_signature(order_id, payment_id, signature, secret):
            logger.warning("Rejected payment %s for order %s: bad signature", payment_id, order_id)
            raise InvalidPaymentSignatureError()

        customer = self._get_customer(user_id)
        subscription = customer.subscription.model_copy(deep=True)

        now = datetime.now(timezone.utc)
        subscription.is_subscribed = True
        subscription.plan = Plan.YEARLY
        subscription.start_date = now
        subscription.end_date = now + timedelta(days=self._settings.subscription_period_days)
        subscription.payment_history.append(
            PaymentRecord(
                external_payment_id=payment_id,
                amount=self._settings.yearly_plan_amount_minor / 100,
                status="success",
                date=now,
            )
        )

        stored = self._repository.save_subscription(user_id, subscription)
        logger.info("Activated yearly subscription for user %s until %s", user_id, stored.end_date)

        return SubscriptionActionResponse(
            message="Payment verified and subscription activated",
            subscription=to_status(stored),
        )

    async def cancel(self, user_id: str) -> SubscriptionActionResponse:
        customer = self._get_customer(user_id)
        subscription = customer.subscription.model_copy(deep=True)

        if subscription.external_subscription_id:
            try:
                await self._payments.cancel_subscription(subscription.external_subscription_id)
            except Exception as e:
                # Local state decides access; the provider call is best-effort.
                logger.warning(
                    "Provider cancellation of %s failed, cancelling locally: %s",
                    subscription.external_subscription_id,
                    e,
                )

        subscription.is_subscribed = False
        subscription.end_date = datetime.now(timezone.utc)

        stored = self._repository.save_subscription(user_id, subscription)
        logger.info("Cancelled subscription for user %s", user_id)

        return SubscriptionActionResponse(
            message="Subscription cancelled successfully",
            subscription=to_status(stored),
        )

    async def get_status(self, user_id: str) -> SubscriptionStatus:
        customer = self._get_customer(user_id)
        return to_status(customer.subscription)
