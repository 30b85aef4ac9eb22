"""
Billing module interface.

Other modules should depend on IBillingService, not the concrete implementation.
Entitlement checks elsewhere use the pure functions in entitlement.py.
"""

from typing import Protocol, runtime_checkable

from .models import OrderResponse, SubscriptionActionResponse, SubscriptionStatus


@runtime_checkable
class IBillingService(Protocol):
    """
    Interface for subscription and payment operations.

    This protocol defines the contract that the billing module exposes
    to the API layer.
    """

    async def create_order(self, user_id: str) -> OrderResponse:
        """
        Create a payment order for the yearly plan.

        Does not change the subscription.

        Raises:
            BillingCustomerNotFoundError: If the user doesn't exist
            PaymentProviderError: If the provider call fails
        """
        ...

    async def verify_and_activate(
        self,
        user_id: str,
        payment_id: str,
        order_id: str,
        signature: str,
    ) -> SubscriptionActionResponse:
        """
        Verify a checkout signature and activate the yearly plan.

        Raises:
            InvalidPaymentSignatureError: If the signature doesn't match
            BillingCustomerNotFoundError: If the user doesn't exist
        """
        ...

    async def cancel(self, user_id: str) -> SubscriptionActionResponse:
        """
        Cancel the user's subscription immediately.

        Raises:
            BillingCustomerNotFoundError: If the user doesn't exist
        """
        ...

    async def get_status(self, user_id: str) -> SubscriptionStatus:
        """
        Get the user's subscription status.

        Raises:
            BillingCustomerNotFoundError: If the user doesn't exist
        """
        ...
