"""
Billing module.

Handles the yearly subscription: Razorpay orders, payment signature
verification, activation, cancellation and entitlement.

Public API:
- IBillingService: Interface for billing operations
- has_active_access / subscription_state: Entitlement rules
- Subscription: Subscription record stored on the user
- Billing exceptions: InvalidPaymentSignatureError, etc.
"""

from .interfaces import IBillingService
from .entitlement import has_active_access, subscription_state
from .models import (
    Plan,
    SubscriptionState,
    PaymentRecord,
    Subscription,
    SubscriptionSummary,
    SubscriptionStatus,
    OrderResponse,
    VerifyPaymentRequest,
)
from .exceptions import BillingCustomerNotFoundError, InvalidPaymentSignatureError

__all__ = [
    # Interface
    "IBillingService",
    # Entitlement
    "has_active_access",
    "subscription_state",
    # Models
    "Plan",
    "SubscriptionState",
    "PaymentRecord",
    "Subscription",
    "SubscriptionSummary",
    "SubscriptionStatus",
    "OrderResponse",
    "VerifyPaymentRequest",
    # Exceptions
    "BillingCustomerNotFoundError",
    "InvalidPaymentSignatureError",
]
