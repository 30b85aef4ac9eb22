"""
Billing module data models.

These models define the data structures used by the billing module
and exposed to other modules through the interface.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Plan(str, Enum):
    """Subscription plans."""

    NONE = "none"
    YEARLY = "yearly"


class SubscriptionState(str, Enum):
    """Derived subscription lifecycle state."""

    UNSUBSCRIBED = "unsubscribed"  # Never paid
    ACTIVE = "active"              # Paid and within the period
    EXPIRED = "expired"            # Paid, period ran out, never cancelled
    CANCELLED = "cancelled"        # Cancelled by the user


class PaymentRecord(BaseModel):
    """
    A successful payment.

    Payment history is append-only; records are never edited.
    """

    external_payment_id: str = Field(..., description="Provider payment ID")
    amount: float = Field(..., description="Amount in major units (e.g., 499.0 INR)")
    status: str = Field(default="success", description="Payment status")
    date: datetime = Field(..., description="When the payment was verified")


class Subscription(BaseModel):
    """
    Subscription record embedded in the users table.

    Access is derived from this record on every read (see entitlement.py).
    """

    is_subscribed: bool = Field(default=False)
    plan: Plan = Field(default=Plan.NONE)
    start_date: Optional[datetime] = Field(None)
    end_date: Optional[datetime] = Field(None)
    external_customer_id: Optional[str] = Field(None, description="Provider customer ID")
    external_subscription_id: Optional[str] = Field(None, description="Provider subscription ID")
    payment_history: list[PaymentRecord] = Field(default_factory=list)


class SubscriptionSummary(BaseModel):
    """Short subscription view embedded in profiles."""

    is_active: bool
    plan: Plan
    end_date: Optional[datetime] = None


class BillingCustomer(BaseModel):
    """Contact details and subscription of a paying user."""

    id: str
    name: str
    email: str
    phone: Optional[str] = None
    subscription: Subscription = Field(default_factory=Subscription)


class CustomerContact(BaseModel):
    """Prefill data for the checkout widget."""

    name: str
    email: str
    phone: Optional[str] = None


class OrderResponse(BaseModel):
    """Order created for the yearly plan, ready for client-side checkout."""

    order_id: str = Field(..., description="Provider order ID")
    amount: int = Field(..., description="Amount in minor units (paise)")
    currency: str = Field(..., description="ISO currency code")
    receipt: str = Field(..., description="Receipt ID")
    key_id: str = Field(..., description="Public provider key for the checkout widget")
    user: CustomerContact


class VerifyPaymentRequest(BaseModel):
    """Payment confirmation posted by the client after checkout."""

    razorpay_payment_id: str = Field(..., min_length=1)
    razorpay_order_id: str = Field(..., min_length=1)
    razorpay_signature: str = Field(..., min_length=1)


class SubscriptionStatus(BaseModel):
    """Full subscription status for the current user."""

    is_subscribed: bool
    is_active: bool
    state: SubscriptionState
    plan: Plan
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    payment_history: list[PaymentRecord] = Field(default_factory=list)


class SubscriptionActionResponse(BaseModel):
    """Result of activating or cancelling a subscription."""

    message: str
    subscription: SubscriptionStatus
