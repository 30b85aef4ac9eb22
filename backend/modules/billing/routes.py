"""
Subscription API endpoints.

Order creation and payment verification for the yearly plan, plus
status and cancellation.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_billing_service
from api.middleware.auth import get_current_user, require_entitlement
from shared.models import AuthenticatedUser

from .interfaces import IBillingService
from .models import (
    OrderResponse,
    SubscriptionActionResponse,
    SubscriptionStatus,
    VerifyPaymentRequest,
)

router = APIRouter()


@router.post("/create-order", response_model=OrderResponse)
async def create_order(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IBillingService = Depends(get_billing_service),
) -> OrderResponse:
    """
    Create a payment order for the yearly plan.

    The client opens the checkout widget with the returned order and key.
    """
    return await service.create_order(user.id)


@router.post("/verify-payment", response_model=SubscriptionActionResponse)
async def verify_payment(
    request: VerifyPaymentRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IBillingService = Depends(get_billing_service),
) -> SubscriptionActionResponse:
    """
    Verify the checkout signature and activate the subscription.
    """
    return await service.verify_and_activate(
        user.id,
        payment_id=request.razorpay_payment_id,
        order_id=request.razorpay_order_id,
        signature=request.razorpay_signature,
    )


@router.get("/status", response_model=SubscriptionStatus)
async def get_status(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IBillingService = Depends(get_billing_service),
) -> SubscriptionStatus:
    return await service.get_status(user.id)


@router.post("/cancel", response_model=SubscriptionActionResponse)
async def cancel_subscription(
    user: AuthenticatedUser = Depends(require_entitlement),
    service: IBillingService = Depends(get_billing_service),
) -> SubscriptionActionResponse:
    """
    Cancel the current subscription. Access ends immediately.
    """
    return await service.cancel(user.id)
