"""
Billing module exceptions.

These exceptions are raised by the billing module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import NotFoundError, ValidationError


class BillingCustomerNotFoundError(NotFoundError):
    """Raised when the paying user no longer exists."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class InvalidPaymentSignatureError(ValidationError):
    """Raised when a checkout signature does not match the order and payment."""

    def __init__(self):
        super().__init__(
            "Payment verification failed",
            code="INVALID_PAYMENT_SIGNATURE",
        )
