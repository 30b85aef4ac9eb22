"""
Admin module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class ManagedUserNotFoundError(NotFoundError):
    """Raised when an admin looks up a user that doesn't exist."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class InvalidDateRangeError(ValidationError):
    def __init__(self, start_date, end_date):
        super().__init__(
            "start_date must not be after end_date",
            code="INVALID_DATE_RANGE",
            details={"start_date": start_date.isoformat(), "end_date": end_date.isoformat()},
        )
