"""
Billing repository for database access.

Subscriptions are stored as a jsonb column on the users table, so this
repository reads and writes that column only.
"""

from typing import Any, Optional

from shared.repository import BaseRepository

from .models import BillingCustomer, Subscription


class BillingRepository(BaseRepository[BillingCustomer]):
    """
    Repository for subscription data.

    Note: This repository does NOT perform authorization checks.
    The service layer decides who may change a subscription.
    """

    def get_customer(self, user_id: str) -> Optional[BillingCustomer]:
        """
        Get a user's contact details and subscription.

        Args:
            user_id: The user UUID.

        Returns:
            BillingCustomer, or None if the user doesn't exist.
        """
        if not self._is_uuid(user_id):
            return None

        result = (
            self._db.table("users")
            .select("id, name, email, phone, subscription")
            .eq("id", user_id)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_customer(result.data[0])

    def save_subscription(self, user_id: str, subscription: Subscription) -> Subscription:
        """
        Overwrite a user's subscription record.

        Args:
            user_id: The user UUID.
            subscription: The full new subscription record.

        Returns:
            The subscription as stored.
        """
        result = (
            self._db.table("users")
            .update({
                "subscription": subscription.model_dump(mode="json"),
                "updated_at": self._now().isoformat(),
            })
            .eq("id", user_id)
            .execute()
        )
        if not result.data:
            return subscription
        return self._map_to_subscription(result.data[0].get("subscription"))

    @staticmethod
    def _map_to_subscription(data: Optional[dict[str, Any]]) -> Subscription:
        return Subscription.model_validate(data or {})

    def _map_to_customer(self, row: dict[str, Any]) -> BillingCustomer:
        return BillingCustomer(
            id=row["id"],
            name=row.get("name") or "",
            email=row["email"],
            phone=row.get("phone"),
            subscription=self._map_to_subscription(row.get("subscription")),
        )
