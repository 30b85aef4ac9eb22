"""
User repository for database access.

Encapsulates Supabase queries and data mapping for the users table,
which holds both regular users and admins.
"""

import logging
from typing import Any, Optional

from shared.models import Role
from shared.repository import BaseRepository

from .models import UserAccount

logger = logging.getLogger(__name__)

# Attempts at the compare-and-set epoch bump before giving up
MAX_EPOCH_ATTEMPTS = 3


class UserRepository(BaseRepository[UserAccount]):
    """
    Repository for principal data access.

    Note: This repository does NOT perform authorization checks.
    """

    def get_by_id(self, user_id: str) -> Optional[UserAccount]:
        if not self._is_uuid(user_id):
            return None
        result = self._db.table("users").select("*").eq("id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_account(result.data[0])

    def get_by_email(self, email: str) -> Optional[UserAccount]:
        result = self._db.table("users").select("*").eq("email", email).execute()
        if not result.data:
            return None
        return self._map_to_account(result.data[0])

    def create(
        self,
        name: str,
        email: str,
        password_hash: str,
        role: Role = Role.USER,
        phone: Optional[str] = None,
        parent_category_id: Optional[str] = None,
        sub_category_id: Optional[str] = None,
    ) -> UserAccount:
        """
        Insert a new principal with token_epoch 0 and no subscription.

        Returns:
            Created UserAccount with generated ID.
        """
        now = self._now().isoformat()
        result = self._db.table("users").insert({
            "name": name,
            "email": email,
            "password_hash": password_hash,
            "role": role.value,
            "phone": phone,
            "parent_category_id": parent_category_id,
            "sub_category_id": sub_category_id,
            "subscription": {},
            "token_epoch": 0,
            "created_at": now,
            "updated_at": now,
        }).execute()
        return self._map_to_account(result.data[0])

    def increment_token_epoch(self, user_id: str) -> Optional[int]:
        """
        Bump a principal's token epoch.

        Uses a compare-and-set update on the current epoch so two
        concurrent bumps can't both land on the same value.

        Returns:
            The new epoch, or None if the principal doesn't exist, or if
            every attempt lost a race.
        """
        for attempt in range(MAX_EPOCH_ATTEMPTS):
            current = self._db.table("users").select("token_epoch").eq("id", user_id).execute()
            if not current.data:
                return None

            epoch = current.data[0].get("token_epoch") or 0
            result = (
                self._db.table("users")
                .update({"token_epoch": epoch + 1, "updated_at": self._now().isoformat()})
                .eq("id", user_id)
                .eq("token_epoch", epoch)
                .execute()
            )
            if result.data:
                return epoch + 1

            logger.debug("Token epoch race on %s (attempt %d)", user_id, attempt + 1)

        return None

    def _map_to_account(self, data: dict[str, Any]) -> UserAccount:
        return UserAccount(
            id=data["id"],
            name=data.get("name") or "",
            email=data["email"],
            password_hash=data.get("password_hash") or "",
            phone=data.get("phone"),
            role=Role(data.get("role") or Role.USER.value),
            parent_category_id=data.get("parent_category_id"),
            sub_category_id=data.get("sub_category_id"),
            subscription=data.get("subscription") or {},
            token_epoch=data.get("token_epoch") or 0,
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
