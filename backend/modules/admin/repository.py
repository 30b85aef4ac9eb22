"""
Admin repository for database access.

Reads regular users (role=user) from the users table. Admin principals
never show up in these queries.
"""

from typing import Any, Optional

from shared.models import Role
from shared.repository import BaseRepository

from .models import UserRecord

USER_COLUMNS = (
    "id, name, email, phone, parent_category_id, sub_category_id, "
    "subscription, created_at, updated_at"
)


class AdminRepository(BaseRepository[UserRecord]):
    """
    Repository for user management queries.

    Note: This repository does NOT perform authorization checks.
    """

    def list_users(self) -> list[UserRecord]:
        """All regular users, newest first."""
        result = (
            self._db.table("users")
            .select(USER_COLUMNS)
            .eq("role", Role.USER.value)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_record(row) for row in result.data]

    def get_user(self, user_id: str) -> Optional[UserRecord]:
        if not self._is_uuid(user_id):
            return None
        result = (
            self._db.table("users")
            .select(USER_COLUMNS)
            .eq("id", user_id)
            .eq("role", Role.USER.value)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_record(result.data[0])

    def update_user(self, user_id: str, fields: dict[str, Any]) -> Optional[UserRecord]:
        """
        Update profile fields of a regular user.

        Returns:
            The updated record, or None if no regular user has that ID.
        """
        if not self._is_uuid(user_id):
            return None
        result = (
            self._db.table("users")
            .update({**fields, "updated_at": self._now().isoformat()})
            .eq("id", user_id)
            .eq("role", Role.USER.value)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_record(result.data[0])

    def delete_user(self, user_id: str) -> bool:
        """
        Delete a regular user. Their chat sessions go with them.

        Returns:
            True if a row was deleted.
        """
        if not self._is_uuid(user_id):
            return False
        result = (
            self._db.table("users")
            .delete()
            .eq("id", user_id)
            .eq("role", Role.USER.value)
            .execute()
        )
        return bool(result.data)

    def _map_to_record(self, data: dict[str, Any]) -> UserRecord:
        return UserRecord(
            id=data["id"],
            name=data.get("name") or "",
            email=data["email"],
            phone=data.get("phone"),
            parent_category_id=data.get("parent_category_id"),
            sub_category_id=data.get("sub_category_id"),
            subscription=data.get("subscription") or {},
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
