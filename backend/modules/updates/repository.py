"""
Latest update repository for database access.
"""

from typing import Any, Optional

from shared.repository import BaseRepository

from .models import LatestUpdate


class UpdateRepository(BaseRepository[LatestUpdate]):
    """Repository for the latest_updates table."""

    def create(self, fields: dict[str, Any]) -> LatestUpdate:
        now = self._now().isoformat()
        result = self._db.table("latest_updates").insert({
            **fields,
            "created_at": now,
            "updated_at": now,
        }).execute()
        return self._map_to_update(result.data[0])

    def list_all(self) -> list[LatestUpdate]:
        result = self._db.table("latest_updates").select("*").order("created_at", desc=True).execute()
        return [self._map_to_update(row) for row in result.data]

    def update(self, update_id: str, fields: dict[str, Any]) -> Optional[LatestUpdate]:
        """
        Returns:
            The updated item, or None if it doesn't exist.
        """
        if not self._is_uuid(update_id):
            return None
        result = (
            self._db.table("latest_updates")
            .update({**fields, "updated_at": self._now().isoformat()})
            .eq("id", update_id)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_update(result.data[0])

    def delete(self, update_id: str) -> bool:
        if not self._is_uuid(update_id):
            return False
        result = self._db.table("latest_updates").delete().eq("id", update_id).execute()
        return bool(result.data)

    def _map_to_update(self, data: dict[str, Any]) -> LatestUpdate:
        return LatestUpdate(
            id=data["id"],
            title=data["title"],
            subtitle=data["subtitle"],
            image_url=data["image_url"],
            published_on=data["published_on"],
            read_time=data["read_time"],
            content=data["content"],
            is_top=bool(data.get("is_top")),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
