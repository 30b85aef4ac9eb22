"""
Sponsor repository for database access.
"""

from typing import Any, Optional

from shared.repository import BaseRepository

from .models import Sponsor


class SponsorRepository(BaseRepository[Sponsor]):
    """Repository for the sponsors table."""

    def create(self, name: str, context_color: str, url: str) -> Sponsor:
        now = self._now().isoformat()
        result = self._db.table("sponsors").insert({
            "name": name,
            "context_color": context_color,
            "url": url,
            "created_at": now,
            "updated_at": now,
        }).execute()
        return self._map_to_sponsor(result.data[0])

    def list_all(self) -> list[Sponsor]:
        result = self._db.table("sponsors").select("*").order("created_at", desc=True).execute()
        return [self._map_to_sponsor(row) for row in result.data]

    def get_by_id(self, sponsor_id: str) -> Optional[Sponsor]:
        if not self._is_uuid(sponsor_id):
            return None
        result = self._db.table("sponsors").select("*").eq("id", sponsor_id).execute()
        if not result.data:
            return None
        return self._map_to_sponsor(result.data[0])

    def update(self, sponsor_id: str, fields: dict[str, Any]) -> Optional[Sponsor]:
        """
        Update the given fields.

        Returns:
            The updated Sponsor, or None if it doesn't exist.
        """
        if not self._is_uuid(sponsor_id):
            return None
        result = (
            self._db.table("sponsors")
            .update({**fields, "updated_at": self._now().isoformat()})
            .eq("id", sponsor_id)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_sponsor(result.data[0])

    def delete(self, sponsor_id: str) -> bool:
        if not self._is_uuid(sponsor_id):
            return False
        result = self._db.table("sponsors").delete().eq("id", sponsor_id).execute()
        return bool(result.data)

    def _map_to_sponsor(self, data: dict[str, Any]) -> Sponsor:
        return Sponsor(
            id=data["id"],
            name=data["name"],
            context_color=data["context_color"],
            url=data["url"],
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
