"""
Blog repository for database access.
"""

from typing import Any, Optional

from shared.repository import BaseRepository

from .models import Blog


class BlogRepository(BaseRepository[Blog]):
    """Repository for the blogs table."""

    def create(self, fields: dict[str, Any]) -> Blog:
        now = self._now().isoformat()
        result = self._db.table("blogs").insert({
            **fields,
            "created_at": now,
            "updated_at": now,
        }).execute()
        return self._map_to_blog(result.data[0])

    def list_all(self) -> list[Blog]:
        result = (
            self._db.table("blogs")
            .select("*")
            .order("published_on", desc=True)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_blog(row) for row in result.data]

    def get_by_id(self, blog_id: str) -> Optional[Blog]:
        if not self._is_uuid(blog_id):
            return None
        result = self._db.table("blogs").select("*").eq("id", blog_id).execute()
        if not result.data:
            return None
        return self._map_to_blog(result.data[0])

    def update(self, blog_id: str, fields: dict[str, Any]) -> Optional[Blog]:
        if not self._is_uuid(blog_id):
            return None
        result = (
            self._db.table("blogs")
            .update({**fields, "updated_at": self._now().isoformat()})
            .eq("id", blog_id)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_blog(result.data[0])

    def delete(self, blog_id: str) -> bool:
        if not self._is_uuid(blog_id):
            return False
        result = self._db.table("blogs").delete().eq("id", blog_id).execute()
        return bool(result.data)

    def _map_to_blog(self, data: dict[str, Any]) -> Blog:
        return Blog(
            id=data["id"],
            title=data["title"],
            excerpt=data.get("excerpt"),
            content=data.get("content"),
            image_url=data.get("image_url"),
            gallery_urls=data.get("gallery_urls") or [],
            category=data.get("category"),
            read_time=data.get("read_time"),
            published_on=data.get("published_on"),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
