"""
Hero banner repository for database access.
"""

from typing import Any, Optional

from shared.repository import BaseRepository

from .models import HeroBanner


class BannerRepository(BaseRepository[HeroBanner]):
    """Repository for the hero_banners table."""

    def create(
        self,
        title: str,
        desktop_image_url: str,
        mobile_image_url: str,
        link_url: Optional[str],
    ) -> HeroBanner:
        now = self._now().isoformat()
        result = self._db.table("hero_banners").insert({
            "title": title,
            "desktop_image_url": desktop_image_url,
            "mobile_image_url": mobile_image_url,
            "link_url": link_url,
            "created_at": now,
            "updated_at": now,
        }).execute()
        return self._map_to_banner(result.data[0])

    def list_all(self) -> list[HeroBanner]:
        result = self._db.table("hero_banners").select("*").order("created_at", desc=True).execute()
        return [self._map_to_banner(row) for row in result.data]

    def delete(self, banner_id: str) -> bool:
        if not self._is_uuid(banner_id):
            return False
        result = self._db.table("hero_banners").delete().eq("id", banner_id).execute()
        return bool(result.data)

    def _map_to_banner(self, data: dict[str, Any]) -> HeroBanner:
        return HeroBanner(
            id=data["id"],
            title=data["title"],
            desktop_image_url=data["desktop_image_url"],
            mobile_image_url=data["mobile_image_url"],
            link_url=data.get("link_url"),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
