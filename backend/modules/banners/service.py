"""
Hero banner service implementation.
"""

import logging
from typing import Optional

from providers.base import BlobStorage
from shared.media import ensure_image, storage_key
from shared.models import UploadedFile

from .exceptions import BannerNotFoundError
from .interfaces import IBannerService
from .models import HeroBanner
from .repository import BannerRepository

logger = logging.getLogger(__name__)

STORAGE_PREFIX = "banners"


class BannerService(IBannerService):
    def __init__(self, repository: BannerRepository, storage: BlobStorage):
        self._repository = repository
        self._storage = storage

    async def create_banner(
        self,
        title: str,
        desktop: Optional[UploadedFile],
        mobile: Optional[UploadedFile],
        link_url: Optional[str] = None,
    ) -> HeroBanner:
        ensure_image(desktop, "desktop", required=True)
        ensure_image(mobile, "mobile", required=True)

        banner = self._repository.create(
            title=title,
            desktop_image_url=self._store(desktop),
            mobile_image_url=self._store(mobile),
            link_url=link_url or None,
        )
        logger.info("Created hero banner %s", banner.id)
        return banner

    async def list_banners(self) -> list[HeroBanner]:
        return self._repository.list_all()

    async def delete_banner(self, banner_id: str) -> None:
        if not self._repository.delete(banner_id):
            raise BannerNotFoundError(banner_id)
        logger.info("Deleted hero banner %s", banner_id)

    def _store(self, upload: UploadedFile) -> str:
        key = storage_key(STORAGE_PREFIX, upload.filename)
        return self._storage.put(upload.data, key, content_type=upload.content_type)
