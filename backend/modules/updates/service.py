"""
Latest update service implementation.
"""

import logging
from typing import Optional

from providers.base import BlobStorage
from shared.media import ensure_image, storage_key
from shared.models import UploadedFile

from .exceptions import UpdateNotFoundError
from .interfaces import IUpdateService
from .models import LatestUpdate, UpdateFields
from .repository import UpdateRepository

logger = logging.getLogger(__name__)

STORAGE_PREFIX = "updates"


class UpdateService(IUpdateService):
    def __init__(self, repository: UpdateRepository, storage: BlobStorage):
        self._repository = repository
        self._storage = storage

    async def create_update(self, fields: UpdateFields, image: Optional[UploadedFile]) -> LatestUpdate:
        ensure_image(image, "image", required=True)

        key = storage_key(STORAGE_PREFIX, image.filename)
        row = fields.model_dump(mode="json")
        row["image_url"] = self._storage.put(image.data, key, content_type=image.content_type)

        update = self._repository.create(row)
        logger.info("Created latest update %s", update.id)
        return update

    async def list_updates(self) -> list[LatestUpdate]:
        return self._repository.list_all()

    async def set_content(self, update_id: str, content: str) -> LatestUpdate:
        return self._change(update_id, {"content": content})

    async def set_top(self, update_id: str, is_top: bool) -> LatestUpdate:
        return self._change(update_id, {"is_top": is_top})

    async def delete_update(self, update_id: str) -> None:
        if not self._repository.delete(update_id):
            raise UpdateNotFoundError(update_id)
        logger.info("Deleted latest update %s", update_id)

    def _change(self, update_id: str, fields: dict) -> LatestUpdate:
        update = self._repository.update(update_id, fields)
        if update is None:
            raise UpdateNotFoundError(update_id)
        logger.info("Changed %s on latest update %s", ", ".join(fields), update_id)
        return update
