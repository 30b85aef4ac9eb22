"""
Blog service implementation.
"""

import logging
from typing import Optional

from providers.base import BlobStorage
from shared.media import ensure_image, storage_key
from shared.models import UploadedFile

from .exceptions import BlogNotFoundError, TooManyGalleryImagesError
from .interfaces import IBlogService
from .models import Blog, BlogFields, BlogUpdate
from .repository import BlogRepository

logger = logging.getLogger(__name__)

MAX_GALLERY_IMAGES = 5
STORAGE_PREFIX = "blogs"


class BlogService(IBlogService):
    def __init__(self, repository: BlogRepository, storage: BlobStorage):
        self._repository = repository
        self._storage = storage

    async def create_blog(
        self,
        fields: BlogFields,
        image: Optional[UploadedFile] = None,
        gallery: Optional[list[UploadedFile]] = None,
    ) -> Blog:
        gallery = gallery or []
        self._check_images(image, gallery)

        row = fields.model_dump(mode="json")
        row["image_url"] = self._store(image) if image else None
        row["gallery_urls"] = [self._store(upload) for upload in gallery]

        blog = self._repository.create(row)
        logger.info("Created blog %s with %d gallery images", blog.id, len(gallery))
        return blog

    async def list_blogs(self) -> list[Blog]:
        return self._repository.list_all()

    async def update_blog(
        self,
        blog_id: str,
        changes: BlogUpdate,
        image: Optional[UploadedFile] = None,
        gallery: Optional[list[UploadedFile]] = None,
    ) -> Blog:
        gallery = gallery or []
        self._check_images(image, gallery)
        if self._repository.get_by_id(blog_id) is None:
            raise BlogNotFoundError(blog_id)

        fields = changes.model_dump(mode="json", exclude_none=True)
        if image:
            fields["image_url"] = self._store(image)
        if gallery:
            fields["gallery_urls"] = [self._store(upload) for upload in gallery]

        if not fields:
            return self._repository.get_by_id(blog_id)

        blog = self._repository.update(blog_id, fields)
        if blog is None:
            raise BlogNotFoundError(blog_id)
        logger.info("Updated blog %s: %s", blog_id, ", ".join(sorted(fields)))
        return blog

    async def delete_blog(self, blog_id: str) -> None:
        if not self._repository.delete(blog_id):
            raise BlogNotFoundError(blog_id)
        logger.info("Deleted blog %s", blog_id)

    @staticmethod
    def _check_images(image: Optional[UploadedFile], gallery: list[UploadedFile]) -> None:
        if len(gallery) > MAX_GALLERY_IMAGES:
            raise TooManyGalleryImagesError(MAX_GALLERY_IMAGES)
        ensure_image(image, "image")
        for upload in gallery:
            ensure_image(upload, "gallery")

    def _store(self, upload: UploadedFile) -> str:
        key = storage_key(STORAGE_PREFIX, upload.filename)
        return self._storage.put(upload.data, key, content_type=upload.content_type)
