"""Supabase Storage implementation of blob storage.

Uploaded category files (PDFs, images) live in a public bucket and are
served by their public URL.
"""

import logging
from typing import Optional

from supabase import Client

from .base import BlobStorage
from .exceptions import StorageError

logger = logging.getLogger(__name__)


class SupabaseBlobStorage(BlobStorage):
    """Stores objects in a Supabase Storage bucket.

    Keys are placed under a configurable prefix so several environments can
    share one bucket.
    """

    def __init__(self, client: Client, bucket: str, prefix: str = ""):
        self._client = client
        self._bucket = bucket
        self._prefix = prefix.strip("/")

    def _object_path(self, suggested_key: str) -> str:
        key = suggested_key.lstrip("/")
        return f"{self._prefix}/{key}" if self._prefix else key

    def put(
        self,
        data: bytes,
        suggested_key: str,
        content_type: Optional[str] = None,
    ) -> str:
        path = self._object_path(suggested_key)
        file_options = {"upsert": "false"}
        if content_type:
            file_options["content-type"] = content_type

        bucket = self._client.storage.from_(self._bucket)
        try:
            bucket.upload(path=path, file=data, file_options=file_options)
            url = bucket.get_public_url(path)
        except Exception as e:
            logger.error("Upload to bucket %s failed for %s: %s", self._bucket, path, e)
            raise StorageError(f"Failed to store {suggested_key}", original_error=str(e)) from e

        logger.debug("Stored %d bytes at %s", len(data), path)
        return url
