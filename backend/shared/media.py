"""
Helpers for uploaded media.

Services store uploads in blob storage and keep only the returned URL.
"""

import os
import uuid
from typing import Optional

from .exceptions import ValidationError
from .models import UploadedFile


class InvalidImageError(ValidationError):
    """Raised when an image field receives something that isn't an image."""

    def __init__(self, field: str, content_type: str):
        super().__init__(
            f"{field} must be an image, got {content_type}",
            code="INVALID_IMAGE",
            details={"field": field, "content_type": content_type},
        )


class MissingImageError(ValidationError):
    def __init__(self, field: str):
        super().__init__(f"{field} image is required", code="IMAGE_REQUIRED", details={"field": field})


def storage_key(prefix: str, filename: Optional[str]) -> str:
    """Unique object key under prefix. Directory parts of the client filename are dropped."""
    name = os.path.basename(filename or "") or "upload"
    return f"{prefix}/{uuid.uuid4().hex}-{name}"


def ensure_image(upload: Optional[UploadedFile], field: str, required: bool = False) -> None:
    """
    Raises:
        MissingImageError: If required and no upload was sent
        InvalidImageError: If the upload's content type is not image/*
    """
    if upload is None:
        if required:
            raise MissingImageError(field)
        return
    if not upload.content_type.startswith("image/"):
        raise InvalidImageError(field, upload.content_type)
