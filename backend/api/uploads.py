"""
Multipart upload helpers.

Converts FastAPI UploadFile objects into the framework-free UploadedFile
model the services accept.
"""

from typing import Optional

from fastapi import UploadFile

from shared.exceptions import ValidationError
from shared.models import UploadedFile


async def read_upload(upload: Optional[UploadFile], max_bytes: int) -> Optional[UploadedFile]:
    """
    Read an upload into memory.

    Returns None for a missing upload, or for the empty part browsers send
    when a file input is left blank.

    Raises:
        ValidationError: If the file is larger than max_bytes
    """
    if upload is None or not upload.filename:
        return None

    data = await upload.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise ValidationError(
            f"File {upload.filename} exceeds the {max_bytes} byte limit",
            code="FILE_TOO_LARGE",
            details={"filename": upload.filename, "max_bytes": max_bytes},
        )

    return UploadedFile(
        filename=upload.filename,
        content_type=upload.content_type or "application/octet-stream",
        data=data,
    )


async def read_uploads(uploads: Optional[list[UploadFile]], max_bytes: int) -> list[UploadedFile]:
    files = []
    for upload in uploads or []:
        uploaded = await read_upload(upload, max_bytes)
        if uploaded is not None:
            files.append(uploaded)
    return files
