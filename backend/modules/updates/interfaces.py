"""
Latest update module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import UploadedFile

from .models import LatestUpdate, UpdateFields


@runtime_checkable
class IUpdateService(Protocol):
    """Interface for latest update operations."""

    async def create_update(self, fields: UpdateFields, image: Optional[UploadedFile]) -> LatestUpdate:
        """
        Raises:
            MissingImageError: If no image was sent
            InvalidImageError: If the upload isn't an image
        """
        ...

    async def list_updates(self) -> list[LatestUpdate]:
        """List updates, newest first."""
        ...

    async def set_content(self, update_id: str, content: str) -> LatestUpdate:
        """
        Replace the HTML body.

        Raises:
            UpdateNotFoundError: If the update doesn't exist
        """
        ...

    async def set_top(self, update_id: str, is_top: bool) -> LatestUpdate:
        """
        Raises:
            UpdateNotFoundError: If the update doesn't exist
        """
        ...

    async def delete_update(self, update_id: str) -> None:
        """
        Raises:
            UpdateNotFoundError: If the update doesn't exist
        """
        ...
