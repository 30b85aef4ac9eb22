"""
Hero banner module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import UploadedFile

from .models import HeroBanner


@runtime_checkable
class IBannerService(Protocol):
    """Interface for hero banner operations."""

    async def create_banner(
        self,
        title: str,
        desktop: Optional[UploadedFile],
        mobile: Optional[UploadedFile],
        link_url: Optional[str] = None,
    ) -> HeroBanner:
        """
        Raises:
            MissingImageError: If either image is missing
            InvalidImageError: If either upload isn't an image
        """
        ...

    async def list_banners(self) -> list[HeroBanner]:
        """List banners, newest first."""
        ...

    async def delete_banner(self, banner_id: str) -> None:
        """
        Raises:
            BannerNotFoundError: If the banner doesn't exist
        """
        ...
