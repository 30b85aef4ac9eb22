"""
Sponsor module interface.
"""

from typing import Protocol, runtime_checkable

from .models import Sponsor, SponsorRequest, UpdateSponsorRequest


@runtime_checkable
class ISponsorService(Protocol):
    """Interface for sponsor operations."""

    async def create_sponsor(self, request: SponsorRequest) -> Sponsor:
        ...

    async def list_sponsors(self) -> list[Sponsor]:
        """List sponsors, newest first."""
        ...

    async def update_sponsor(self, sponsor_id: str, request: UpdateSponsorRequest) -> Sponsor:
        """
        Raises:
            SponsorNotFoundError: If the sponsor doesn't exist
        """
        ...

    async def delete_sponsor(self, sponsor_id: str) -> None:
        """
        Raises:
            SponsorNotFoundError: If the sponsor doesn't exist
        """
        ...
