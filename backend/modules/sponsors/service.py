"""
Sponsor service implementation.
"""

import logging

from .exceptions import SponsorNotFoundError
from .interfaces import ISponsorService
from .models import Sponsor, SponsorRequest, UpdateSponsorRequest
from .repository import SponsorRepository

logger = logging.getLogger(__name__)


class SponsorService(ISponsorService):
    def __init__(self, repository: SponsorRepository):
        self._repository = repository

    async def create_sponsor(self, request: SponsorRequest) -> Sponsor:
        sponsor = self._repository.create(request.name, request.context_color, request.url)
        logger.info("Created sponsor %s", sponsor.id)
        return sponsor

    async def list_sponsors(self) -> list[Sponsor]:
        return self._repository.list_all()

    async def update_sponsor(self, sponsor_id: str, request: UpdateSponsorRequest) -> Sponsor:
        fields = request.model_dump(exclude_none=True)
        if fields:
            sponsor = self._repository.update(sponsor_id, fields)
        else:
            sponsor = self._repository.get_by_id(sponsor_id)
        if sponsor is None:
            raise SponsorNotFoundError(sponsor_id)
        return sponsor

    async def delete_sponsor(self, sponsor_id: str) -> None:
        if not self._repository.delete(sponsor_id):
            raise SponsorNotFoundError(sponsor_id)
        logger.info("Deleted sponsor %s", sponsor_id)
