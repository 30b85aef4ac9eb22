"""Tests for sponsors."""

import pytest

from modules.sponsors.exceptions import SponsorNotFoundError
from modules.sponsors.models import SponsorRequest, UpdateSponsorRequest
from modules.sponsors.repository import SponsorRepository
from modules.sponsors.service import SponsorService

UNKNOWN_ID = "8a6e0804-2bd0-4672-b79d-d97027f9071a"


@pytest.fixture
def service(db) -> SponsorService:
    return SponsorService(SponsorRepository(db))


@pytest.fixture
def request_body() -> SponsorRequest:
    return SponsorRequest(name="Acme Books", context_color="#ff6600", url="https://acme.example.com")


class TestSponsorService:
    @pytest.mark.asyncio
    async def test_create_and_list(self, service, request_body):
        created = await service.create_sponsor(request_body)

        sponsors = await service.list_sponsors()

        assert [s.id for s in sponsors] == [created.id]
        assert sponsors[0].context_color == "#ff6600"

    @pytest.mark.asyncio
    async def test_partial_update(self, service, request_body):
        created = await service.create_sponsor(request_body)

        updated = await service.update_sponsor(created.id, UpdateSponsorRequest(name="Acme Press"))

        assert updated.name == "Acme Press"
        assert updated.url == "https://acme.example.com"

    @pytest.mark.asyncio
    async def test_empty_update_returns_current(self, service, request_body):
        created = await service.create_sponsor(request_body)
        unchanged = await service.update_sponsor(created.id, UpdateSponsorRequest())
        assert unchanged.name == "Acme Books"

    @pytest.mark.asyncio
    async def test_update_missing(self, service):
        with pytest.raises(SponsorNotFoundError):
            await service.update_sponsor(UNKNOWN_ID, UpdateSponsorRequest(name="x"))
        with pytest.raises(SponsorNotFoundError):
            await service.update_sponsor(UNKNOWN_ID, UpdateSponsorRequest())

    @pytest.mark.asyncio
    async def test_delete(self, service, request_body, db):
        created = await service.create_sponsor(request_body)

        await service.delete_sponsor(created.id)

        assert db.rows("sponsors") == []
        with pytest.raises(SponsorNotFoundError):
            await service.delete_sponsor(created.id)
