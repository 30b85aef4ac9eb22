"""
Sponsor API endpoints.

Listing is public; changes are admin-only.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_sponsor_service
from api.middleware.auth import require_admin
from shared.models import AuthenticatedUser

from .interfaces import ISponsorService
from .models import Sponsor, SponsorRequest, UpdateSponsorRequest

router = APIRouter()


@router.get("", response_model=list[Sponsor])
async def list_sponsors(
    service: ISponsorService = Depends(get_sponsor_service),
) -> list[Sponsor]:
    return await service.list_sponsors()


@router.post("", response_model=Sponsor, status_code=201)
async def create_sponsor(
    request: SponsorRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    service: ISponsorService = Depends(get_sponsor_service),
) -> Sponsor:
    return await service.create_sponsor(request)


@router.put("/{sponsor_id}", response_model=Sponsor)
async def update_sponsor(
    sponsor_id: str,
    request: UpdateSponsorRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    service: ISponsorService = Depends(get_sponsor_service),
) -> Sponsor:
    return await service.update_sponsor(sponsor_id, request)


@router.delete("/{sponsor_id}", status_code=204)
async def delete_sponsor(
    sponsor_id: str,
    admin: AuthenticatedUser = Depends(require_admin),
    service: ISponsorService = Depends(get_sponsor_service),
) -> None:
    await service.delete_sponsor(sponsor_id)
