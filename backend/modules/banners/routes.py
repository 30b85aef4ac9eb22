"""
Hero banner API endpoints.

Listing is public; uploads and deletes are admin-only.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from api.dependencies import get_banner_service, get_settings_dependency
from api.middleware.auth import require_admin
from api.uploads import read_upload
from shared.config import Settings
from shared.models import AuthenticatedUser

from .interfaces import IBannerService
from .models import HeroBanner

router = APIRouter()


@router.get("", response_model=list[HeroBanner])
async def list_banners(
    service: IBannerService = Depends(get_banner_service),
) -> list[HeroBanner]:
    return await service.list_banners()


@router.post("", response_model=HeroBanner, status_code=201)
async def create_banner(
    title: str = Form(..., min_length=1, max_length=300),
    link_url: Optional[str] = Form(None, alias="url", max_length=2000),
    desktop: Optional[UploadFile] = File(None),
    mobile: Optional[UploadFile] = File(None),
    admin: AuthenticatedUser = Depends(require_admin),
    service: IBannerService = Depends(get_banner_service),
    settings: Settings = Depends(get_settings_dependency),
) -> HeroBanner:
    """
    Upload a banner. Both the desktop and mobile images are required.
    """
    max_bytes = settings.max_attachment_bytes
    return await service.create_banner(
        title,
        desktop=await read_upload(desktop, max_bytes),
        mobile=await read_upload(mobile, max_bytes),
        link_url=link_url,
    )


@router.delete("/{banner_id}", status_code=204)
async def delete_banner(
    banner_id: str,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IBannerService = Depends(get_banner_service),
) -> None:
    await service.delete_banner(banner_id)
