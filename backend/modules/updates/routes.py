"""
Latest update API endpoints.

Listing is public; every change is admin-only.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from api.dependencies import get_settings_dependency, get_update_service
from api.middleware.auth import require_admin
from api.uploads import read_upload
from shared.config import Settings
from shared.models import AuthenticatedUser

from .interfaces import IUpdateService
from .models import LatestUpdate, SetContentRequest, SetTopRequest, UpdateFields

router = APIRouter()


@router.get("", response_model=list[LatestUpdate])
async def list_updates(
    service: IUpdateService = Depends(get_update_service),
) -> list[LatestUpdate]:
    return await service.list_updates()


@router.post("", response_model=LatestUpdate, status_code=201)
async def create_update(
    title: str = Form(..., min_length=1, max_length=300),
    subtitle: str = Form(..., min_length=1, max_length=500),
    published_on: date = Form(...),
    read_time: str = Form(..., min_length=1, max_length=50),
    content: str = Form(..., min_length=1),
    is_top: bool = Form(False),
    image: Optional[UploadFile] = File(None),
    admin: AuthenticatedUser = Depends(require_admin),
    service: IUpdateService = Depends(get_update_service),
    settings: Settings = Depends(get_settings_dependency),
) -> LatestUpdate:
    fields = UpdateFields(
        title=title,
        subtitle=subtitle,
        published_on=published_on,
        read_time=read_time,
        content=content,
        is_top=is_top,
    )
    return await service.create_update(
        fields,
        await read_upload(image, settings.max_attachment_bytes),
    )


@router.patch("/{update_id}/content", response_model=LatestUpdate)
async def set_content(
    update_id: str,
    request: SetContentRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IUpdateService = Depends(get_update_service),
) -> LatestUpdate:
    return await service.set_content(update_id, request.content)


@router.patch("/{update_id}/top", response_model=LatestUpdate)
async def set_top(
    update_id: str,
    request: SetTopRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IUpdateService = Depends(get_update_service),
) -> LatestUpdate:
    """
    Pin or unpin an update as a top story.
    """
    return await service.set_top(update_id, request.is_top)


@router.delete("/{update_id}", status_code=204)
async def delete_update(
    update_id: str,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IUpdateService = Depends(get_update_service),
) -> None:
    await service.delete_update(update_id)
