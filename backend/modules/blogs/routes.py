"""
Blog API endpoints.

Listing is public; changes are admin-only and sent as multipart forms so
images can travel with the text fields.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from api.dependencies import get_blog_service, get_settings_dependency
from api.middleware.auth import require_admin
from api.uploads import read_upload, read_uploads
from shared.config import Settings
from shared.models import AuthenticatedUser

from .interfaces import IBlogService
from .models import Blog, BlogFields, BlogUpdate

router = APIRouter()


@router.get("", response_model=list[Blog])
async def list_blogs(
    service: IBlogService = Depends(get_blog_service),
) -> list[Blog]:
    return await service.list_blogs()


@router.post("", response_model=Blog, status_code=201)
async def create_blog(
    title: str = Form(..., min_length=1, max_length=300),
    excerpt: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    category: Optional[str] = Form(None, max_length=100),
    read_time: Optional[str] = Form(None, max_length=50),
    published_on: Optional[date] = Form(None),
    image: Optional[UploadFile] = File(None),
    gallery: Optional[list[UploadFile]] = File(None),
    admin: AuthenticatedUser = Depends(require_admin),
    service: IBlogService = Depends(get_blog_service),
    settings: Settings = Depends(get_settings_dependency),
) -> Blog:
    """
    Create a blog with an optional cover image and up to 5 gallery images.
    """
    fields = BlogFields(
        title=title,
        excerpt=excerpt,
        content=content,
        category=category,
        read_time=read_time,
        published_on=published_on,
    )
    max_bytes = settings.max_attachment_bytes
    return await service.create_blog(
        fields,
        image=await read_upload(image, max_bytes),
        gallery=await read_uploads(gallery, max_bytes),
    )


@router.put("/{blog_id}", response_model=Blog)
async def update_blog(
    blog_id: str,
    title: Optional[str] = Form(None, min_length=1, max_length=300),
    excerpt: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    category: Optional[str] = Form(None, max_length=100),
    read_time: Optional[str] = Form(None, max_length=50),
    published_on: Optional[date] = Form(None),
    image: Optional[UploadFile] = File(None),
    gallery: Optional[list[UploadFile]] = File(None),
    admin: AuthenticatedUser = Depends(require_admin),
    service: IBlogService = Depends(get_blog_service),
    settings: Settings = Depends(get_settings_dependency),
) -> Blog:
    """
    Update a blog. A new gallery replaces the old one.
    """
    changes = BlogUpdate(
        title=title,
        excerpt=excerpt,
        content=content,
        category=category,
        read_time=read_time,
        published_on=published_on,
    )
    max_bytes = settings.max_attachment_bytes
    return await service.update_blog(
        blog_id,
        changes,
        image=await read_upload(image, max_bytes),
        gallery=await read_uploads(gallery, max_bytes),
    )


@router.delete("/{blog_id}", status_code=204)
async def delete_blog(
    blog_id: str,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IBlogService = Depends(get_blog_service),
) -> None:
    await service.delete_blog(blog_id)
