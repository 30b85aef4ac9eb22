"""
Category API endpoints.

Public navigation reads, entitlement-gated node reads, and admin-only
writes. navigation_router is mounted at the root for GET /categories.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile

from api.dependencies import get_category_service, get_settings_dependency
from api.middleware.auth import require_admin, require_entitlement
from api.uploads import read_upload, read_uploads
from shared.config import Settings
from shared.models import AuthenticatedUser

from .interfaces import ICategoryService
from .models import (
    CategoryNode,
    CategorySummary,
    CategoryTreeNode,
    CreateCategoryRequest,
    DeleteSubtreeResponse,
    NavigationCategory,
    RootCategory,
)

router = APIRouter()
navigation_router = APIRouter()


@navigation_router.get("/categories", response_model=list[NavigationCategory])
async def list_navigation_categories(
    service: ICategoryService = Depends(get_category_service),
) -> list[NavigationCategory]:
    """
    List all navigation categories for the registration picker.
    """
    return await service.list_navigation_categories()


@router.post("", response_model=CategoryNode, status_code=201)
async def create_category(
    request: CreateCategoryRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    service: ICategoryService = Depends(get_category_service),
) -> CategoryNode:
    """
    Create a category node. Omit parent_id to create a root.
    """
    return await service.create_node(
        request.name,
        parent_id=request.parent_id,
        kind=request.kind,
        owner_id=admin.id,
    )


@router.post("/content", response_model=CategoryNode)
async def upload_content(
    category_id: str = Form(..., alias="categoryid"),
    text: Optional[str] = Form(None),
    video_url: Optional[str] = Form(None, alias="videoUrl"),
    pdf: Optional[UploadFile] = File(None),
    images: Optional[list[UploadFile]] = File(None),
    admin: AuthenticatedUser = Depends(require_admin),
    service: ICategoryService = Depends(get_category_service),
    settings: Settings = Depends(get_settings_dependency),
) -> CategoryNode:
    """
    Attach content to a node.

    Exactly one of text, pdf, images (up to 10) or videoUrl must be sent.
    """
    max_bytes = settings.max_attachment_bytes
    return await service.set_content(
        category_id,
        text=text or None,
        file=await read_upload(pdf, max_bytes),
        images=await read_uploads(images, max_bytes),
        video_url=video_url or None,
    )


@router.get("/parents", response_model=list[RootCategory])
async def list_parent_categories(
    service: ICategoryService = Depends(get_category_service),
) -> list[RootCategory]:
    return await service.list_roots()


@router.get("/subcategories/{parent_id}", response_model=list[CategorySummary])
async def list_subcategories(
    parent_id: str,
    service: ICategoryService = Depends(get_category_service),
) -> list[CategorySummary]:
    return await service.list_children(parent_id)


@router.get("/tree", response_model=list[CategoryTreeNode])
async def get_category_tree(
    root_id: Optional[str] = Query(default=None, description="Return only this subtree"),
    service: ICategoryService = Depends(get_category_service),
) -> list[CategoryTreeNode]:
    """
    Get the full category tree, or a single subtree.

    Content is left out; subscribers read it through GET /api/categories/{id}.
    """
    return await service.build_tree(root_id)


@router.get("/{category_id}", response_model=CategoryNode)
async def get_category(
    category_id: str,
    user: AuthenticatedUser = Depends(require_entitlement),
    service: ICategoryService = Depends(get_category_service),
) -> CategoryNode:
    """
    Get a node with its content. Requires an active subscription.
    """
    return await service.get_node(category_id)


@router.delete("/{category_id}", response_model=DeleteSubtreeResponse)
async def delete_category(
    category_id: str,
    admin: AuthenticatedUser = Depends(require_admin),
    service: ICategoryService = Depends(get_category_service),
) -> DeleteSubtreeResponse:
    """
    Delete a node and everything below it.
    """
    deleted = await service.delete_subtree(category_id)
    return DeleteSubtreeResponse(
        message="Category and its descendants deleted" if deleted else "Category not found",
        deleted=deleted,
    )
