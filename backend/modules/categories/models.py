"""
Category tree data models.

A category node is either a navigation category or a content node.
Nodes form a tree through parent_id; path holds the names from the root
down to the node itself.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class NodeKind(str, Enum):
    """Kinds of category nodes."""

    CATEGORY = "category"
    CONTENT = "content"


class ContentKind(str, Enum):
    """The content variant written last to a node."""

    TEXT = "text"
    FILE = "file"
    IMAGES = "images"
    VIDEO = "video"


class NodeContent(BaseModel):
    """
    Content attached to a node.

    Each upload writes a single field; fields from earlier uploads are
    left in place. content_kind names the field written last.
    """

    text: Optional[str] = None
    file_url: Optional[str] = None
    image_urls: list[str] = Field(default_factory=list)
    video_url: Optional[str] = None
    content_kind: Optional[ContentKind] = None


class CategoryNode(BaseModel):
    """A node of the category tree."""

    id: str = Field(..., description="Node ID (UUID)")
    name: str = Field(..., description="Display name")
    kind: NodeKind = Field(default=NodeKind.CATEGORY)
    parent_id: Optional[str] = Field(None, description="Parent node ID, None for roots")
    path: list[str] = Field(default_factory=list, description="Names from the root to this node")
    owner_id: Optional[str] = Field(None, description="Principal that created the node")
    content: Optional[NodeContent] = Field(None)
    created_at: datetime
    updated_at: datetime


class CategorySummary(BaseModel):
    """
    A node without its content.

    Served by the public navigation routes; content is only returned to
    subscribers through the single-node read.
    """

    id: str
    name: str
    kind: NodeKind
    parent_id: Optional[str] = None
    path: list[str] = Field(default_factory=list)
    has_content: bool = Field(False, description="Whether the node carries paid content")
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_node(cls, node: CategoryNode) -> "CategorySummary":
        return cls(
            id=node.id,
            name=node.name,
            kind=node.kind,
            parent_id=node.parent_id,
            path=node.path,
            has_content=node.content is not None,
            created_at=node.created_at,
            updated_at=node.updated_at,
        )


class CategoryTreeNode(CategorySummary):
    """A content-free node together with its whole subtree."""

    children: list["CategoryTreeNode"] = Field(default_factory=list)


class RootCategory(BaseModel):
    """Projection of a root node for the top-level menu."""

    id: str
    name: str
    path: list[str] = Field(default_factory=list)


class NavigationCategory(BaseModel):
    """Projection used by the registration category picker."""

    id: str
    name: str
    kind: NodeKind


class CreateCategoryRequest(BaseModel):
    """Request to create a category node."""

    name: str = Field(..., min_length=1, max_length=200)
    parent_id: Optional[str] = Field(None, description="Parent node ID; omit for a root")
    kind: NodeKind = Field(default=NodeKind.CATEGORY)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value


class DeleteSubtreeResponse(BaseModel):
    """Result of deleting a node and its descendants."""

    message: str
    deleted: int = Field(..., description="Number of nodes deleted")
