"""
Categories module interface.

The auth module depends on ICategoryService to validate the categories a
user registers with.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import UploadedFile

from .models import (
    CategoryNode,
    CategorySummary,
    CategoryTreeNode,
    NavigationCategory,
    NodeKind,
    RootCategory,
)


@runtime_checkable
class ICategoryService(Protocol):
    """Interface for category tree operations."""

    async def create_node(
        self,
        name: str,
        parent_id: Optional[str] = None,
        kind: NodeKind = NodeKind.CATEGORY,
        owner_id: Optional[str] = None,
    ) -> CategoryNode:
        """
        Create a node under an existing parent, or a root.

        Raises:
            CategoryNotFoundError: If parent_id is given but doesn't exist
        """
        ...

    async def set_content(
        self,
        node_id: str,
        text: Optional[str] = None,
        file: Optional[UploadedFile] = None,
        images: Optional[list[UploadedFile]] = None,
        video_url: Optional[str] = None,
    ) -> CategoryNode:
        """
        Attach exactly one content variant to a node.

        Raises:
            InvalidContentError: Unless exactly one variant is supplied, or on a bad video URL
            CategoryNotFoundError: If the node doesn't exist
            StorageError: If uploading a file or image fails
        """
        ...

    async def list_roots(self) -> list[RootCategory]:
        ...

    async def list_children(self, parent_id: str) -> list[CategorySummary]:
        """Direct children of a node, without their content."""
        ...

    async def list_navigation_categories(self) -> list[NavigationCategory]:
        ...

    async def get_node(self, node_id: str) -> CategoryNode:
        """
        Raises:
            CategoryNotFoundError: If the node doesn't exist
        """
        ...

    async def build_tree(self, root_id: Optional[str] = None) -> list[CategoryTreeNode]:
        """
        Build the forest of all roots, or the single subtree under root_id.

        Nodes are content-free summaries; content is read per node.

        Raises:
            CategoryNotFoundError: If root_id is given but doesn't exist
            TreeDepthExceededError: If the tree is deeper than allowed
        """
        ...

    async def delete_subtree(self, node_id: str) -> int:
        """
        Delete a node and all its descendants.

        Returns:
            Number of nodes deleted (0 if the node doesn't exist)
        """
        ...
