"""
Category repository for database access.

Encapsulates all Supabase queries and data mapping for the categories table.
"""

from typing import Any, Optional

from shared.repository import BaseRepository

from .models import CategoryNode, NodeContent, NodeKind


class CategoryRepository(BaseRepository[CategoryNode]):
    """
    Repository for category tree data access.

    Every method issues flat queries against the self-referential
    categories table; tree walks are done by the service.
    """

    def create(
        self,
        name: str,
        path: list[str],
        kind: NodeKind = NodeKind.CATEGORY,
        parent_id: Optional[str] = None,
        owner_id: Optional[str] = None,
    ) -> CategoryNode:
        """
        Insert a new node.

        Returns:
            Created CategoryNode with generated ID.
        """
        now = self._now().isoformat()
        result = self._db.table("categories").insert({
            "name": name,
            "kind": kind.value,
            "parent_id": parent_id,
            "path": path,
            "owner_id": owner_id,
            "content": None,
            "created_at": now,
            "updated_at": now,
        }).execute()
        return self._map_to_node(result.data[0])

    def get_by_id(self, node_id: str) -> Optional[CategoryNode]:
        if not self._is_uuid(node_id):
            return None
        result = self._db.table("categories").select("*").eq("id", node_id).execute()
        if not result.data:
            return None
        return self._map_to_node(result.data[0])

    def list_roots(self) -> list[CategoryNode]:
        result = (
            self._db.table("categories")
            .select("*")
            .is_("parent_id", "null")
            .order("created_at")
            .execute()
        )
        return [self._map_to_node(row) for row in result.data]

    def list_children(self, parent_id: str) -> list[CategoryNode]:
        """Direct children of a node, oldest first."""
        if not self._is_uuid(parent_id):
            return []
        result = (
            self._db.table("categories")
            .select("*")
            .eq("parent_id", parent_id)
            .order("created_at")
            .execute()
        )
        return [self._map_to_node(row) for row in result.data]

    def list_child_ids(self, parent_id: str) -> list[str]:
        result = self._db.table("categories").select("id").eq("parent_id", parent_id).execute()
        return [row["id"] for row in result.data]

    def list_by_kind(self, kind: NodeKind) -> list[CategoryNode]:
        result = (
            self._db.table("categories")
            .select("*")
            .eq("kind", kind.value)
            .order("created_at")
            .execute()
        )
        return [self._map_to_node(row) for row in result.data]

    def update_content(self, node_id: str, content: NodeContent) -> CategoryNode:
        """
        Replace a node's content and mark it as a content node.

        Returns:
            The updated CategoryNode.
        """
        result = (
            self._db.table("categories")
            .update({
                "kind": NodeKind.CONTENT.value,
                "content": content.model_dump(mode="json"),
                "updated_at": self._now().isoformat(),
            })
            .eq("id", node_id)
            .execute()
        )
        return self._map_to_node(result.data[0])

    def delete(self, node_id: str) -> bool:
        """
        Delete a single node.

        Returns:
            True if a row was deleted.
        """
        result = self._db.table("categories").delete().eq("id", node_id).execute()
        return bool(result.data)

    def _map_to_node(self, data: dict[str, Any]) -> CategoryNode:
        content = data.get("content")
        return CategoryNode(
            id=data["id"],
            name=data["name"],
            kind=NodeKind(data.get("kind") or NodeKind.CATEGORY.value),
            parent_id=data.get("parent_id"),
            path=data.get("path") or [],
            owner_id=data.get("owner_id"),
            content=NodeContent.model_validate(content) if content else None,
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
