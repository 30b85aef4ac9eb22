"""
Category tree service implementation.

Builds and prunes the self-referential category tree and attaches
uploaded content to nodes.
"""

import logging
import re
from typing import Optional

from shared.config import Settings, get_settings
from shared.media import storage_key
from shared.models import UploadedFile
from providers.base import BlobStorage

from .exceptions import CategoryNotFoundError, InvalidContentError, TreeDepthExceededError
from .interfaces import ICategoryService
from .models import (
    CategoryNode,
    CategorySummary,
    CategoryTreeNode,
    ContentKind,
    NavigationCategory,
    NodeContent,
    NodeKind,
    RootCategory,
)
from .repository import CategoryRepository

logger = logging.getLogger(__name__)

YOUTUBE_URL_PATTERN = re.compile(r"^(https?://)?(www\.)?(youtube\.com|youtu\.be)/.+$")

MAX_IMAGES_PER_UPLOAD = 10


class CategoryService(ICategoryService):
    """
    Implementation of the category tree service.

    Files and images are pushed to blob storage and only their URLs are
    kept on the node.
    """

    def __init__(
        self,
        repository: CategoryRepository,
        storage: BlobStorage,
        settings: Optional[Settings] = None,
    ):
        self._repository = repository
        self._storage = storage
        self._settings = settings or get_settings()

    async def create_node(
        self,
        name: str,
        parent_id: Optional[str] = None,
        kind: NodeKind = NodeKind.CATEGORY,
        owner_id: Optional[str] = None,
    ) -> CategoryNode:
        path = [name]
        if parent_id:
            parent = self._repository.get_by_id(parent_id)
            if parent is None:
                raise CategoryNotFoundError(parent_id)
            path = [*parent.path, name]

        node = self._repository.create(
            name=name,
            path=path,
            kind=kind,
            parent_id=parent_id or None,
            owner_id=owner_id,
        )
        logger.info("Created %s node %s at %s", kind.value, node.id, "/".join(path))
        return node

    async def set_content(
        self,
        node_id: str,
        text: Optional[str] = None,
        file: Optional[UploadedFile] = None,
        images: Optional[list[UploadedFile]] = None,
        video_url: Optional[str] = None,
    ) -> CategoryNode:
        supplied = [
            variant
            for variant, present in (
                (ContentKind.TEXT, bool(text and text.strip())),
                (ContentKind.FILE, file is not None),
                (ContentKind.IMAGES, bool(images)),
                (ContentKind.VIDEO, bool(video_url and video_url.strip())),
            )
            if present
        ]
        if len(supplied) != 1:
            raise InvalidContentError(
                "Provide exactly one of text, file, images or video URL"
            )
        variant = supplied[0]

        node = self._repository.get_by_id(node_id)
        if node is None:
            raise CategoryNotFoundError(node_id)

        content = node.content.model_copy(deep=True) if node.content else NodeContent()

        if variant == ContentKind.TEXT:
            content.text = text
        elif variant == ContentKind.FILE:
            content.file_url = self._store(node.id, file)
        elif variant == ContentKind.IMAGES:
            if len(images) > MAX_IMAGES_PER_UPLOAD:
                raise InvalidContentError(
                    f"At most {MAX_IMAGES_PER_UPLOAD} images per upload",
                    field="images",
                )
            content.image_urls = [self._store(node.id, image) for image in images]
        else:
            video_url = video_url.strip()
            if not YOUTUBE_URL_PATTERN.match(video_url):
                raise InvalidContentError("Invalid YouTube URL", field="video_url")
            content.video_url = video_url

        content.content_kind = variant
        updated = self._repository.update_content(node.id, content)
        logger.info("Set %s content on node %s", variant.value, node.id)
        return updated

    def _store(self, node_id: str, upload: UploadedFile) -> str:
        key = storage_key(node_id, upload.filename)
        return self._storage.put(upload.data, key, content_type=upload.content_type)

    async def list_roots(self) -> list[RootCategory]:
        return [
            RootCategory(id=node.id, name=node.name, path=node.path)
            for node in self._repository.list_roots()
        ]

    async def list_children(self, parent_id: str) -> list[CategorySummary]:
        return [CategorySummary.from_node(node) for node in self._repository.list_children(parent_id)]

    async def list_navigation_categories(self) -> list[NavigationCategory]:
        return [
            NavigationCategory(id=node.id, name=node.name, kind=node.kind)
            for node in self._repository.list_by_kind(NodeKind.CATEGORY)
        ]

    async def get_node(self, node_id: str) -> CategoryNode:
        node = self._repository.get_by_id(node_id)
        if node is None:
            raise CategoryNotFoundError(node_id)
        return node

    async def build_tree(self, root_id: Optional[str] = None) -> list[CategoryTreeNode]:
        if root_id:
            root = await self.get_node(root_id)
            return [self._build_subtree(root, depth=1)]
        return [self._build_subtree(root, depth=1) for root in self._repository.list_roots()]

    def _build_subtree(self, node: CategoryNode, depth: int) -> CategoryTreeNode:
        max_depth = self._settings.max_tree_depth
        if depth > max_depth:
            raise TreeDepthExceededError(max_depth)
        children = [
            self._build_subtree(child, depth + 1)
            for child in self._repository.list_children(node.id)
        ]
        return CategoryTreeNode(**CategorySummary.from_node(node).model_dump(), children=children)

    async def delete_subtree(self, node_id: str) -> int:
        node = self._repository.get_by_id(node_id)
        if node is None:
            return 0

        # Post-order: a node is deleted only after all of its children.
        deleted = 0
        stack: list[tuple[str, bool]] = [(node.id, False)]
        while stack:
            current, expanded = stack.pop()
            if expanded:
                if self._repository.delete(current):
                    deleted += 1
                continue
            stack.append((current, True))
            for child_id in self._repository.list_child_ids(current):
                stack.append((child_id, False))

        logger.info("Deleted subtree %s (%d nodes)", node_id, deleted)
        return deleted
