"""
Categories module.

Self-referential tree of navigation categories and content nodes.

Public API:
- ICategoryService: Interface for tree operations
- CategoryNode / CategorySummary / CategoryTreeNode: Node models
- Category exceptions: CategoryNotFoundError, etc.
"""

from .interfaces import ICategoryService
from .models import (
    NodeKind,
    ContentKind,
    NodeContent,
    CategoryNode,
    CategorySummary,
    CategoryTreeNode,
    RootCategory,
    NavigationCategory,
)
from .exceptions import CategoryNotFoundError, InvalidContentError, TreeDepthExceededError

__all__ = [
    # Interface
    "ICategoryService",
    # Models
    "NodeKind",
    "ContentKind",
    "NodeContent",
    "CategoryNode",
    "CategorySummary",
    "CategoryTreeNode",
    "RootCategory",
    "NavigationCategory",
    # Exceptions
    "CategoryNotFoundError",
    "InvalidContentError",
    "TreeDepthExceededError",
]
