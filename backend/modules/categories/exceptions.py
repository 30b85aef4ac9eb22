"""
Category module exceptions.

These exceptions are raised by the categories module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from typing import Optional

from shared.exceptions import NotFoundError, ValidationError


class CategoryNotFoundError(NotFoundError):
    """Raised when a category node doesn't exist."""

    def __init__(self, category_id: str):
        super().__init__(
            f"Category not found: {category_id}",
            code="CATEGORY_NOT_FOUND",
            details={"category_id": category_id},
        )


class InvalidContentError(ValidationError):
    """Raised when a content upload is malformed."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            message,
            code="INVALID_CONTENT",
            details={"field": field} if field else {},
        )


class TreeDepthExceededError(ValidationError):
    """Raised when a subtree is deeper than the configured limit."""

    def __init__(self, max_depth: int):
        super().__init__(
            f"Category tree exceeds maximum depth of {max_depth}",
            code="TREE_DEPTH_EXCEEDED",
            details={"max_depth": max_depth},
        )
