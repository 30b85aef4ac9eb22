"""
Blog module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class BlogNotFoundError(NotFoundError):
    def __init__(self, blog_id: str):
        super().__init__(
            f"Blog not found: {blog_id}",
            code="BLOG_NOT_FOUND",
            details={"blog_id": blog_id},
        )


class TooManyGalleryImagesError(ValidationError):
    def __init__(self, limit: int):
        super().__init__(
            f"At most {limit} gallery images per blog",
            code="TOO_MANY_IMAGES",
            details={"field": "gallery", "limit": limit},
        )
