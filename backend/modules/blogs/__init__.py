"""
Blogs module.

Articles with a cover image and an optional gallery, managed by admins.
"""

from .interfaces import IBlogService
from .models import Blog, BlogFields, BlogUpdate
from .exceptions import BlogNotFoundError, TooManyGalleryImagesError

__all__ = [
    "IBlogService",
    "Blog",
    "BlogFields",
    "BlogUpdate",
    "BlogNotFoundError",
    "TooManyGalleryImagesError",
]
