"""
Blog module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import UploadedFile

from .models import Blog, BlogFields, BlogUpdate


@runtime_checkable
class IBlogService(Protocol):
    """Interface for blog operations."""

    async def create_blog(
        self,
        fields: BlogFields,
        image: Optional[UploadedFile] = None,
        gallery: Optional[list[UploadedFile]] = None,
    ) -> Blog:
        """
        Store the images and create the blog.

        Raises:
            InvalidImageError: If an upload isn't an image
            TooManyGalleryImagesError: If the gallery is over the limit
        """
        ...

    async def list_blogs(self) -> list[Blog]:
        """List blogs by publication date, newest first."""
        ...

    async def update_blog(
        self,
        blog_id: str,
        changes: BlogUpdate,
        image: Optional[UploadedFile] = None,
        gallery: Optional[list[UploadedFile]] = None,
    ) -> Blog:
        """
        Update text fields and, when sent, replace the cover image or the
        whole gallery.

        Raises:
            BlogNotFoundError: If the blog doesn't exist
        """
        ...

    async def delete_blog(self, blog_id: str) -> None:
        """
        Raises:
            BlogNotFoundError: If the blog doesn't exist
        """
        ...
