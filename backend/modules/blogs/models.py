"""
Blog data models.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field


class Blog(BaseModel):
    id: str
    title: str
    excerpt: Optional[str] = None
    content: Optional[str] = Field(None, description="HTML body")
    image_url: Optional[str] = Field(None, description="Cover image")
    gallery_urls: list[str] = Field(default_factory=list)
    category: Optional[str] = Field(None, description="Free-form label, not a category node")
    read_time: Optional[str] = Field(None, description="Display string, e.g. '5 min read'")
    published_on: Optional[date] = None
    created_at: datetime
    updated_at: datetime


class BlogFields(BaseModel):
    """Text fields of a new blog."""

    title: str = Field(..., min_length=1, max_length=300)
    excerpt: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = Field(None, max_length=100)
    read_time: Optional[str] = Field(None, max_length=50)
    published_on: Optional[date] = None


class BlogUpdate(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    title: Optional[str] = Field(None, min_length=1, max_length=300)
    excerpt: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = Field(None, max_length=100)
    read_time: Optional[str] = Field(None, max_length=50)
    published_on: Optional[date] = None
