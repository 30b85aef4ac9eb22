"""
Latest update data models.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field, StrictBool


class LatestUpdate(BaseModel):
    id: str
    title: str
    subtitle: str
    image_url: str
    published_on: date
    read_time: str
    content: str = Field(..., description="HTML body")
    is_top: bool = False
    created_at: datetime
    updated_at: datetime


class UpdateFields(BaseModel):
    """Text fields of a new update. The image is sent alongside."""

    title: str = Field(..., min_length=1, max_length=300)
    subtitle: str = Field(..., min_length=1, max_length=500)
    published_on: date
    read_time: str = Field(..., min_length=1, max_length=50)
    content: str = Field(..., min_length=1)
    is_top: bool = False


class SetContentRequest(BaseModel):
    content: str = Field(..., min_length=1)


class SetTopRequest(BaseModel):
    is_top: StrictBool
