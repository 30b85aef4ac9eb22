"""
Hero banner data models.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class HeroBanner(BaseModel):
    id: str
    title: str
    desktop_image_url: str
    mobile_image_url: str
    link_url: Optional[str] = Field(None, description="Where a click on the banner leads")
    created_at: datetime
    updated_at: datetime
