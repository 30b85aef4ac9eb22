"""
Sponsor data models.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class Sponsor(BaseModel):
    id: str
    name: str
    context_color: str = Field(..., description="Brand color used behind the sponsor card")
    url: str
    created_at: datetime
    updated_at: datetime


class SponsorRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    context_color: str = Field(..., min_length=1, max_length=50)
    url: str = Field(..., min_length=1, max_length=2000)


class UpdateSponsorRequest(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    context_color: Optional[str] = Field(None, min_length=1, max_length=50)
    url: Optional[str] = Field(None, min_length=1, max_length=2000)
