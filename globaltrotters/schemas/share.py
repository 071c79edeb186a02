"""
Pydantic schemas for ShareLink entity.
"""
from datetime import datetime
from typing import Optional
from pydantic import Field
from globaltrotters.schemas.base import CamelModel


class ShareLinkCreate(CamelModel):
    """Schema for share link creation."""
    expires_in: Optional[int] = Field(default=None, gt=0, le=24 * 365)  # Hours


class ShareLinkResponse(CamelModel):
    """Schema for share link response."""
    id: int
    trip_id: int
    token: str
    expires_at: Optional[datetime] = None
    created_at: datetime
