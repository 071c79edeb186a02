"""
Pydantic schemas for the City and Activity catalogue.
"""
from typing import List, Optional
from globaltrotters.schemas.base import CamelModel


class CityResponse(CamelModel):
    """Schema for city response."""
    id: int
    name: str
    country: str
    image_url: Optional[str] = None
    description: Optional[str] = None
    cost_index: Optional[float] = None
    popularity: int = 0


class ActivityBase(CamelModel):
    """Activity fields without the owning city."""
    id: int
    name: str
    description: Optional[str] = None
    category: Optional[str] = None
    estimated_cost: Optional[float] = None
    duration: Optional[float] = None
    image_url: Optional[str] = None
    city_id: int


class ActivityResponse(ActivityBase):
    """Activity with its city."""
    city: Optional[CityResponse] = None


class CityDetailResponse(CityResponse):
    """City with its activities."""
    activities: List[ActivityBase] = []
