"""
Pydantic schemas for Trip entity and its derived views.
"""
from pydantic import Field, field_validator
from typing import Dict, List, Optional
import datetime as dt
from globaltrotters.core.utils import parse_iso_date
from globaltrotters.models.trip import TripStatus
from globaltrotters.schemas.base import CamelModel, Pagination
from globaltrotters.schemas.city import ActivityResponse
from globaltrotters.schemas.user import UserSummary


class TripCreate(CamelModel):
    """Schema for trip creation."""
    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    cover_image_url: Optional[str] = None
    is_public: Optional[bool] = False
    budget: Optional[float] = Field(default=None, ge=0)
    destinations: Optional[List[str]] = None
    status: TripStatus = TripStatus.PLANNING

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_dates(cls, v):
        return parse_iso_date(v)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v):
        if not v.strip():
            raise ValueError("Name is required")
        return v.strip()


class TripUpdate(CamelModel):
    """Schema for partial trip update; only fields sent are applied."""
    name: Optional[str] = Field(default=None, max_length=200)
    description: Optional[str] = None
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    cover_image_url: Optional[str] = None
    is_public: Optional[bool] = None
    budget: Optional[float] = Field(default=None, ge=0)
    destinations: Optional[List[str]] = None
    status: Optional[TripStatus] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_dates(cls, v):
        return parse_iso_date(v)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v):
        if v is None or not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()

    @field_validator("is_public", "destinations", "status")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("Value cannot be null")
        return v


class TripActivityCreate(CamelModel):
    """Schema for placing an activity on a trip."""
    activity_id: int
    date: Optional[dt.date] = None
    notes: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        return parse_iso_date(v)


class TripActivityUpdate(CamelModel):
    """Schema for editing an existing placement."""
    date: Optional[dt.date] = None
    notes: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        return parse_iso_date(v)


class TripActivityResponse(CamelModel):
    """Placement with its activity and city."""
    id: int
    trip_id: int
    activity_id: int
    date: Optional[dt.date] = None
    notes: Optional[str] = None
    created_at: dt.datetime
    activity: ActivityResponse


class TripResponse(CamelModel):
    """Schema for trip response."""
    id: int
    user_id: int
    name: str
    description: Optional[str] = None
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    cover_image_url: Optional[str] = None
    is_public: bool
    budget: Optional[float] = None
    destinations: List[str] = []
    status: TripStatus
    created_at: dt.datetime
    updated_at: dt.datetime
    trip_activities: List[TripActivityResponse] = []


class TripDetailResponse(TripResponse):
    """Trip with its owner summary."""
    user: UserSummary


class TripListResponse(CamelModel):
    """Paginated trips."""
    trips: List[TripDetailResponse]
    pagination: Pagination


class BudgetAllocation(CamelModel):
    """Share of the budget reserved for a spending category."""
    name: str
    percentage: int
    amount: float


class BudgetBreakdown(CamelModel):
    """Budget dashboard for a trip."""
    trip_id: int
    total_budget: float
    allocations: List[BudgetAllocation]
    planned_activities_cost: float
    activity_costs_by_category: Dict[str, float] = {}
    remaining_budget: float
    over_budget: bool
    trip_days: Optional[int] = None
    daily_budget: Optional[float] = None


class CalendarDay(CamelModel):
    """Activities scheduled on a single day."""
    date: dt.date
    in_trip_range: bool
    activities: List[TripActivityResponse] = []


class TripCalendar(CamelModel):
    """Day-by-day view of a trip."""
    trip_id: int
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    days: List[CalendarDay] = []
    unscheduled: List[TripActivityResponse] = []


class ItineraryStop(CamelModel):
    """A destination city with the trip's activities there."""
    order: int
    city_name: str
    city_id: Optional[int] = None
    country: Optional[str] = None
    listed: bool = True
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    activities: List[TripActivityResponse] = []


class TripItinerary(CamelModel):
    """Stop-by-stop view derived from destinations and placements."""
    trip_id: int
    stops: List[ItineraryStop] = []
