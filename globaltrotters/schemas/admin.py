"""
Pydantic schemas for admin dashboards.
"""
from typing import Dict, List
from globaltrotters.schemas.base import CamelModel, Pagination
from globaltrotters.schemas.user import UserResponse


class DestinationCount(CamelModel):
    """Number of trips listing a destination."""
    name: str
    count: int


class AdminStats(CamelModel):
    """Platform-wide counts."""
    total_users: int
    active_users: int
    admin_users: int
    total_trips: int
    public_trips: int
    total_cities: int
    total_activities: int
    total_trip_activities: int
    trips_by_status: Dict[str, int]
    top_destinations: List[DestinationCount] = []


class AdminUserResponse(UserResponse):
    """User row with their trip count."""
    trip_count: int = 0


class AdminUserList(CamelModel):
    """Paginated users."""
    users: List[AdminUserResponse]
    pagination: Pagination
