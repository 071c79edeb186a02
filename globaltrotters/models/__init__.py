"""Models package - Import all models for SQLAlchemy registration."""
from globaltrotters.models.user import User, UserRole, UserStatus
from globaltrotters.models.trip import Trip, TripActivity, TripStatus
from globaltrotters.models.city import City, Activity
from globaltrotters.models.share_link import ShareLink

__all__ = [
    "User",
    "UserRole",
    "UserStatus",
    "Trip",
    "TripActivity",
    "TripStatus",
    "City",
    "Activity",
    "ShareLink",
]
