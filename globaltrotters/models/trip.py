"""
Trip model and its activity placements.
"""
from sqlalchemy import (
    Column, String, Date, Boolean, Text, JSON, Numeric,
    Enum as SQLEnum, ForeignKey, Integer, UniqueConstraint
)
from sqlalchemy.orm import relationship
from globaltrotters.db.base import BaseModel
import enum


class TripStatus(str, enum.Enum):
    """Trip status enumeration."""
    PLANNING = "PLANNING"
    PLANNED = "PLANNED"
    CONFIRMED = "CONFIRMED"
    ONGOING = "ONGOING"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class Trip(BaseModel):
    """User-owned itinerary with a date range, budget and destination list."""
    __tablename__ = "trips"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    start_date = Column(Date, nullable=True, index=True)
    end_date = Column(Date, nullable=True)
    cover_image_url = Column(String(500), nullable=True)
    is_public = Column(Boolean, default=False, nullable=False, index=True)
    budget = Column(Numeric(12, 2, asdecimal=False), nullable=True)
    destinations = Column(JSON, default=list, nullable=False)  # Ordered city names
    status = Column(SQLEnum(TripStatus), default=TripStatus.PLANNING, nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="trips")
    trip_activities = relationship(
        "TripActivity",
        back_populates="trip",
        cascade="all, delete-orphan",
        order_by="TripActivity.id",
    )
    share_links = relationship("ShareLink", back_populates="trip", cascade="all, delete-orphan")


class TripActivity(BaseModel):
    """Junction table placing an Activity on a Trip."""
    __tablename__ = "trip_activities"

    trip_id = Column(Integer, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False, index=True)
    activity_id = Column(Integer, ForeignKey("activities.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=True)
    notes = Column(Text, nullable=True)

    # Relationships
    trip = relationship("Trip", back_populates="trip_activities")
    activity = relationship("Activity", back_populates="trip_activities")

    # One placement per activity per trip
    __table_args__ = (
        UniqueConstraint('trip_id', 'activity_id', name='uq_trip_activity'),
    )
