"""
City and Activity catalogue models.
"""
from sqlalchemy import Column, String, Text, Float, Integer, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from globaltrotters.db.base import BaseModel


class City(BaseModel):
    """Destination city, read-only for the application."""
    __tablename__ = "cities"

    name = Column(String(100), nullable=False, index=True)
    country = Column(String(100), nullable=False, index=True)
    image_url = Column(String(500), nullable=True)
    description = Column(Text, nullable=True)
    cost_index = Column(Float, nullable=True)  # Relative cost of living, 1.0 = average
    popularity = Column(Integer, default=0, nullable=False, index=True)

    # Relationships
    activities = relationship("Activity", back_populates="city", order_by="Activity.name")


class Activity(BaseModel):
    """Bookable activity located in a single city."""
    __tablename__ = "activities"

    name = Column(String(200), nullable=False, index=True)
    description = Column(Text, nullable=True)
    category = Column(String(50), nullable=True, index=True)
    estimated_cost = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    duration = Column(Float, nullable=True)  # Hours
    image_url = Column(String(500), nullable=True)
    city_id = Column(Integer, ForeignKey("cities.id"), nullable=False, index=True)

    # Relationships
    city = relationship("City", back_populates="activities")
    trip_activities = relationship("TripActivity", back_populates="activity", cascade="all, delete-orphan")
