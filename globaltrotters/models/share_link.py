"""
Share link model for token-based read access to a trip.
"""
from sqlalchemy import Column, String, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship
from globaltrotters.db.base import BaseModel


class ShareLink(BaseModel):
    """Token granting read access to a trip until it expires or is revoked."""
    __tablename__ = "share_links"

    trip_id = Column(Integer, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False, index=True)
    token = Column(String(64), unique=True, nullable=False, index=True)
    expires_at = Column(DateTime, nullable=True)  # Never expires when null

    # Relationships
    trip = relationship("Trip", back_populates="share_links")
