"""
Share link service for token-based trip access.
"""
import logging
import secrets
from datetime import datetime, timedelta
from typing import Optional
from sqlalchemy.orm import Session, joinedload, selectinload
from globaltrotters.core.config import settings
from globaltrotters.core.exceptions import NotFoundError
from globaltrotters.models.city import Activity
from globaltrotters.models.share_link import ShareLink
from globaltrotters.models.trip import Trip, TripActivity
from globaltrotters.services.trip_service import get_owned_trip

logger = logging.getLogger(__name__)


def create_share_link(trip_id: int, user_id: int, db: Session, expires_in_hours: Optional[int] = None) -> ShareLink:
    """Create a share link for the caller's trip."""
    get_owned_trip(trip_id, user_id, db)
    expires_at = None
    if expires_in_hours:
        expires_at = datetime.utcnow() + timedelta(hours=expires_in_hours)

    link = ShareLink(
        trip_id=trip_id,
        token=secrets.token_urlsafe(settings.SHARE_TOKEN_BYTES),
        expires_at=expires_at,
    )
    db.add(link)
    db.commit()
    db.refresh(link)
    logger.info(f"Share link created for trip {trip_id} (expires_at={expires_at})")
    return link


def get_shared_trip(token: str, db: Session) -> Trip:
    """Resolve a live share token to its trip."""
    link = db.query(ShareLink).filter(ShareLink.token == token).first()
    if not link:
        raise NotFoundError("Share link not found")
    if link.expires_at is not None and link.expires_at <= datetime.utcnow():
        raise NotFoundError("Share link has expired")

    return db.query(Trip).options(
        selectinload(Trip.trip_activities)
        .joinedload(TripActivity.activity)
        .joinedload(Activity.city),
        joinedload(Trip.user),
    ).filter(Trip.id == link.trip_id).one()


def revoke_share_links(trip_id: int, user_id: int, db: Session) -> int:
    """Delete every share link of the caller's trip; returns the row count."""
    get_owned_trip(trip_id, user_id, db)
    removed = db.query(ShareLink).filter(ShareLink.trip_id == trip_id).delete(synchronize_session=False)
    db.commit()
    logger.info(f"Revoked {removed} share link(s) for trip {trip_id}")
    return removed
