"""
Admin service for aggregate platform statistics.
"""
from collections import Counter
from typing import Dict, List, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session
from globaltrotters.models.city import Activity, City
from globaltrotters.models.trip import Trip, TripActivity, TripStatus
from globaltrotters.models.user import User, UserRole, UserStatus


def get_stats(db: Session, top_n: int = 5) -> Dict:
    """Collect platform-wide counts for the admin dashboard."""
    trips_by_status = {status.value: 0 for status in TripStatus}
    for status, count in db.query(Trip.status, func.count(Trip.id)).group_by(Trip.status).all():
        trips_by_status[status.value] = count

    # Destinations are stored as JSON lists, so they are counted here
    destinations = Counter()
    for (names,) in db.query(Trip.destinations).all():
        for name in {n.strip() for n in (names or []) if n and n.strip()}:
            destinations[name] += 1

    return {
        "total_users": db.query(func.count(User.id)).scalar(),
        "active_users": db.query(func.count(User.id)).filter(User.status == UserStatus.ACTIVE).scalar(),
        "admin_users": db.query(func.count(User.id)).filter(User.role == UserRole.ADMIN).scalar(),
        "total_trips": db.query(func.count(Trip.id)).scalar(),
        "public_trips": db.query(func.count(Trip.id)).filter(Trip.is_public.is_(True)).scalar(),
        "total_cities": db.query(func.count(City.id)).scalar(),
        "total_activities": db.query(func.count(Activity.id)).scalar(),
        "total_trip_activities": db.query(func.count(TripActivity.id)).scalar(),
        "trips_by_status": trips_by_status,
        "top_destinations": [
            {"name": name, "count": count}
            for name, count in sorted(destinations.items(), key=lambda item: (-item[1], item[0]))[:top_n]
        ],
    }


def list_users(page: int, limit: int, db: Session) -> Tuple[List[Tuple[User, int]], int]:
    """Users newest first, each paired with their trip count."""
    total = db.query(func.count(User.id)).scalar()
    trip_counts = db.query(
        Trip.user_id, func.count(Trip.id).label("trip_count")
    ).group_by(Trip.user_id).subquery()

    rows = db.query(User, func.coalesce(trip_counts.c.trip_count, 0)).outerjoin(
        trip_counts, trip_counts.c.user_id == User.id
    ).order_by(User.created_at.desc(), User.id.desc()).offset((page - 1) * limit).limit(limit).all()
    return [(user, count) for user, count in rows], total
