"""
Trip service for ownership-scoped trip and placement logic.
"""
import logging
from datetime import date, timedelta
from typing import Dict, List, Optional, Tuple

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload, selectinload

from globaltrotters.core.exceptions import NotFoundError
from globaltrotters.models.city import Activity, City
from globaltrotters.models.trip import Trip, TripActivity, TripStatus
from globaltrotters.schemas.trip import (
    TripCreate, TripUpdate, TripActivityCreate, TripActivityUpdate
)

logger = logging.getLogger(__name__)

# Fixed share of the total budget suggested for each spending category
BUDGET_ALLOCATIONS: List[Tuple[str, int]] = [
    ("Accommodation", 35),
    ("Transportation", 25),
    ("Food & Dining", 20),
    ("Activities", 15),
    ("Other", 5),
]


def _with_activities(query):
    return query.options(
        selectinload(Trip.trip_activities)
        .joinedload(TripActivity.activity)
        .joinedload(Activity.city),
        joinedload(Trip.user),
    )


def get_owned_trip(trip_id: int, user_id: int, db: Session) -> Trip:
    """Return the caller's trip or raise NOT_FOUND; ownership is never leaked."""
    trip = db.query(Trip).filter(Trip.id == trip_id).first()
    if not trip or trip.user_id != user_id:
        raise NotFoundError("Trip not found")
    return trip


def get_visible_trip(trip_id: int, user_id: int, db: Session) -> Trip:
    """Return a trip the caller owns or that is public."""
    trip = _with_activities(db.query(Trip)).filter(
        Trip.id == trip_id,
        or_(Trip.user_id == user_id, Trip.is_public.is_(True))
    ).first()
    if not trip:
        raise NotFoundError("Trip not found")
    return trip


def create_trip(user_id: int, trip_data: TripCreate, db: Session) -> Trip:
    """Create a trip owned by the caller."""
    trip = Trip(
        user_id=user_id,
        name=trip_data.name,
        description=trip_data.description,
        start_date=trip_data.start_date,
        end_date=trip_data.end_date,
        cover_image_url=trip_data.cover_image_url,
        is_public=bool(trip_data.is_public),
        budget=trip_data.budget,
        destinations=list(trip_data.destinations or []),
        status=trip_data.status,
    )
    db.add(trip)
    db.commit()
    logger.info(f"Trip created: {trip.name} (id={trip.id}, user={user_id})")
    return get_visible_trip(trip.id, user_id, db)


def list_trips(
    user_id: int,
    page: int,
    limit: int,
    db: Session,
    status: Optional[TripStatus] = None
) -> Tuple[List[Trip], int]:
    """List the caller's trips, newest first."""
    query = db.query(Trip).filter(Trip.user_id == user_id)
    if status is not None:
        query = query.filter(Trip.status == status)
    total = query.count()
    trips = _with_activities(query).order_by(
        Trip.created_at.desc(), Trip.id.desc()
    ).offset((page - 1) * limit).limit(limit).all()
    return trips, total


def list_public_trips(page: int, limit: int, db: Session) -> Tuple[List[Trip], int]:
    """List every public trip, newest first."""
    query = db.query(Trip).filter(Trip.is_public.is_(True))
    total = query.count()
    trips = _with_activities(query).order_by(
        Trip.created_at.desc(), Trip.id.desc()
    ).offset((page - 1) * limit).limit(limit).all()
    return trips, total


def update_trip(trip_id: int, user_id: int, trip_data: TripUpdate, db: Session) -> Trip:
    """Apply only the fields present in the request."""
    trip = get_owned_trip(trip_id, user_id, db)
    changes = trip_data.model_dump(exclude_unset=True)
    for field, value in changes.items():
        if field == "destinations":
            value = list(value)
        setattr(trip, field, value)
    db.commit()
    logger.info(f"Trip updated: {trip.name} (id={trip.id}, fields={sorted(changes)})")
    return get_visible_trip(trip.id, user_id, db)


def delete_trip(trip_id: int, user_id: int, db: Session) -> None:
    """Delete a trip together with its placements and share links."""
    trip = get_owned_trip(trip_id, user_id, db)
    db.delete(trip)
    db.commit()
    logger.info(f"Trip deleted: {trip_id}")


def _load_trip_activity(trip_activity_id: int, db: Session) -> TripActivity:
    return db.query(TripActivity).options(
        joinedload(TripActivity.activity).joinedload(Activity.city)
    ).filter(TripActivity.id == trip_activity_id).one()


def _find_placement(trip_id: int, activity_id: int, db: Session) -> Optional[TripActivity]:
    return db.query(TripActivity).filter(
        TripActivity.trip_id == trip_id,
        TripActivity.activity_id == activity_id
    ).first()


def add_activity(trip_id: int, user_id: int, data: TripActivityCreate, db: Session) -> TripActivity:
    """
    Upsert the (trip, activity) placement.
    Re-adding an activity overwrites its date and notes instead of duplicating it.
    """
    get_owned_trip(trip_id, user_id, db)
    activity = db.query(Activity).filter(Activity.id == data.activity_id).first()
    if not activity:
        raise NotFoundError("Activity not found")

    placement = _find_placement(trip_id, data.activity_id, db)
    if placement:
        placement.date = data.date
        placement.notes = data.notes
        db.commit()
    else:
        placement = TripActivity(
            trip_id=trip_id,
            activity_id=data.activity_id,
            date=data.date,
            notes=data.notes
        )
        db.add(placement)
        try:
            db.commit()
        except IntegrityError:
            # A concurrent request inserted the same pair first
            db.rollback()
            placement = _find_placement(trip_id, data.activity_id, db)
            placement.date = data.date
            placement.notes = data.notes
            db.commit()

    return _load_trip_activity(placement.id, db)


def update_activity(
    trip_id: int,
    activity_id: int,
    user_id: int,
    data: TripActivityUpdate,
    db: Session
) -> TripActivity:
    """Edit the date or notes of an existing placement."""
    get_owned_trip(trip_id, user_id, db)
    placement = _find_placement(trip_id, activity_id, db)
    if not placement:
        raise NotFoundError("Activity is not part of this trip")

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(placement, field, value)
    db.commit()
    return _load_trip_activity(placement.id, db)


def remove_activity(trip_id: int, activity_id: int, user_id: int, db: Session) -> int:
    """Delete every placement of the activity on the trip; returns the row count."""
    get_owned_trip(trip_id, user_id, db)
    removed = db.query(TripActivity).filter(
        TripActivity.trip_id == trip_id,
        TripActivity.activity_id == activity_id
    ).delete(synchronize_session=False)
    db.commit()
    return removed


def trip_length_days(trip: Trip) -> Optional[int]:
    """Inclusive number of days between start and end, when both are set."""
    if not trip.start_date or not trip.end_date or trip.end_date < trip.start_date:
        return None
    return (trip.end_date - trip.start_date).days + 1


def budget_breakdown(trip: Trip) -> Dict:
    """Compute the budget dashboard for a trip."""
    total = float(trip.budget or 0)

    allocations = [
        {"name": name, "percentage": percentage, "amount": round(total * percentage / 100, 2)}
        for name, percentage in BUDGET_ALLOCATIONS
    ]

    costs_by_category: Dict[str, float] = {}
    planned = 0.0
    for placement in trip.trip_activities:
        cost = float(placement.activity.estimated_cost or 0)
        category = placement.activity.category or "uncategorized"
        costs_by_category[category] = round(costs_by_category.get(category, 0.0) + cost, 2)
        planned += cost

    days = trip_length_days(trip)
    return {
        "trip_id": trip.id,
        "total_budget": total,
        "allocations": allocations,
        "planned_activities_cost": round(planned, 2),
        "activity_costs_by_category": costs_by_category,
        "remaining_budget": round(total - planned, 2),
        "over_budget": planned > total,
        "trip_days": days,
        "daily_budget": round(total / days, 2) if days else None,
    }


def calendar(trip: Trip) -> Dict:
    """Group placements by day, covering every day of the trip's range."""
    by_day: Dict[date, List[TripActivity]] = {}
    unscheduled: List[TripActivity] = []

    if trip_length_days(trip):
        current = trip.start_date
        while current <= trip.end_date:
            by_day[current] = []
            current += timedelta(days=1)

    for placement in trip.trip_activities:
        if placement.date is None:
            unscheduled.append(placement)
        else:
            by_day.setdefault(placement.date, []).append(placement)

    def in_range(day: date) -> bool:
        return bool(trip.start_date and trip.end_date and trip.start_date <= day <= trip.end_date)

    return {
        "trip_id": trip.id,
        "start_date": trip.start_date,
        "end_date": trip.end_date,
        "days": [
            {"date": day, "in_trip_range": in_range(day), "activities": by_day[day]}
            for day in sorted(by_day)
        ],
        "unscheduled": unscheduled,
    }


def itinerary(trip: Trip, db: Session) -> Dict:
    """
    Derive the stop list from the trip's destination names.

    Each destination becomes a stop matched to a City by name. Placements in
    cities that are not listed become trailing stops, in order of first
    appearance.
    """
    names = [name for name in (trip.destinations or []) if name and name.strip()]
    lowered = [name.strip().lower() for name in names]

    cities: Dict[str, City] = {}
    if lowered:
        for city in db.query(City).filter(func.lower(City.name).in_(set(lowered))).order_by(City.id).all():
            cities.setdefault(city.name.lower(), city)

    placements_by_city: Dict[str, List[TripActivity]] = {}
    unlisted: List[str] = []
    for placement in trip.trip_activities:
        city = placement.activity.city
        key = city.name.lower()
        placements_by_city.setdefault(key, []).append(placement)
        if key not in lowered and key not in unlisted:
            unlisted.append(key)
            cities.setdefault(key, city)

    stops = []
    seen = set()
    for name, key in zip(names, lowered):
        if key in seen:
            continue
        seen.add(key)
        stops.append(_build_stop(len(stops) + 1, name.strip(), cities.get(key), placements_by_city.get(key, []), True))
    for key in unlisted:
        city = cities[key]
        stops.append(_build_stop(len(stops) + 1, city.name, city, placements_by_city[key], False))

    return {"trip_id": trip.id, "stops": stops}


def _build_stop(order: int, name: str, city: Optional[City], placements: List[TripActivity], listed: bool) -> Dict:
    dates = [p.date for p in placements if p.date is not None]
    placements = sorted(placements, key=lambda p: (p.date is None, p.date or date.min, p.id))
    return {
        "order": order,
        "city_name": name,
        "city_id": city.id if city else None,
        "country": city.country if city else None,
        "listed": listed,
        "start_date": min(dates) if dates else None,
        "end_date": max(dates) if dates else None,
        "activities": placements,
    }
