"""
Trip management routes.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional
from globaltrotters.db.session import get_db
from globaltrotters.models.user import User
from globaltrotters.models.trip import TripStatus
from globaltrotters.schemas.trip import (
    TripCreate, TripUpdate, TripDetailResponse, TripActivityCreate,
    TripActivityUpdate, TripActivityResponse, BudgetBreakdown, TripCalendar, TripItinerary
)
from globaltrotters.core.utils import format_response, pagination
from globaltrotters.services import trip_service
from globaltrotters.api.dependencies import get_current_user, PageParams

router = APIRouter(prefix="/trips", tags=["trips"])


def _trip_payload(trip) -> dict:
    return {"trip": TripDetailResponse.model_validate(trip)}


def _trip_list_payload(trips, total: int, params: PageParams) -> dict:
    return {
        "trips": [TripDetailResponse.model_validate(t) for t in trips],
        "pagination": pagination(params.page, params.limit, total),
    }


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_trip(
    trip_data: TripCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a new trip."""
    trip = trip_service.create_trip(current_user.id, trip_data, db)
    return format_response(_trip_payload(trip))


@router.get("")
async def list_trips(
    params: PageParams = Depends(),
    status: Optional[TripStatus] = Query(None),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List the current user's trips, newest first."""
    trips, total = trip_service.list_trips(current_user.id, params.page, params.limit, db, status=status)
    return format_response(_trip_list_payload(trips, total, params))


@router.get("/public")
async def list_public_trips(
    params: PageParams = Depends(),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Browse public itineraries from every user."""
    trips, total = trip_service.list_public_trips(params.page, params.limit, db)
    return format_response(_trip_list_payload(trips, total, params))


@router.get("/{trip_id}")
async def get_trip(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get a trip the caller owns or that is public."""
    trip = trip_service.get_visible_trip(trip_id, current_user.id, db)
    return format_response(_trip_payload(trip))


@router.put("/{trip_id}")
async def update_trip(
    trip_id: int,
    trip_data: TripUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Partially update a trip."""
    trip = trip_service.update_trip(trip_id, current_user.id, trip_data, db)
    return format_response(_trip_payload(trip))


@router.delete("/{trip_id}")
async def delete_trip(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a trip and its activity placements."""
    trip_service.delete_trip(trip_id, current_user.id, db)
    return format_response(message="Trip deleted successfully")


@router.post("/{trip_id}/activities", status_code=status.HTTP_201_CREATED)
async def add_activity(
    trip_id: int,
    data: TripActivityCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Add an activity to a trip, or update its date and notes if already added."""
    placement = trip_service.add_activity(trip_id, current_user.id, data, db)
    return format_response({"tripActivity": TripActivityResponse.model_validate(placement)})


@router.put("/{trip_id}/activities/{activity_id}")
async def update_activity(
    trip_id: int,
    activity_id: int,
    data: TripActivityUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Edit the date or notes of an activity on a trip."""
    placement = trip_service.update_activity(trip_id, activity_id, current_user.id, data, db)
    return format_response({"tripActivity": TripActivityResponse.model_validate(placement)})


@router.delete("/{trip_id}/activities/{activity_id}")
async def remove_activity(
    trip_id: int,
    activity_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Remove an activity from a trip."""
    trip_service.remove_activity(trip_id, activity_id, current_user.id, db)
    return format_response(message="Activity removed from trip successfully")


@router.get("/{trip_id}/itinerary")
async def get_itinerary(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get the stop-by-stop itinerary."""
    trip = trip_service.get_visible_trip(trip_id, current_user.id, db)
    itinerary = TripItinerary.model_validate(trip_service.itinerary(trip, db))
    return format_response({"itinerary": itinerary})


@router.get("/{trip_id}/budget")
async def get_budget(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get the budget breakdown."""
    trip = trip_service.get_visible_trip(trip_id, current_user.id, db)
    return format_response({"budget": BudgetBreakdown.model_validate(trip_service.budget_breakdown(trip))})


@router.get("/{trip_id}/calendar")
async def get_calendar(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get the day-by-day calendar."""
    trip = trip_service.get_visible_trip(trip_id, current_user.id, db)
    return format_response({"calendar": TripCalendar.model_validate(trip_service.calendar(trip))})
