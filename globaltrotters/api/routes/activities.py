"""
Activity catalogue routes.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from globaltrotters.db.session import get_db
from globaltrotters.schemas.city import ActivityResponse
from globaltrotters.core.utils import format_response
from globaltrotters.services import catalogue_service

router = APIRouter(prefix="/activities", tags=["activities"])


@router.get("/search")
async def search_activities(
    city_id: Optional[int] = Query(None, alias="cityId"),
    category: Optional[str] = None,
    query: Optional[str] = None,
    limit: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db)
):
    """Search activities by city, category and text."""
    activities = catalogue_service.search_activities(
        db, city_id=city_id, category=category, query_text=query, limit=limit
    )
    return format_response([ActivityResponse.model_validate(a) for a in activities])


@router.get("/{activity_id}")
async def get_activity(activity_id: int, db: Session = Depends(get_db)):
    """Get an activity with its city."""
    activity = catalogue_service.get_activity(activity_id, db)
    return format_response(ActivityResponse.model_validate(activity))
