"""
City catalogue routes.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from globaltrotters.db.session import get_db
from globaltrotters.schemas.city import CityResponse, CityDetailResponse
from globaltrotters.core.utils import format_response
from globaltrotters.services import catalogue_service

router = APIRouter(prefix="/cities", tags=["cities"])


@router.get("/popular")
async def get_popular_cities(
    limit: int = Query(8, ge=1, le=50),
    db: Session = Depends(get_db)
):
    """Get the most popular cities."""
    cities = catalogue_service.popular_cities(limit, db)
    return format_response([CityResponse.model_validate(c) for c in cities])


@router.get("/search")
async def search_cities(
    keyword: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """Search cities by name or country."""
    cities = catalogue_service.search_cities(keyword, db)
    return format_response([CityResponse.model_validate(c) for c in cities])


@router.get("/{city_id}")
async def get_city(city_id: int, db: Session = Depends(get_db)):
    """Get a city with its activities."""
    city = catalogue_service.get_city(city_id, db)
    return format_response(CityDetailResponse.model_validate(city))
