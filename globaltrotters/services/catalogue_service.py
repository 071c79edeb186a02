"""
City and activity catalogue queries.
"""
from typing import List, Optional
from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload, selectinload
from globaltrotters.core.exceptions import NotFoundError
from globaltrotters.models.city import Activity, City


def _like(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped.lower()}%"


def popular_cities(limit: int, db: Session) -> List[City]:
    """Cities ordered by popularity, most popular first."""
    return db.query(City).order_by(City.popularity.desc(), City.name).limit(limit).all()


def search_cities(keyword: Optional[str], db: Session) -> List[City]:
    """Case-insensitive search on city name or country."""
    query = db.query(City)
    if keyword and keyword.strip():
        pattern = _like(keyword.strip())
        query = query.filter(or_(
            func.lower(City.name).like(pattern, escape="\\"),
            func.lower(City.country).like(pattern, escape="\\"),
        ))
    return query.order_by(City.popularity.desc(), City.name).all()


def get_city(city_id: int, db: Session) -> City:
    city = db.query(City).options(selectinload(City.activities)).filter(City.id == city_id).first()
    if not city:
        raise NotFoundError("City not found")
    return city


def search_activities(
    db: Session,
    city_id: Optional[int] = None,
    category: Optional[str] = None,
    query_text: Optional[str] = None,
    limit: int = 50
) -> List[Activity]:
    """Filter activities by city, category and free text."""
    query = db.query(Activity).options(joinedload(Activity.city))
    if city_id is not None:
        query = query.filter(Activity.city_id == city_id)
    if category and category.strip():
        query = query.filter(func.lower(Activity.category) == category.strip().lower())
    if query_text and query_text.strip():
        pattern = _like(query_text.strip())
        query = query.filter(or_(
            func.lower(Activity.name).like(pattern, escape="\\"),
            func.lower(Activity.description).like(pattern, escape="\\"),
        ))
    return query.order_by(Activity.name, Activity.id).limit(limit).all()


def get_activity(activity_id: int, db: Session) -> Activity:
    activity = db.query(Activity).options(joinedload(Activity.city)).filter(Activity.id == activity_id).first()
    if not activity:
        raise NotFoundError("Activity not found")
    return activity
