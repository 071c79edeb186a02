"""
Share link routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Optional
from globaltrotters.db.session import get_db
from globaltrotters.models.user import User
from globaltrotters.schemas.share import ShareLinkCreate, ShareLinkResponse
from globaltrotters.schemas.trip import TripDetailResponse
from globaltrotters.core.utils import format_response
from globaltrotters.services import share_service
from globaltrotters.api.dependencies import get_current_user

router = APIRouter(prefix="/shared", tags=["shared"])


@router.post("/trips/{trip_id}", status_code=status.HTTP_201_CREATED)
async def create_share_link(
    trip_id: int,
    data: Optional[ShareLinkCreate] = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a share link for a trip."""
    link = share_service.create_share_link(trip_id, current_user.id, db, expires_in_hours=data.expires_in if data else None)
    return format_response({"shareLink": ShareLinkResponse.model_validate(link)})


@router.delete("/trips/{trip_id}")
async def revoke_share_links(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Revoke every share link of a trip."""
    share_service.revoke_share_links(trip_id, current_user.id, db)
    return format_response(message="Share links revoked successfully")


@router.get("/{token}")
async def get_shared_trip(token: str, db: Session = Depends(get_db)):
    """View a shared trip without logging in."""
    trip = share_service.get_shared_trip(token, db)
    return format_response({"trip": TripDetailResponse.model_validate(trip)})
