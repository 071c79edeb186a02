"""
Admin routes for platform statistics and user management.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from globaltrotters.db.session import get_db
from globaltrotters.models.user import User
from globaltrotters.schemas.admin import AdminStats, AdminUserResponse
from globaltrotters.schemas.user import UserResponse
from globaltrotters.core.utils import format_response, pagination
from globaltrotters.services import admin_service
from globaltrotters.api.dependencies import get_current_admin, PageParams

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/stats")
async def get_stats(
    current_user: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Get aggregate platform statistics."""
    return format_response(AdminStats.model_validate(admin_service.get_stats(db)))


@router.get("/users")
async def list_users(
    params: PageParams = Depends(),
    current_user: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """List users with their trip counts."""
    rows, total = admin_service.list_users(params.page, params.limit, db)
    users = [
        AdminUserResponse(**UserResponse.model_validate(user).model_dump(), trip_count=count)
        for user, count in rows
    ]
    return format_response({
        "users": users,
        "pagination": pagination(params.page, params.limit, total),
    })
