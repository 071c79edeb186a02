"""
Shared route dependencies for authentication and pagination.
"""
from typing import Optional
from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from globaltrotters.core.config import settings
from globaltrotters.core.exceptions import ForbiddenError, UnauthorizedError
from globaltrotters.core.security import token_user_id
from globaltrotters.db.session import get_db
from globaltrotters.models.user import User, UserRole, UserStatus

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> User:
    """Resolve the bearer token to an active user."""
    if credentials is None:
        raise UnauthorizedError("Authentication required")

    user_id = token_user_id(credentials.credentials)
    if user_id is None:
        raise UnauthorizedError("Invalid or expired token")

    user = db.query(User).filter(User.id == user_id).first()
    if not user or user.status != UserStatus.ACTIVE:
        raise UnauthorizedError("Invalid or expired token")
    return user


async def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    """Require the ADMIN role."""
    if current_user.role != UserRole.ADMIN:
        raise ForbiddenError("Admin access required")
    return current_user


class PageParams:
    """1-indexed page/limit query parameters."""

    def __init__(
        self,
        page: int = Query(1, ge=1),
        limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    ):
        self.page = page
        self.limit = limit
