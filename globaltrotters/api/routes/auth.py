"""
Authentication routes for register, login and the current profile.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from globaltrotters.db.session import get_db
from globaltrotters.schemas.user import UserCreate, UserLogin, UserResponse, AuthResponse
from globaltrotters.models.user import User
from globaltrotters.core.utils import format_response
from globaltrotters.services import user_service
from globaltrotters.api.dependencies import get_current_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """Register a new user and log them in."""
    user, token = user_service.register_user(user_data, db)
    return format_response(AuthResponse(token=token, user=UserResponse.model_validate(user)))


@router.post("/login")
async def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Login and get a bearer token."""
    user, token = user_service.authenticate_user(credentials, db)
    return format_response(AuthResponse(token=token, user=UserResponse.model_validate(user)))


@router.get("/me")
async def me(current_user: User = Depends(get_current_user)):
    """Get current user information."""
    return format_response({"user": UserResponse.model_validate(current_user)})
