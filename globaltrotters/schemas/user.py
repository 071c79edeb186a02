"""
Pydantic schemas for User entity.
"""
from pydantic import EmailStr, Field
from typing import Optional
from datetime import datetime
from globaltrotters.models.user import UserRole, UserStatus
from globaltrotters.schemas.base import CamelModel


class UserCreate(CamelModel):
    """Schema for registration."""
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)
    name: str = Field(min_length=1, max_length=100)


class UserLogin(CamelModel):
    """Schema for user login."""
    email: EmailStr
    password: str = Field(min_length=1)


class UserSummary(CamelModel):
    """Owner summary embedded in trips."""
    id: int
    name: str
    email: str
    avatar_url: Optional[str] = None


class UserResponse(UserSummary):
    """Schema for user response."""
    role: UserRole
    status: UserStatus
    created_at: datetime


class AuthResponse(CamelModel):
    """Token and profile returned by register and login."""
    token: str
    user: UserResponse
