"""
User service for registration, login and role management.
"""
import logging
from typing import Optional, Tuple
from sqlalchemy.orm import Session
from globaltrotters.core.exceptions import ConflictError, ForbiddenError, UnauthorizedError
from globaltrotters.core.security import create_user_token, get_password_hash, verify_password
from globaltrotters.models.user import User, UserRole, UserStatus
from globaltrotters.schemas.user import UserCreate, UserLogin

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user_by_email(email: str, db: Session) -> Optional[User]:
    return db.query(User).filter(User.email == normalize_email(email)).first()


def register_user(user_data: UserCreate, db: Session) -> Tuple[User, str]:
    """Create an account and return it with a fresh token."""
    if get_user_by_email(user_data.email, db):
        raise ConflictError("Email already registered")

    user = User(
        email=normalize_email(user_data.email),
        name=user_data.name.strip(),
        hashed_password=get_password_hash(user_data.password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"User registered: {user.email}")
    return user, create_user_token(user.id, user.email, user.role.value)


def authenticate_user(credentials: UserLogin, db: Session) -> Tuple[User, str]:
    """Check credentials and return the user with a fresh token."""
    user = get_user_by_email(credentials.email, db)
    if not user or not verify_password(credentials.password, user.hashed_password):
        raise UnauthorizedError("Invalid email or password")
    if user.status != UserStatus.ACTIVE:
        raise ForbiddenError("User account is suspended")
    return user, create_user_token(user.id, user.email, user.role.value)


def make_user_admin(email: str, db: Session) -> Tuple[Optional[User], bool]:
    """
    Promote a user to ADMIN.
    Returns (user, changed); user is None when the email is unknown.
    """
    user = get_user_by_email(email, db)
    if not user:
        return None, False
    if user.role == UserRole.ADMIN:
        return user, False
    user.role = UserRole.ADMIN
    db.commit()
    db.refresh(user)
    logger.info(f"User promoted to admin: {user.email}")
    return user, True
