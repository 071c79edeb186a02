"""
Password hashing and bearer tokens for traveller accounts.

Passwords are SHA-256 digested before bcrypt so long passphrases are not
silently truncated at bcrypt's 72-byte limit. Tokens are HS256 JWTs whose
``sub`` claim is the user id as a string.
"""
from datetime import datetime, timedelta
from typing import Any, Dict, Optional
import hashlib
import bcrypt
from jose import JWTError, jwt
from globaltrotters.core.config import settings


def _digest(password: str) -> bytes:
    return hashlib.sha256(password.encode("utf-8")).digest()


def get_password_hash(password: str) -> str:
    """Hash a password for storage."""
    return bcrypt.hashpw(_digest(password), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a login password against the stored hash."""
    return bcrypt.checkpw(_digest(plain_password), hashed_password.encode("utf-8"))


def create_access_token(claims: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """Sign ``claims`` with an expiry, ACCESS_TOKEN_EXPIRE_DAYS by default."""
    lifetime = expires_delta or timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    payload = dict(claims, exp=datetime.utcnow() + lifetime)
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def create_user_token(user_id: int, email: str, role: str) -> str:
    """Bearer token identifying a traveller; role is informational only."""
    return create_access_token({"sub": str(user_id), "email": email, "role": role})


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Verified claims, or None for a bad signature or an expired token."""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None


def token_user_id(token: str) -> Optional[int]:
    """User id carried by a valid token, or None."""
    claims = decode_access_token(token)
    if not claims:
        return None
    try:
        return int(claims["sub"])
    except (KeyError, TypeError, ValueError):
        return None
