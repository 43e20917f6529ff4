"""
Security utilities: JWT access tokens and password hashing.
Tokens carry the user id as 'sub' plus the email and role used for authorization.
"""

from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from core.config import get_settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def create_access_token(
    subject: str | int,
    expires_delta: timedelta | None = None,
    **claims: Any,
) -> str:
    """
    Signed JWT access token. 'sub' is the user id; extra claims (email, role) are merged in.
    Verify with verify_token in dependencies.
    """
    settings = get_settings()
    now = datetime.now(UTC)
    expire = now + (expires_delta or timedelta(minutes=settings.JWT_ACCESS_EXPIRE_MINUTES))
    payload = {**claims, "sub": str(subject), "exp": expire, "iat": now}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> dict[str, Any] | None:
    """Verify JWT and return payload or None. Use in FastAPI dependency."""
    settings = get_settings()
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        return None


def hash_password(plain: str) -> str:
    """Hash password for storage. Use with verify_password on login."""
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """Verify plain password against stored hash."""
    return pwd_context.verify(plain, hashed)


def is_safe_for_log(value: str, max_length: int = 200) -> str:
    """Redact or truncate sensitive data before logging."""
    if not value or len(value) > max_length:
        return "(redacted)" if value else ""
    return value[:max_length]
