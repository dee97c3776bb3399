"""Security utilities: password hashing, JWT issuance/validation, auth dependencies."""

from datetime import datetime, timedelta, timezone

import structlog
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.database import get_db
from app.core.exceptions import ForbiddenError, UnauthorizedError

logger = structlog.get_logger()

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_work_factor,
)


# ── Passwords ─────────────────────────────────────
def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


# ── Tokens ────────────────────────────────────────
def create_access_token(user_id: int, email: str, expires_delta: timedelta | None = None) -> str:
    """Sign an access token carrying the user's identity."""
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.jwt_access_token_expire_minutes)
    )
    payload = {"sub": str(user_id), "email": email, "exp": expire}
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict:
    """Verify signature and expiry, return the claims."""
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise UnauthorizedError("Invalid or expired token") from e


# ── Auth Dependencies ─────────────────────────────
security_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security_scheme),
    db: AsyncSession = Depends(get_db),
):
    """FastAPI dependency: validate the bearer token and return the active user."""
    from app.models.user import User

    if credentials is None:
        raise UnauthorizedError("Not authenticated")

    payload = decode_token(credentials.credentials)
    subject = payload.get("sub")
    if not subject or not subject.isdigit():
        raise UnauthorizedError("Token missing subject")

    result = await db.execute(
        select(User).where(
            User.id == int(subject),
            User.is_active.is_(True),
            User.deleted_at.is_(None),
        )
    )
    user = result.scalar_one_or_none()
    if user is None:
        logger.warning("token_user_not_found", user_id=subject)
        raise UnauthorizedError("User not found")
    return user


def ensure_correct_user(user_id: int, current_user) -> None:
    """Reject access to another user's resources."""
    if current_user.id != user_id:
        raise ForbiddenError()
