"""Shared API dependencies."""

from app.core.database import get_db, get_session_factory
from app.core.security import get_current_user

__all__ = ["get_db", "get_session_factory", "get_current_user"]
