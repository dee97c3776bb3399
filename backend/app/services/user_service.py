"""User management service."""

from datetime import datetime, timezone

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.exceptions import NotFoundError
from app.core.security import hash_password
from app.models.user import User
from app.schemas.user import UserUpdate

logger = structlog.get_logger()


class UserService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_users(self) -> list[User]:
        result = await self.db.execute(
            select(User)
            .where(User.deleted_at.is_(None), User.is_active.is_(True))
            .order_by(User.first_name, User.id)
        )
        return list(result.scalars().all())

    async def get_user(self, user_id: int) -> User:
        """Fetch a user with their categories loaded."""
        result = await self.db.execute(
            select(User)
            .options(selectinload(User.categories))
            .where(User.id == user_id, User.deleted_at.is_(None))
        )
        user = result.scalar_one_or_none()
        if not user:
            raise NotFoundError(detail=f"No user with id: {user_id}")
        return user

    async def update_user(self, user_id: int, data: UserUpdate) -> User:
        """Partial update; a new password is hashed before it is stored."""
        user = await self._get_active(user_id)
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)

        password = update_data.pop("password", None)
        if password:
            user.password_hash = hash_password(password)
        for key, value in update_data.items():
            setattr(user, key, value)

        await self.db.flush()
        await self.db.refresh(user)
        return user

    async def delete_user(self, user_id: int) -> None:
        """Soft delete: the account is deactivated and hidden from every lookup."""
        user = await self._get_active(user_id)
        user.deleted_at = datetime.now(timezone.utc)
        user.is_active = False
        await self.db.flush()
        logger.info("user_deleted", user_id=user_id)

    async def _get_active(self, user_id: int) -> User:
        result = await self.db.execute(
            select(User).where(User.id == user_id, User.deleted_at.is_(None))
        )
        user = result.scalar_one_or_none()
        if not user:
            raise NotFoundError(detail=f"No user: {user_id}")
        return user
