"""Authentication service."""

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import BadRequestError, UnauthorizedError
from app.core.security import create_access_token, hash_password, verify_password
from app.models.user import User
from app.schemas.user import OAuthLogin, TokenResponse, UserLogin, UserRegister
from app.services.category_service import CategoryService

logger = structlog.get_logger()


class AuthService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def register(self, data: UserRegister) -> User:
        """Register a new user and seed their default categories."""
        if await self._find_by_email(data.email, include_deleted=True):
            raise BadRequestError(f"Duplicate email: {data.email}")

        user = User(
            email=data.email,
            password_hash=hash_password(data.password),
            first_name=data.first_name,
            last_name=data.last_name,
        )
        self.db.add(user)
        await self.db.flush()
        await self.db.refresh(user)

        await CategoryService(self.db).seed_defaults(user)
        logger.info("user_registered", user_id=user.id)
        return user

    async def authenticate(self, data: UserLogin) -> User:
        """Check email/password; the same error covers unknown email and bad password."""
        user = await self._find_by_email(data.email)
        if not user or not user.is_active or not verify_password(data.password, user.password_hash):
            logger.info("login_failed", email=data.email)
            raise UnauthorizedError("Invalid email/password")
        return user

    async def oauth(self, data: OAuthLogin) -> tuple[User, bool]:
        """Sign in through an external provider.

        Returns ``(user, is_new)``. A returning OAuth user gets their profile
        refreshed from the provider's claims; an email already registered with
        a password (or another provider id) is rejected.
        """
        user = await self._find_by_email(data.email, include_deleted=True)
        if user is not None:
            if user.deleted_at is not None or user.oauth_uid != data.oauth_id:
                raise BadRequestError(f"Duplicate email: {data.email}")
            user.first_name = data.first_name
            user.last_name = data.last_name
            user.oauth_provider = data.oauth_provider
            user.oauth_picture = data.oauth_picture
            await self.db.flush()
            await self.db.refresh(user)
            return user, False

        user = User(
            email=data.email,
            first_name=data.first_name,
            last_name=data.last_name,
            is_oauth=True,
            oauth_uid=data.oauth_id,
            oauth_provider=data.oauth_provider,
            oauth_picture=data.oauth_picture,
        )
        self.db.add(user)
        await self.db.flush()
        await self.db.refresh(user)

        await CategoryService(self.db).seed_defaults(user)
        logger.info("oauth_user_created", user_id=user.id, provider=data.oauth_provider)
        return user, True

    @staticmethod
    def issue_token(user: User) -> TokenResponse:
        return TokenResponse(token=create_access_token(user.id, user.email))

    async def _find_by_email(self, email: str, include_deleted: bool = False) -> User | None:
        query = select(User).where(User.email == email)
        if not include_deleted:
            query = query.where(User.deleted_at.is_(None))
        result = await self.db.execute(query)
        return result.scalar_one_or_none()
