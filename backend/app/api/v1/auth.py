"""Authentication API routes: registration, password login, OAuth sign-in."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.schemas.user import OAuthLogin, TokenResponse, UserLogin, UserRegister
from app.services.auth_service import AuthService

router = APIRouter()


@router.post("/register", response_model=TokenResponse, status_code=201)
async def register(data: UserRegister, db: AsyncSession = Depends(get_db)):
    """Create an account (with default categories) and return a token for it."""
    service = AuthService(db)
    user = await service.register(data)
    return service.issue_token(user)


@router.post("/token", response_model=TokenResponse)
async def login(data: UserLogin, db: AsyncSession = Depends(get_db)):
    """Exchange email + password for a token."""
    service = AuthService(db)
    user = await service.authenticate(data)
    return service.issue_token(user)


@router.post("/oauth", response_model=TokenResponse)
async def oauth_login(data: OAuthLogin, response: Response, db: AsyncSession = Depends(get_db)):
    """Sign in with provider claims; 201 when the account was just created."""
    service = AuthService(db)
    user, is_new = await service.oauth(data)
    if is_new:
        response.status_code = status.HTTP_201_CREATED
    return service.issue_token(user)
