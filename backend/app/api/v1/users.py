"""User management API routes, including the per-user dashboard."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.api.deps import get_current_user, get_db, get_session_factory
from app.core.security import ensure_correct_user
from app.models.user import User
from app.repositories.transaction_repository import SqlTransactionRepository
from app.schemas.dashboard import DashboardEnvelope
from app.schemas.user import (
    DeletedResponse,
    UserDetailEnvelope,
    UserEnvelope,
    UserListEnvelope,
    UserUpdate,
)
from app.services.dashboard_service import DashboardService
from app.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=UserListEnvelope)
async def list_users(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """List active users ordered by first name."""
    service = UserService(db)
    return {"users": await service.list_users()}


@router.get("/{user_id}", response_model=UserDetailEnvelope)
async def get_user(
    user_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get a user profile with their categories."""
    ensure_correct_user(user_id, current_user)
    service = UserService(db)
    return {"user": await service.get_user(user_id)}


@router.patch("/{user_id}", response_model=UserEnvelope)
async def update_user(
    user_id: int,
    data: UserUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Update first name, last name and/or password."""
    ensure_correct_user(user_id, current_user)
    service = UserService(db)
    return {"user": await service.update_user(user_id, data)}


@router.delete("/{user_id}", response_model=DeletedResponse)
async def delete_user(
    user_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Soft delete the account."""
    ensure_correct_user(user_id, current_user)
    service = UserService(db)
    await service.delete_user(user_id)
    return {"deleted": user_id}


@router.get("/{user_id}/dashboard", response_model=DashboardEnvelope)
async def get_dashboard(
    user_id: int,
    current_user: User = Depends(get_current_user),
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
):
    """Rolling 7/30-day totals, expense breakdown, daily series and recent transactions."""
    ensure_correct_user(user_id, current_user)
    service = DashboardService(SqlTransactionRepository(session_factory))
    return {"dashboard": await service.compute_dashboard(user_id)}
