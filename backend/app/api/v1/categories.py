"""Category API routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user, get_db
from app.models.user import User
from app.schemas.category import (
    CategoryCreate,
    CategoryEnvelope,
    CategoryListEnvelope,
    CategoryUpdate,
)
from app.schemas.user import DeletedResponse
from app.services.category_service import CategoryService

router = APIRouter()


@router.get("", response_model=CategoryListEnvelope)
async def list_categories(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """List the current user's categories."""
    service = CategoryService(db)
    return {"categories": await service.list_categories(current_user)}


@router.post("", response_model=CategoryEnvelope, status_code=201)
async def create_category(
    data: CategoryCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Create an Income or Expense category."""
    service = CategoryService(db)
    return {"category": await service.create_category(data, current_user)}


@router.get("/{category_id}", response_model=CategoryEnvelope)
async def get_category(
    category_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    service = CategoryService(db)
    return {"category": await service.get_category(category_id, current_user)}


@router.patch("/{category_id}", response_model=CategoryEnvelope)
async def update_category(
    category_id: int,
    data: CategoryUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Rename a category or change its type."""
    service = CategoryService(db)
    return {"category": await service.update_category(category_id, data, current_user)}


@router.delete("/{category_id}", response_model=DeletedResponse)
async def delete_category(
    category_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a category; its transactions become uncategorized."""
    service = CategoryService(db)
    await service.delete_category(category_id, current_user)
    return {"deleted": category_id}
