"""Transaction API routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user, get_db
from app.models.user import User
from app.schemas.transaction import (
    TransactionCreate,
    TransactionEnvelope,
    TransactionListEnvelope,
    TransactionUpdate,
)
from app.schemas.user import DeletedResponse
from app.services.transaction_service import TransactionService

router = APIRouter()


@router.get("", response_model=TransactionListEnvelope)
async def list_transactions(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """List the current user's transactions, newest first."""
    service = TransactionService(db)
    return {"transactions": await service.list_transactions(current_user)}


@router.post("", response_model=TransactionEnvelope, status_code=201)
async def create_transaction(
    data: TransactionCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Record a transaction against one of the user's categories."""
    service = TransactionService(db)
    return {"transaction": await service.create_transaction(data, current_user)}


@router.get("/{transaction_id}", response_model=TransactionEnvelope)
async def get_transaction(
    transaction_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    service = TransactionService(db)
    return {"transaction": await service.get_transaction(transaction_id, current_user)}


@router.patch("/{transaction_id}", response_model=TransactionEnvelope)
async def update_transaction(
    transaction_id: int,
    data: TransactionUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Update category, amount, date and/or note."""
    service = TransactionService(db)
    return {"transaction": await service.update_transaction(transaction_id, data, current_user)}


@router.delete("/{transaction_id}", response_model=DeletedResponse)
async def delete_transaction(
    transaction_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    service = TransactionService(db)
    await service.delete_transaction(transaction_id, current_user)
    return {"deleted": transaction_id}
