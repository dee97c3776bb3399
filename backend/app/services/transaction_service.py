"""Transaction management service."""

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.models.category import Category
from app.models.transaction import Transaction
from app.models.user import User
from app.repositories.transaction_repository import joined_transaction_query
from app.schemas.transaction import TransactionCreate, TransactionDetail, TransactionUpdate


class TransactionService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_transactions(self, user: User) -> list[TransactionDetail]:
        """All of the user's transactions, newest first, with category name/type."""
        result = await self.db.execute(
            joined_transaction_query()
            .where(Transaction.user_id == user.id, Transaction.deleted_at.is_(None))
            .order_by(Transaction.date.desc(), Transaction.id.desc())
        )
        return [TransactionDetail.model_validate(row) for row in result.all()]

    async def get_transaction(self, transaction_id: int, user: User) -> TransactionDetail:
        result = await self.db.execute(
            joined_transaction_query().where(
                Transaction.id == transaction_id,
                Transaction.user_id == user.id,
                Transaction.deleted_at.is_(None),
            )
        )
        row = result.one_or_none()
        if row is None:
            raise NotFoundError(detail=f"No transaction: {transaction_id}")
        return TransactionDetail.model_validate(row)

    async def create_transaction(self, data: TransactionCreate, user: User) -> TransactionDetail:
        await self._verify_category_ownership(data.category_id, user)

        txn = Transaction(
            user_id=user.id,
            category_id=data.category_id,
            amount=data.amount,
            date=data.date,
            note=data.note,
        )
        self.db.add(txn)
        await self.db.flush()
        return await self.get_transaction(txn.id, user)

    async def update_transaction(
        self, transaction_id: int, data: TransactionUpdate, user: User
    ) -> TransactionDetail:
        """Partial update of category, amount, date and note."""
        txn = await self._get_user_transaction(transaction_id, user)
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        if "category_id" in update_data:
            await self._verify_category_ownership(update_data["category_id"], user)

        for key, value in update_data.items():
            setattr(txn, key, value)
        await self.db.flush()
        return await self.get_transaction(txn.id, user)

    async def delete_transaction(self, transaction_id: int, user: User) -> None:
        """Soft-delete a transaction."""
        txn = await self._get_user_transaction(transaction_id, user)
        txn.deleted_at = datetime.now(timezone.utc)
        await self.db.flush()

    async def _get_user_transaction(self, transaction_id: int, user: User) -> Transaction:
        result = await self.db.execute(
            select(Transaction).where(
                Transaction.id == transaction_id,
                Transaction.user_id == user.id,
                Transaction.deleted_at.is_(None),
            )
        )
        txn = result.scalar_one_or_none()
        if not txn:
            raise NotFoundError(detail=f"No transaction: {transaction_id}")
        return txn

    async def _verify_category_ownership(self, category_id: int, user: User) -> None:
        """A transaction may only point at one of its owner's categories."""
        result = await self.db.execute(
            select(Category.id).where(Category.id == category_id, Category.user_id == user.id)
        )
        if result.scalar_one_or_none() is None:
            raise NotFoundError(detail=f"No category: {category_id}")
