"""Read-side access to transactions joined with their category.

The dashboard fires several of these reads at once, and an ``AsyncSession``
cannot run statements concurrently, so every call below opens its own
short-lived session from the factory.
"""

from __future__ import annotations

import datetime as dt
from typing import Protocol

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.models.category import Category
from app.models.transaction import Transaction
from app.models.user import User
from app.schemas.transaction import TransactionDetail


class TransactionRepository(Protocol):
    """What the dashboard needs from the store."""

    async def find_by_user_in_range(
        self, user_id: int, start: dt.date, end: dt.date
    ) -> list[TransactionDetail]:  # pragma: no cover - interface
        """Transactions dated within ``[start, end]`` (inclusive)."""
        ...

    async def find_recent_by_user(
        self, user_id: int, limit: int
    ) -> list[TransactionDetail]:  # pragma: no cover - interface
        """At most ``limit`` transactions, newest date first."""
        ...

    async def user_exists(self, user_id: int) -> bool:  # pragma: no cover - interface
        ...


def joined_transaction_query() -> Select:
    """Transaction columns plus category name/type (LEFT JOIN, category may be missing)."""
    return select(
        Transaction.id,
        Transaction.category_id,
        Transaction.user_id,
        Transaction.amount,
        Transaction.date,
        Transaction.note,
        Category.name.label("category_name"),
        Category.type.label("category_type"),
    ).outerjoin(Category, Transaction.category_id == Category.id)


class SqlTransactionRepository:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def _fetch(self, query: Select) -> list[TransactionDetail]:
        async with self.session_factory() as session:
            result = await session.execute(query)
            return [TransactionDetail.model_validate(row) for row in result.all()]

    async def find_by_user_in_range(
        self, user_id: int, start: dt.date, end: dt.date
    ) -> list[TransactionDetail]:
        query = (
            joined_transaction_query()
            .where(
                Transaction.user_id == user_id,
                Transaction.deleted_at.is_(None),
                Transaction.date >= start,
                Transaction.date <= end,
            )
            .order_by(Transaction.date, Transaction.id)
        )
        return await self._fetch(query)

    async def find_recent_by_user(self, user_id: int, limit: int) -> list[TransactionDetail]:
        query = (
            joined_transaction_query()
            .where(Transaction.user_id == user_id, Transaction.deleted_at.is_(None))
            .order_by(Transaction.date.desc(), Transaction.id.desc())
            .limit(limit)
        )
        return await self._fetch(query)

    async def user_exists(self, user_id: int) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                select(User.id).where(User.id == user_id, User.deleted_at.is_(None))
            )
            return result.scalar_one_or_none() is not None
