"""Transaction schemas for request/response validation."""

import datetime as dt
from decimal import Decimal

from pydantic import Field

from app.schemas.base import CamelModel


class TransactionCreate(CamelModel):
    category_id: int
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    date: dt.date
    note: str = Field(default="", max_length=1000)


class TransactionUpdate(CamelModel):
    category_id: int | None = None
    amount: Decimal | None = Field(default=None, gt=0, max_digits=12, decimal_places=2)
    date: dt.date | None = None
    note: str | None = Field(default=None, max_length=1000)


class TransactionResponse(CamelModel):
    id: int
    category_id: int | None
    user_id: int
    amount: Decimal
    date: dt.date
    note: str


class TransactionDetail(TransactionResponse):
    """Transaction joined with its category name and type."""

    category_name: str | None = None
    category_type: str | None = None


class TransactionEnvelope(CamelModel):
    transaction: TransactionDetail


class TransactionListEnvelope(CamelModel):
    transactions: list[TransactionDetail]
