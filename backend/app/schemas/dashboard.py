"""Dashboard schemas."""

from decimal import Decimal

from app.schemas.base import CamelModel
from app.schemas.transaction import TransactionDetail


class DoughnutSlice(CamelModel):
    category_name: str | None
    amount: Decimal
    formatted_amount: str


class SplinePoint(CamelModel):
    day: str  # "18-Sep"
    income: Decimal
    expense: Decimal


class RecentTransaction(CamelModel):
    id: int
    category_id: int | None
    user_id: int
    amount: Decimal
    date: str  # "18-Sep-2023"
    note: str
    category_name: str | None = None
    category_type: str | None = None


class DashboardResult(CamelModel):
    last_seven_transactions: list[TransactionDetail]
    monthly_transactions: list[TransactionDetail]
    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    total_income_monthly: Decimal
    total_expense_monthly: Decimal
    balance_monthly: Decimal
    doughnut_chart_data: list[DoughnutSlice]
    spline_chart_data: list[SplinePoint]
    recent_transactions: list[RecentTransaction]


class DashboardEnvelope(CamelModel):
    dashboard: DashboardResult
