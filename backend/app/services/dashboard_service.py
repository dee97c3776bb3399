"""Dashboard service: rolling-window totals, category breakdown, daily series."""

import asyncio
import datetime as dt
from collections.abc import Iterable

import structlog

from app.config import settings
from app.core.exceptions import NotFoundError
from app.models.category import CategoryType
from app.repositories.transaction_repository import TransactionRepository
from app.schemas.dashboard import DashboardResult, DoughnutSlice, RecentTransaction, SplinePoint
from app.schemas.transaction import TransactionDetail
from app.utils.grouping import group_by
from app.utils.money import ZERO, day_label, display_date, format_currency, sum_amounts

logger = structlog.get_logger()

SEVEN_DAY_SPAN = 6  # today - 6 .. today is 7 calendar days
MONTHLY_SPAN = 30


def _of_type(transactions: Iterable[TransactionDetail], category_type: CategoryType) -> list[TransactionDetail]:
    return [t for t in transactions if t.category_type == category_type.value]


def _totals(transactions: list[TransactionDetail]):
    """(income, expense, balance) for one window.

    Rows whose category type is neither Income nor Expense count towards neither.
    """
    income = sum_amounts(t.amount for t in _of_type(transactions, CategoryType.INCOME))
    expense = sum_amounts(t.amount for t in _of_type(transactions, CategoryType.EXPENSE))
    return income, expense, income - expense


def _doughnut(transactions: list[TransactionDetail]) -> list[DoughnutSlice]:
    groups = group_by(_of_type(transactions, CategoryType.EXPENSE), lambda t: t.category_id)
    slices = []
    for members in groups.values():
        amount = sum_amounts(t.amount for t in members)
        slices.append(
            DoughnutSlice(
                category_name=members[0].category_name,
                amount=amount,
                formatted_amount=format_currency(amount, settings.currency_symbol),
            )
        )
    # sorted() is stable: equal amounts keep first-seen order
    return sorted(slices, key=lambda s: s.amount)


def _spline(transactions: list[TransactionDetail], start: dt.date) -> list[SplinePoint]:
    income_by_day = {
        day: sum_amounts(t.amount for t in members)
        for day, members in group_by(_of_type(transactions, CategoryType.INCOME), lambda t: t.date).items()
    }
    expense_by_day = {
        day: sum_amounts(t.amount for t in members)
        for day, members in group_by(_of_type(transactions, CategoryType.EXPENSE), lambda t: t.date).items()
    }

    points = []
    for offset in range(SEVEN_DAY_SPAN + 1):
        day = start + dt.timedelta(days=offset)
        points.append(
            SplinePoint(
                day=day_label(day),
                income=income_by_day.get(day, ZERO),
                expense=expense_by_day.get(day, ZERO),
            )
        )
    return points


def _recent(transactions: list[TransactionDetail]) -> list[RecentTransaction]:
    return [
        RecentTransaction(**t.model_dump(exclude={"date"}), date=display_date(t.date))
        for t in transactions
    ]


class DashboardService:
    def __init__(self, repository: TransactionRepository):
        self.repository = repository

    async def compute_dashboard(
        self, user_id: int, now: dt.date | dt.datetime | None = None
    ) -> DashboardResult:
        """Build the dashboard for ``user_id`` as of ``now`` (default: today).

        The 7-day window, the 30-day window and the recent list are three
        independent reads issued together; if any of them fails the error
        propagates and no partial dashboard is produced.
        """
        if not await self.repository.user_exists(user_id):
            raise NotFoundError(detail=f"No user with id: {user_id}")

        if now is None:
            today = dt.date.today()
        elif isinstance(now, dt.datetime):
            today = now.date()
        else:
            today = now

        seven_day_start = today - dt.timedelta(days=SEVEN_DAY_SPAN)
        monthly_start = today - dt.timedelta(days=MONTHLY_SPAN)

        last_seven, recent, monthly = await asyncio.gather(
            self.repository.find_by_user_in_range(user_id, seven_day_start, today),
            self.repository.find_recent_by_user(user_id, settings.recent_transactions_limit),
            self.repository.find_by_user_in_range(user_id, monthly_start, today),
        )

        total_income, total_expense, balance = _totals(last_seven)
        total_income_monthly, total_expense_monthly, balance_monthly = _totals(monthly)

        logger.info(
            "dashboard_computed",
            user_id=user_id,
            as_of=today.isoformat(),
            seven_day_count=len(last_seven),
            monthly_count=len(monthly),
            recent_count=len(recent),
        )

        return DashboardResult(
            last_seven_transactions=last_seven,
            monthly_transactions=monthly,
            total_income=total_income,
            total_expense=total_expense,
            balance=balance,
            total_income_monthly=total_income_monthly,
            total_expense_monthly=total_expense_monthly,
            balance_monthly=balance_monthly,
            doughnut_chart_data=_doughnut(last_seven),
            spline_chart_data=_spline(last_seven, seven_day_start),
            recent_transactions=_recent(recent),
        )
