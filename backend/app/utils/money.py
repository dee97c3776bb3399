"""Decimal money helpers and display formatting."""

from collections.abc import Iterable
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")


def to_decimal(value: Decimal | str | int | float | None) -> Decimal:
    """Coerce a stored amount to a 2-digit Decimal.

    Floats go through ``str`` first so that binary representation noise
    (``0.1 + 0.2``) never reaches the result.
    """
    if value is None:
        return ZERO
    if isinstance(value, float):
        value = str(value)
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def sum_amounts(values: Iterable[Decimal | str | int | float | None]) -> Decimal:
    total = ZERO
    for value in values:
        total += to_decimal(value)
    return total


def format_currency(amount: Decimal | str | int | float, symbol: str = "$") -> str:
    """Render ``amount`` as ``$1,235``: thousands separators, no fractional digits."""
    whole = to_decimal(amount).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if whole < 0 else ""
    return f"{sign}{symbol}{abs(whole):,}"


def day_label(day: date) -> str:
    """Short chart label, e.g. ``18-Sep``."""
    return day.strftime("%d-%b")


def display_date(day: date) -> str:
    """Full display date, e.g. ``18-Sep-2023``."""
    return day.strftime("%d-%b-%Y")
