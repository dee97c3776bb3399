"""Tests for grouping and money helpers."""

import datetime as dt
from decimal import Decimal

from app.utils.grouping import group_by
from app.utils.money import day_label, display_date, format_currency, sum_amounts, to_decimal


class TestGroupBy:
    def test_preserves_key_and_member_order(self):
        items = [("b", 1), ("a", 2), ("b", 3), ("c", 4), ("a", 5)]
        groups = group_by(items, lambda item: item[0])

        assert list(groups) == ["b", "a", "c"]
        assert groups["b"] == [("b", 1), ("b", 3)]
        assert groups["a"] == [("a", 2), ("a", 5)]

    def test_empty_input(self):
        assert group_by([], lambda item: item) == {}

    def test_calls_are_independent(self):
        first = group_by([1, 2, 3], lambda n: n % 2)
        second = group_by([4], lambda n: n % 2)

        assert first == {1: [1, 3], 0: [2]}
        assert second == {0: [4]}


class TestMoney:
    def test_to_decimal_from_strings_and_numbers(self):
        assert to_decimal("7500") == Decimal("7500.00")
        assert to_decimal("12.345") == Decimal("12.35")
        assert to_decimal(3) == Decimal("3.00")
        assert to_decimal(0.1) == Decimal("0.10")
        assert to_decimal(None) == Decimal("0.00")

    def test_sum_has_no_float_drift(self):
        assert sum_amounts([0.1, 0.2]) == Decimal("0.30")
        assert sum_amounts(["0.10", "0.20", Decimal("0.30")]) == Decimal("0.60")
        assert sum_amounts([]) == Decimal("0.00")

    def test_format_currency(self):
        assert format_currency(Decimal("1200.00")) == "$1,200"
        assert format_currency(Decimal("180")) == "$180"
        assert format_currency(Decimal("1234567.50")) == "$1,234,568"
        assert format_currency(Decimal("0.49")) == "$0"
        assert format_currency(Decimal("-5.00")) == "-$5"
        assert format_currency("99.5", symbol="€") == "€100"

    def test_date_labels(self):
        day = dt.date(2023, 9, 8)
        assert day_label(day) == "08-Sep"
        assert display_date(day) == "08-Sep-2023"
