"""Tests for the dashboard endpoint against a real database."""

import datetime as dt
from decimal import Decimal

import pytest


async def add(client, user, category, amount, days_ago, note=""):
    day = dt.date.today() - dt.timedelta(days=days_ago)
    response = await client.post(
        "/api/v1/transactions",
        json={"categoryId": category["id"], "amount": amount, "date": day.isoformat(), "note": note},
        headers=user["headers"],
    )
    assert response.status_code == 201, response.text
    return response.json()["transaction"]


async def fetch(client, user):
    response = await client.get(f"/api/v1/users/{user['id']}/dashboard", headers=user["headers"])
    assert response.status_code == 200, response.text
    return response.json()["dashboard"]


class TestDashboardAPI:
    @pytest.fixture
    async def seeded(self, client, user, categories):
        await add(client, user, categories["Salary"], "7500.00", 6, note="Pay")
        await add(client, user, categories["Rent"], "1200.00", 5)
        await add(client, user, categories["Groceries"], "180.00", 4)
        await add(client, user, categories["Utilities"], "95.40", 12)
        await add(client, user, categories["Freelance"], "400.00", 45)
        return user

    async def test_totals(self, client, seeded):
        dashboard = await fetch(client, seeded)

        assert Decimal(dashboard["totalIncome"]) == Decimal("7500.00")
        assert Decimal(dashboard["totalExpense"]) == Decimal("1380.00")
        assert Decimal(dashboard["balance"]) == Decimal("6120.00")
        assert Decimal(dashboard["totalIncomeMonthly"]) == Decimal("7500.00")
        assert Decimal(dashboard["totalExpenseMonthly"]) == Decimal("1475.40")
        assert Decimal(dashboard["balanceMonthly"]) == Decimal("6024.60")

    async def test_windows(self, client, seeded):
        dashboard = await fetch(client, seeded)

        assert len(dashboard["lastSevenTransactions"]) == 3
        assert len(dashboard["monthlyTransactions"]) == 4
        first = dashboard["lastSevenTransactions"][0]
        assert first["categoryName"] == "Salary"
        assert first["categoryType"] == "Income"
        assert first["note"] == "Pay"

    async def test_charts(self, client, seeded):
        dashboard = await fetch(client, seeded)

        assert [(s["categoryName"], s["formattedAmount"]) for s in dashboard["doughnutChartData"]] == [
            ("Groceries", "$180"),
            ("Rent", "$1,200"),
        ]

        spline = dashboard["splineChartData"]
        today = dt.date.today()
        assert [p["day"] for p in spline] == [
            (today - dt.timedelta(days=6 - i)).strftime("%d-%b") for i in range(7)
        ]
        assert Decimal(spline[0]["income"]) == Decimal("7500.00")
        assert Decimal(spline[1]["expense"]) == Decimal("1200.00")
        assert Decimal(spline[2]["expense"]) == Decimal("180.00")
        assert Decimal(spline[6]["income"]) == 0

    async def test_recent_transactions(self, client, seeded):
        dashboard = await fetch(client, seeded)

        recent = dashboard["recentTransactions"]
        assert len(recent) == 5
        assert [r["categoryName"] for r in recent] == [
            "Groceries", "Rent", "Salary", "Utilities", "Freelance",
        ]
        oldest = dt.date.today() - dt.timedelta(days=45)
        assert recent[-1]["date"] == oldest.strftime("%d-%b-%Y")

    async def test_deleted_transactions_are_ignored(self, client, user, categories):
        txn = await add(client, user, categories["Rent"], "1200.00", 1)
        await client.delete(f"/api/v1/transactions/{txn['id']}", headers=user["headers"])

        dashboard = await fetch(client, user)
        assert Decimal(dashboard["totalExpense"]) == 0
        assert dashboard["recentTransactions"] == []

    async def test_new_user_has_empty_dashboard(self, client, user):
        dashboard = await fetch(client, user)

        assert Decimal(dashboard["balance"]) == 0
        assert dashboard["doughnutChartData"] == []
        assert len(dashboard["splineChartData"]) == 7

    async def test_other_user_forbidden(self, client, user, other_user):
        response = await client.get(f"/api/v1/users/{user['id']}/dashboard", headers=other_user["headers"])
        assert response.status_code == 403

    async def test_requires_token(self, client, user):
        response = await client.get(f"/api/v1/users/{user['id']}/dashboard")
        assert response.status_code == 401
