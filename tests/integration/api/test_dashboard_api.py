"""Integration tests for Dashboard API endpoints"""

import pytest
from datetime import datetime, timedelta
from decimal import Decimal
from httpx import AsyncClient


@pytest.mark.asyncio
class TestDashboardAPIIntegration:
    async def test_cards_and_daily_trend(self, client: AsyncClient, admin_headers, customer):
        """
        Given: One customer with a 120000 debt paid off today
        When: Reading the cards and the 7 day payment trend
        Then: Totals reflect the debt and the payment, and today's point carries it
        """
        # Arrange
        await client.post(
            "/api/debt", json={"customer_id": customer.id, "amount": "120000"}, headers=admin_headers
        )
        await client.post(
            "/api/payment", json={"customer_id": customer.id, "amount": "120000"}, headers=admin_headers
        )

        # Act
        cards = await client.get("/api/dashboard/cards", headers=admin_headers)
        trend = await client.get("/api/dashboard/trends/daily-payments", headers=admin_headers)

        # Assert
        data = cards.json()["data"]
        assert data["total_customers"] == 1
        assert Decimal(data["total_debt"]) == Decimal("120000")
        assert Decimal(data["total_paid"]) == Decimal("120000")
        assert data["settled_customers"] == 1

        points = trend.json()["data"]["points"]
        assert len(points) == 7
        assert points[-1]["day"] == datetime.utcnow().date().isoformat()
        assert Decimal(points[-1]["total"]) == Decimal("120000")
        assert all(Decimal(point["total"]) == 0 for point in points[:-1])

    async def test_compare_rejects_inverted_range(self, client: AsyncClient, admin_headers):
        today = datetime.utcnow().date()

        response = await client.get(
            "/api/dashboard/compare",
            params={"from": today.isoformat(), "to": (today - timedelta(days=3)).isoformat()},
            headers=admin_headers,
        )

        assert response.status_code == 400

    async def test_compare_all_time(self, client: AsyncClient, admin_headers, customer):
        await client.post(
            "/api/debt", json={"customer_id": customer.id, "amount": "5000"}, headers=admin_headers
        )

        response = await client.get("/api/dashboard/compare", headers=admin_headers)

        data = response.json()["data"]
        assert Decimal(data["total_debt"]) == Decimal("5000")
        assert Decimal(data["total_paid"]) == Decimal("0")

    async def test_trend_range_limit(self, client: AsyncClient, admin_headers):
        response = await client.get(
            "/api/dashboard/trends/daily-payments", params={"days": 400}, headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json()["errors"] == {"days": ["Rentang maksimal 366 hari."]}
