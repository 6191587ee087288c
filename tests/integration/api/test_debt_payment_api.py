"""Integration tests for Debt and Payment API endpoints"""

import pytest
from datetime import datetime, timedelta
from decimal import Decimal
from httpx import AsyncClient


async def add_debt(client: AsyncClient, headers, customer_id: str, amount: str):
    response = await client.post(
        "/api/debt", json={"customer_id": customer_id, "amount": amount}, headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def pay(client: AsyncClient, headers, customer_id: str, amount: str):
    return await client.post(
        "/api/payment", json={"customer_id": customer_id, "amount": amount}, headers=headers
    )


@pytest.mark.asyncio
class TestDebtAPIIntegration:
    """Integration test suite for Debt API endpoints"""

    async def test_debts_accumulate_in_open_cycle(self, client: AsyncClient, admin_headers, customer):
        """
        Given: A customer without debts
        When: 150000 and then 50000 are recorded
        Then: One cycle exists with total 200000
        """
        # Act
        first = await add_debt(client, admin_headers, customer.id, "150000")
        second = await add_debt(client, admin_headers, customer.id, "50000")
        listed = await client.get("/api/debt", headers=admin_headers)

        # Assert
        assert first["cycle_id"] == second["cycle_id"]
        assert Decimal(second["total"]) == Decimal("200000")
        rows = listed.json()["data"]
        assert len(rows) == 1
        assert rows[0]["customer_name"] == "Budi Santoso"
        assert rows[0]["is_paid"] is False
        assert Decimal(rows[0]["total"]) == Decimal("200000")
        assert listed.json()["pagination"]["total_items"] == 1

    async def test_create_debt_message_names_customer(
        self, client: AsyncClient, admin_headers, customer
    ):
        response = await client.post(
            "/api/debt", json={"customer_id": customer.id, "amount": "1000"}, headers=admin_headers
        )

        assert response.json()["message"] == "Budi Santoso berhasil menambahkan utang."

    async def test_invalid_debt_payload(self, client: AsyncClient, admin_headers, customer):
        future = (datetime.utcnow() + timedelta(days=2)).isoformat()

        response = await client.post(
            "/api/debt",
            json={"customer_id": customer.id, "amount": "-5", "date": future},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"] == {
            "amount": ["Nominal harus lebih dari 0."],
            "date": ["Tanggal tidak boleh lebih dari sekarang."],
        }

    async def test_oversized_amount_is_a_field_error(
        self, client: AsyncClient, admin_headers, customer
    ):
        response = await client.post(
            "/api/debt", json={"customer_id": customer.id, "amount": "1e20"}, headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json()["errors"] == {"amount": ["Nominal terlalu besar."]}

    async def test_unknown_customer(self, client: AsyncClient, admin_headers):
        response = await client.post(
            "/api/debt", json={"customer_id": "missing", "amount": "1000"}, headers=admin_headers
        )

        assert response.status_code == 404
        assert response.json()["message"] == "User yang dipilih tidak ditemukan."

    async def test_public_listing_needs_no_token(self, client: AsyncClient, admin_headers, customer):
        await add_debt(client, admin_headers, customer.id, "75000")
        client.cookies.clear()

        response = await client.get("/api/debt/public")

        assert response.status_code == 200
        row = response.json()["data"][0]
        assert row["customer_name"] == "Budi Santoso"
        assert Decimal(row["total"]) == Decimal("75000")
        assert "customer_id" not in row

    async def test_open_cycles_for_payment_form(self, client: AsyncClient, admin_headers, customer):
        await add_debt(client, admin_headers, customer.id, "75000")

        response = await client.get("/api/debt/open", params={"search": "budi"}, headers=admin_headers)

        assert response.status_code == 200
        assert [row["customer_name"] for row in response.json()["data"]] == ["Budi Santoso"]

    async def test_delete_debt_only_after_settlement(
        self, client: AsyncClient, admin_headers, customer
    ):
        # Arrange
        debt = await add_debt(client, admin_headers, customer.id, "80000")
        debt_id = debt["debt"]["id"]

        # Act
        blocked = await client.delete(f"/api/debt/{debt_id}", headers=admin_headers)
        await pay(client, admin_headers, customer.id, "80000")
        deleted = await client.delete(f"/api/debt/{debt_id}", headers=admin_headers)

        # Assert
        assert blocked.status_code == 400
        assert deleted.status_code == 200
        assert deleted.json()["message"] == "Berhasil menghapus data utang."

    async def test_delete_cycle_requires_superadmin(
        self, client: AsyncClient, admin_headers, superadmin_headers, customer
    ):
        # Arrange
        debt = await add_debt(client, admin_headers, customer.id, "80000")
        await pay(client, admin_headers, customer.id, "80000")
        path = f"/api/debt/cycles/{debt['cycle_id']}"

        # Act
        forbidden = await client.delete(path, headers=admin_headers)
        deleted = await client.delete(path, headers=superadmin_headers)

        # Assert
        assert forbidden.status_code == 403
        assert deleted.status_code == 200
        assert deleted.json()["data"]["debts_deleted"] == 1
        assert deleted.json()["data"]["payments_deleted"] == 1


@pytest.mark.asyncio
class TestPaymentAPIIntegration:
    """Integration test suite for Payment API endpoints"""

    async def test_exact_payment_settles_cycle(self, client: AsyncClient, admin_headers, customer):
        """
        Given: An open cycle totalling 200000
        When: 200000 is paid, and then paid again
        Then: The first payment settles the cycle, the second finds nothing to pay
        """
        # Arrange
        await add_debt(client, admin_headers, customer.id, "150000")
        await add_debt(client, admin_headers, customer.id, "50000")

        # Act
        first = await pay(client, admin_headers, customer.id, "200000")
        second = await pay(client, admin_headers, customer.id, "200000")

        # Assert
        assert first.status_code == 201
        data = first.json()["data"]
        assert data["is_paid"] is True
        assert Decimal(data["total"]) == Decimal("200000")
        assert first.json()["message"] == "Pembayaran Budi Santoso berhasil dicatat."

        assert second.status_code == 400
        assert second.json()["message"] == "User yang dipilih tidak memiliki pencatatan."

        cycles = (await client.get("/api/debt", headers=admin_headers)).json()["data"]
        assert cycles[0]["is_paid"] is True
        assert cycles[0]["paid_at"] is not None

    async def test_amount_mismatch(self, client: AsyncClient, admin_headers, customer):
        await add_debt(client, admin_headers, customer.id, "200000")

        response = await pay(client, admin_headers, customer.id, "150000")

        assert response.status_code == 400
        assert "amount" in response.json()["errors"]
        cycles = (await client.get("/api/debt", headers=admin_headers)).json()["data"]
        assert cycles[0]["is_paid"] is False

    async def test_list_and_delete_payment(self, client: AsyncClient, admin_headers, customer):
        # Arrange
        await add_debt(client, admin_headers, customer.id, "90000")
        payment = (await pay(client, admin_headers, customer.id, "90000")).json()["data"]
        payment_id = payment["payments"][0]["id"]

        # Act
        listed = await client.get("/api/payment", headers=admin_headers)
        deleted = await client.delete(f"/api/payment/{payment_id}", headers=admin_headers)
        again = await client.delete(f"/api/payment/{payment_id}", headers=admin_headers)
        after = await client.get("/api/payment", headers=admin_headers)
        history = await client.get("/api/payment/deleted", headers=admin_headers)

        # Assert
        row = listed.json()["data"][0]
        assert row["customer_name"] == "Budi Santoso"
        assert Decimal(row["remaining_calculated"]) == Decimal("0")
        assert Decimal(row["total_remaining"]) == Decimal("0")

        assert deleted.status_code == 200
        assert again.status_code == 404
        assert after.json()["data"] == []
        assert [row["id"] for row in history.json()["data"]] == [payment_id]

    async def test_payment_requires_authentication(self, client: AsyncClient, customer):
        response = await pay(client, {}, customer.id, "1000")

        assert response.status_code == 401
