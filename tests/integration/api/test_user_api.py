"""Integration tests for Customer (User) API endpoints"""

import pytest
from decimal import Decimal
from httpx import AsyncClient


@pytest.mark.asyncio
class TestUserAPIIntegration:
    """Integration test suite for customer management"""

    async def test_requires_authentication(self, client: AsyncClient):
        response = await client.get("/api/user")

        assert response.status_code == 401

    async def test_create_list_and_search(self, client: AsyncClient, admin_headers):
        # Arrange
        for name in ("Budi Santoso", "Siti Aminah"):
            created = await client.post(
                "/api/user",
                json={"name": name, "phone": "081234567890", "address": "Jl. Merdeka 1"},
                headers=admin_headers,
            )
            assert created.status_code == 201
            assert created.json()["message"] == "User berhasil dibuat"

        # Act
        listed = await client.get("/api/user", headers=admin_headers)
        found = await client.get("/api/user/search", params={"query": "siti"}, headers=admin_headers)
        blank = await client.get("/api/user/search", params={"query": ""}, headers=admin_headers)

        # Assert
        assert len(listed.json()["data"]) == 2
        assert [row["name"] for row in found.json()["data"]] == ["Siti Aminah"]
        assert set(found.json()["data"][0]) == {"id", "name"}
        assert blank.json()["data"] == []

    async def test_invalid_customer_payload(self, client: AsyncClient, admin_headers):
        """
        Given: A short name and a phone with the wrong prefix
        When: Creating a customer
        Then: 400 with one message per field
        """
        response = await client.post(
            "/api/user",
            json={"name": "Bu", "phone": "0712345678", "address": "Jl. Merdeka 1"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Validasi gagal"
        assert body["errors"] == {
            "name": ["Nama minimal 3 karakter."],
            "phone": ["Nomor telepon harus diawali 08 atau 62."],
        }

    async def test_update_changes_only_sent_fields(self, client: AsyncClient, admin_headers, customer):
        response = await client.put(
            f"/api/user/{customer.id}", json={"address": "Jl. Kenanga 9"}, headers=admin_headers
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["address"] == "Jl. Kenanga 9"
        assert data["name"] == "Budi Santoso"

    async def test_delete_blocked_by_unpaid_debt(self, client: AsyncClient, admin_headers, customer):
        # Arrange
        await client.post(
            "/api/debt",
            json={"customer_id": customer.id, "amount": "100000"},
            headers=admin_headers,
        )

        # Act
        blocked = await client.delete(f"/api/user/{customer.id}", headers=admin_headers)
        await client.post(
            "/api/payment",
            json={"customer_id": customer.id, "amount": "100000"},
            headers=admin_headers,
        )
        deleted = await client.delete(f"/api/user/{customer.id}", headers=admin_headers)

        # Assert
        assert blocked.status_code == 400
        assert blocked.json()["message"] == (
            "User tidak bisa dihapus karena masih memiliki utang yang belum lunas."
        )
        assert deleted.status_code == 200
        assert (await client.get("/api/user", headers=admin_headers)).json()["data"] == []

    async def test_delete_unknown_customer(self, client: AsyncClient, admin_headers):
        response = await client.delete("/api/user/missing", headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "User tidak ditemukan"
