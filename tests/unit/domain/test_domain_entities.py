"""Unit tests for back office domain entities"""

import pytest
from datetime import datetime
from decimal import Decimal
from src.domain.admin import Admin, Role
from src.domain.debt_cycle import DebtCycle
from src.domain.payment import Payment


class TestRole:
    def test_parse_accepts_known_values(self):
        assert Role.parse("ADMIN") is Role.ADMIN
        assert Role.parse("SUPERADMIN") is Role.SUPERADMIN

    def test_parse_passes_role_through(self):
        assert Role.parse(Role.SUPERADMIN) is Role.SUPERADMIN

    @pytest.mark.parametrize("value", ["admin", "OWNER", "", None])
    def test_parse_rejects_unknown_values(self, value):
        with pytest.raises(ValueError):
            Role.parse(value)


class TestAdmin:
    def test_defaults(self):
        """Test a new admin gets an id, the ADMIN role and timestamps"""
        # Arrange & Act
        admin = Admin(
            username="kasir01",
            email="kasir01@example.com",
            name="Kasir Satu",
            password_hash="$2b$04$hash",
        )

        # Assert
        assert admin.id
        assert admin.role == Role.ADMIN
        assert isinstance(admin.created_at, datetime)


class TestDebtCycle:
    def test_new_cycle_is_open_with_zero_total(self):
        cycle = DebtCycle(customer_id="customer_1")

        assert cycle.is_open
        assert cycle.is_paid is False
        assert cycle.total == Decimal("0")
        assert cycle.paid_at is None

    def test_paid_cycle_is_not_open(self):
        cycle = DebtCycle(customer_id="customer_1", is_paid=True, paid_at=datetime.utcnow())

        assert not cycle.is_open


class TestPayment:
    def test_soft_delete_marker(self):
        payment = Payment(
            cycle_id="cycle_1",
            customer_id="customer_1",
            amount=Decimal("200000"),
            paid_at=datetime.utcnow(),
        )

        assert payment.is_deleted is False
        assert payment.debt_id is None

        payment.deleted_at = datetime.utcnow()

        assert payment.is_deleted is True
