"""Unit tests for derived payment balances"""

from datetime import datetime, timedelta
from decimal import Decimal
from src.domain.balances import PaymentLine, cycle_outstanding, running_remaining


def _line(payment_id, group_id, group_amount, amount, paid_at, created_at=None):
    return PaymentLine(
        payment_id=payment_id,
        group_id=group_id,
        group_amount=Decimal(group_amount),
        amount=Decimal(amount),
        paid_at=paid_at,
        created_at=created_at or paid_at,
    )


class TestRunningRemaining:
    """Test remaining balance right after each payment"""

    def test_payments_applied_in_paid_at_order(self):
        """
        Given: Two payments on a 100000 line item, listed newest first
        When: Running balances are computed
        Then: The older payment leaves 70000, the newer 20000
        """
        # Arrange
        t0 = datetime(2025, 6, 1, 10, 0)
        lines = [
            _line("pay_2", "debt_1", "100000", "50000", t0 + timedelta(days=1)),
            _line("pay_1", "debt_1", "100000", "30000", t0),
        ]

        # Act
        remaining = running_remaining(lines)

        # Assert
        assert remaining == {"pay_1": Decimal("70000"), "pay_2": Decimal("20000")}

    def test_same_paid_at_applied_in_creation_order(self):
        """
        Given: Two payments on one line item share paid_at, listed newest first
        When: Running balances are computed
        Then: The earlier-created payment is applied first
        """
        # Arrange
        paid_at = datetime(2025, 6, 1, 10, 0)
        lines = [
            _line("pay_2", "debt_1", "100000", "50000", paid_at, paid_at + timedelta(seconds=5)),
            _line("pay_1", "debt_1", "100000", "30000", paid_at, paid_at + timedelta(seconds=1)),
        ]

        # Act
        remaining = running_remaining(lines)

        # Assert
        assert remaining == {"pay_1": Decimal("70000"), "pay_2": Decimal("20000")}

    def test_groups_are_independent(self):
        t0 = datetime(2025, 6, 1, 10, 0)
        lines = [
            _line("pay_a", "cycle_a", "200000", "200000", t0),
            _line("pay_b", "cycle_b", "75000", "25000", t0),
        ]

        remaining = running_remaining(lines)

        assert remaining["pay_a"] == Decimal("0")
        assert remaining["pay_b"] == Decimal("50000")

    def test_empty_input(self):
        assert running_remaining([]) == {}


class TestCycleOutstanding:
    def test_settled_cycle_owes_nothing(self):
        assert cycle_outstanding(Decimal("200000"), True, Decimal("0")) == Decimal("0")

    def test_open_cycle_owes_total_minus_paid(self):
        assert cycle_outstanding(Decimal("200000"), False, Decimal("50000")) == Decimal("150000")

    def test_never_negative(self):
        assert cycle_outstanding(Decimal("100"), False, Decimal("150")) == Decimal("0")
