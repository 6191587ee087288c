"""Unit tests for request field rules"""

import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pydantic import ValidationError

from src.api.schemas import validators
from src.api.schemas.debt_request import CreateDebtRequestSchema, CreatePaymentRequestSchema
from src.api.schemas.admin_request import CreateAdminRequestSchema


class TestPhone:
    @pytest.mark.parametrize("value", ["081234567890", "6281234567890", " 0812345678 "])
    def test_accepts_local_and_international(self, value):
        assert validators.phone(value) == value.strip()

    @pytest.mark.parametrize(
        "value,message",
        [
            ("", "Nomor telepon tidak boleh kosong."),
            ("0812-3456-789", "Nomor telepon hanya boleh berisi angka."),
            ("081234", "Nomor telepon harus 10–15 digit."),
            ("071234567890", "Nomor telepon harus diawali 08 atau 62."),
        ],
    )
    def test_rejects(self, value, message):
        with pytest.raises(ValueError, match=message):
            validators.phone(value)


class TestUsernameAndPassword:
    def test_username_needs_a_digit(self):
        with pytest.raises(ValueError, match="minimal satu angka"):
            validators.username("kasir")

    def test_username_rejects_symbols(self):
        with pytest.raises(ValueError, match="huruf, angka, dan underscore"):
            validators.username("kasir-01")

    def test_username_accepts_underscore(self):
        assert validators.username("kasir_01") == "kasir_01"

    def test_password_rejects_spaces(self):
        with pytest.raises(ValueError, match="spasi"):
            validators.password("rahasia 1")

    def test_password_minimum_length(self):
        with pytest.raises(ValueError, match="minimal 6"):
            validators.password("abc12")


class TestAmount:
    def test_rejects_zero(self):
        with pytest.raises(ValueError, match="lebih dari 0"):
            validators.amount(Decimal("0"))

    def test_rejects_amount_beyond_column_precision(self):
        with pytest.raises(ValueError, match="terlalu besar"):
            validators.amount(Decimal("1e20"))

    def test_accepts_largest_storable_amount(self):
        assert validators.amount(Decimal("9999999999999999.99")) == Decimal("9999999999999999.99")

    def test_rejects_three_decimals(self):
        with pytest.raises(ValueError, match="2 angka desimal"):
            validators.amount(Decimal("1000.005"))

    def test_allows_trailing_zeros(self):
        assert validators.amount(Decimal("1000.500")) == Decimal("1000.5")


class TestNotInFuture:
    def test_rejects_future(self):
        with pytest.raises(ValueError, match="tidak boleh lebih dari sekarang"):
            validators.not_in_future(datetime.utcnow() + timedelta(days=1))

    def test_normalizes_aware_datetime_to_naive_utc(self):
        aware = datetime(2025, 6, 1, 16, 30, tzinfo=timezone(timedelta(hours=7)))

        assert validators.not_in_future(aware) == datetime(2025, 6, 1, 9, 30)


class TestRequestSchemas:
    def test_debt_date_is_optional(self):
        schema = CreateDebtRequestSchema(customer_id="customer_1", amount="150000")

        assert schema.date is None
        assert schema.amount == Decimal("150000")

    def test_payment_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            CreatePaymentRequestSchema(customer_id="customer_1", amount="1000", method="cash")

    def test_admin_role_defaults_to_admin(self):
        schema = CreateAdminRequestSchema(
            username="kasir01", email="kasir01@example.com", name="Kasir Satu", password="rahasia1"
        )

        assert schema.role.value == "ADMIN"
