"""Field rules shared by request schemas

Each function returns the cleaned value or raises ValueError with the
message shown to the user.
"""

import re
from datetime import datetime, timezone
from decimal import Decimal

NAME_PATTERN = re.compile(r"^[a-zA-ZÀ-ž'’. -]+$")
PHONE_PATTERN = re.compile(r"^(08\d{8,11}|62\d{9,12})$")
USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# NUMERIC(18, 2) holds 16 integer digits
MAX_AMOUNT = Decimal(10) ** 16


def name(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Nama wajib diisi.")
    if len(value) < 3:
        raise ValueError("Nama minimal 3 karakter.")
    if not NAME_PATTERN.match(value):
        raise ValueError("Nama hanya boleh berisi huruf, spasi, titik, apostrof, dan tanda hubung.")
    return value


def phone(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Nomor telepon tidak boleh kosong.")
    if not value.isdigit():
        raise ValueError("Nomor telepon hanya boleh berisi angka.")
    if not 10 <= len(value) <= 15:
        raise ValueError("Nomor telepon harus 10–15 digit.")
    if not PHONE_PATTERN.match(value):
        raise ValueError("Nomor telepon harus diawali 08 atau 62.")
    return value


def address(value: str) -> str:
    value = value.strip()
    if len(value) < 3:
        raise ValueError("Alamat minimal 3 karakter.")
    return value


def username(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Username wajib diisi.")
    if len(value) < 3:
        raise ValueError("Username minimal 3 karakter")
    if not USERNAME_PATTERN.match(value):
        raise ValueError("Username hanya boleh berisi huruf, angka, dan underscore.")
    if not any(char.isdigit() for char in value):
        raise ValueError("Username harus mengandung minimal satu angka.")
    return value


def password(value: str) -> str:
    if not value:
        raise ValueError("Password wajib diisi.")
    if any(char.isspace() for char in value):
        raise ValueError("Password tidak boleh mengandung spasi.")
    if len(value) < 6:
        raise ValueError("Password minimal 6 karakter")
    return value


def email(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Email wajib diisi.")
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Format email tidak valid.")
    return value


def amount(value: Decimal) -> Decimal:
    if value <= 0:
        raise ValueError("Nominal harus lebih dari 0.")
    if value >= MAX_AMOUNT:
        raise ValueError("Nominal terlalu besar.")
    if value.as_tuple().exponent < -2 and value != value.quantize(Decimal("0.01")):
        raise ValueError("Nominal maksimal 2 angka desimal.")
    return value


def not_in_future(value: datetime) -> datetime:
    """Normalize to naive UTC and reject timestamps after now"""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    if value > datetime.utcnow():
        raise ValueError("Tanggal tidak boleh lebih dari sekarang.")
    return value
