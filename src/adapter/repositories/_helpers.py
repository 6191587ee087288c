from decimal import Decimal


def to_decimal(value) -> Decimal:
    """Normalize SQL aggregate results (None, int, float, Decimal) to Decimal"""
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))
