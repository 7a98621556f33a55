from decimal import Decimal, ROUND_HALF_UP


def round_half_up(value) -> int:
    """Round to the nearest integer minor unit, halves away from zero"""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def to_decimal(value) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))
