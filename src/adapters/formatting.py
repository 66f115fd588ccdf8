"""Number formatting shared by the adapters."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")


def _as_decimal(value: Decimal | float | int) -> Decimal:
    # str() first so floats such as 24.99 keep their written value
    return value if isinstance(value, Decimal) else Decimal(str(value))


def to_minor_units(price: Decimal | float | int) -> int:
    """Convert a decimal price to integer cents, rounding half up."""

    cents = _as_decimal(price) * 100
    return int(cents.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_price(price: Decimal | float | int) -> str:
    """Two-decimal price string, e.g. ``"25.00"``."""

    return str(_as_decimal(price).quantize(CENTS, rounding=ROUND_HALF_UP))


def format_decimal(value: Decimal | float | int | None, *, default: str = "") -> str:
    """Plain decimal string without trailing zeros; ``default`` when absent."""

    if value is None:
        return default
    normalized = _as_decimal(value).normalize()
    return format(normalized, "f")
