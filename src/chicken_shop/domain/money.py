"""Money and quantity arithmetic."""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

ZERO = Decimal("0")
CENT = Decimal("0.01")
GRAM = Decimal("0.001")


def to_decimal(value: object) -> Decimal:
    """Convert a raw store or form value into a Decimal.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion. Blank or malformed input is zero.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        return ZERO
    if isinstance(value, int | float):
        return Decimal(str(value))
    if isinstance(value, str):
        cleaned = value.strip().replace(",", "")
        if not cleaned:
            return ZERO
        try:
            parsed = Decimal(cleaned)
        except InvalidOperation:
            return ZERO
        return parsed if parsed.is_finite() else ZERO
    return ZERO


def line_total(quantity: Decimal, price_per_unit: Decimal) -> Decimal:
    """Return the exact, unrounded subtotal of one line."""
    return quantity * price_per_unit


def sum_amounts(values: Iterable[Decimal]) -> Decimal:
    """Sum decimal amounts without intermediate rounding."""
    total = ZERO
    for value in values:
        total += value
    return total


def round_currency(value: Decimal) -> Decimal:
    """Round to whole satang (two places), half up."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def round_quantity(value: Decimal) -> Decimal:
    """Round a weight to whole grams."""
    return value.quantize(GRAM, rounding=ROUND_HALF_UP)


def format_currency(value: Decimal, symbol: str = "฿") -> str:
    """Format an amount for display, e.g. ``฿1,234.50``."""
    rounded = round_currency(value)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.2f}"


def format_quantity(value: Decimal, unit: str = "kg") -> str:
    """Format a weight without trailing zeros, e.g. ``2.5 kg``."""
    normalized = round_quantity(value).normalize()
    text = f"{normalized:f}"
    return f"{text} {unit}"
