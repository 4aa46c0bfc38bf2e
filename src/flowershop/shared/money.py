"""Monetary arithmetic for prices and order totals.

Prices are stored as floats, so every calculation goes through ``Decimal``
built from the float's string form and is rounded to cents on the way out.
"""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")


def to_decimal(amount: float | int | str) -> Decimal:
    return Decimal(str(amount))


def to_amount(value: Decimal) -> float:
    """Round a decimal to cents and return it as a float amount."""
    return float(value.quantize(CENTS, rounding=ROUND_HALF_UP))


def line_total(unit_price: float, quantity: int) -> Decimal:
    return to_decimal(unit_price) * quantity


def sum_amounts(amounts: Iterable[float | Decimal]) -> float:
    total = sum((a if isinstance(a, Decimal) else to_decimal(a) for a in amounts), Decimal("0"))
    return to_amount(total)
