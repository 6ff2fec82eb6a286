"""
Fixed-point money arithmetic for order lines.

CRITICAL: Always use Decimal, never float!

Stored quantities and product prices are nullable. Every helper here treats an
absent operand as zero instead of propagating ``None``.
"""
from decimal import Decimal
from typing import Iterable, Optional

ZERO = Decimal("0")


def to_amount(value: Optional[Decimal]) -> Decimal:
    """Return ``value`` as a Decimal, or zero when absent."""
    if value is None:
        return ZERO
    if not isinstance(value, Decimal):
        return Decimal(str(value))
    return value


def line_amount(quantity: Optional[int], unit_amount: Optional[Decimal]) -> Decimal:
    """Quantity times a unit cost or price."""
    return (quantity or 0) * to_amount(unit_amount)


def line_profit(
    quantity: Optional[int],
    unit_cost: Optional[Decimal],
    unit_price: Optional[Decimal],
) -> Decimal:
    """Quantity times the unit margin (price minus cost)."""
    return (quantity or 0) * (to_amount(unit_price) - to_amount(unit_cost))


def total(amounts: Iterable[Decimal]) -> Decimal:
    """Sum of amounts, zero for an empty sequence."""
    return sum(amounts, ZERO)
