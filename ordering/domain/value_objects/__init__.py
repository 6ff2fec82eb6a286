"""Domain value objects."""

from .money import ZERO, line_amount, line_profit, to_amount, total

__all__ = [
    "ZERO",
    "line_amount",
    "line_profit",
    "to_amount",
    "total",
]
