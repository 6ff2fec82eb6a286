"""Domain layer - status names and money arithmetic."""

from .enums import OrderStatusName
from .value_objects import ZERO, line_amount, line_profit, total

__all__ = [
    "OrderStatusName",
    "ZERO",
    "line_amount",
    "line_profit",
    "total",
]
