"""Domain enums."""

from .order_status import OrderStatusName

__all__ = ["OrderStatusName"]
