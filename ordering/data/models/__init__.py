"""Database models."""

from .base import Base
from .order_model import (
    OrderItemModel,
    OrderModel,
    OrderStatusModel,
    ProductModel,
    ServiceModel,
)

__all__ = [
    "Base",
    "OrderItemModel",
    "OrderModel",
    "OrderStatusModel",
    "ProductModel",
    "ServiceModel",
]
