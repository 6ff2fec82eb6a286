"""Application DTOs."""

from .order_dto import (
    CreateOrderItemRequest,
    CreateOrderRequest,
    CreateOrderResponse,
    MonthProfit,
    OrderDetail,
    OrderItemDetail,
    OrderSummary,
)

__all__ = [
    "CreateOrderItemRequest",
    "CreateOrderRequest",
    "CreateOrderResponse",
    "MonthProfit",
    "OrderDetail",
    "OrderItemDetail",
    "OrderSummary",
]
