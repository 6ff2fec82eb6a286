"""Application layer - services, interfaces, validation and DTOs."""

from .dtos import (
    CreateOrderItemRequest,
    CreateOrderRequest,
    CreateOrderResponse,
    MonthProfit,
    OrderDetail,
    OrderItemDetail,
    OrderSummary,
)
from .interfaces import OrderRepository
from .services import OrderService
from .validation import FieldError, OrderValidationError, parse_create_order, validate_create_order

__all__ = [
    # DTOs
    "CreateOrderItemRequest",
    "CreateOrderRequest",
    "CreateOrderResponse",
    "MonthProfit",
    "OrderDetail",
    "OrderItemDetail",
    "OrderSummary",
    # Services
    "OrderService",
    # Interfaces
    "OrderRepository",
    # Validation
    "FieldError",
    "OrderValidationError",
    "parse_create_order",
    "validate_create_order",
]
