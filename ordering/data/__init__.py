"""Data layer - persistence models, mapping and repositories."""

from .mappers import MonthProfitMapper, OrderItemMapper, OrderMapper
from .models import (
    Base,
    OrderItemModel,
    OrderModel,
    OrderStatusModel,
    ProductModel,
    ServiceModel,
)
from .repositories import SqlAlchemyOrderRepository
from .types import GuidBytes, MoneyDecimal
from .uow import UnitOfWork, create_uow

__all__ = [
    "Base",
    "create_uow",
    "GuidBytes",
    "MoneyDecimal",
    "MonthProfitMapper",
    "OrderItemMapper",
    "OrderItemModel",
    "OrderMapper",
    "OrderModel",
    "OrderStatusModel",
    "ProductModel",
    "ServiceModel",
    "SqlAlchemyOrderRepository",
    "UnitOfWork",
]
