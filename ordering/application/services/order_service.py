"""Application service for Order operations."""

from typing import List, Optional
from uuid import UUID

from ordering.application.dtos.order_dto import (
    CreateOrderRequest,
    MonthProfit,
    OrderDetail,
    OrderSummary,
)
from ordering.application.interfaces.order_repository import OrderRepository


class OrderService:
    """
    Application service for order operations.

    Forwards every call to the repository unchanged. The API layer depends on
    this class only, never on the storage layer.
    """

    def __init__(self, repository: OrderRepository) -> None:
        """Initialize order service.

        Args:
            repository: OrderRepository implementation
        """
        self._repository = repository

    async def list_orders(self) -> List[OrderSummary]:
        return await self._repository.list_orders()

    async def list_orders_by_status(self, status_name: str) -> List[OrderSummary]:
        return await self._repository.list_orders_by_status(status_name)

    async def get_order_by_id(self, order_id: UUID) -> Optional[OrderDetail]:
        return await self._repository.get_order_by_id(order_id)

    async def update_order_status(self, order_id: UUID, status_name: str) -> Optional[OrderDetail]:
        return await self._repository.update_order_status(order_id, status_name)

    async def create_order(self, request: CreateOrderRequest) -> Optional[UUID]:
        return await self._repository.create_order(request)

    async def get_monthly_profit(self) -> List[MonthProfit]:
        return await self._repository.get_monthly_profit()
