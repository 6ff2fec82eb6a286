"""Repository interface for order data access and aggregation."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from ordering.application.dtos.order_dto import (
    CreateOrderRequest,
    MonthProfit,
    OrderDetail,
    OrderSummary,
)


class OrderRepository(ABC):
    """
    Abstract repository for orders.

    Every operation returns view models, never persisted entities. A missing
    order, status or reference row is reported as ``None``; store failures
    propagate to the caller unchanged.
    """

    @abstractmethod
    async def list_orders(self) -> List[OrderSummary]:
        """List all orders, newest first.

        Returns:
            List of OrderSummary (empty when there are no orders)
        """
        pass

    @abstractmethod
    async def list_orders_by_status(self, status_name: str) -> List[OrderSummary]:
        """List orders whose status name matches exactly, newest first.

        Args:
            status_name: Order status name, e.g. "Completed"

        Returns:
            List of OrderSummary (empty for an unknown status name)
        """
        pass

    @abstractmethod
    async def get_order_by_id(self, order_id: UUID) -> Optional[OrderDetail]:
        """Retrieve one order with its lines.

        Args:
            order_id: Order identifier

        Returns:
            OrderDetail if found, None otherwise
        """
        pass

    @abstractmethod
    async def update_order_status(self, order_id: UUID, status_name: str) -> Optional[OrderDetail]:
        """Move an order to another status.

        Args:
            order_id: Order identifier
            status_name: Name of the target status

        Returns:
            Updated OrderDetail, or None if the status or the order is unknown
        """
        pass

    @abstractmethod
    async def create_order(self, request: CreateOrderRequest) -> Optional[UUID]:
        """Persist a new order in the "Created" status.

        Args:
            request: Validated CreateOrderRequest

        Returns:
            New order ID, or None if the "Created" status row is missing
        """
        pass

    @abstractmethod
    async def get_monthly_profit(self) -> List[MonthProfit]:
        """Profit of completed orders grouped by month of year.

        Returns:
            List of MonthProfit ascending by month
        """
        pass
