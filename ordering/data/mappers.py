"""Static mappers for ORM entities → view models."""

from collections import defaultdict
from datetime import datetime
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple

from ordering.application.dtos.order_dto import (
    MonthProfit,
    OrderDetail,
    OrderItemDetail,
    OrderSummary,
)
from ordering.domain.value_objects import ZERO, line_amount, line_profit, total

from .models.order_model import OrderItemModel, OrderModel

# (created_date, quantity, unit_cost, unit_price) for one line of a completed order
ProfitRow = Tuple[datetime, Optional[int], Optional[Decimal], Optional[Decimal]]


class OrderItemMapper:
    """Static mapper for OrderItemModel → OrderItemDetail."""

    @staticmethod
    def unit_cost(model: OrderItemModel) -> Optional[Decimal]:
        return model.product.unit_cost if model.product is not None else None

    @staticmethod
    def unit_price(model: OrderItemModel) -> Optional[Decimal]:
        return model.product.unit_price if model.product is not None else None

    @staticmethod
    def total_cost(model: OrderItemModel) -> Decimal:
        return line_amount(model.quantity, OrderItemMapper.unit_cost(model))

    @staticmethod
    def total_price(model: OrderItemModel) -> Decimal:
        return line_amount(model.quantity, OrderItemMapper.unit_price(model))

    @staticmethod
    def to_detail(model: OrderItemModel) -> OrderItemDetail:
        """Convert ORM model to item view.

        Requires ``product`` and ``service`` to be loaded.

        Args:
            model: OrderItemModel instance

        Returns:
            OrderItemDetail
        """
        return OrderItemDetail(
            id=model.id,
            order_id=model.order_id,
            service_id=model.service_id,
            service_name=model.service.name if model.service is not None else None,
            product_id=model.product_id,
            product_name=model.product.name if model.product is not None else None,
            unit_cost=OrderItemMapper.unit_cost(model),
            unit_price=OrderItemMapper.unit_price(model),
            total_cost=OrderItemMapper.total_cost(model),
            total_price=OrderItemMapper.total_price(model),
            quantity=model.quantity or 0,
        )


class OrderMapper:
    """Static mapper for OrderModel → summary and detail views.

    Both views compute totals with the same line arithmetic, so a summary and
    a detail of the same order always agree.
    """

    @staticmethod
    def total_cost(model: OrderModel) -> Decimal:
        return total(OrderItemMapper.total_cost(item) for item in model.items)

    @staticmethod
    def total_price(model: OrderModel) -> Decimal:
        return total(OrderItemMapper.total_price(item) for item in model.items)

    @staticmethod
    def to_summary(model: OrderModel) -> OrderSummary:
        """Convert ORM model to list view.

        Requires ``status`` and ``items.product`` to be loaded.

        Args:
            model: OrderModel instance

        Returns:
            OrderSummary
        """
        return OrderSummary(
            id=model.id,
            reseller_id=model.reseller_id,
            customer_id=model.customer_id,
            status_id=model.status_id,
            status_name=model.status.name,
            item_count=len(model.items),
            total_cost=OrderMapper.total_cost(model),
            total_price=OrderMapper.total_price(model),
            created_date=model.created_date,
        )

    @staticmethod
    def to_detail(model: OrderModel) -> OrderDetail:
        """Convert ORM model to detail view (with nested items).

        Requires ``status``, ``items.product`` and ``items.service`` to be
        loaded.

        Args:
            model: OrderModel instance

        Returns:
            OrderDetail
        """
        return OrderDetail(
            id=model.id,
            reseller_id=model.reseller_id,
            customer_id=model.customer_id,
            status_id=model.status_id,
            status_name=model.status.name,
            created_date=model.created_date,
            total_cost=OrderMapper.total_cost(model),
            total_price=OrderMapper.total_price(model),
            items=[OrderItemMapper.to_detail(item) for item in model.items],
        )


class MonthProfitMapper:
    """Folds completed-order lines into per-month profit."""

    @staticmethod
    def to_month_profits(rows: Iterable[ProfitRow]) -> List[MonthProfit]:
        """Group line profit by month of year, ignoring the year.

        An order without lines arrives as a row with ``None`` values and
        still yields its month with zero profit.

        Args:
            rows: ProfitRow tuples

        Returns:
            List of MonthProfit ascending by month
        """
        by_month: Dict[int, Decimal] = defaultdict(lambda: ZERO)
        for created_date, quantity, unit_cost, unit_price in rows:
            by_month[created_date.month] += line_profit(quantity, unit_cost, unit_price)

        return [
            MonthProfit(month=month, profit=profit)
            for month, profit in sorted(by_month.items())
        ]
