"""Tests for entity → view-model mappers on transient ORM objects."""
from datetime import datetime
from decimal import Decimal
from uuid import uuid4

from ordering.data.mappers import MonthProfitMapper, OrderMapper
from ordering.data.models import (
    OrderItemModel,
    OrderModel,
    OrderStatusModel,
    ProductModel,
    ServiceModel,
)


def _order(lines):
    """Build an unsaved order; ``lines`` is a list of (quantity, cost, price)."""
    service = ServiceModel(id=uuid4(), name="Email")
    status = OrderStatusModel(id=uuid4(), name="Created")
    order_id = uuid4()
    items = []
    for index, (quantity, cost, price) in enumerate(lines):
        product = ProductModel(
            id=uuid4(), service_id=service.id, name=f"Product {index}", unit_cost=cost, unit_price=price
        )
        item = OrderItemModel(
            id=uuid4(),
            order_id=order_id,
            service_id=service.id,
            product_id=product.id,
            quantity=quantity,
        )
        item.product = product
        item.service = service
        items.append(item)

    order = OrderModel(
        id=order_id,
        reseller_id=uuid4(),
        customer_id=uuid4(),
        status_id=status.id,
        created_date=datetime(2024, 6, 1, 8, 30),
    )
    order.status = status
    order.items = items
    return order


class TestOrderMapper:
    """Summary and detail share one arithmetic."""

    def test_summary_totals_and_count(self):
        order = _order([(2, Decimal("0.8"), Decimal("0.9")), (1, Decimal("1.6"), Decimal("1.7"))])

        summary = OrderMapper.to_summary(order)

        assert summary.id == order.id
        assert summary.status_name == "Created"
        assert summary.item_count == 2
        assert summary.total_cost == Decimal("3.2")
        assert summary.total_price == Decimal("3.5")
        assert summary.created_date == datetime(2024, 6, 1, 8, 30)

    def test_detail_matches_summary(self):
        order = _order([(2, Decimal("0.8"), Decimal("0.9")), (None, Decimal("1.6"), None)])

        summary = OrderMapper.to_summary(order)
        detail = OrderMapper.to_detail(order)

        assert detail.total_cost == summary.total_cost == Decimal("1.6")
        assert detail.total_price == summary.total_price == Decimal("1.8")
        assert detail.status_id == summary.status_id

    def test_detail_items(self):
        order = _order([(None, None, Decimal("2.5"))])

        [item] = OrderMapper.to_detail(order).items

        assert item.quantity == 0
        assert item.unit_cost is None
        assert item.unit_price == Decimal("2.5")
        assert item.total_cost == Decimal("0")
        assert item.total_price == Decimal("0")
        assert item.service_name == "Email"
        assert item.product_name == "Product 0"

    def test_order_without_items(self):
        summary = OrderMapper.to_summary(_order([]))

        assert summary.item_count == 0
        assert summary.total_cost == Decimal("0")
        assert summary.total_price == Decimal("0")


class TestMonthProfitMapper:
    """Grouping by month of year."""

    def test_empty(self):
        assert MonthProfitMapper.to_month_profits([]) == []

    def test_groups_by_month_ignoring_year_and_sorts(self):
        rows = [
            (datetime(2024, 3, 1), 1, Decimal("0.8"), Decimal("0.9")),
            (datetime(2021, 1, 5), 2, Decimal("1.0"), Decimal("1.5")),
            (datetime(2023, 3, 31), 3, Decimal("0.8"), Decimal("0.9")),
        ]

        result = MonthProfitMapper.to_month_profits(rows)

        assert [(p.month, p.profit) for p in result] == [
            (1, Decimal("1.0")),
            (3, Decimal("0.4")),
        ]

    def test_row_without_item_keeps_month(self):
        rows = [(datetime(2024, 9, 1), None, None, None)]

        assert [(p.month, p.profit) for p in MonthProfitMapper.to_month_profits(rows)] == [
            (9, Decimal("0"))
        ]
