"""SQLAlchemy implementation of OrderRepository."""

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ordering.application.dtos.order_dto import (
    CreateOrderRequest,
    MonthProfit,
    OrderDetail,
    OrderSummary,
)
from ordering.application.interfaces.order_repository import OrderRepository
from ordering.domain.enums import OrderStatusName

from ..mappers import MonthProfitMapper, OrderMapper
from ..models.order_model import (
    OrderItemModel,
    OrderModel,
    OrderStatusModel,
    ProductModel,
)

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Current UTC time as a naive timestamp, the form stored in ``order``."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class SqlAlchemyOrderRepository(OrderRepository):
    """Concrete implementation of OrderRepository using SQLAlchemy.

    The session is owned by the caller (see ``UnitOfWork``). Reads never
    commit; ``create_order`` and ``update_order_status`` each commit exactly
    once.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @staticmethod
    def _orders_query() -> Select:
        """Orders with everything the mappers read, newest first."""
        return (
            select(OrderModel)
            .options(
                selectinload(OrderModel.status),
                selectinload(OrderModel.items).selectinload(OrderItemModel.product),
                selectinload(OrderModel.items).selectinload(OrderItemModel.service),
            )
            .order_by(OrderModel.created_date.desc())
        )

    async def _find_order(self, order_id: uuid.UUID) -> Optional[OrderModel]:
        result = await self._session.execute(
            self._orders_query().where(OrderModel.id == order_id)
        )
        return result.scalar_one_or_none()

    async def _find_status(self, status_name: str) -> Optional[OrderStatusModel]:
        result = await self._session.execute(
            select(OrderStatusModel).where(OrderStatusModel.name == status_name)
        )
        return result.scalar_one_or_none()

    async def list_orders(self) -> List[OrderSummary]:
        result = await self._session.execute(self._orders_query())
        return [OrderMapper.to_summary(model) for model in result.scalars().all()]

    async def list_orders_by_status(self, status_name: str) -> List[OrderSummary]:
        query = (
            self._orders_query()
            .join(OrderModel.status)
            .where(OrderStatusModel.name == status_name)
        )
        result = await self._session.execute(query)
        return [OrderMapper.to_summary(model) for model in result.scalars().all()]

    async def get_order_by_id(self, order_id: uuid.UUID) -> Optional[OrderDetail]:
        model = await self._find_order(order_id)
        if model is None:
            return None
        return OrderMapper.to_detail(model)

    async def get_monthly_profit(self) -> List[MonthProfit]:
        # Outer joins keep completed orders without lines (zero profit)
        query = (
            select(
                OrderModel.created_date,
                OrderItemModel.quantity,
                ProductModel.unit_cost,
                ProductModel.unit_price,
            )
            .select_from(OrderModel)
            .join(OrderStatusModel, OrderModel.status_id == OrderStatusModel.id)
            .outerjoin(OrderItemModel, OrderItemModel.order_id == OrderModel.id)
            .outerjoin(ProductModel, OrderItemModel.product_id == ProductModel.id)
            .where(OrderStatusModel.name == OrderStatusName.COMPLETED.value)
        )
        result = await self._session.execute(query)
        return MonthProfitMapper.to_month_profits(result.all())

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def update_order_status(self, order_id: uuid.UUID, status_name: str) -> Optional[OrderDetail]:
        status = await self._find_status(status_name)
        if status is None:
            logger.info(f"Order status not found: {status_name!r}")
            return None

        order = await self._find_order(order_id)
        if order is None:
            logger.info(f"Order not found: {order_id}")
            return None

        # No version check: concurrent updates race and the last commit wins
        order.status_id = status.id
        order.status = status
        # Map before commit: the caller's session may expire attributes on commit
        detail = OrderMapper.to_detail(order)
        await self._session.commit()

        logger.info(f"Order {order_id} moved to status {detail.status_name!r}")
        return detail

    async def create_order(self, request: CreateOrderRequest) -> Optional[uuid.UUID]:
        status = await self._find_status(OrderStatusName.CREATED.value)
        if status is None:
            logger.error(
                f"Reference data missing: order status {OrderStatusName.CREATED.value!r} not found"
            )
            return None

        order_id = uuid.uuid4()
        order = OrderModel(
            id=order_id,
            reseller_id=request.reseller_id,
            customer_id=request.customer_id,
            status_id=status.id,
            created_date=utc_now(),
            items=[
                OrderItemModel(
                    id=uuid.uuid4(),
                    order_id=order_id,
                    service_id=item.service_id,
                    product_id=item.product_id,
                    quantity=item.quantity,
                )
                for item in request.items
            ],
        )

        self._session.add(order)
        await self._session.commit()

        logger.info(f"Created order {order_id} with {len(request.items)} item(s)")
        return order_id
