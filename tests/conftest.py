"""Shared pytest fixtures: in-memory database and order reference data."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import AsyncGenerator, Awaitable, Callable, List, Optional, Tuple
from uuid import UUID, uuid4

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from ordering.application.services import OrderService
from ordering.data.models import (
    Base,
    OrderItemModel,
    OrderModel,
    OrderStatusModel,
    ProductModel,
    ServiceModel,
)
from ordering.data.repositories import SqlAlchemyOrderRepository


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@dataclass(frozen=True)
class ReferenceData:
    """IDs of the reference rows every test database starts with."""

    created_status_id: UUID
    completed_status_id: UUID
    email_service_id: UUID
    mailbox_product_id: UUID
    enhanced_mailbox_product_id: UUID
    unpriced_product_id: UUID


# (product_id, quantity) for one order line
Line = Tuple[UUID, Optional[int]]
AddOrder = Callable[..., Awaitable[UUID]]


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    """Create test session factory."""
    session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    yield session_factory


@pytest_asyncio.fixture
async def reference_data(test_session_factory) -> ReferenceData:
    """Insert statuses, the Email service and its mailbox products."""
    data = ReferenceData(
        created_status_id=uuid4(),
        completed_status_id=uuid4(),
        email_service_id=uuid4(),
        mailbox_product_id=uuid4(),
        enhanced_mailbox_product_id=uuid4(),
        unpriced_product_id=uuid4(),
    )

    async with test_session_factory() as session:
        session.add_all(
            [
                OrderStatusModel(id=data.created_status_id, name="Created"),
                OrderStatusModel(id=data.completed_status_id, name="Completed"),
                ServiceModel(id=data.email_service_id, name="Email"),
                ProductModel(
                    id=data.mailbox_product_id,
                    service_id=data.email_service_id,
                    name="100GB Mailbox",
                    unit_cost=Decimal("0.8"),
                    unit_price=Decimal("0.9"),
                ),
                ProductModel(
                    id=data.enhanced_mailbox_product_id,
                    service_id=data.email_service_id,
                    name="200GB Mailbox",
                    unit_cost=Decimal("1.6"),
                    unit_price=Decimal("1.7"),
                ),
                ProductModel(
                    id=data.unpriced_product_id,
                    service_id=data.email_service_id,
                    name="Archive Add-on",
                    unit_cost=None,
                    unit_price=Decimal("2.5"),
                ),
            ]
        )
        await session.commit()

    return data


@pytest_asyncio.fixture
async def add_order(test_session_factory, reference_data) -> AddOrder:
    """Return a helper that stores an order directly in the database.

    By default the order has one "100GB Mailbox" line with ``quantity``;
    pass ``lines`` to control the lines exactly.
    """

    async def _add_order(
        status_id: UUID,
        created_date: datetime,
        quantity: Optional[int] = 1,
        lines: Optional[List[Line]] = None,
        order_id: Optional[UUID] = None,
    ) -> UUID:
        order_id = order_id or uuid4()
        if lines is None:
            lines = [(reference_data.mailbox_product_id, quantity)]

        async with test_session_factory() as session:
            session.add(
                OrderModel(
                    id=order_id,
                    reseller_id=uuid4(),
                    customer_id=uuid4(),
                    status_id=status_id,
                    created_date=created_date,
                )
            )
            for product_id, line_quantity in lines:
                session.add(
                    OrderItemModel(
                        id=uuid4(),
                        order_id=order_id,
                        service_id=reference_data.email_service_id,
                        product_id=product_id,
                        quantity=line_quantity,
                    )
                )
            await session.commit()

        return order_id

    return _add_order


@pytest_asyncio.fixture
async def test_session(test_session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def order_repository(test_session) -> SqlAlchemyOrderRepository:
    """Repository bound to the test session."""
    return SqlAlchemyOrderRepository(test_session)


@pytest.fixture
def order_service(order_repository) -> OrderService:
    """Service over the SQLAlchemy repository."""
    return OrderService(order_repository)
