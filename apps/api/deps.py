"""FastAPI dependencies for dependency injection."""

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ordering.application.interfaces import OrderRepository
from ordering.application.services import OrderService
from ordering.data.uow import UnitOfWork, create_uow
from ordering.infrastructure.database import config as database


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get SQLAlchemy session factory.

    Returns:
        async_sessionmaker instance
    """
    return database.get_session_factory()


async def get_uow(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> AsyncGenerator[UnitOfWork, None]:
    """Open one Unit of Work per request.

    Yields:
        UnitOfWork instance
    """
    async with create_uow(session_factory) as uow:
        yield uow


def get_order_repository(uow: UnitOfWork = Depends(get_uow)) -> OrderRepository:
    """Get OrderRepository bound to the request session.

    Returns:
        OrderRepository instance
    """
    return uow.orders


def get_order_service(
    repository: OrderRepository = Depends(get_order_repository),
) -> OrderService:
    """Get OrderService instance.

    Returns:
        OrderService instance
    """
    return OrderService(repository)
