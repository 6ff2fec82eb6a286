"""Reference data required by the order core."""

import logging
from typing import Iterable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ordering.data.models import OrderStatusModel
from ordering.domain.enums import OrderStatusName

logger = logging.getLogger(__name__)

DEFAULT_ORDER_STATUSES = tuple(status.value for status in OrderStatusName)


async def seed_reference_data(
    session: AsyncSession,
    status_names: Iterable[str] = DEFAULT_ORDER_STATUSES,
) -> List[str]:
    """Insert missing order status rows and commit.

    Args:
        session: SQLAlchemy async session
        status_names: Status names to ensure

    Returns:
        Names that were inserted
    """
    result = await session.execute(select(OrderStatusModel.name))
    existing = set(result.scalars().all())

    inserted = [name for name in status_names if name not in existing]
    for name in inserted:
        session.add(OrderStatusModel(name=name))

    if inserted:
        await session.commit()
        logger.info(f"Seeded order statuses: {', '.join(inserted)}")

    return inserted
