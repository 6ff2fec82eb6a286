"""
Create the order tables and seed the order status reference data.

Usage:
    python scripts/seed_reference_data.py

Reads ``DB_DATABASE_URL`` from the environment or ``.env``.
"""
import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from ordering.infrastructure.database import (  # noqa: E402
    close_database,
    get_session_factory,
    init_database,
    seed_reference_data,
)
from ordering.infrastructure.logging import configure_logging, get_logger  # noqa: E402

logger = get_logger(__name__)


async def main() -> int:
    configure_logging("INFO")
    try:
        await init_database(seed=False)
        async with get_session_factory()() as session:
            inserted = await seed_reference_data(session)
    finally:
        await close_database()

    if inserted:
        logger.info(f"Inserted {len(inserted)} order status row(s)")
    else:
        logger.info("Order status reference data already present")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
