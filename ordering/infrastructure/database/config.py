"""
Database configuration.

Manages engine creation, the session factory and schema initialization.
"""
import logging
from typing import Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from ordering.settings import get_app_settings
from ordering.settings.modules.database_settings import DatabaseSettings


logger = logging.getLogger(__name__)


# =============================================================================
# ENGINE CREATION
# =============================================================================

def create_engine(settings: Optional[DatabaseSettings] = None) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.

    SQLite gets a single shared connection for in-memory URLs; every other
    backend gets the configured connection pool.

    Args:
        settings: Database settings (defaults to application settings)

    Returns:
        Configured async engine
    """
    settings = settings or get_app_settings().database
    logger.info(f"Creating database engine: {settings.database_url}")

    if settings.is_sqlite:
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in settings.database_url:
            kwargs["poolclass"] = StaticPool
        return create_async_engine(settings.database_url, echo=settings.echo_sql, **kwargs)

    return create_async_engine(
        settings.database_url,
        echo=settings.echo_sql,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_timeout=settings.pool_timeout,
        pool_recycle=settings.pool_recycle,
        pool_pre_ping=True,  # Test connections before using
    )


# Global engine instance
_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def get_engine() -> AsyncEngine:
    """
    Get or create global engine instance.

    Returns:
        Global async engine
    """
    global _engine

    if _engine is None:
        _engine = create_engine()

    return _engine


# =============================================================================
# SESSION FACTORY
# =============================================================================

def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Get session factory.

    Returns:
        Session factory for creating sessions
    """
    global _session_factory

    if _session_factory is None:
        _session_factory = async_sessionmaker(
            bind=get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    return _session_factory


# =============================================================================
# DATABASE INITIALIZATION
# =============================================================================

async def init_database(seed: Optional[bool] = None) -> None:
    """
    Initialize database.

    Creates all tables if they don't exist and, when enabled, inserts the
    order status reference rows.

    Args:
        seed: Override ``DB_SEED_REFERENCE_DATA``
    """
    from ordering.data.models import Base
    from ordering.infrastructure.database.seed import seed_reference_data

    logger.info("Initializing database...")

    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if seed is None:
        seed = get_app_settings().database.seed_reference_data

    if seed:
        async with get_session_factory()() as session:
            await seed_reference_data(session)

    logger.info("Database initialized")


async def close_database() -> None:
    """Close database connections."""
    global _engine, _session_factory

    if _engine is not None:
        logger.info("Closing database connections...")
        await _engine.dispose()
        logger.info("Database connections closed")

    _engine = None
    _session_factory = None
