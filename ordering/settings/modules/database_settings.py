from __future__ import annotations

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from ordering.settings.base import OrdersBaseSettings


class DatabaseSettings(OrdersBaseSettings):
    """
    Database connection settings.
    Loaded from environment variables prefixed with ``DB_``.
    """

    model_config = SettingsConfigDict(env_prefix="DB_")

    database_url: str = "sqlite+aiosqlite:///./orders.db"

    # Connection pool settings (ignored for SQLite)
    pool_size: int = 10
    max_overflow: int = 20
    pool_timeout: int = 30
    pool_recycle: int = 3600  # 1 hour

    echo_sql: bool = False

    # Insert the order status reference rows on startup
    seed_reference_data: bool = Field(default=False)

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")
