from __future__ import annotations

from typing import List

from pydantic_settings import SettingsConfigDict

from ordering.settings.base import OrdersBaseSettings


class ApiSettings(OrdersBaseSettings):
    """Settings for the HTTP binding, prefixed with ``API_``."""

    model_config = SettingsConfigDict(env_prefix="API_")

    title: str = "Order Management API"
    version: str = "1.0.0"
    cors_origins: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]
    log_level: str = "INFO"
