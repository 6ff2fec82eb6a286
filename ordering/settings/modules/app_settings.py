from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from ordering.settings.modules.api_settings import ApiSettings
from ordering.settings.modules.database_settings import DatabaseSettings


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(extra="ignore")

    database: DatabaseSettings
    api: ApiSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    return AppSettings(
        database=DatabaseSettings(),
        api=ApiSettings(),
    )
