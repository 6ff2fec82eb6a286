"""Database infrastructure."""

from .config import (
    close_database,
    create_engine,
    get_engine,
    get_session_factory,
    init_database,
)
from .seed import DEFAULT_ORDER_STATUSES, seed_reference_data

__all__ = [
    "close_database",
    "create_engine",
    "DEFAULT_ORDER_STATUSES",
    "get_engine",
    "get_session_factory",
    "init_database",
    "seed_reference_data",
]
