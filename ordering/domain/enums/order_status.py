"""
Order Status Enum.

Names of the order status reference rows the core relies on.
"""
from enum import Enum


class OrderStatusName(str, Enum):
    """Order status names as stored in the ``order_status`` table."""

    CREATED = "Created"
    IN_PROGRESS = "In Progress"
    FAILED = "Failed"
    COMPLETED = "Completed"
