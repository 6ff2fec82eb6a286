"""Application DTOs for Order operations."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class OrderItemDetail(BaseModel):
    """DTO for a single order line with product and service names."""

    id: UUID = Field(..., description="Order item ID")
    order_id: UUID = Field(..., description="Owning order ID")
    service_id: UUID = Field(..., description="Service ID")
    service_name: Optional[str] = Field(None, description="Service display name")
    product_id: UUID = Field(..., description="Product ID")
    product_name: Optional[str] = Field(None, description="Product display name")
    unit_cost: Optional[Decimal] = Field(None, description="Product unit cost")
    unit_price: Optional[Decimal] = Field(None, description="Product unit price")
    total_cost: Decimal = Field(default=Decimal("0"), description="Quantity x unit cost")
    total_price: Decimal = Field(default=Decimal("0"), description="Quantity x unit price")
    quantity: int = Field(default=0, ge=0, description="Quantity ordered")

    model_config = {"frozen": True}


class OrderSummary(BaseModel):
    """DTO for an order in list results."""

    id: UUID = Field(..., description="Order ID")
    reseller_id: UUID = Field(..., description="Reseller ID")
    customer_id: UUID = Field(..., description="Customer ID")
    status_id: UUID = Field(..., description="Order status ID")
    status_name: str = Field(..., description="Order status name")
    item_count: int = Field(..., ge=0, description="Number of order lines")
    total_cost: Decimal = Field(..., description="Sum of line costs")
    total_price: Decimal = Field(..., description="Sum of line prices")
    created_date: datetime = Field(..., description="Creation timestamp (UTC)")

    model_config = {"frozen": True}


class OrderDetail(BaseModel):
    """DTO for a single order with its lines."""

    id: UUID = Field(..., description="Order ID")
    reseller_id: UUID = Field(..., description="Reseller ID")
    customer_id: UUID = Field(..., description="Customer ID")
    status_id: UUID = Field(..., description="Order status ID")
    status_name: str = Field(..., description="Order status name")
    created_date: datetime = Field(..., description="Creation timestamp (UTC)")
    total_cost: Decimal = Field(..., description="Sum of line costs")
    total_price: Decimal = Field(..., description="Sum of line prices")
    items: List[OrderItemDetail] = Field(default_factory=list, description="Order lines")

    model_config = {"frozen": True}


class MonthProfit(BaseModel):
    """Profit of completed orders for one calendar month (any year)."""

    month: int = Field(..., ge=1, le=12, description="Month number")
    profit: Decimal = Field(..., description="Summed profit")

    model_config = {"frozen": True}


class CreateOrderItemRequest(BaseModel):
    """Request DTO for one line of a new order."""

    service_id: UUID = Field(..., description="Service ID")
    product_id: UUID = Field(..., description="Product ID")
    quantity: int = Field(..., ge=1, description="Quantity ordered")

    model_config = {"frozen": True}


class CreateOrderRequest(BaseModel):
    """Request DTO for creating an order."""

    reseller_id: UUID = Field(..., description="Reseller ID")
    customer_id: UUID = Field(..., description="Customer ID")
    items: List[CreateOrderItemRequest] = Field(..., min_length=1, description="Order lines")

    model_config = {"frozen": True}

    @field_validator("items")
    @classmethod
    def _unique_products(cls, items: List[CreateOrderItemRequest]) -> List[CreateOrderItemRequest]:
        product_ids = [item.product_id for item in items]
        if len(set(product_ids)) != len(product_ids):
            raise ValueError("Every order item must be for a unique product.")
        return items


class CreateOrderResponse(BaseModel):
    """Response DTO for a created order."""

    id: UUID = Field(..., description="New order ID")

    model_config = {"frozen": True}
