"""Order endpoints for REST API."""

import logging
from typing import Any, Dict, List
from uuid import UUID

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status

from ordering.application.dtos.order_dto import (
    CreateOrderResponse,
    MonthProfit,
    OrderDetail,
    OrderSummary,
)
from ordering.application.services import OrderService
from ordering.application.validation import OrderValidationError, parse_create_order

from apps.api.deps import get_order_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=List[OrderSummary])
async def list_orders(
    service: OrderService = Depends(get_order_service),
) -> List[OrderSummary]:
    """List all orders, newest first."""
    return await service.list_orders()


@router.post("/byStatus", response_model=List[OrderSummary])
async def list_orders_by_status(
    status_name: str = Body(..., description="Exact order status name"),
    service: OrderService = Depends(get_order_service),
) -> List[OrderSummary]:
    """List orders with the given status.

    Args:
        status_name: Status name sent as a JSON string body
        service: OrderService instance

    Returns:
        List of OrderSummary (empty for unknown statuses)
    """
    return await service.list_orders_by_status(status_name)


@router.get("/profitByMonth", response_model=List[MonthProfit])
async def get_profit_by_month(
    service: OrderService = Depends(get_order_service),
) -> List[MonthProfit]:
    """Profit of completed orders per month of year."""
    return await service.get_monthly_profit()


@router.get("/{order_id}", response_model=OrderDetail)
async def get_order(
    order_id: UUID,
    service: OrderService = Depends(get_order_service),
) -> OrderDetail:
    """Get order by ID.

    Raises:
        HTTPException: If order not found
    """
    order = await service.get_order_by_id(order_id)
    if order is None:
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")
    return order


@router.put("/{order_id}/status", response_model=OrderDetail)
async def update_order_status(
    order_id: UUID,
    status_name: str = Body(..., description="Target order status name"),
    service: OrderService = Depends(get_order_service),
) -> OrderDetail:
    """Move an order to another status.

    Raises:
        HTTPException: If the order or the status name is unknown
    """
    order = await service.update_order_status(order_id, status_name)
    if order is None:
        raise HTTPException(
            status_code=404,
            detail=f"Order {order_id} or status {status_name!r} not found",
        )
    return order


@router.post("", response_model=CreateOrderResponse, status_code=201)
async def create_order(
    request: Request,
    response: Response,
    payload: Dict[str, Any] = Body(...),
    service: OrderService = Depends(get_order_service),
) -> CreateOrderResponse:
    """Create a new order.

    Args:
        request: Incoming request
        response: Outgoing response (for the Location header)
        payload: Raw create-order JSON
        service: OrderService instance

    Returns:
        CreateOrderResponse with the new order ID

    Raises:
        HTTPException: 422 on invalid input, 500 if reference data is missing
    """
    try:
        create_request = parse_create_order(payload)
    except OrderValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=[error.to_dict() for error in e.errors],
        )

    order_id = await service.create_order(create_request)
    if order_id is None:
        logger.error("Order not created: 'Created' status reference data is missing")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Order status reference data is not configured",
        )

    response.headers["Location"] = str(request.url_for("get_order", order_id=str(order_id)))
    return CreateOrderResponse(id=order_id)
