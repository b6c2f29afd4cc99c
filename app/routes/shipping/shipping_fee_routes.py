from fastapi import APIRouter, Body, Depends, status
from typing import Any

from app.dependencies import get_service_registry
from app.responses import APIResponse
from app.services import ServiceRegistry

shipping_fee_router = APIRouter()

@shipping_fee_router.post(
    "/calculate",
    status_code=status.HTTP_201_CREATED,
    summary="Calculate a shipping fee and record the order"
)
async def calculate_shipping_fee(
    payload: Any = Body(..., examples=[{"shipping_method_id": 1, "weight": 2, "destination": "City A"}]),
    services: ServiceRegistry = Depends(get_service_registry)
):
    """
    Compute base_cost + cost_per_kg * weight + additional_fee and store the
    result as a new order. An unknown destination adds no zone fee unless
    strict calculation is enabled.
    """
    quote = await services.shipping_fee.calculate(payload)
    return APIResponse.success(data=quote, message="Order created successfully")
