from fastapi import APIRouter, Body, Depends, status, Query
from typing import Any, Optional

from app.dependencies import get_service_registry
from app.responses import APIResponse
from app.services import ServiceRegistry

shipping_method_router = APIRouter()

@shipping_method_router.get(
    "",
    summary="Get a list of shipping methods"
)
async def get_all_shipping_methods(
    name: Optional[str] = Query(None, description="Substring match on name"),
    estimated_days: Optional[str] = Query(None, description="Exact match on estimated days"),
    sort_by: Optional[str] = Query(None, description="base_cost or estimated_days"),
    sort_order: Optional[str] = Query(None, description="asc (default) or desc"),
    page: Optional[str] = Query(None, description="Page number, default 1"),
    per_page: Optional[str] = Query(None, description="Items per page (1-100), default 10"),
    services: ServiceRegistry = Depends(get_service_registry)
):
    """
    Get a paginated list of shipping methods, optionally filtered and sorted.
    Query values are validated by the service so errors come back per field.
    """
    params = {
        'name': name,
        'estimated_days': estimated_days,
        'sort_by': sort_by,
        'sort_order': sort_order,
        'page': page,
        'per_page': per_page,
    }
    result = await services.shipping_method.list(params)
    return APIResponse.paginated(
        data=result['items'],
        total=result['total'],
        page=result['page'],
        per_page=result['per_page'],
        message="Shipping methods retrieved successfully"
    )

@shipping_method_router.get(
    "/{method_id}",
    summary="Get a single shipping method"
)
async def get_shipping_method_by_id(
    method_id: int,
    services: ServiceRegistry = Depends(get_service_registry)
):
    item = await services.shipping_method.get(method_id)
    return APIResponse.success(data=item, message="Shipping method retrieved successfully")

@shipping_method_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a new shipping method"
)
async def create_shipping_method(
    payload: Any = Body(..., examples=[{
        "name": "Express Delivery",
        "description": "Next-day delivery",
        "base_cost": 10.0,
        "cost_per_kg": 2.0,
        "estimated_days": 1
    }]),
    services: ServiceRegistry = Depends(get_service_registry)
):
    new_item = await services.shipping_method.create(payload)
    return APIResponse.success(data=new_item, message="Shipping method created successfully")

@shipping_method_router.put(
    "/{method_id}",
    summary="Update a shipping method"
)
async def update_shipping_method(
    method_id: int,
    payload: Any = Body(..., examples=[{"base_cost": 12.0, "cost_per_kg": 2.5, "estimated_days": 3}]),
    services: ServiceRegistry = Depends(get_service_registry)
):
    """
    Update base_cost, cost_per_kg and estimated_days. All three are required;
    name and description cannot be changed here.
    """
    updated_item = await services.shipping_method.update(method_id, payload)
    return APIResponse.success(data=updated_item, message="Shipping method updated successfully")

@shipping_method_router.delete(
    "/{method_id}",
    summary="Delete a shipping method"
)
async def delete_shipping_method(
    method_id: int,
    services: ServiceRegistry = Depends(get_service_registry)
):
    """
    Delete a shipping method. Returns 409 while any order still references it.
    """
    await services.shipping_method.delete(method_id)
    return APIResponse.success(message="Shipping method deleted successfully")
