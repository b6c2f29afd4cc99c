from fastapi import APIRouter, Body, Depends, status, Query
from typing import Any, Optional

from app.dependencies import get_service_registry
from app.responses import APIResponse
from app.services import ServiceRegistry

shipping_zone_router = APIRouter()

@shipping_zone_router.get(
    "",
    summary="Get a list of shipping zones"
)
async def get_all_shipping_zones(
    page: Optional[str] = Query(None, description="Page number, default 1"),
    per_page: Optional[str] = Query(None, description="Items per page (1-100), default 10"),
    services: ServiceRegistry = Depends(get_service_registry)
):
    result = await services.shipping_zone.list({'page': page, 'per_page': per_page})
    return APIResponse.paginated(
        data=result['items'],
        total=result['total'],
        page=result['page'],
        per_page=result['per_page'],
        message="Shipping zones retrieved successfully"
    )

@shipping_zone_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a new shipping zone"
)
async def create_shipping_zone(
    payload: Any = Body(..., examples=[{"zone_name": "Zone 1", "additional_fee": 5.0}]),
    services: ServiceRegistry = Depends(get_service_registry)
):
    new_item = await services.shipping_zone.create(payload)
    return APIResponse.success(data=new_item, message="Shipping zone created successfully")
