"""
Shipping Repositories
=====================

Repository per entity: metode pengiriman, zona, dan order.
"""

from typing import Any, List, Optional, Tuple

from sqlalchemy import select, func

from .base import SQLAlchemyRepository
from ..models import ShippingMethod, ShippingZone, Order

class ShippingMethodRepository(SQLAlchemyRepository):
    model_class = ShippingMethod
    unique_fields = ('name',)

    async def get_by_name(self, name: str) -> Optional[ShippingMethod]:
        return await self.get_by('name', name)

    async def list(self, name: Optional[str] = None, estimated_days: Optional[int] = None,
                   sort_by: Optional[str] = None, sort_order: str = 'asc',
                   page: int = 1, per_page: int = 10) -> Tuple[List[ShippingMethod], int]:
        """List metode dengan filter, sorting, dan pagination"""
        query = select(ShippingMethod)

        if name:
            # Substring match, case-insensitive, wildcard dari user di-escape
            query = query.filter(
                func.lower(ShippingMethod.name).contains(name.lower(), autoescape=True)
            )
        if estimated_days is not None:
            query = query.filter(ShippingMethod.estimated_days == estimated_days)

        query = self._apply_sorting(query, sort_by, sort_order)
        return await self._paginate_query(query, page, per_page)

class ShippingZoneRepository(SQLAlchemyRepository):
    model_class = ShippingZone
    unique_fields = ('zone_name',)

    async def get_by_name(self, zone_name: str) -> Optional[ShippingZone]:
        return await self.get_by('zone_name', zone_name)

    async def list(self, page: int = 1, per_page: int = 10) -> Tuple[List[ShippingZone], int]:
        query = self._apply_sorting(select(ShippingZone))
        return await self._paginate_query(query, page, per_page)

class OrderRepository(SQLAlchemyRepository):
    model_class = Order

    async def exists_for_method(self, shipping_method_id: int) -> bool:
        """True kalau ada order yang memakai metode ini"""
        result = await self.db_session.execute(
            select(Order.id).filter(Order.shipping_method_id == shipping_method_id).limit(1)
        )
        return result.scalar_one_or_none() is not None
