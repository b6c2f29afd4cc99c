"""
Shipping Zone Service
=====================

Service untuk Shipping Zone management
"""

from typing import Any, Dict, Mapping

from ..base import BaseService, transactional, audit_log
from ..exceptions import ValidationError, DuplicateEntryError
from ...models import ShippingZone
from ...schemas import ShippingZoneSchema
from .validators import validate_pagination_query, validate_zone_create, ZONE_MESSAGES

class ShippingZoneService(BaseService):
    """Service untuk master data zona pengiriman"""

    response_schema = ShippingZoneSchema

    def __init__(self, db_session, zone_repository):
        super().__init__(db_session)
        self.zones = zone_repository

    async def list(self, params: Mapping[str, Any]) -> Dict[str, Any]:
        result = validate_pagination_query(params)
        self._raise_for_errors(result)
        query = result.data

        items, total = await self.zones.list(page=query.page, per_page=query.per_page)
        return {
            'items': [self._serialize(item) for item in items],
            'total': total,
            'page': query.page,
            'per_page': query.per_page
        }

    @transactional
    @audit_log('CREATE', 'ShippingZone')
    async def create(self, payload: Any) -> Dict[str, Any]:
        result = await validate_zone_create(payload, self.zones)
        self._raise_for_errors(result)

        zone = ShippingZone(**result.data.model_dump())
        try:
            await self.zones.add(zone)
        except DuplicateEntryError:
            raise ValidationError({'zone_name': [ZONE_MESSAGES['zone_name.unique']]})
        return self._serialize(zone)
