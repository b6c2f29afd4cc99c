"""
Shipping Method Service
=======================

Service untuk Shipping Method management
"""

from typing import Any, Dict, Mapping

from ..base import BaseService, transactional, audit_log
from ..exceptions import ValidationError, ConflictError, DuplicateEntryError
from ...models import ShippingMethod
from ...schemas import ShippingMethodSchema
from .validators import (
    validate_method_list_query, validate_method_create, validate_method_update, METHOD_MESSAGES
)

NOT_FOUND_MESSAGE = "Shipping method not found"
IN_USE_MESSAGE = "Cannot delete: shipping method is in use"

class ShippingMethodService(BaseService):
    """Service untuk master data metode pengiriman"""

    response_schema = ShippingMethodSchema
    # Hanya field ini yang boleh diubah lewat update
    updatable_fields = ('base_cost', 'cost_per_kg', 'estimated_days')

    def __init__(self, db_session, method_repository, order_repository):
        super().__init__(db_session)
        self.methods = method_repository
        self.orders = order_repository

    async def list(self, params: Mapping[str, Any]) -> Dict[str, Any]:
        """List metode dengan filter name/estimated_days, sorting, dan pagination"""
        result = validate_method_list_query(params)
        self._raise_for_errors(result)
        query = result.data

        items, total = await self.methods.list(
            name=query.name,
            estimated_days=query.estimated_days,
            sort_by=query.sort_by,
            sort_order=query.sort_order,
            page=query.page,
            per_page=query.per_page
        )
        return {
            'items': [self._serialize(item) for item in items],
            'total': total,
            'page': query.page,
            'per_page': query.per_page
        }

    async def get(self, method_id: int) -> Dict[str, Any]:
        method = await self._get_or_404(self.methods, method_id, NOT_FOUND_MESSAGE)
        return self._serialize(method)

    @transactional
    @audit_log('CREATE', 'ShippingMethod')
    async def create(self, payload: Any) -> Dict[str, Any]:
        """Create metode baru; nama harus unik"""
        result = await validate_method_create(payload, self.methods)
        self._raise_for_errors(result)

        method = ShippingMethod(**result.data.model_dump())
        try:
            await self.methods.add(method)
        except DuplicateEntryError:
            # Kalah balapan dengan request lain setelah pre-check
            raise ValidationError({'name': [METHOD_MESSAGES['name.unique']]})
        return self._serialize(method)

    @transactional
    @audit_log('UPDATE', 'ShippingMethod')
    async def update(self, method_id: int, payload: Any) -> Dict[str, Any]:
        """Update base_cost, cost_per_kg, dan estimated_days"""
        result = validate_method_update(payload)
        self._raise_for_errors(result)

        method = await self._get_or_404(self.methods, method_id, NOT_FOUND_MESSAGE)
        for field, value in result.data.model_dump(include=set(self.updatable_fields)).items():
            setattr(method, field, value)
        await self.methods.save(method)
        return self._serialize(method)

    @transactional
    @audit_log('DELETE', 'ShippingMethod')
    async def delete(self, method_id: int) -> bool:
        """Delete metode; ditolak kalau masih dipakai order"""
        method = await self._get_or_404(self.methods, method_id, NOT_FOUND_MESSAGE)

        if await self.orders.exists_for_method(method.id):
            raise ConflictError(IN_USE_MESSAGE, 'ShippingMethod')

        await self.methods.delete(method)
        return True
