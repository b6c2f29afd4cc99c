"""
Shipping Fee Service
====================

Kalkulasi ongkir dan pencatatan order hasil kalkulasi.
"""

from typing import Any, Dict

from ..base import BaseService, transactional, audit_log
from ...models import Order
from ...schemas import ShippingFeeSchema
from .fee_calculator import calculate_fee, ZERO
from .validators import validate_fee_calculation
from .shipping_method_service import NOT_FOUND_MESSAGE

class ShippingFeeService(BaseService):
    """
    Hitung ongkir: base_cost + cost_per_kg * weight + additional_fee.

    Di luar strict mode, destination yang tidak cocok dengan zona manapun
    tidak dianggap error; biaya tambahannya nol.
    """

    response_schema = ShippingFeeSchema

    def __init__(self, db_session, method_repository, zone_repository, order_repository,
                 strict: bool = False):
        super().__init__(db_session)
        self.methods = method_repository
        self.zones = zone_repository
        self.orders = order_repository
        self.strict = strict

    @transactional
    @audit_log('CREATE', 'Order', id_key='order_id')
    async def calculate(self, payload: Any) -> Dict[str, Any]:
        result = await validate_fee_calculation(payload, self.methods, self.zones, strict=self.strict)
        self._raise_for_errors(result)
        data = result.data

        method = await self._get_or_404(self.methods, data.shipping_method_id, NOT_FOUND_MESSAGE)
        zone = await self.zones.get_by_name(data.destination)
        if zone is None:
            self.logger.info(f"Unknown destination '{data.destination}', no additional fee applied")

        total_fee = calculate_fee(method, data.weight, zone)

        order = Order(shipping_method_id=method.id, total_price=total_fee)
        await self.orders.add(order)

        return ShippingFeeSchema(
            order_id=order.id,
            shipping_method_id=method.id,
            shipping_method=method.name,
            destination=data.destination,
            weight=data.weight,
            base_cost=method.base_cost,
            cost_per_kg=method.cost_per_kg,
            additional_fee=zone.additional_fee if zone is not None else ZERO,
            total_fee=total_fee
        ).model_dump()
