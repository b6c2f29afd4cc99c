from pydantic import Field
from decimal import Decimal

from .base import BaseSchema

class ShippingFeeCalculateSchema(BaseSchema):
    shipping_method_id: int = Field(ge=1)
    # 2 desimal: cost_per_kg * weight tetap muat di skala Order.total_price
    weight: Decimal = Field(ge=0, max_digits=8, decimal_places=2, allow_inf_nan=False)
    destination: str = Field(min_length=1, max_length=255)

class ShippingFeeSchema(BaseSchema):
    order_id: int
    shipping_method_id: int
    shipping_method: str
    destination: str
    weight: Decimal
    base_cost: Decimal
    cost_per_kg: Decimal
    additional_fee: Decimal
    total_fee: Decimal
