from pydantic import Field
from decimal import Decimal

from .base import BaseSchema, ResponseSchema, Money

class ShippingZoneCreateSchema(BaseSchema):
    zone_name: str = Field(min_length=1, max_length=255)
    additional_fee: Money

class ShippingZoneSchema(ResponseSchema):
    id: int
    zone_name: str
    additional_fee: Decimal
