from pydantic import Field
from decimal import Decimal
from typing import Literal, Optional

from .base import BaseSchema, ResponseSchema, PaginationQuerySchema, Money, MAX_INTEGER

class ShippingMethodCreateSchema(BaseSchema):
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=255)
    base_cost: Money
    cost_per_kg: Money
    estimated_days: int = Field(3, ge=1, le=MAX_INTEGER)

class ShippingMethodUpdateSchema(BaseSchema):
    """Hanya field ini yang boleh diubah; field lain diabaikan."""
    base_cost: Money
    cost_per_kg: Money
    estimated_days: int = Field(ge=1, le=MAX_INTEGER)

class ShippingMethodListQuerySchema(PaginationQuerySchema):
    name: Optional[str] = Field(None, max_length=255)
    estimated_days: Optional[int] = Field(None, ge=1, le=MAX_INTEGER)
    sort_by: Optional[Literal['base_cost', 'estimated_days']] = None
    sort_order: Literal['asc', 'desc'] = 'asc'

class ShippingMethodSchema(ResponseSchema):
    id: int
    name: str
    description: Optional[str] = None
    base_cost: Decimal
    cost_per_kg: Decimal
    estimated_days: int
