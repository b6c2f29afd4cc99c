"""
Schemas Package
===============

Pydantic schemas untuk serialization dan validation
"""

from .base import BaseSchema, ResponseSchema, PaginationQuerySchema, Money, MAX_INTEGER
from .shipping_method import (
    ShippingMethodSchema, ShippingMethodCreateSchema, ShippingMethodUpdateSchema,
    ShippingMethodListQuerySchema
)
from .shipping_zone import ShippingZoneSchema, ShippingZoneCreateSchema
from .shipping_fee import ShippingFeeCalculateSchema, ShippingFeeSchema
from .validators import ValidationResult, validate_schema

__all__ = [
    'BaseSchema', 'ResponseSchema', 'PaginationQuerySchema', 'Money', 'MAX_INTEGER',
    'ShippingMethodSchema', 'ShippingMethodCreateSchema', 'ShippingMethodUpdateSchema',
    'ShippingMethodListQuerySchema',
    'ShippingZoneSchema', 'ShippingZoneCreateSchema',
    'ShippingFeeCalculateSchema', 'ShippingFeeSchema',
    'ValidationResult', 'validate_schema',
]
