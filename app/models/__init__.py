"""
Shipping Models Package
=======================

Database models untuk shipping service.

Domain Structure:
- Core: Base model dan declarative Base
- Shipping: ShippingMethod, ShippingZone, Order
"""

from .base import Base, BaseModel
from .shipping import ShippingMethod, ShippingZone, Order

__all__ = ['Base', 'BaseModel', 'ShippingMethod', 'ShippingZone', 'Order']
