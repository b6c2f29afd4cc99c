"""
Repositories Package
====================

Data-access layer: satu repository per entity.
"""

from .base import SQLAlchemyRepository
from .shipping import ShippingMethodRepository, ShippingZoneRepository, OrderRepository

__all__ = [
    'SQLAlchemyRepository',
    'ShippingMethodRepository', 'ShippingZoneRepository', 'OrderRepository'
]
