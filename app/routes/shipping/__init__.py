"""
Shipping Domain Routes
======================

Routes untuk metode pengiriman, zona, dan kalkulasi ongkir
"""

from .shipping_method_routes import shipping_method_router
from .shipping_zone_routes import shipping_zone_router
from .shipping_fee_routes import shipping_fee_router

__all__ = ['shipping_method_router', 'shipping_zone_router', 'shipping_fee_router']
