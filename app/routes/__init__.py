"""
Shipping Routes Module
======================

API Routes untuk shipping application
"""

from .shipping import shipping_method_router, shipping_zone_router, shipping_fee_router

__all__ = ['shipping_method_router', 'shipping_zone_router', 'shipping_fee_router']
