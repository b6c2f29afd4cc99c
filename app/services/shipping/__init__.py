"""
Shipping Domain Services
========================

Services untuk Shipping Method, Shipping Zone, dan kalkulasi ongkir
"""

from .shipping_method_service import ShippingMethodService
from .shipping_zone_service import ShippingZoneService
from .shipping_fee_service import ShippingFeeService
from .fee_calculator import calculate_fee, calculate_total_fee

__all__ = [
    'ShippingMethodService',
    'ShippingZoneService',
    'ShippingFeeService',
    'calculate_fee',
    'calculate_total_fee',
]
