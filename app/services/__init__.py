"""
Shipping Services Module
========================

Services layer untuk shipping application
Menggunakan dependency injection pattern untuk service management
"""

from .base import BaseService, transactional, audit_log
from .exceptions import (
    ShippingServiceError, ValidationError, NotFoundError, ConflictError, DuplicateEntryError
)

# Shipping Domain
from .shipping import ShippingMethodService, ShippingZoneService, ShippingFeeService

from ..repositories import ShippingMethodRepository, ShippingZoneRepository, OrderRepository

__all__ = [
    # Base Classes
    'BaseService', 'transactional', 'audit_log',

    # Exceptions
    'ShippingServiceError', 'ValidationError', 'NotFoundError', 'ConflictError',
    'DuplicateEntryError',

    # Shipping Domain
    'ShippingMethodService', 'ShippingZoneService', 'ShippingFeeService',

    'ServiceRegistry', 'create_service_registry',
]


class ServiceRegistry:
    """
    Service Registry untuk dependency injection
    Mengelola repositories dan services untuk satu database session
    """

    def __init__(self, db_session, config: dict):
        self.db_session = db_session
        self.config = config
        self._repositories = {}
        self._services = {}

        self._init_repositories()
        self._init_services()

    def _init_repositories(self):
        """Initialize repositories, satu per entity"""
        self._repositories['shipping_method'] = ShippingMethodRepository(self.db_session)
        self._repositories['shipping_zone'] = ShippingZoneRepository(self.db_session)
        self._repositories['order'] = OrderRepository(self.db_session)

    def _init_services(self):
        """Initialize domain services dengan dependencies"""
        self._services['shipping_method'] = ShippingMethodService(
            db_session=self.db_session,
            method_repository=self._repositories['shipping_method'],
            order_repository=self._repositories['order']
        )

        self._services['shipping_zone'] = ShippingZoneService(
            db_session=self.db_session,
            zone_repository=self._repositories['shipping_zone']
        )

        self._services['shipping_fee'] = ShippingFeeService(
            db_session=self.db_session,
            method_repository=self._repositories['shipping_method'],
            zone_repository=self._repositories['shipping_zone'],
            order_repository=self._repositories['order'],
            strict=self.config.get('STRICT_FEE_CALCULATION', False)
        )

    @property
    def shipping_method(self) -> ShippingMethodService:
        return self._services['shipping_method']

    @property
    def shipping_zone(self) -> ShippingZoneService:
        return self._services['shipping_zone']

    @property
    def shipping_fee(self) -> ShippingFeeService:
        return self._services['shipping_fee']


# Factory function untuk easy service registry creation
def create_service_registry(db_session, config: dict) -> ServiceRegistry:
    """Factory function untuk membuat ServiceRegistry"""
    return ServiceRegistry(db_session, config)
