"""
Base Service Classes
====================

Base classes dan utilities untuk semua services
"""

from typing import Any, Dict, Optional
from functools import wraps
import logging

from .exceptions import ShippingServiceError, ValidationError, NotFoundError

logger = logging.getLogger(__name__)

def transactional(func):
    """Decorator untuk automatic transaction management"""
    @wraps(func)
    async def wrapper(self, *args, **kwargs):
        try:
            result = await func(self, *args, **kwargs)
            if self.db_session is not None:
                await self.db_session.commit()
            return result
        except Exception as e:
            if self.db_session is not None:
                await self.db_session.rollback()
            if isinstance(e, ShippingServiceError):
                logger.info(f"Transaction rolled back in {func.__name__}: {e.message}")
            else:
                logger.error(f"Transaction failed in {func.__name__}: {str(e)}")
            raise
    return wrapper

def audit_log(action: str, entity_type: str, id_key: str = 'id'):
    """Decorator untuk mencatat aksi mutasi ke log service"""
    def decorator(func):
        @wraps(func)
        async def wrapper(self, *args, **kwargs):
            entity_id = args[0] if args and isinstance(args[0], int) else None
            try:
                result = await func(self, *args, **kwargs)
            except ShippingServiceError as e:
                self.logger.warning(f"{action}_FAILED {entity_type} id={entity_id}: {e.message}")
                raise

            if isinstance(result, dict) and id_key in result:
                entity_id = result[id_key]
            self.logger.info(f"{action} {entity_type} id={entity_id}")
            return result
        return wrapper
    return decorator

class BaseService:
    """Base service class dengan common functionality"""

    # Schema untuk serialisasi entity ke response
    response_schema = None

    def __init__(self, db_session=None):
        self.db_session = db_session
        self.logger = logging.getLogger(f"services.{self.__class__.__name__}")

    async def _get_or_404(self, repository, entity_id: int, error_message: Optional[str] = None):
        """Get entity by ID or raise 404 error"""
        entity = await repository.get(entity_id)
        if entity is None:
            raise NotFoundError(repository.model_class.__name__, entity_id, message=error_message)
        return entity

    def _raise_for_errors(self, result) -> None:
        """Lempar ValidationError kalau hasil validasi punya error"""
        if not result.ok:
            raise ValidationError(result.errors)

    def _serialize(self, entity) -> Dict[str, Any]:
        return self.response_schema.model_validate(entity).model_dump()
