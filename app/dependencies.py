"""
API Dependencies
================

FastAPI dependencies untuk shipping application.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from .services import ServiceRegistry, create_service_registry
from .database import get_db_session
from .config import settings

# Dependency untuk get service registry per request
async def get_service_registry(
    db_session: AsyncSession = Depends(get_db_session)
) -> ServiceRegistry:
    """Get service registry yang terikat ke session request ini"""
    return create_service_registry(
        db_session=db_session,
        config=settings.model_dump()
    )
