"""
Base Repository
===============

Data-access helpers bersama untuk semua repository berbasis SQLAlchemy.
"""

import logging
from typing import Any, List, Optional, Sequence, Tuple

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..services.exceptions import DuplicateEntryError

logger = logging.getLogger(__name__)

# Batas kolom INTEGER (64-bit signed); id di luar ini pasti tidak ada
MAX_ID = 2 ** 63 - 1

class SQLAlchemyRepository:
    """Repository generic untuk satu model ORM"""

    model_class = None
    # Kolom yang punya unique constraint, dipakai untuk menerjemahkan IntegrityError
    unique_fields: Sequence[str] = ()

    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session

    async def get(self, entity_id: int):
        """Get entity by ID, None kalau tidak ada"""
        if not 0 < entity_id <= MAX_ID:
            return None
        return await self.db_session.get(self.model_class, entity_id)

    async def get_by(self, field_name: str, value: Any):
        result = await self.db_session.execute(
            select(self.model_class).filter(getattr(self.model_class, field_name) == value)
        )
        return result.scalars().first()

    async def add(self, entity):
        """Insert entity dan flush supaya ID terisi"""
        self.db_session.add(entity)
        try:
            await self.db_session.flush()
        except IntegrityError as e:
            field = self._violated_field(e)
            if field is None:
                raise
            logger.info(f"Unique constraint violated on {self.model_class.__name__}.{field}")
            raise DuplicateEntryError(self.model_class.__name__, field, getattr(entity, field)) from e
        return entity

    async def save(self, entity):
        """Flush perubahan pada entity yang sudah ada"""
        await self.db_session.flush()
        return entity

    async def delete(self, entity) -> None:
        await self.db_session.delete(entity)
        await self.db_session.flush()

    def _violated_field(self, error: IntegrityError) -> Optional[str]:
        message = str(error.orig).lower()
        for field in self.unique_fields:
            if field in message:
                return field
        # Driver tidak menyebut kolom: asumsikan unique field pertama
        if self.unique_fields and 'unique' in message:
            return self.unique_fields[0]
        return None

    async def _paginate_query(self, query, page: int = 1, per_page: int = 10) -> Tuple[List[Any], int]:
        """Paginate query results, return (items, total)"""
        count_query = select(func.count()).select_from(query.subquery())
        total_result = await self.db_session.execute(count_query)
        total = total_result.scalar() or 0

        offset = (page - 1) * per_page
        items_result = await self.db_session.execute(query.offset(offset).limit(per_page))
        return list(items_result.scalars().all()), total

    def _apply_sorting(self, query, sort_by: Optional[str] = None,
                       sort_order: str = 'asc', default_sort: str = 'id'):
        """Apply sorting to query, id selalu jadi tie-breaker"""
        sort_field = sort_by or default_sort
        field_attr = getattr(self.model_class, sort_field)
        if sort_order.lower() == 'desc':
            query = query.order_by(field_attr.desc())
        else:
            query = query.order_by(field_attr.asc())

        if sort_field != 'id':
            query = query.order_by(self.model_class.id.asc())
        return query
