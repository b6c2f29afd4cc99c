"""
Base Pydantic Schemas
=====================

Base classes dan common functionality untuk semua schemas (Pydantic V2).
"""

from pydantic import BaseModel, ConfigDict, Field
from decimal import Decimal
from typing import Annotated

# Nilai uang: non-negatif, 2 desimal, muat di kolom Numeric(10, 2)
Money = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]

# Batas kolom Integer
MAX_INTEGER = 2 ** 31 - 1

class BaseSchema(BaseModel):
    """Base schema untuk request payload."""

    model_config = ConfigDict(
        extra='ignore',
        str_strip_whitespace=True,
    )

class ResponseSchema(BaseModel):
    """Base schema untuk serialisasi dari ORM object."""

    model_config = ConfigDict(from_attributes=True)

class PaginationQuerySchema(BaseSchema):
    """Query parameter pagination: page >= 1, per_page 1..100."""
    page: int = Field(1, ge=1, le=MAX_INTEGER)
    per_page: int = Field(10, ge=1, le=100)
