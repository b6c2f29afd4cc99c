from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.orm import declarative_base
from datetime import datetime, timezone

# Create a declarative base which all models will inherit from
Base = declarative_base()

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

# Define a BaseModel with common columns to keep the code DRY (Don't Repeat Yourself)
# This is an abstract class; it won't be created as a table itself.
class BaseModel(Base):
    __abstract__ = True
    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
