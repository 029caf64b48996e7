"""SQLAlchemy declarative base shared by all models.

Engines and sessions are owned by the persistence layer that loads records;
this package only declares the record types.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for marketplace models."""
