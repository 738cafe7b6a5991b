# File: dealership/db/models/base.py
"""
Base model for the dealership schema.

Provides the SQLAlchemy declarative base shared by every table mapping and a
small mixin for dictionary conversion.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict

from sqlalchemy import MetaData
from sqlalchemy.orm import declarative_base

# Create the SQLAlchemy base
Base = declarative_base(metadata=MetaData())


class SerializableMixin:
    """Mixin converting mapped column values to plain Python values."""

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the model instance to a dictionary.

        Returns:
            Dictionary representation of the model instance
        """
        result = {}
        for column in self.__table__.columns:
            value = getattr(self, column.key)
            if isinstance(value, (datetime, date)):
                value = value.isoformat()
            elif isinstance(value, Decimal):
                value = str(value)
            elif hasattr(value, "value"):
                value = value.value
            result[column.key] = value
        return result
