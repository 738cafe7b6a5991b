"""
Initializes the models package for SQLAlchemy declarative base.

Importing this package registers every table on `Base.metadata` so that
`Base.metadata.create_all()` sees the full schema.
"""

from dealership.db.models.base import Base
from dealership.db.models.enums import AuditActionType, VehicleStatus
from dealership.db.models.customer import Customer
from dealership.db.models.vehicle import Vehicle, Maintenance
from dealership.db.models.salesperson import Salesperson
from dealership.db.models.sales import Sale
from dealership.db.models.audit import AuditLog

__all__ = [
    "Base",
    "AuditActionType",
    "VehicleStatus",
    "Customer",
    "Vehicle",
    "Maintenance",
    "Salesperson",
    "Sale",
    "AuditLog",
]
