# File: dealership/db/models/enums.py
"""
Enumeration types used by the dealership schema.
"""

from enum import Enum


class VehicleStatus(str, Enum):
    """Sale status of a vehicle on the lot."""

    AVAILABLE = "Available"
    SOLD = "Sold"


class AuditActionType(str, Enum):
    """Action types written to the audit log."""

    SALE_RECORDED = "Sale Recorded"
