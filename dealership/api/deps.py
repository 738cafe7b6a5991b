# dealership/api/deps.py
"""
FastAPI dependencies for the dealership API.

Provides the database session and service injection for API routes.
"""

import logging

from fastapi import Depends
from sqlalchemy.orm import Session

from dealership.core.events import EventBus
from dealership.db.session import get_db
from dealership.services.sale_service import SaleService

logger = logging.getLogger(__name__)

# Process-wide bus for post-commit sale notifications
event_bus = EventBus()


def get_sale_service(db: Session = Depends(get_db)) -> SaleService:
    """
    Provide a SaleService bound to the request's session.
    """
    return SaleService(db, event_bus=event_bus)
