# File: dealership/services/audit_service.py

from datetime import datetime
from decimal import Decimal
from typing import Optional
import logging

from sqlalchemy.orm import Session

from dealership.db.models.audit import AuditLog
from dealership.db.models.enums import AuditActionType
from dealership.repositories.audit_repository import AuditLogRepository

logger = logging.getLogger(__name__)


class AuditService:
    """
    Service for the dealership audit trail.

    Entries are written on the caller's session and become durable only when
    the caller's transaction commits, after which the caller emits the AUDIT
    log line through log_sale_recorded.
    """

    def __init__(self, session: Session, audit_repository: Optional[AuditLogRepository] = None):
        """
        Initialize audit service with dependencies.

        Args:
            session: Database session for persistence operations
            audit_repository: Repository for audit records
        """
        self.session = session
        self.repository = audit_repository or AuditLogRepository(session)

    @staticmethod
    def format_sale_details(
        sale_id: int,
        customer_id: int,
        vehicle_id: int,
        salesperson_id: int,
        sale_price: Decimal,
    ) -> str:
        """
        Build the human-readable detail string for a recorded sale.

        Example:
            "Sale ID: 7, Customer ID: 1, Vehicle ID: 1, Salesperson ID: 1, Sale Price: 19500.00"
        """
        return (
            f"Sale ID: {sale_id}, Customer ID: {customer_id}, "
            f"Vehicle ID: {vehicle_id}, Salesperson ID: {salesperson_id}, "
            f"Sale Price: {sale_price:.2f}"
        )

    def record_sale(
        self,
        sale_id: int,
        customer_id: int,
        vehicle_id: int,
        salesperson_id: int,
        sale_price: Decimal,
        action_date: Optional[datetime] = None,
    ) -> AuditLog:
        """
        Append a "Sale Recorded" entry to the audit log.

        Args:
            sale_id: ID of the new sale
            customer_id: Buyer
            vehicle_id: Vehicle sold
            salesperson_id: Salesperson credited
            sale_price: Agreed price
            action_date: Timestamp of the action, defaults to now

        Returns:
            Created audit record
        """
        action = AuditActionType.SALE_RECORDED.value
        details = self.format_sale_details(
            sale_id, customer_id, vehicle_id, salesperson_id, sale_price
        )

        return self.repository.append(
            action_type=action,
            details=details,
            action_date=action_date or datetime.now(),
        )

    def log_sale_recorded(self, sale_id: int, audit_id: int) -> None:
        """
        Emit the AUDIT log line for a sale entry.

        Call only after the transaction holding the entry has committed.
        """
        logger.info(
            f"AUDIT: {AuditActionType.SALE_RECORDED.value} sale {sale_id} (entry {audit_id})",
            extra={
                "audit": True,
                "entity_type": "Sale",
                "entity_id": sale_id,
                "action": AuditActionType.SALE_RECORDED.value,
            },
        )
