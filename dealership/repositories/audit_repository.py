# File: dealership/repositories/audit_repository.py

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from dealership.db.models.audit import AuditLog
from dealership.repositories.base_repository import BaseRepository


class AuditLogRepository(BaseRepository[AuditLog]):
    """
    Repository for the append-only audit log.

    Only exposes inserts; audit rows are never updated or deleted.
    """

    def __init__(self, session: Session):
        super().__init__(session, AuditLog)

    def append(
        self,
        action_type: str,
        details: str,
        action_date: Optional[datetime] = None,
    ) -> AuditLog:
        """
        Append an audit entry.

        Args:
            action_type (str): Action performed
            details (str): Human-readable description
            action_date (Optional[datetime]): Timestamp, defaults to now

        Returns:
            AuditLog: The flushed audit entry
        """
        return self.add(
            {
                "action_type": action_type,
                "action_date": action_date or datetime.now(),
                "details": details,
            }
        )
