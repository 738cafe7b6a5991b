# File: dealership/db/models/audit.py

from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String, Text

from dealership.db.models.base import Base, SerializableMixin


class AuditLog(Base, SerializableMixin):
    """Append-only audit trail entry. Rows are never updated or deleted."""

    __tablename__ = "audit_log"

    audit_id = Column(Integer, primary_key=True, autoincrement=True)
    action_type = Column(String(50), nullable=False)
    action_date = Column(DateTime, nullable=False, default=datetime.now)
    details = Column(Text)

    def __repr__(self) -> str:
        return f"<AuditLog(audit_id={self.audit_id}, action_type='{self.action_type}')>"
