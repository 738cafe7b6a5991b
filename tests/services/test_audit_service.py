# tests/services/test_audit_service.py

import logging
from datetime import datetime
from decimal import Decimal

from sqlalchemy import func, select

from dealership.db.models import AuditLog
from dealership.services.audit_service import AuditService


def test_format_sale_details():
    details = AuditService.format_sale_details(7, 1, 1, 1, Decimal("19500"))
    assert details == (
        "Sale ID: 7, Customer ID: 1, Vehicle ID: 1, Salesperson ID: 1, Sale Price: 19500.00"
    )


def test_record_sale_is_part_of_callers_transaction(db, session_factory):
    service = AuditService(db)
    when = datetime(2025, 1, 15, 9, 0)

    entry = service.record_sale(7, 1, 1, 1, Decimal("19500.00"), action_date=when)

    assert entry.audit_id is not None
    assert entry.action_type == "Sale Recorded"
    assert entry.action_date == when

    db.rollback()
    check = session_factory()
    try:
        assert check.execute(select(func.count()).select_from(AuditLog)).scalar() == 0
    finally:
        check.close()


def test_record_sale_does_not_log_before_commit(db, caplog):
    caplog.set_level(logging.INFO, logger="dealership.services.audit_service")

    AuditService(db).record_sale(7, 1, 1, 1, Decimal("19500.00"))

    assert not any(r.getMessage().startswith("AUDIT:") for r in caplog.records)


def test_log_sale_recorded(caplog):
    caplog.set_level(logging.INFO, logger="dealership.services.audit_service")

    AuditService(None).log_sale_recorded(7, 3)

    assert [r.getMessage() for r in caplog.records] == ["AUDIT: Sale Recorded sale 7 (entry 3)"]
    assert caplog.records[0].action == "Sale Recorded"
