# tests/test_exceptions.py

import pytest

from dealership.core.exceptions import (
    ConcurrentModificationException,
    DatabaseException,
    DealershipException,
    EntityNotFoundException,
    ValidationException,
    VehicleNotAvailableException,
)


@pytest.mark.parametrize(
    "exc, category, code",
    [
        (ValidationException("bad input", {"sale_price": ["Must not be negative"]}), "validation", "VALIDATION_001"),
        (EntityNotFoundException("Customer", 9), "validation", "VALIDATION_002"),
        (VehicleNotAvailableException(2, "Sold"), "validation", "VALIDATION_003"),
        (DatabaseException("write failed"), "storage", "DATABASE_001"),
        (ConcurrentModificationException("lost race"), "storage", "DATABASE_002"),
    ],
)
def test_categories_and_codes(exc, category, code):
    assert isinstance(exc, DealershipException)
    assert exc.category == category
    assert exc.code == code
    assert exc.to_dict()["category"] == category


def test_not_found_details():
    exc = EntityNotFoundException("Salesperson", 3)
    assert exc.message == "Salesperson with ID 3 not found"
    assert exc.details["reason"] == "not_found"
    assert exc.details["entity_id"] == 3


def test_not_available_details():
    exc = VehicleNotAvailableException(2, "Sold")
    assert "status: Sold" in exc.message
    assert exc.details["reason"] == "not_available"
    assert exc.details["current_status"] == "Sold"


def test_validation_errors_in_details():
    exc = ValidationException("bad input", {"vehicle_id": ["Must be a positive integer"]})
    assert exc.details["validation_errors"] == {"vehicle_id": ["Must be a positive integer"]}


def test_only_concurrency_failures_are_retryable():
    database_error = DatabaseException("write failed", original_error="disk I/O error", operation="record_sale")
    conflict = ConcurrentModificationException("lost race", operation="record_sale")

    assert database_error.retryable is False
    assert database_error.details == {"original_error": "disk I/O error", "operation": "record_sale"}
    assert conflict.retryable is True
    assert conflict.details["retryable"] is True
    assert isinstance(conflict, DatabaseException)
