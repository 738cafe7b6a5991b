# File: dealership/core/validation.py
"""
Boundary validation helpers.

The sale service takes already-typed values. These helpers check type and
range only; they never convert, so a string id or a float price is reported
as an error instead of being coerced.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

MONEY_QUANTUM = Decimal("0.01")
MONEY_MAX_DIGITS = 18


class ValidationResult:
    """Container for validation results."""

    def __init__(self):
        """Initialize an empty validation result."""
        self.errors: Dict[str, List[str]] = {}

    def add_error(self, field: str, message: str) -> None:
        """
        Add an error for a specific field.

        Args:
            field: Field name with the error
            message: Error message
        """
        if field not in self.errors:
            self.errors[field] = []
        self.errors[field].append(message)

    @property
    def is_valid(self) -> bool:
        """
        Check if validation passed (no errors).

        Returns:
            True if validation passed, False otherwise
        """
        return len(self.errors) == 0

    def __bool__(self) -> bool:
        return self.is_valid

    def to_dict(self) -> Dict[str, List[str]]:
        """
        Convert validation result to dictionary.

        Returns:
            Dictionary of field names to error messages
        """
        return self.errors


def validate_identifier(result: ValidationResult, field: str, value: Any) -> None:
    """Require a positive int (bool is rejected)."""
    if isinstance(value, bool) or not isinstance(value, int):
        result.add_error(field, f"Must be an integer identifier, got {type(value).__name__}")
    elif value < 1:
        result.add_error(field, "Must be a positive integer")


def validate_amount(result: ValidationResult, field: str, value: Any) -> None:
    """Require a finite, non-negative Decimal with at most two decimal places."""
    if not isinstance(value, Decimal):
        result.add_error(field, f"Must be a Decimal amount, got {type(value).__name__}")
        return
    if not value.is_finite():
        result.add_error(field, "Must be a finite amount")
        return
    if value < 0:
        result.add_error(field, "Must not be negative")
    # quantize() raises InvalidOperation past the context precision
    if value and value.adjusted() >= MONEY_MAX_DIGITS - 2:
        result.add_error(field, f"Must have at most {MONEY_MAX_DIGITS} digits")
    elif value != value.quantize(MONEY_QUANTUM):
        result.add_error(field, "Must have at most two decimal places")


def validate_calendar_date(result: ValidationResult, field: str, value: Any) -> None:
    """Require a date value (a datetime is rejected)."""
    if isinstance(value, datetime) or not isinstance(value, date):
        result.add_error(field, f"Must be a date, got {type(value).__name__}")


def validate_text(
    result: ValidationResult, field: str, value: Any, max_length: Optional[int] = None
) -> None:
    """Require a non-blank str no longer than max_length."""
    if not isinstance(value, str):
        result.add_error(field, f"Must be a string, got {type(value).__name__}")
    elif max_length is not None and len(value) > max_length:
        result.add_error(field, f"Must be at most {max_length} characters")
    elif not value.strip():
        result.add_error(field, "Must not be blank")
