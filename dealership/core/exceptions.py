# File: dealership/core/exceptions.py

from typing import Dict, Any, List, Optional
from datetime import datetime


class DealershipException(Exception):
    """Base exception for all dealership service errors."""

    CATEGORY = "error"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize a dealership exception.

        Args:
            message: Human-readable error message
            code: Optional machine-processable error code
            details: Additional error details
        """
        self.message = message
        self.code = code or "GENERIC_ERROR"
        self.details = details or {}
        super().__init__(message)

    @property
    def category(self) -> str:
        """Coarse failure category reported to callers."""
        return self.CATEGORY

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for API responses.

        Returns:
            Dictionary representation of the exception
        """
        return {
            "code": self.code,
            "category": self.category,
            "message": self.message,
            "details": self.details,
            "timestamp": datetime.now().isoformat(),
        }


# Validation exceptions
class ValidationException(DealershipException):
    """Raised when input or precondition validation fails."""

    CATEGORY = "validation"

    def __init__(
        self,
        message: str,
        validation_errors: Optional[Dict[str, List[str]]] = None,
        code: str = "VALIDATION_001",
        details: Optional[Dict[str, Any]] = None,
    ):
        error_details = details or {}
        if validation_errors is not None or not error_details:
            error_details["validation_errors"] = validation_errors or {}
        super().__init__(message, code, error_details)


class EntityNotFoundException(ValidationException):
    """Raised when a referenced customer, vehicle, salesperson or sale does not exist."""

    def __init__(self, entity_type: str, entity_id: Any):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            f"{entity_type} with ID {entity_id} not found",
            code="VALIDATION_002",
            details={
                "entity_type": entity_type,
                "entity_id": entity_id,
                "reason": "not_found",
            },
        )


class VehicleNotAvailableException(ValidationException):
    """Raised when a vehicle exists but cannot be sold in its current status."""

    def __init__(self, vehicle_id: int, current_status: Optional[str] = None):
        self.vehicle_id = vehicle_id
        self.current_status = current_status
        details: Dict[str, Any] = {
            "entity_type": "Vehicle",
            "entity_id": vehicle_id,
            "reason": "not_available",
        }
        if current_status is not None:
            details["current_status"] = current_status
        super().__init__(
            f"Vehicle with ID {vehicle_id} is not available for sale"
            + (f" (status: {current_status})" if current_status else ""),
            code="VALIDATION_003",
            details=details,
        )


# Storage exceptions
class DatabaseException(DealershipException):
    """
    Exception raised for database-related errors.
    """

    CODE_PREFIX = "DATABASE_"
    CATEGORY = "storage"
    retryable = False

    def __init__(
        self,
        message: str,
        original_error: Optional[str] = None,
        operation: Optional[str] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        error_details = details or {}
        if original_error:
            error_details["original_error"] = original_error
        if operation:
            error_details["operation"] = operation
        code = error_code or f"{self.CODE_PREFIX}001"
        super().__init__(message=message, code=code, details=error_details)


class ConcurrentModificationException(DatabaseException):
    """
    Raised when the store's concurrency control aborts the transaction.

    The whole operation may be retried from validation.
    """

    retryable = True

    def __init__(
        self,
        message: str,
        original_error: Optional[str] = None,
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        error_details = details or {}
        error_details["retryable"] = True
        super().__init__(
            message,
            original_error=original_error,
            operation=operation,
            error_code=f"{self.CODE_PREFIX}002",
            details=error_details,
        )
