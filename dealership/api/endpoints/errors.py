# File: dealership/api/endpoints/errors.py
"""
Translation of service exceptions into HTTP errors.
"""

from fastapi import HTTPException, status

from dealership.core.exceptions import (
    ConcurrentModificationException,
    DatabaseException,
    DealershipException,
    EntityNotFoundException,
    ValidationException,
    VehicleNotAvailableException,
)


def to_http_exception(exc: DealershipException) -> HTTPException:
    """
    Map a dealership exception to an HTTPException carrying its to_dict() body.
    """
    if isinstance(exc, EntityNotFoundException):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, VehicleNotAvailableException):
        status_code = status.HTTP_409_CONFLICT
    elif isinstance(exc, ValidationException):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, ConcurrentModificationException):
        status_code = status.HTTP_409_CONFLICT
    elif isinstance(exc, DatabaseException):
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return HTTPException(status_code=status_code, detail=exc.to_dict())
