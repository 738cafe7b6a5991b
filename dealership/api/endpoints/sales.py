# File: dealership/api/endpoints/sales.py
"""
Sales API endpoints.

Request bodies are parsed into typed values by Pydantic before the sale
service is called; malformed bodies never reach a transaction.
"""

from fastapi import APIRouter, Depends, Path, status

from dealership.api.deps import get_sale_service
from dealership.api.endpoints.errors import to_http_exception
from dealership.core.exceptions import DealershipException
from dealership.schemas.sale import (
    SaleResponse,
    SaleTransactionCreate,
    SaleTransactionResult,
)
from dealership.services.sale_service import SaleService

router = APIRouter()


@router.post("/", response_model=SaleTransactionResult, status_code=status.HTTP_201_CREATED)
def record_sale(
    *,
    sale_in: SaleTransactionCreate,
    sale_service: SaleService = Depends(get_sale_service),
) -> SaleTransactionResult:
    """
    Record a vehicle sale.

    Args:
        sale_in: Sale, maintenance and party identifiers
        sale_service: Sale service bound to the request session

    Returns:
        ID of the new sale

    Raises:
        HTTPException: 404 for unknown parties, 409 for unavailable vehicles or
            concurrent conflicts, 400 for other validation failures, 503 for
            storage failures
    """
    try:
        sale_id = sale_service.record_sale_request(sale_in)
    except DealershipException as e:
        raise to_http_exception(e)
    return SaleTransactionResult(sale_id=sale_id)


@router.get("/{sale_id}", response_model=SaleResponse)
def get_sale(
    *,
    sale_id: int = Path(..., ge=1, description="The ID of the sale to retrieve"),
    sale_service: SaleService = Depends(get_sale_service),
) -> SaleResponse:
    """
    Get a recorded sale.

    Raises:
        HTTPException: If the sale doesn't exist
    """
    try:
        return SaleResponse.model_validate(sale_service.get_sale(sale_id))
    except DealershipException as e:
        raise to_http_exception(e)
