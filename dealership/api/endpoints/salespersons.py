# File: dealership/api/endpoints/salespersons.py

from fastapi import APIRouter, Depends, Path

from dealership.api.deps import get_sale_service
from dealership.api.endpoints.errors import to_http_exception
from dealership.core.exceptions import DealershipException
from dealership.schemas.sale import SalespersonStatistics
from dealership.services.sale_service import SaleService

router = APIRouter()


@router.get("/{salesperson_id}/statistics", response_model=SalespersonStatistics)
def get_salesperson_statistics(
    *,
    salesperson_id: int = Path(..., ge=1, description="The ID of the salesperson"),
    sale_service: SaleService = Depends(get_sale_service),
) -> SalespersonStatistics:
    """
    Stored sales counters for a salesperson, checked against the sales table.
    """
    try:
        return sale_service.verify_salesperson_statistics(salesperson_id)
    except DealershipException as e:
        raise to_http_exception(e)
