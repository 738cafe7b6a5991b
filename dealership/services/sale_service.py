# File: dealership/services/sale_service.py
"""
Sale transaction service.

Records a vehicle sale as one unit of work: the sale row, the vehicle status
change, the scheduled maintenance, the salesperson counters and the audit
entry are committed together or not at all.
"""

from datetime import date
from decimal import Decimal
from typing import Optional
import logging

from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.orm import Session

from dealership.core.events import SaleRecorded
from dealership.core.exceptions import (
    ConcurrentModificationException,
    DatabaseException,
    DealershipException,
    EntityNotFoundException,
    ValidationException,
    VehicleNotAvailableException,
)
from dealership.core.validation import (
    ValidationResult,
    validate_amount,
    validate_calendar_date,
    validate_identifier,
    validate_text,
)
from dealership.db.models.sales import Sale
from dealership.repositories.customer_repository import CustomerRepository
from dealership.repositories.maintenance_repository import MaintenanceRepository
from dealership.repositories.sale_repository import SaleRepository
from dealership.repositories.salesperson_repository import SalespersonRepository
from dealership.repositories.vehicle_repository import VehicleRepository
from dealership.schemas.sale import SaleTransactionCreate, SalespersonStatistics
from dealership.services.audit_service import AuditService
from dealership.services.base_service import BaseService

logger = logging.getLogger(__name__)

MAINTENANCE_DESCRIPTION_MAX_LENGTH = 255

# SQLSTATEs raised by PostgreSQL concurrency control
_CONCURRENCY_SQLSTATES = {"40001", "40P01", "55P03"}
_CONCURRENCY_MESSAGES = (
    "database is locked",
    "deadlock",
    "could not serialize",
    "could not obtain lock",
    "lock timeout",
)


def _is_concurrency_error(error: SQLAlchemyError) -> bool:
    """Whether the store aborted the statement through its concurrency control."""
    if isinstance(error, DBAPIError) and error.orig is not None:
        sqlstate = getattr(error.orig, "pgcode", None) or getattr(error.orig, "sqlstate", None)
        if sqlstate in _CONCURRENCY_SQLSTATES:
            return True
    message = str(error).lower()
    return any(fragment in message for fragment in _CONCURRENCY_MESSAGES)


class SaleService(BaseService[Sale]):
    """
    Service for recording vehicle sales.

    Provides functionality for:
    - Atomic sale recording with precondition validation
    - Sale lookup
    - Verification of the denormalized salesperson counters
    """

    def __init__(
        self,
        session: Session,
        repository=None,
        event_bus=None,
        audit_service: Optional[AuditService] = None,
        customer_repository=None,
        vehicle_repository=None,
        salesperson_repository=None,
        maintenance_repository=None,
    ):
        """
        Initialize SaleService with dependencies.

        Args:
            session: Database session for persistence operations
            repository: Optional repository for sales (defaults to SaleRepository)
            event_bus: Optional event bus for publishing domain events
            audit_service: Optional audit service (defaults to one on the same session)
            customer_repository: Optional customer repository
            vehicle_repository: Optional vehicle repository
            salesperson_repository: Optional salesperson repository
            maintenance_repository: Optional maintenance repository
        """
        super().__init__(
            session,
            repository_class=SaleRepository,
            repository=repository,
            event_bus=event_bus,
        )
        self.audit_service = audit_service or AuditService(session)
        self.customer_repository = customer_repository or CustomerRepository(session)
        self.vehicle_repository = vehicle_repository or VehicleRepository(session)
        self.salesperson_repository = salesperson_repository or SalespersonRepository(session)
        self.maintenance_repository = maintenance_repository or MaintenanceRepository(session)

    def record_sale(
        self,
        customer_id: int,
        vehicle_id: int,
        salesperson_id: int,
        sale_price: Decimal,
        sale_date: date,
        maintenance_date: date,
        maintenance_description: str,
        maintenance_cost: Decimal,
    ) -> int:
        """
        Record a vehicle sale.

        Inputs must already be typed; nothing is coerced. Inside one
        transaction the customer, vehicle (existence and availability) and
        salesperson are checked in that order, then the sale, vehicle status,
        maintenance appointment, salesperson counters and audit entry are
        written. Any failure rolls the whole transaction back.

        Args:
            customer_id: Buyer
            vehicle_id: Vehicle to sell, must be Available
            salesperson_id: Salesperson credited with the sale
            sale_price: Agreed price, non-negative
            sale_date: Date of sale
            maintenance_date: Date of the first scheduled service
            maintenance_description: Work to be done at that service
            maintenance_cost: Expected service cost, non-negative

        Returns:
            ID of the new sale

        Raises:
            ValidationException: Malformed input (nothing opened)
            EntityNotFoundException: Customer, vehicle or salesperson missing
            VehicleNotAvailableException: Vehicle is not Available
            ConcurrentModificationException: Lost a race with a concurrent transaction
            DatabaseException: Any other storage failure
        """
        self._validate_sale_input(
            customer_id=customer_id,
            vehicle_id=vehicle_id,
            salesperson_id=salesperson_id,
            sale_price=sale_price,
            sale_date=sale_date,
            maintenance_date=maintenance_date,
            maintenance_description=maintenance_description,
            maintenance_cost=maintenance_cost,
        )

        with self.transaction():
            self._check_preconditions(customer_id, vehicle_id, salesperson_id)

            sale = self.repository.create_sale(
                customer_id=customer_id,
                vehicle_id=vehicle_id,
                salesperson_id=salesperson_id,
                sale_date=sale_date,
                sale_price=sale_price,
            )
            sale_id = sale.sale_id

            if not self.vehicle_repository.mark_sold(vehicle_id):
                raise ConcurrentModificationException(
                    f"Vehicle with ID {vehicle_id} was sold by a concurrent transaction",
                    operation="mark_vehicle_sold",
                    details={"vehicle_id": vehicle_id},
                )

            maintenance = self.maintenance_repository.schedule(
                vehicle_id=vehicle_id,
                maintenance_date=maintenance_date,
                description=maintenance_description,
                cost=maintenance_cost,
            )
            maintenance_id = maintenance.maintenance_id

            if not self.salesperson_repository.increment_statistics(salesperson_id, sale_price):
                raise ConcurrentModificationException(
                    f"Salesperson with ID {salesperson_id} disappeared during the sale",
                    operation="increment_salesperson_statistics",
                    details={"salesperson_id": salesperson_id},
                )

            audit_id = self.audit_service.record_sale(
                sale_id=sale_id,
                customer_id=customer_id,
                vehicle_id=vehicle_id,
                salesperson_id=salesperson_id,
                sale_price=sale_price,
            ).audit_id

        self.audit_service.log_sale_recorded(sale_id, audit_id)
        logger.info(
            f"Recorded sale {sale_id}: vehicle {vehicle_id} to customer {customer_id} "
            f"by salesperson {salesperson_id} for {sale_price:.2f}"
        )

        self._publish(
            SaleRecorded(
                sale_id=sale_id,
                customer_id=customer_id,
                vehicle_id=vehicle_id,
                salesperson_id=salesperson_id,
                sale_price=sale_price,
                sale_date=sale_date,
                maintenance_id=maintenance_id,
            )
        )

        return sale_id

    def record_sale_request(self, request: SaleTransactionCreate) -> int:
        """
        Record a sale from a parsed request schema.

        Args:
            request: Validated sale request

        Returns:
            ID of the new sale
        """
        return self.record_sale(
            customer_id=request.customer_id,
            vehicle_id=request.vehicle_id,
            salesperson_id=request.salesperson_id,
            sale_price=request.sale_price,
            sale_date=request.sale_date,
            maintenance_date=request.maintenance_date,
            maintenance_description=request.maintenance_description,
            maintenance_cost=request.maintenance_cost,
        )

    def get_sale(self, sale_id: int) -> Sale:
        """
        Get a sale by ID.

        Raises:
            EntityNotFoundException: If the sale doesn't exist
        """
        sale = self.repository.get_by_id(sale_id)
        if sale is None:
            raise EntityNotFoundException("Sale", sale_id)
        return sale

    def verify_salesperson_statistics(self, salesperson_id: int) -> SalespersonStatistics:
        """
        Compare a salesperson's stored counters with the sales table.

        Args:
            salesperson_id: ID of the salesperson

        Returns:
            Stored and derived values with a consistency flag

        Raises:
            EntityNotFoundException: If the salesperson doesn't exist
        """
        salesperson = self.salesperson_repository.get_by_id(salesperson_id)
        if salesperson is None:
            raise EntityNotFoundException("Salesperson", salesperson_id)

        derived_sales, derived_revenue = self.repository.aggregate_for_salesperson(salesperson_id)
        stored_revenue = Decimal(str(salesperson.total_revenue or 0)).quantize(Decimal("0.01"))
        stored_sales = salesperson.total_sales or 0

        is_consistent = stored_sales == derived_sales and stored_revenue == derived_revenue
        if not is_consistent:
            logger.warning(
                f"Salesperson {salesperson_id} counters drifted: stored "
                f"({stored_sales}, {stored_revenue}) vs derived ({derived_sales}, {derived_revenue})"
            )

        return SalespersonStatistics(
            salesperson_id=salesperson_id,
            total_sales=stored_sales,
            total_revenue=stored_revenue,
            derived_total_sales=derived_sales,
            derived_total_revenue=derived_revenue,
            is_consistent=is_consistent,
        )

    def _validate_sale_input(self, **values) -> None:
        result = ValidationResult()
        for field in ("customer_id", "vehicle_id", "salesperson_id"):
            validate_identifier(result, field, values[field])
        for field in ("sale_price", "maintenance_cost"):
            validate_amount(result, field, values[field])
        for field in ("sale_date", "maintenance_date"):
            validate_calendar_date(result, field, values[field])
        validate_text(
            result,
            "maintenance_description",
            values["maintenance_description"],
            max_length=MAINTENANCE_DESCRIPTION_MAX_LENGTH,
        )

        if not result.is_valid:
            logger.warning(f"Rejected sale input: {result.to_dict()}")
            raise ValidationException("Sale input validation failed", result.to_dict())

    def _check_preconditions(self, customer_id: int, vehicle_id: int, salesperson_id: int) -> None:
        if not self.customer_repository.exists(customer_id):
            raise EntityNotFoundException("Customer", customer_id)

        vehicle = self.vehicle_repository.get_for_update(vehicle_id)
        if vehicle is None:
            raise EntityNotFoundException("Vehicle", vehicle_id)
        if not vehicle.is_available:
            raise VehicleNotAvailableException(vehicle_id, vehicle.status)

        if not self.salesperson_repository.exists(salesperson_id):
            raise EntityNotFoundException("Salesperson", salesperson_id)

    def _transform_error(self, error: Exception) -> Optional[DealershipException]:
        if not isinstance(error, SQLAlchemyError):
            return None

        original = str(getattr(error, "orig", None) or error)
        if _is_concurrency_error(error):
            return ConcurrentModificationException(
                "Sale aborted by a concurrent transaction",
                original_error=original,
                operation="record_sale",
            )
        return DatabaseException(
            "Sale could not be recorded",
            original_error=original,
            operation="record_sale",
        )
