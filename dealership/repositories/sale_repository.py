# File: dealership/repositories/sale_repository.py

from datetime import date
from decimal import Decimal
from typing import Tuple

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from dealership.db.models.sales import Sale
from dealership.repositories.base_repository import BaseRepository


class SaleRepository(BaseRepository[Sale]):
    """
    Repository for Sale entity operations.

    Sales are inserted once and never updated by this service.
    """

    def __init__(self, session: Session):
        """
        Initialize the SaleRepository.

        Args:
            session (Session): SQLAlchemy database session
        """
        super().__init__(session, Sale)

    def create_sale(
        self,
        customer_id: int,
        vehicle_id: int,
        salesperson_id: int,
        sale_date: date,
        sale_price: Decimal,
    ) -> Sale:
        """
        Insert a sale row and return it with its generated sale_id.

        Args:
            customer_id (int): Buyer
            vehicle_id (int): Vehicle sold
            salesperson_id (int): Salesperson credited
            sale_date (date): Date of sale
            sale_price (Decimal): Agreed price

        Returns:
            Sale: The flushed sale
        """
        return self.add(
            {
                "customer_id": customer_id,
                "vehicle_id": vehicle_id,
                "salesperson_id": salesperson_id,
                "sale_date": sale_date,
                "sale_price": sale_price,
            }
        )

    def aggregate_for_salesperson(self, salesperson_id: int) -> Tuple[int, Decimal]:
        """
        Derive sale count and revenue for a salesperson from the sales table.

        Args:
            salesperson_id (int): ID of the salesperson

        Returns:
            Tuple[int, Decimal]: (number of sales, sum of sale prices)
        """
        stmt = select(
            func.count(Sale.sale_id), func.coalesce(func.sum(Sale.sale_price), 0)
        ).where(Sale.salesperson_id == salesperson_id)
        count, revenue = self.session.execute(stmt).one()
        return int(count), Decimal(str(revenue)).quantize(Decimal("0.01"))
