# File: dealership/repositories/salesperson_repository.py

from decimal import Decimal

from sqlalchemy import update
from sqlalchemy.orm import Session

from dealership.db.models.salesperson import Salesperson
from dealership.repositories.base_repository import BaseRepository


class SalespersonRepository(BaseRepository[Salesperson]):
    """
    Repository for Salesperson entity operations.
    """

    def __init__(self, session: Session):
        super().__init__(session, Salesperson)

    def increment_statistics(self, salesperson_id: int, sale_price: Decimal) -> bool:
        """
        Add one sale and its price to the salesperson's counters.

        Issued as a single relative UPDATE so concurrent sales by the same
        salesperson cannot lose an increment.

        Args:
            salesperson_id (int): ID of the salesperson
            sale_price (Decimal): Price to add to total_revenue

        Returns:
            bool: True if the salesperson row was updated
        """
        stmt = (
            update(Salesperson)
            .where(Salesperson.salesperson_id == salesperson_id)
            .values(
                total_sales=Salesperson.total_sales + 1,
                total_revenue=Salesperson.total_revenue + sale_price,
            )
            .execution_options(synchronize_session=False)
        )
        result = self.session.execute(stmt)
        self.expire_cached(salesperson_id)
        return result.rowcount == 1
