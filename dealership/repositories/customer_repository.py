# File: dealership/repositories/customer_repository.py

from sqlalchemy.orm import Session

from dealership.db.models.customer import Customer
from dealership.repositories.base_repository import BaseRepository


class CustomerRepository(BaseRepository[Customer]):
    """
    Repository for Customer entity operations.

    Customers are only looked up by the sale workflow.
    """

    def __init__(self, session: Session):
        super().__init__(session, Customer)
