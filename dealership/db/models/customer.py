# File: dealership/db/models/customer.py
"""
Customer model.

Customers are read-only for the sale workflow; the service only checks that
the referenced row exists.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from dealership.db.models.base import Base, SerializableMixin


class Customer(Base, SerializableMixin):
    """
    Customer model representing dealership buyers.

    Attributes:
        customer_id: Primary key
        first_name: Customer first name
        last_name: Customer last name
        email: Contact email address
        phone: Contact phone number
        address: Street address
        city: City
        state: State or province
        zip_code: Postal code
    """

    __tablename__ = "customers"

    customer_id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(50))
    last_name = Column(String(50))
    email = Column(String(100))
    phone = Column(String(15))
    address = Column(String(255))
    city = Column(String(50))
    state = Column(String(50))
    zip_code = Column(String(10))

    # Relationships
    sales = relationship("Sale", back_populates="customer")

    def __repr__(self) -> str:
        return f"<Customer(customer_id={self.customer_id}, name='{self.first_name} {self.last_name}')>"
