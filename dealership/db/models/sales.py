# File: dealership/db/models/sales.py
"""
Sale model for the dealership schema.

A Sale row links a customer, a vehicle and a salesperson. It is created once
per successful sale transaction and never modified afterwards.
"""

from sqlalchemy import Column, Date, ForeignKey, Integer, Numeric
from sqlalchemy.orm import relationship

from dealership.db.models.base import Base, SerializableMixin


class Sale(Base, SerializableMixin):
    """
    Sale model representing a completed vehicle sale.

    Attributes:
        sale_id: Primary key (autogenerated)
        customer_id: Buyer
        vehicle_id: Vehicle sold
        salesperson_id: Salesperson credited with the sale
        sale_date: Date of sale
        sale_price: Agreed price
    """

    __tablename__ = "sales"

    sale_id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(Integer, ForeignKey("customers.customer_id"), nullable=False)
    vehicle_id = Column(Integer, ForeignKey("vehicles.vehicle_id"), nullable=False)
    salesperson_id = Column(
        Integer, ForeignKey("salespersons.salesperson_id"), nullable=False
    )
    sale_date = Column(Date, nullable=False)
    sale_price = Column(Numeric(18, 2), nullable=False)

    # Relationships
    customer = relationship("Customer", back_populates="sales")
    vehicle = relationship("Vehicle", back_populates="sales")
    salesperson = relationship("Salesperson", back_populates="sales")

    def __repr__(self) -> str:
        return f"<Sale(sale_id={self.sale_id}, vehicle_id={self.vehicle_id}, sale_price={self.sale_price})>"
