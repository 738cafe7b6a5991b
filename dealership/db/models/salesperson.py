# File: dealership/db/models/salesperson.py

from sqlalchemy import Column, Integer, Numeric, String
from sqlalchemy.orm import relationship

from dealership.db.models.base import Base, SerializableMixin


class Salesperson(Base, SerializableMixin):
    """
    Salesperson model with denormalized sales counters.

    total_sales and total_revenue must equal the count and sum of committed
    sales attributed to the salesperson. They are only ever changed by
    relative UPDATE statements issued inside the sale transaction.
    """

    __tablename__ = "salespersons"

    salesperson_id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(50))
    last_name = Column(String(50))
    email = Column(String(100))
    phone = Column(String(15))
    total_sales = Column(Integer, nullable=False, default=0)
    total_revenue = Column(Numeric(18, 2), nullable=False, default=0)

    # Relationships
    sales = relationship("Sale", back_populates="salesperson")

    def __repr__(self) -> str:
        return f"<Salesperson(salesperson_id={self.salesperson_id}, total_sales={self.total_sales})>"
