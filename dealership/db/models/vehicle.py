# File: dealership/db/models/vehicle.py
"""
Vehicle and maintenance models.

A vehicle moves from Available to Sold exactly once, when a sale is recorded
for it. Maintenance rows pre-schedule service appointments for sold vehicles.
"""

from sqlalchemy import Column, Date, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from dealership.db.models.base import Base, SerializableMixin
from dealership.db.models.enums import VehicleStatus


class Vehicle(Base, SerializableMixin):
    """
    Vehicle model representing an item of dealership inventory.

    Attributes:
        vehicle_id: Primary key
        make: Manufacturer
        model: Model name
        year: Model year
        type: Body type (Sedan, SUV, ...)
        price: List price
        status: Availability, one of VehicleStatus values
    """

    __tablename__ = "vehicles"

    vehicle_id = Column(Integer, primary_key=True, autoincrement=True)
    make = Column(String(50))
    model = Column(String(50))
    year = Column(Integer)
    type = Column(String(50))
    price = Column(Numeric(18, 2))
    status = Column(
        String(20), nullable=False, default=VehicleStatus.AVAILABLE.value
    )

    # Relationships
    sales = relationship("Sale", back_populates="vehicle")
    maintenance_records = relationship("Maintenance", back_populates="vehicle")

    @property
    def is_available(self) -> bool:
        return self.status == VehicleStatus.AVAILABLE.value

    def __repr__(self) -> str:
        return f"<Vehicle(vehicle_id={self.vehicle_id}, {self.year} {self.make} {self.model}, status='{self.status}')>"


class Maintenance(Base, SerializableMixin):
    """
    Scheduled maintenance appointment for a vehicle.

    Attributes:
        maintenance_id: Primary key (autogenerated)
        vehicle_id: Vehicle being serviced
        maintenance_date: Scheduled date
        description: Work to be done
        cost: Expected cost
    """

    __tablename__ = "maintenance"

    maintenance_id = Column(Integer, primary_key=True, autoincrement=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.vehicle_id"), nullable=False)
    maintenance_date = Column(Date, nullable=False)
    description = Column(String(255))
    cost = Column(Numeric(18, 2), nullable=False, default=0)

    # Relationships
    vehicle = relationship("Vehicle", back_populates="maintenance_records")

    def __repr__(self) -> str:
        return f"<Maintenance(maintenance_id={self.maintenance_id}, vehicle_id={self.vehicle_id}, date={self.maintenance_date})>"
