# File: dealership/repositories/vehicle_repository.py

from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from dealership.db.models.enums import VehicleStatus
from dealership.db.models.vehicle import Vehicle
from dealership.repositories.base_repository import BaseRepository


class VehicleRepository(BaseRepository[Vehicle]):
    """
    Repository for Vehicle entity operations.

    Provides the locking read and the guarded status transition used when a
    vehicle is sold.
    """

    def __init__(self, session: Session):
        """
        Initialize the VehicleRepository.

        Args:
            session (Session): SQLAlchemy database session
        """
        super().__init__(session, Vehicle)

    def get_for_update(self, vehicle_id: int) -> Optional[Vehicle]:
        """
        Load a vehicle and lock its row for the rest of the transaction.

        Dialects without row locks (SQLite) ignore FOR UPDATE; the guarded
        update in mark_sold still prevents a double sale there.

        Args:
            vehicle_id (int): ID of the vehicle

        Returns:
            Optional[Vehicle]: The vehicle if found, None otherwise
        """
        stmt = (
            select(Vehicle)
            .where(Vehicle.vehicle_id == vehicle_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def mark_sold(self, vehicle_id: int) -> bool:
        """
        Transition a vehicle from Available to Sold.

        The status check is part of the UPDATE itself, so a vehicle sold by a
        concurrent transaction is never sold again.

        Args:
            vehicle_id (int): ID of the vehicle

        Returns:
            bool: True if exactly one Available vehicle was marked Sold
        """
        stmt = (
            update(Vehicle)
            .where(Vehicle.vehicle_id == vehicle_id)
            .where(Vehicle.status == VehicleStatus.AVAILABLE.value)
            .values(status=VehicleStatus.SOLD.value)
            .execution_options(synchronize_session=False)
        )
        result = self.session.execute(stmt)
        self.expire_cached(vehicle_id)
        return result.rowcount == 1
