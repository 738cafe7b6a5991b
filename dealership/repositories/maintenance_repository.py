# File: dealership/repositories/maintenance_repository.py

from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Session

from dealership.db.models.vehicle import Maintenance
from dealership.repositories.base_repository import BaseRepository


class MaintenanceRepository(BaseRepository[Maintenance]):
    """
    Repository for scheduled maintenance records.
    """

    def __init__(self, session: Session):
        super().__init__(session, Maintenance)

    def schedule(
        self,
        vehicle_id: int,
        maintenance_date: date,
        description: str,
        cost: Decimal,
    ) -> Maintenance:
        """
        Insert a maintenance appointment for a vehicle.

        Args:
            vehicle_id (int): Vehicle to service
            maintenance_date (date): Scheduled date
            description (str): Work to be done
            cost (Decimal): Expected cost

        Returns:
            Maintenance: The flushed maintenance record
        """
        return self.add(
            {
                "vehicle_id": vehicle_id,
                "maintenance_date": maintenance_date,
                "description": description,
                "cost": cost,
            }
        )
