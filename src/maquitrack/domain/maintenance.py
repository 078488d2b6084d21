"""Maintenance domain service."""

from datetime import date
from typing import Optional

from maquitrack.database.base import Database
from maquitrack.domain.entities import Maintenance, MaintenanceStatus
from maquitrack.domain.errors import (
    NotFoundError,
    ValidationError,
    invalid_status_transition,
    maintenance_not_found,
)

# Allowed status changes; completed and cancelled are final
STATUS_TRANSITIONS = {
    MaintenanceStatus.PENDING: {MaintenanceStatus.IN_PROGRESS, MaintenanceStatus.CANCELLED},
    MaintenanceStatus.IN_PROGRESS: {MaintenanceStatus.COMPLETED, MaintenanceStatus.CANCELLED},
    MaintenanceStatus.COMPLETED: set(),
    MaintenanceStatus.CANCELLED: set(),
}


class MaintenanceService:
    """Service for tracking maintenance work."""

    def __init__(self, db: Database):
        """Initialize maintenance service.

        Args:
            db: Database instance
        """
        self.db = db

    def change_status(
        self,
        maintenance_id: int,
        status: MaintenanceStatus,
        executed_date: Optional[date] = None,
    ) -> None:
        """Move a maintenance record to a new status.

        Completing a maintenance stamps its executed date (today unless given).

        Args:
            maintenance_id: Maintenance ID
            status: New status
            executed_date: Day the work was done, for completed maintenance

        Raises:
            NotFoundError: If maintenance doesn't exist
            ValidationError: If the transition is not allowed
        """
        status = MaintenanceStatus(status)
        maintenance = self.db.get_maintenance(maintenance_id)
        if maintenance is None:
            raise NotFoundError(maintenance_not_found(maintenance_id))
        if status not in STATUS_TRANSITIONS[maintenance.status]:
            raise ValidationError(invalid_status_transition(maintenance.status.value, status.value))

        if status == MaintenanceStatus.COMPLETED and executed_date is None:
            executed_date = date.today()
        self.db.update_maintenance_status(maintenance_id, status, executed_date=executed_date)

    def list_maintenances(
        self,
        equipment_id: Optional[int] = None,
        status: Optional[MaintenanceStatus] = None,
    ) -> list[Maintenance]:
        return self.db.list_maintenances(equipment_id=equipment_id, status=status)
