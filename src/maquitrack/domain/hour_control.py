"""Hour-control (equipment usage) domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from maquitrack.database.base import Database
from maquitrack.domain.entities import HourControl, Shift
from maquitrack.domain.errors import (
    NotFoundError,
    ValidationError,
    equipment_not_found,
    project_not_found,
)

logger = logging.getLogger(__name__)


def worked_hours(start_reading: Decimal, end_reading: Decimal) -> Decimal:
    """Hours worked between two hour-meter readings.

    >>> worked_hours(Decimal("1500.00"), Decimal("1620.50"))
    Decimal('120.50')

    Raises:
        ValidationError: If the end reading is below the start reading
    """
    if end_reading < start_reading:
        raise ValidationError(
            f"End reading {end_reading} is lower than start reading {start_reading}"
        )
    return end_reading - start_reading


class HourControlService:
    """Service for recording equipment usage."""

    def __init__(self, db: Database):
        """Initialize hour-control service.

        Args:
            db: Database instance
        """
        self.db = db

    def register(
        self,
        equipment_id: int,
        date: date,
        start_reading: Decimal,
        end_reading: Decimal,
        project_id: Optional[int] = None,
        shift: Optional[Shift] = None,
        operator: Optional[str] = None,
        activity: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> int:
        """Record a usage entry and advance the equipment hour meter.

        Args:
            equipment_id: Equipment used
            date: Day of use
            start_reading: Hour meter at the start of the shift
            end_reading: Hour meter at the end of the shift
            project_id: Optional project the hours are billed to
            shift: Optional shift
            operator: Optional operator name
            activity: Optional description of the work
            notes: Optional notes

        Returns:
            Hour-control entry ID

        Raises:
            NotFoundError: If equipment or project doesn't exist
            ValidationError: If readings are inconsistent
        """
        equipment = self.db.get_equipment(equipment_id)
        if equipment is None:
            raise NotFoundError(equipment_not_found(equipment_id))
        if project_id is not None and self.db.get_project(project_id) is None:
            raise NotFoundError(project_not_found(project_id))

        hours = worked_hours(start_reading, end_reading)
        if start_reading < equipment.hour_meter:
            raise ValidationError(
                f"Start reading {start_reading} is lower than the current hour meter "
                f"of {equipment.code} ({equipment.hour_meter})"
            )

        entry_id = self.db.create_hour_control(
            equipment_id=equipment_id,
            date=date,
            start_reading=start_reading,
            end_reading=end_reading,
            worked_hours=hours,
            project_id=project_id,
            shift=Shift(shift) if shift is not None else None,
            operator=operator,
            activity=activity,
            notes=notes,
        )
        logger.info("Recorded %s hours for %s, hour meter now %s", hours, equipment.code, end_reading)
        return entry_id

    def list_entries(
        self,
        equipment_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[HourControl]:
        return self.db.list_hour_controls(equipment_id=equipment_id, start_date=start_date, end_date=end_date)
