"""Expiry and due-date alerts domain service."""

import logging
from datetime import date, timedelta
from typing import Optional

from maquitrack.database.base import Database
from maquitrack.domain.entities import (
    Alert,
    AlertNotice,
    AlertPriority,
    AlertType,
    Equipment,
    Inspection,
    Insurance,
    Maintenance,
    MaintenanceStatus,
)
from maquitrack.domain.errors import NotFoundError, alert_not_found

logger = logging.getLogger(__name__)

# How far ahead each scan looks, in days
MAINTENANCE_LOOKAHEAD_DAYS = 15
INSURANCE_LOOKAHEAD_DAYS = 30
INSPECTION_LOOKAHEAD_DAYS = 15

# An imported policy expiring in fewer days than this raises an alert at once
INSURANCE_IMPORT_ALERT_DAYS = 30


def priority_for(alert_type: AlertType, days_remaining: int) -> AlertPriority:
    """Priority of an alert given the days left until the due date.

    >>> priority_for(AlertType.INSURANCE, 10)
    <AlertPriority.URGENT: 'urgente'>
    >>> priority_for(AlertType.INSPECTION, 12)
    <AlertPriority.HIGH: 'alta'>
    """
    alert_type = AlertType(alert_type)
    if alert_type == AlertType.INSURANCE:
        if days_remaining <= 15:
            return AlertPriority.URGENT
        if days_remaining <= 30:
            return AlertPriority.HIGH
        return AlertPriority.NORMAL
    if alert_type == AlertType.MAINTENANCE:
        return AlertPriority.URGENT if days_remaining <= 7 else AlertPriority.NORMAL
    return AlertPriority.URGENT if days_remaining <= 7 else AlertPriority.HIGH


def _plate(equipment: Optional[Equipment]) -> str:
    if equipment is None or not equipment.plate:
        return "S/P"
    return equipment.plate


def _code(equipment: Optional[Equipment]) -> str:
    return equipment.code if equipment is not None else "?"


class AlertService:
    """Service for creating, scanning and acknowledging alerts."""

    def __init__(self, db: Database):
        """Initialize alert service.

        Args:
            db: Database instance
        """
        self.db = db

    def _emit(
        self,
        alert_type: AlertType,
        reference_id: int,
        equipment_id: int,
        title: str,
        message: str,
        alert_date: date,
        days_remaining: int,
    ) -> Optional[int]:
        if self.db.open_alert_exists(alert_type, reference_id):
            return None
        alert_id = self.db.create_alert(
            alert_type=alert_type,
            title=title,
            message=message,
            alert_date=alert_date,
            days_remaining=days_remaining,
            priority=priority_for(alert_type, days_remaining),
            equipment_id=equipment_id,
            reference_id=reference_id,
        )
        logger.info("Created %s alert %d for reference %d", alert_type.value, alert_id, reference_id)
        return alert_id

    def insurance_import_alert(
        self, equipment_code: str, expiry_date: date, today: date
    ) -> Optional[AlertNotice]:
        """Alert to store with a newly imported policy that expires soon.

        Policies that have already expired get one too.

        Args:
            equipment_code: Code of the insured equipment, used for the message
            expiry_date: Policy expiry date
            today: Reference day for days remaining

        Returns:
            The alert, or None if the policy is not close to expiring
        """
        days = (expiry_date - today).days
        if days >= INSURANCE_IMPORT_ALERT_DAYS:
            return None
        return AlertNotice(
            alert_type=AlertType.INSURANCE,
            title="SOAT próximo a vencer",
            message=f"SOAT de {equipment_code} vence el {expiry_date:%d/%m/%Y}",
            alert_date=expiry_date,
            days_remaining=days,
            priority=priority_for(AlertType.INSURANCE, days),
        )

    def scan(self, today: Optional[date] = None) -> list[int]:
        """Create alerts for everything coming due.

        Looks at pending maintenance scheduled within the next 15 days,
        active insurance expiring within 30 days and inspections expiring
        within 15 days. Entities that already have an open alert are skipped.

        Args:
            today: Reference day (defaults to today)

        Returns:
            IDs of the alerts created
        """
        today = today or date.today()
        created = []
        for maintenance in self.db.list_maintenances(
            status=MaintenanceStatus.PENDING,
            scheduled_from=today,
            scheduled_to=today + timedelta(days=MAINTENANCE_LOOKAHEAD_DAYS),
        ):
            alert_id = self._maintenance_alert(maintenance, today)
            if alert_id is not None:
                created.append(alert_id)

        for insurance in self.db.list_insurance(
            active_only=True,
            expiring_from=today,
            expiring_to=today + timedelta(days=INSURANCE_LOOKAHEAD_DAYS),
        ):
            alert_id = self._insurance_alert(insurance, today)
            if alert_id is not None:
                created.append(alert_id)

        for inspection in self.db.list_inspections(
            expiring_from=today,
            expiring_to=today + timedelta(days=INSPECTION_LOOKAHEAD_DAYS),
        ):
            alert_id = self._inspection_alert(inspection, today)
            if alert_id is not None:
                created.append(alert_id)

        logger.info("Alert scan created %d alerts", len(created))
        return created

    def _maintenance_alert(self, maintenance: Maintenance, today: date) -> Optional[int]:
        equipment = self.db.get_equipment(maintenance.equipment_id)
        days = (maintenance.scheduled_date - today).days
        kind = maintenance.kind.value
        return self._emit(
            AlertType.MAINTENANCE,
            reference_id=maintenance.id,
            equipment_id=maintenance.equipment_id,
            title=f"Mantenimiento {kind} próximo",
            message=(
                f"El equipo {_code(equipment)} tiene un mantenimiento {kind} programado "
                f"para {maintenance.scheduled_date:%d/%m/%Y}. Faltan {days} días."
            ),
            alert_date=maintenance.scheduled_date,
            days_remaining=days,
        )

    def _insurance_alert(self, insurance: Insurance, today: date) -> Optional[int]:
        equipment = self.db.get_equipment(insurance.equipment_id)
        days = (insurance.expiry_date - today).days
        return self._emit(
            AlertType.INSURANCE,
            reference_id=insurance.id,
            equipment_id=insurance.equipment_id,
            title="SOAT próximo a vencer",
            message=(
                f"El SOAT del equipo {_code(equipment)} ({_plate(equipment)}) vence el "
                f"{insurance.expiry_date:%d/%m/%Y}. Faltan {days} días."
            ),
            alert_date=insurance.expiry_date,
            days_remaining=days,
        )

    def _inspection_alert(self, inspection: Inspection, today: date) -> Optional[int]:
        equipment = self.db.get_equipment(inspection.equipment_id)
        days = (inspection.expiry_date - today).days
        return self._emit(
            AlertType.INSPECTION,
            reference_id=inspection.id,
            equipment_id=inspection.equipment_id,
            title="Revisión técnica próxima a vencer",
            message=(
                f"La revisión técnica del equipo {_code(equipment)} ({_plate(equipment)}) vence el "
                f"{inspection.expiry_date:%d/%m/%Y}. Faltan {days} días."
            ),
            alert_date=inspection.expiry_date,
            days_remaining=days,
        )

    def list_alerts(self, include_acknowledged: bool = False) -> list[Alert]:
        """List alerts, open ones only unless include_acknowledged is set."""
        return self.db.list_alerts(include_acknowledged=include_acknowledged)

    def acknowledge(self, alert_id: int) -> None:
        """Acknowledge an alert.

        Raises:
            NotFoundError: If alert doesn't exist
        """
        if self.db.get_alert(alert_id) is None:
            raise NotFoundError(alert_not_found(alert_id))
        self.db.acknowledge_alert(alert_id)
