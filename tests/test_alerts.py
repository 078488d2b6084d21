"""Tests for alert priorities, scanning and acknowledgement."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from maquitrack.domain.alerts import priority_for
from maquitrack.domain.entities import AlertPriority, AlertType, MaintenanceKind
from maquitrack.domain.errors import NotFoundError

TODAY = date(2024, 3, 1)


@pytest.mark.parametrize(
    "alert_type, days, expected",
    [
        (AlertType.INSURANCE, 10, AlertPriority.URGENT),
        (AlertType.INSURANCE, 15, AlertPriority.URGENT),
        (AlertType.INSURANCE, 16, AlertPriority.HIGH),
        (AlertType.INSURANCE, 30, AlertPriority.HIGH),
        (AlertType.INSURANCE, 31, AlertPriority.NORMAL),
        (AlertType.MAINTENANCE, 7, AlertPriority.URGENT),
        (AlertType.MAINTENANCE, 8, AlertPriority.NORMAL),
        (AlertType.INSPECTION, 7, AlertPriority.URGENT),
        (AlertType.INSPECTION, 8, AlertPriority.HIGH),
    ],
)
def test_priority_tiers(alert_type, days, expected):
    assert priority_for(alert_type, days) == expected


def test_scan_creates_one_alert_per_entity(temp_db, alert_service, sample_equipment):
    temp_db.create_maintenance(
        equipment_id=sample_equipment.id,
        kind=MaintenanceKind.PREVENTIVE,
        description="Cambio de aceite",
        scheduled_date=TODAY + timedelta(days=5),
    )
    temp_db.create_insurance(
        equipment_id=sample_equipment.id,
        policy_number="POL-1",
        insurer="RIMAC",
        start_date=date(2023, 3, 20),
        expiry_date=TODAY + timedelta(days=20),
    )
    temp_db.create_inspection(
        equipment_id=sample_equipment.id,
        inspection_date=date(2023, 3, 10),
        expiry_date=TODAY + timedelta(days=12),
    )

    created = alert_service.scan(TODAY)
    again = alert_service.scan(TODAY)

    assert len(created) == 3
    assert again == []
    alerts = {alert.alert_type: alert for alert in alert_service.list_alerts()}
    assert alerts[AlertType.MAINTENANCE].priority == AlertPriority.URGENT
    assert alerts[AlertType.INSURANCE].priority == AlertPriority.HIGH
    assert alerts[AlertType.INSPECTION].priority == AlertPriority.HIGH
    assert "EXC-001" in alerts[AlertType.INSURANCE].message
    assert "ABC-123" in alerts[AlertType.INSURANCE].message


def test_scan_ignores_distant_and_inactive(temp_db, alert_service, sample_equipment):
    temp_db.create_maintenance(
        equipment_id=sample_equipment.id,
        kind=MaintenanceKind.PREVENTIVE,
        description="Overhaul",
        scheduled_date=TODAY + timedelta(days=40),
    )
    temp_db.create_insurance(
        equipment_id=sample_equipment.id,
        policy_number="POL-1",
        insurer="RIMAC",
        start_date=date(2023, 3, 10),
        expiry_date=TODAY + timedelta(days=10),
        active=False,
    )
    temp_db.create_inspection(
        equipment_id=sample_equipment.id,
        inspection_date=date(2023, 1, 1),
        expiry_date=TODAY - timedelta(days=1),
    )

    assert alert_service.scan(TODAY) == []


def test_acknowledged_alert_allows_a_new_one(temp_db, alert_service, sample_equipment):
    temp_db.create_insurance(
        equipment_id=sample_equipment.id,
        policy_number="POL-1",
        insurer="RIMAC",
        start_date=date(2023, 3, 10),
        expiry_date=TODAY + timedelta(days=10),
    )
    [alert_id] = alert_service.scan(TODAY)

    alert_service.acknowledge(alert_id)

    assert alert_service.list_alerts() == []
    assert len(alert_service.list_alerts(include_acknowledged=True)) == 1
    assert len(alert_service.scan(TODAY)) == 1


def test_acknowledge_unknown_alert(alert_service):
    with pytest.raises(NotFoundError):
        alert_service.acknowledge(999)


def test_insurance_import_alert_threshold(alert_service):
    assert alert_service.insurance_import_alert("EXC-001", TODAY + timedelta(days=30), TODAY) is None

    notice = alert_service.insurance_import_alert("EXC-001", TODAY + timedelta(days=29), TODAY)
    assert notice.alert_type == AlertType.INSURANCE
    assert notice.priority == AlertPriority.HIGH
    assert notice.days_remaining == 29
    assert "EXC-001" in notice.message

    expired = alert_service.insurance_import_alert("EXC-001", TODAY - timedelta(days=3), TODAY)
    assert expired.priority == AlertPriority.URGENT
    assert expired.days_remaining == -3
