"""Tests for maintenance status changes and the last-maintenance record."""

from datetime import date
from decimal import Decimal

import pytest

from maquitrack.domain.entities import MaintenanceKind, MaintenanceStatus
from maquitrack.domain.errors import NotFoundError, ValidationError


@pytest.fixture
def pending_maintenance(temp_db, sample_equipment):
    return temp_db.create_maintenance(
        equipment_id=sample_equipment.id,
        kind=MaintenanceKind.PREVENTIVE,
        description="Cambio de aceite",
        scheduled_date=date(2024, 3, 10),
    )


def test_forward_transitions(temp_db, maintenance_service, pending_maintenance):
    maintenance_service.change_status(pending_maintenance, MaintenanceStatus.IN_PROGRESS)
    maintenance_service.change_status(pending_maintenance, MaintenanceStatus.COMPLETED, executed_date=date(2024, 3, 11))

    record = temp_db.get_maintenance(pending_maintenance)
    assert record.status == MaintenanceStatus.COMPLETED
    assert record.executed_date == date(2024, 3, 11)


def test_completion_defaults_executed_date_to_today(temp_db, maintenance_service, pending_maintenance):
    maintenance_service.change_status(pending_maintenance, MaintenanceStatus.IN_PROGRESS)
    maintenance_service.change_status(pending_maintenance, MaintenanceStatus.COMPLETED)

    assert temp_db.get_maintenance(pending_maintenance).executed_date == date.today()


@pytest.mark.parametrize("path", [["cancelado"], ["en_proceso", "cancelado"]])
def test_cancellation(temp_db, maintenance_service, pending_maintenance, path):
    for status in path:
        maintenance_service.change_status(pending_maintenance, status)
    assert temp_db.get_maintenance(pending_maintenance).status == MaintenanceStatus.CANCELLED


@pytest.mark.parametrize(
    "path",
    [
        ["completado"],
        ["en_proceso", "pendiente"],
        ["cancelado", "en_proceso"],
        ["en_proceso", "completado", "cancelado"],
    ],
)
def test_invalid_transitions(maintenance_service, pending_maintenance, path):
    *allowed, rejected = path
    for status in allowed:
        maintenance_service.change_status(pending_maintenance, status)
    with pytest.raises(ValidationError):
        maintenance_service.change_status(pending_maintenance, rejected)


def test_unknown_maintenance(maintenance_service):
    with pytest.raises(NotFoundError):
        maintenance_service.change_status(999, MaintenanceStatus.IN_PROGRESS)


def test_record_last_maintenance_advances_hour_meter(temp_db, sample_equipment):
    maintenance_id, hour_meter = temp_db.record_last_maintenance(
        equipment_id=sample_equipment.id,
        hour_meter_reading=Decimal("1450"),
        current_hour_meter=Decimal("1700"),
        description="Último mantenimiento",
        next_due_hours=Decimal("1700"),
    )

    assert maintenance_id is not None
    assert hour_meter == Decimal("1700")
    assert temp_db.get_maintenance(maintenance_id).status == MaintenanceStatus.COMPLETED
    assert temp_db.get_equipment(sample_equipment.id).hour_meter == Decimal("1700")


def test_record_last_maintenance_is_insert_if_absent(temp_db, sample_equipment):
    kwargs = dict(
        equipment_id=sample_equipment.id,
        hour_meter_reading=Decimal("1450"),
        description="Último mantenimiento",
    )
    temp_db.record_last_maintenance(current_hour_meter=Decimal("1600"), **kwargs)
    second, hour_meter = temp_db.record_last_maintenance(current_hour_meter=Decimal("1650"), **kwargs)

    assert second is None
    assert hour_meter == Decimal("1650")
    assert len(temp_db.list_maintenances(equipment_id=sample_equipment.id)) == 1
    assert temp_db.get_equipment(sample_equipment.id).hour_meter == Decimal("1650")


def test_record_last_maintenance_never_lowers_hour_meter(temp_db, sample_equipment):
    maintenance_id, hour_meter = temp_db.record_last_maintenance(
        equipment_id=sample_equipment.id,
        hour_meter_reading=Decimal("1000"),
        current_hour_meter=Decimal("1200"),
        description="Último mantenimiento",
    )

    assert maintenance_id is not None
    assert hour_meter is None
    assert temp_db.get_equipment(sample_equipment.id).hour_meter == Decimal("1500")
