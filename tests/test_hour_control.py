"""Tests for hour-control records."""

from datetime import date
from decimal import Decimal

import pytest

from maquitrack.domain.entities import Shift
from maquitrack.domain.errors import NotFoundError, ValidationError
from maquitrack.domain.hour_control import worked_hours


def test_worked_hours():
    assert worked_hours(Decimal("1500.00"), Decimal("1620.50")) == Decimal("120.50")


def test_worked_hours_rejects_negative():
    with pytest.raises(ValidationError):
        worked_hours(Decimal("1620.50"), Decimal("1600.00"))


def test_register_advances_hour_meter(temp_db, hour_control_service, project_service, sample_equipment):
    project_id = project_service.create_project("P-001", "Carretera Tramo 1")

    entry_id = hour_control_service.register(
        equipment_id=sample_equipment.id,
        date=date(2024, 1, 15),
        start_reading=Decimal("1500.00"),
        end_reading=Decimal("1620.50"),
        project_id=project_id,
        shift=Shift.MORNING,
        operator="J. PEREZ",
    )

    [entry] = hour_control_service.list_entries(equipment_id=sample_equipment.id)
    assert entry.id == entry_id
    assert entry.worked_hours == Decimal("120.50")
    assert entry.shift == Shift.MORNING
    assert entry.project_id == project_id
    assert temp_db.get_equipment(sample_equipment.id).hour_meter == Decimal("1620.50")


def test_register_rejects_end_below_start(temp_db, hour_control_service, sample_equipment):
    with pytest.raises(ValidationError):
        hour_control_service.register(
            equipment_id=sample_equipment.id,
            date=date(2024, 1, 15),
            start_reading=Decimal("1620.50"),
            end_reading=Decimal("1600.00"),
        )
    assert hour_control_service.list_entries() == []
    assert temp_db.get_equipment(sample_equipment.id).hour_meter == Decimal("1500.00")


def test_register_rejects_start_below_hour_meter(hour_control_service, sample_equipment):
    with pytest.raises(ValidationError):
        hour_control_service.register(
            equipment_id=sample_equipment.id,
            date=date(2024, 1, 15),
            start_reading=Decimal("1400"),
            end_reading=Decimal("1450"),
        )


def test_register_unknown_equipment(hour_control_service):
    with pytest.raises(NotFoundError):
        hour_control_service.register(
            equipment_id=999,
            date=date(2024, 1, 15),
            start_reading=Decimal("0"),
            end_reading=Decimal("1"),
        )


def test_list_entries_by_date_range(hour_control_service, sample_equipment):
    for day, start, end in [(10, "1500", "1508"), (11, "1508", "1516"), (12, "1516", "1524")]:
        hour_control_service.register(
            equipment_id=sample_equipment.id,
            date=date(2024, 1, day),
            start_reading=Decimal(start),
            end_reading=Decimal(end),
        )

    entries = hour_control_service.list_entries(start_date=date(2024, 1, 11), end_date=date(2024, 1, 12))

    assert [e.date for e in entries] == [date(2024, 1, 12), date(2024, 1, 11)]
