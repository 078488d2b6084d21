"""Tests for Database interface returning domain models."""

import pytest
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy.exc import IntegrityError

from maquitrack.domain import entities


class TestDatabaseInterface:
    """Tests to verify Database interface returns domain models."""

    def test_get_company_returns_domain_model(self, temp_db):
        company_id = temp_db.create_company(name="JOMEX S.A.C.", tax_id="20123456789")

        company = temp_db.get_company(company_id)

        assert isinstance(company, entities.Company)
        assert company.tax_id == "20123456789"
        assert isinstance(company.created_at, datetime)

    def test_upsert_equipment_creates_then_updates(self, temp_db):
        equipment_id, created = temp_db.upsert_equipment(
            "EXC-001", {"type": "EXCAVADORA", "hour_meter": Decimal("100")}
        )
        same_id, created_again = temp_db.upsert_equipment(
            "EXC-001", {"type": "EXCAVADORA", "brand": "CAT", "hour_meter": Decimal("90")}
        )

        equipment = temp_db.get_equipment(equipment_id)
        assert created and not created_again
        assert same_id == equipment_id
        assert isinstance(equipment, entities.Equipment)
        assert equipment.brand == "CAT"
        assert equipment.hour_meter == Decimal("100")

    def test_upsert_matches_code_ignoring_case(self, temp_db):
        equipment_id, _ = temp_db.upsert_equipment("EXC-001", {"type": "EXCAVADORA"})
        same_id, created = temp_db.upsert_equipment("exc-001 ", {"type": "EXCAVADORA", "brand": "CAT"})

        assert same_id == equipment_id
        assert not created
        assert temp_db.get_equipment_by_code("Exc-001").code == "EXC-001"
        assert len(temp_db.list_equipment()) == 1

    def test_insurance_stored_with_its_alert(self, temp_db, sample_equipment):
        notice = entities.AlertNotice(
            alert_type=entities.AlertType.INSURANCE,
            title="SOAT próximo a vencer",
            message="SOAT de EXC-001 vence el 11/03/2024",
            alert_date=date(2024, 3, 11),
            days_remaining=10,
            priority=entities.AlertPriority.URGENT,
        )
        kwargs = dict(
            equipment_id=sample_equipment.id,
            policy_number="POL-1",
            insurer="RIMAC",
            start_date=date(2023, 3, 11),
            expiry_date=date(2024, 3, 11),
            alert=notice,
        )
        insurance_id = temp_db.create_insurance(**kwargs)

        [alert] = temp_db.list_alerts()
        assert alert.reference_id == insurance_id
        assert alert.equipment_id == sample_equipment.id
        assert alert.priority == entities.AlertPriority.URGENT

        # A rejected policy leaves no alert behind
        with pytest.raises(IntegrityError):
            temp_db.create_insurance(**kwargs)
        assert len(temp_db.list_alerts()) == 1

    def test_insurance_unique_per_expiry(self, temp_db, sample_equipment):
        kwargs = dict(
            equipment_id=sample_equipment.id,
            policy_number="POL-1",
            insurer="RIMAC",
            start_date=date(2024, 1, 1),
            expiry_date=date(2025, 1, 1),
        )
        temp_db.create_insurance(**kwargs)

        assert temp_db.insurance_exists(sample_equipment.id, date(2025, 1, 1))
        assert not temp_db.insurance_exists(sample_equipment.id, date(2026, 1, 1))
        with pytest.raises(IntegrityError):
            temp_db.create_insurance(**kwargs)

        # The session is usable again after the rollback
        assert len(temp_db.list_insurance(equipment_id=sample_equipment.id)) == 1

    def test_list_insurance_filters(self, temp_db, sample_equipment):
        for expiry, active in [(date(2024, 3, 5), True), (date(2024, 3, 20), False), (date(2024, 6, 1), True)]:
            temp_db.create_insurance(
                equipment_id=sample_equipment.id,
                policy_number="POL",
                insurer="RIMAC",
                start_date=date(2023, 1, 1),
                expiry_date=expiry,
                active=active,
            )

        policies = temp_db.list_insurance(
            active_only=True, expiring_from=date(2024, 3, 1), expiring_to=date(2024, 3, 31)
        )

        assert [p.expiry_date for p in policies] == [date(2024, 3, 5)]

    def test_inspection_returns_domain_model(self, temp_db, sample_equipment):
        inspection_id = temp_db.create_inspection(
            equipment_id=sample_equipment.id,
            inspection_date=date(2024, 1, 15),
            expiry_date=date(2025, 1, 15),
            result=entities.InspectionResult.REJECTED,
        )

        [inspection] = temp_db.list_inspections(equipment_id=sample_equipment.id)
        assert inspection.id == inspection_id
        assert inspection.result == entities.InspectionResult.REJECTED
        assert temp_db.inspection_exists(sample_equipment.id, date(2025, 1, 15))

    def test_scheduled_maintenance_exists(self, temp_db, sample_equipment):
        temp_db.create_maintenance(
            equipment_id=sample_equipment.id,
            kind=entities.MaintenanceKind.PREVENTIVE,
            description="Cambio de aceite",
            scheduled_date=date(2024, 3, 10),
        )

        assert temp_db.scheduled_maintenance_exists(sample_equipment.id, "Cambio de aceite", date(2024, 3, 10))
        assert not temp_db.scheduled_maintenance_exists(sample_equipment.id, "Cambio de aceite", None)

    def test_open_alert_exists(self, temp_db, sample_equipment):
        alert_id = temp_db.create_alert(
            alert_type=entities.AlertType.INSPECTION,
            title="Revisión técnica próxima a vencer",
            message="...",
            alert_date=date(2024, 3, 10),
            days_remaining=9,
            priority=entities.AlertPriority.HIGH,
            equipment_id=sample_equipment.id,
            reference_id=5,
        )

        assert temp_db.open_alert_exists(entities.AlertType.INSPECTION, 5)
        assert not temp_db.open_alert_exists(entities.AlertType.INSURANCE, 5)
        temp_db.acknowledge_alert(alert_id)
        assert not temp_db.open_alert_exists(entities.AlertType.INSPECTION, 5)
        assert temp_db.get_alert(alert_id).acknowledged


class TestDatabaseFactory:
    """Tests for picking the database file."""

    def test_explicit_path_wins(self, monkeypatch):
        from maquitrack.database.factories import resolve_database_path

        monkeypatch.setenv("MAQUITRACK_DB_PATH", "/tmp/from-env.db")

        assert resolve_database_path("/tmp/explicit.db") == "/tmp/explicit.db"
        assert resolve_database_path() == "/tmp/from-env.db"

    def test_in_memory_database(self):
        from maquitrack.database.factories import create_sqlite_database

        db = create_sqlite_database(":memory:")
        db.connect()
        company_id = db.create_company(name="JLMX")

        assert db.get_company(company_id).name == "JLMX"
        db.disconnect()
