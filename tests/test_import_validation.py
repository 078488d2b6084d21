"""Tests for import row validation rules."""

from datetime import date
from decimal import Decimal

import pytest

from maquitrack.domain.import_layouts import ImportCategory
from maquitrack.domain.import_rows import EquipmentRow, InspectionRow, InsuranceRow, MaintenanceRow
from maquitrack.domain.import_validation import RowValidator
from maquitrack.domain.reference_data import ReferenceData


@pytest.fixture
def validator(temp_db, sample_equipment):
    return RowValidator(ReferenceData.load(temp_db))


class TestEquipmentRules:
    """Tests for equipment rows."""

    def test_valid_row(self, validator):
        row = EquipmentRow(row_num=2, code="EXC-009", type="EXCAVADORA")
        assert validator.validate(ImportCategory.EQUIPMENT, row)
        assert row.error is None

    def test_missing_code(self, validator):
        row = EquipmentRow(row_num=2, type="EXCAVADORA")
        assert not validator.validate(ImportCategory.EQUIPMENT, row)
        assert row.error == "Código requerido"

    def test_missing_type(self, validator):
        row = EquipmentRow(row_num=2, code="EXC-009")
        validator.validate(ImportCategory.EQUIPMENT, row)
        assert row.error == "Tipo requerido"

    def test_first_failing_rule_wins(self, validator):
        row = EquipmentRow(row_num=2)
        validator.validate(ImportCategory.EQUIPMENT, row)
        assert row.error == "Código requerido"

    def test_company_is_resolved(self, validator, sample_companies):
        row = EquipmentRow(row_num=2, code="EXC-009", type="EXCAVADORA", company="Maquinarias Jomex")
        validator.validate(ImportCategory.EQUIPMENT, row)
        assert row.company_id == sample_companies["jomex"]
        assert row.warnings == []

    def test_unknown_company_falls_back_with_warning(self, validator, sample_companies):
        row = EquipmentRow(row_num=2, code="EXC-009", type="EXCAVADORA", company="DESCONOCIDA SAC")
        assert validator.validate(ImportCategory.EQUIPMENT, row)
        assert row.company_id == sample_companies["jlmx"]
        assert len(row.warnings) == 1
        assert "DESCONOCIDA SAC" in row.warnings[0]

    def test_unknown_company_rejected_in_strict_mode(self, temp_db, sample_equipment):
        strict = RowValidator(ReferenceData.load(temp_db), strict_companies=True)
        row = EquipmentRow(row_num=2, code="EXC-009", type="EXCAVADORA", company="DESCONOCIDA SAC")
        assert not strict.validate(ImportCategory.EQUIPMENT, row)
        assert row.error == "Empresa no encontrada"

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"hour_meter": Decimal("-250")}, "Horómetro no puede ser negativo"),
            ({"hourly_rate": Decimal("-1")}, "Tarifa por hora no puede ser negativo"),
        ],
    )
    def test_negative_numbers_rejected(self, validator, overrides, message):
        row = EquipmentRow(row_num=2, code="EXC-009", type="EXCAVADORA", **overrides)
        assert not validator.validate(ImportCategory.EQUIPMENT, row)
        assert row.error == message

    def test_zero_hour_meter_is_valid(self, validator):
        row = EquipmentRow(row_num=2, code="EXC-009", type="EXCAVADORA", hour_meter=Decimal("0"))
        assert validator.validate(ImportCategory.EQUIPMENT, row)

    def test_no_company_column_leaves_company_unset(self, validator):
        row = EquipmentRow(row_num=2, code="EXC-009", type="EXCAVADORA")
        validator.validate(ImportCategory.EQUIPMENT, row)
        assert row.company_id is None


class TestInsuranceRules:
    """Tests for insurance rows."""

    def _row(self, **overrides):
        values = dict(
            row_num=2,
            equipment_ref="EXC-001",
            policy_number="POL-1",
            insurer="RIMAC",
            start_date=date(2024, 1, 1),
            expiry_date=date(2025, 1, 1),
        )
        values.update(overrides)
        return InsuranceRow(**values)

    def test_valid_row_resolves_equipment(self, validator, sample_equipment):
        row = self._row()
        assert validator.validate(ImportCategory.INSURANCE, row)
        assert row.equipment_id == sample_equipment.id
        assert row.equipment_code == "EXC-001"

    def test_equipment_found_by_plate_case_insensitive(self, validator, sample_equipment):
        row = self._row(equipment_ref="abc-123")
        assert validator.validate(ImportCategory.INSURANCE, row)
        assert row.equipment_id == sample_equipment.id

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"equipment_ref": "NOPE"}, "Equipo no encontrado"),
            ({"policy_number": None}, "N° Póliza requerido"),
            ({"insurer": None}, "Aseguradora requerida"),
            ({"start_date": None}, "Fechas requeridas"),
            ({"expiry_date": None}, "Fechas requeridas"),
            ({"premium": Decimal("-10")}, "Prima no puede ser negativo"),
        ],
    )
    def test_rejections(self, validator, overrides, message):
        row = self._row(**overrides)
        assert not validator.validate(ImportCategory.INSURANCE, row)
        assert row.error == message


class TestInspectionRules:
    """Tests for inspection rows."""

    def test_valid_row(self, validator, sample_equipment):
        row = InspectionRow(
            row_num=2, equipment_ref="exc-001", inspection_date=date(2024, 1, 1), expiry_date=date(2025, 1, 1)
        )
        assert validator.validate(ImportCategory.INSPECTION, row)
        assert row.equipment_id == sample_equipment.id

    def test_unknown_equipment(self, validator):
        row = InspectionRow(row_num=2, equipment_ref="ZZZ", inspection_date=date(2024, 1, 1))
        validator.validate(ImportCategory.INSPECTION, row)
        assert row.error == "Equipo no encontrado"

    def test_missing_dates(self, validator):
        row = InspectionRow(row_num=2, equipment_ref="EXC-001", inspection_date=date(2024, 1, 1))
        validator.validate(ImportCategory.INSPECTION, row)
        assert row.error == "Fechas requeridas"


class TestMaintenanceRules:
    """Tests for maintenance rows."""

    def test_equipment_matched_by_code_only(self, validator):
        """Maintenance rows do not match plates."""
        row = MaintenanceRow(row_num=2, equipment_code="ABC-123", description="Cambio de aceite")
        validator.validate(ImportCategory.MAINTENANCE, row)
        assert row.error == "Equipo no encontrado"

    def test_missing_description(self, validator):
        row = MaintenanceRow(row_num=2, equipment_code="EXC-001")
        validator.validate(ImportCategory.MAINTENANCE, row)
        assert row.error == "Descripción requerida"

    def test_history_row_needs_maintenance_reading(self, validator):
        row = MaintenanceRow(
            row_num=4, equipment_code="EXC-001", description="Último", current_hours=Decimal("1600")
        )
        validator.validate(ImportCategory.MAINTENANCE, row)
        assert row.error == "Horómetro de mantenimiento requerido"

    def test_valid_plan_row(self, validator, sample_equipment):
        row = MaintenanceRow(row_num=2, equipment_code="exc-001", description="Cambio de aceite")
        assert validator.validate(ImportCategory.MAINTENANCE, row)
        assert row.equipment_id == sample_equipment.id

    @pytest.mark.parametrize(
        "overrides, message",
        [
            (
                {"maintenance_hours": Decimal("-5"), "current_hours": Decimal("100")},
                "Horómetro de mantenimiento no puede ser negativo",
            ),
            (
                {"maintenance_hours": Decimal("90"), "current_hours": Decimal("-100")},
                "Horas actuales no puede ser negativo",
            ),
        ],
    )
    def test_negative_hours_rejected(self, validator, overrides, message):
        row = MaintenanceRow(row_num=5, equipment_code="EXC-001", description="Último", **overrides)
        assert not validator.validate(ImportCategory.MAINTENANCE, row)
        assert row.error == message
