"""Validation rules for imported rows.

Rules run in order and the first failure decides the row's error message.
Rules that look up referenced records also store what they resolved on the
row (equipment ID, company ID) for the commit step.
"""

from typing import Callable, Iterable, Optional

from maquitrack.domain.import_layouts import ImportCategory
from maquitrack.domain.import_rows import (
    EquipmentRow,
    ImportRow,
    InspectionRow,
    InsuranceRow,
    MaintenanceRow,
)
from maquitrack.domain.reference_data import ReferenceData

CODE_REQUIRED = "Código requerido"
TYPE_REQUIRED = "Tipo requerido"
COMPANY_NOT_FOUND = "Empresa no encontrada"
EQUIPMENT_NOT_FOUND = "Equipo no encontrado"
DESCRIPTION_REQUIRED = "Descripción requerida"
MAINTENANCE_HOURS_REQUIRED = "Horómetro de mantenimiento requerido"
POLICY_REQUIRED = "N° Póliza requerido"
INSURER_REQUIRED = "Aseguradora requerida"
DATES_REQUIRED = "Fechas requeridas"
NEGATIVE_VALUE = "{label} no puede ser negativo"

NUMBER_LABELS = {
    "hour_meter": "Horómetro",
    "hourly_rate": "Tarifa por hora",
    "premium": "Prima",
    "cost": "Costo",
    "maintenance_hours": "Horómetro de mantenimiento",
    "current_hours": "Horas actuales",
    "next_due_hours": "Horas del próximo mantenimiento",
}


class RowValidator:
    """Applies the rules of one import category to extracted rows."""

    def __init__(self, reference: ReferenceData, strict_companies: bool = False):
        """Initialize validator.

        Args:
            reference: Snapshot of existing equipment and companies
            strict_companies: Reject equipment rows whose company is not
                recognized instead of assigning the default company
        """
        self.reference = reference
        self.strict_companies = strict_companies
        self._rules: dict[ImportCategory, list[Callable[[ImportRow], Optional[str]]]] = {
            ImportCategory.EQUIPMENT: [
                self._require_code,
                self._require_type,
                self._non_negative("hour_meter", "hourly_rate"),
                self._resolve_company,
            ],
            ImportCategory.INSURANCE: [
                self._resolve_equipment_by_code_or_plate,
                self._require_policy_number,
                self._require_insurer,
                self._require_insurance_dates,
                self._non_negative("premium"),
            ],
            ImportCategory.INSPECTION: [
                self._resolve_equipment_by_code_or_plate,
                self._require_inspection_dates,
                self._non_negative("cost"),
            ],
            ImportCategory.MAINTENANCE: [
                self._resolve_equipment_by_code,
                self._require_description,
                self._require_maintenance_hours,
                self._non_negative("maintenance_hours", "current_hours", "next_due_hours", "cost"),
            ],
        }

    def validate(self, category: ImportCategory, row: ImportRow) -> bool:
        """Run the category's rules on a row, stopping at the first failure.

        Returns:
            True if the row passed every rule
        """
        for rule in self._rules[ImportCategory(category)]:
            message = rule(row)
            if message is not None:
                row.reject(message)
                return False
        return True

    def validate_all(self, category: ImportCategory, rows: Iterable[ImportRow]) -> None:
        for row in rows:
            self.validate(category, row)

    # Shared rules
    @staticmethod
    def _non_negative(*fields: str) -> Callable[[ImportRow], Optional[str]]:
        def rule(row: ImportRow) -> Optional[str]:
            for name in fields:
                value = getattr(row, name)
                if value is not None and value < 0:
                    return NEGATIVE_VALUE.format(label=NUMBER_LABELS[name])
            return None

        return rule

    # Equipment rules
    def _require_code(self, row: EquipmentRow) -> Optional[str]:
        return None if row.code else CODE_REQUIRED

    def _require_type(self, row: EquipmentRow) -> Optional[str]:
        return None if row.type else TYPE_REQUIRED

    def _resolve_company(self, row: EquipmentRow) -> Optional[str]:
        # No company column: the stored company is left as it is
        if row.company is None:
            return None
        company_id, fell_back = self.reference.resolve_company(row.company)
        if fell_back:
            if self.strict_companies or company_id is None:
                return COMPANY_NOT_FOUND
            row.warnings.append(
                f"Empresa '{row.company}' no reconocida, asignada a la empresa por defecto"
            )
        row.company_id = company_id
        return None

    # Equipment lookups
    def _resolve_equipment_by_code(self, row: MaintenanceRow) -> Optional[str]:
        equipment = self.reference.find_equipment(row.equipment_code)
        if equipment is None:
            return EQUIPMENT_NOT_FOUND
        row.equipment_id = equipment.id
        return None

    def _resolve_equipment_by_code_or_plate(self, row: InsuranceRow | InspectionRow) -> Optional[str]:
        equipment = self.reference.find_equipment(row.equipment_ref, by_plate=True)
        if equipment is None:
            return EQUIPMENT_NOT_FOUND
        row.equipment_id = equipment.id
        row.equipment_code = equipment.code
        return None

    # Insurance rules
    def _require_policy_number(self, row: InsuranceRow) -> Optional[str]:
        return None if row.policy_number else POLICY_REQUIRED

    def _require_insurer(self, row: InsuranceRow) -> Optional[str]:
        return None if row.insurer else INSURER_REQUIRED

    def _require_insurance_dates(self, row: InsuranceRow) -> Optional[str]:
        if row.start_date is None or row.expiry_date is None:
            return DATES_REQUIRED
        return None

    # Inspection rules
    def _require_inspection_dates(self, row: InspectionRow) -> Optional[str]:
        if row.inspection_date is None or row.expiry_date is None:
            return DATES_REQUIRED
        return None

    # Maintenance rules
    def _require_description(self, row: MaintenanceRow) -> Optional[str]:
        return None if row.description else DESCRIPTION_REQUIRED

    def _require_maintenance_hours(self, row: MaintenanceRow) -> Optional[str]:
        if row.is_history and row.maintenance_hours is None:
            return MAINTENANCE_HOURS_REQUIRED
        return None
