"""Typed rows extracted from import spreadsheets.

Each category turns a raw row mapping (header label -> cell value) into its
own record type. Extraction only reads and coerces cells; checking the
values against business rules is left to import_validation.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Callable, Iterable, Mapping, Optional

from maquitrack.domain.entities import EquipmentStatus, InspectionResult, MaintenanceKind
from maquitrack.domain.import_layouts import (
    IMPORT_DATE,
    FieldType,
    ImportCategory,
    LayoutKind,
    SheetLayout,
)
from maquitrack.utils.date_parser import cell_to_date
from maquitrack.utils.number_parser import coerce_decimal, coerce_int


def find_cell(raw: Mapping[str, Any], aliases: Iterable[str]) -> Any:
    """Return the value under the first alias that holds a non-blank cell."""
    for alias in aliases:
        value = raw.get(alias)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    return None


def coerce(value: Any, field_type: FieldType) -> Any:
    """Coerce a cell to a field type; None when the cell does not hold one."""
    if value is None:
        return None
    if field_type == FieldType.DECIMAL:
        return coerce_decimal(value)
    if field_type == FieldType.INTEGER:
        return coerce_int(value)
    if field_type == FieldType.DATE:
        return cell_to_date(value)

    # Codes typed as numbers come back as floats ("101.0")
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, date):
        return value.isoformat()
    text = str(value).strip()
    return text or None


def extract_fields(raw: Mapping[str, Any], layout: SheetLayout) -> dict[str, Any]:
    """Read the fields of a layout that the row actually supplies.

    Fields whose cell is missing or cannot be coerced are left out.
    """
    values = {}
    for column in layout.fields:
        value = coerce(find_cell(raw, column.aliases), column.field_type)
        if value is not None:
            values[column.name] = value
    return values


def apply_defaults(
    supplied: Mapping[str, Any], layout: SheetLayout, import_date: date
) -> dict[str, Any]:
    """Fill every field of the layout, using its default where nothing was supplied."""
    values = {}
    for column in layout.fields:
        if column.name in supplied:
            values[column.name] = supplied[column.name]
            continue
        default = layout.default_for(column)
        if default is IMPORT_DATE:
            default = import_date
        elif default is not None and column.field_type == FieldType.DECIMAL:
            default = Decimal(default)
        values[column.name] = default
    return values


def parse_maintenance_kind(text: Optional[str]) -> MaintenanceKind:
    """Map free text to a maintenance kind; preventive unless it says otherwise."""
    normalized = (text or "").lower()
    if "correct" in normalized:
        return MaintenanceKind.CORRECTIVE
    if "emerg" in normalized:
        return MaintenanceKind.EMERGENCY
    return MaintenanceKind.PREVENTIVE


def parse_inspection_result(text: Optional[str]) -> InspectionResult:
    """Map free text to an inspection result; approved unless it says otherwise."""
    normalized = (text or "").lower()
    if "observ" in normalized:
        return InspectionResult.FLAGGED
    if "rechaz" in normalized:
        return InspectionResult.REJECTED
    return InspectionResult.APPROVED


@dataclass(kw_only=True)
class ImportRow:
    """Common state of an extracted row: position, outcome and notes."""

    row_num: int
    supplied: frozenset[str] = frozenset()
    error: Optional[str] = None
    warnings: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return self.error is None

    def reject(self, message: str) -> None:
        """Mark the row invalid. The first rejection is kept."""
        if self.error is None:
            self.error = message


@dataclass(kw_only=True)
class EquipmentRow(ImportRow):
    code: Optional[str] = None
    type: Optional[str] = None
    brand: Optional[str] = None
    model: Optional[str] = None
    serial: Optional[str] = None
    plate: Optional[str] = None
    year: Optional[int] = None
    hour_meter: Decimal = Decimal("0")
    hourly_rate: Decimal = Decimal("0")
    company: Optional[str] = None
    status: Optional[str] = None
    location: Optional[str] = None
    company_id: Optional[int] = None

    @property
    def equipment_status(self) -> Optional[EquipmentStatus]:
        """Operational status written by the import, if the row has one."""
        if self.status is None:
            return None
        if self.status.strip().upper() == EquipmentStatus.OPERATIONAL.value:
            return EquipmentStatus.OPERATIONAL
        return EquipmentStatus.IN_MAINTENANCE

    def attributes(self) -> dict[str, Any]:
        """Attributes to write when upserting the equipment.

        Only what the row supplied is written, so re-importing a sheet with
        fewer columns keeps what is already stored. The hour meter is always
        passed; the store never lets it go down.
        """
        attributes: dict[str, Any] = {"type": self.type, "hour_meter": self.hour_meter}
        for name in ("brand", "model", "serial", "plate", "year", "hourly_rate", "location"):
            if name in self.supplied:
                attributes[name] = getattr(self, name)
        if self.company_id is not None:
            attributes["company_id"] = self.company_id
        if self.equipment_status is not None:
            attributes["status"] = self.equipment_status
        return attributes


@dataclass(kw_only=True)
class InsuranceRow(ImportRow):
    equipment_ref: Optional[str] = None
    policy_number: Optional[str] = None
    insurer: Optional[str] = None
    start_date: Optional[date] = None
    expiry_date: Optional[date] = None
    premium: Decimal = Decimal("0")
    equipment_id: Optional[int] = None
    equipment_code: Optional[str] = None


@dataclass(kw_only=True)
class InspectionRow(ImportRow):
    equipment_ref: Optional[str] = None
    certificate_number: Optional[str] = None
    workshop: Optional[str] = None
    inspection_date: Optional[date] = None
    expiry_date: Optional[date] = None
    result: InspectionResult = InspectionResult.APPROVED
    cost: Decimal = Decimal("0")
    notes: Optional[str] = None
    equipment_id: Optional[int] = None
    equipment_code: Optional[str] = None


@dataclass(kw_only=True)
class MaintenanceRow(ImportRow):
    """A maintenance row.

    History rows describe the last maintenance a machine received (hour
    readings, no dates) and are stored as completed work. Other rows are
    planned maintenance and are stored as pending.
    """

    equipment_code: Optional[str] = None
    kind: MaintenanceKind = MaintenanceKind.PREVENTIVE
    description: Optional[str] = None
    scheduled_date: Optional[date] = None
    cost: Decimal = Decimal("0")
    provider: Optional[str] = None
    maintenance_hours: Optional[Decimal] = None
    next_due_hours: Optional[Decimal] = None
    current_hours: Optional[Decimal] = None
    operator: Optional[str] = None
    location: Optional[str] = None
    history: bool = False
    equipment_id: Optional[int] = None

    @property
    def is_history(self) -> bool:
        return (
            self.history
            or self.current_hours is not None
            or self.maintenance_hours is not None
        )

    def history_notes(self) -> str:
        return f"Importado. Operador: {self.operator or '-'}. Ubicación: {self.location or '-'}"


def parse_equipment_row(row_num: int, values: Mapping[str, Any], layout: SheetLayout) -> EquipmentRow:
    return EquipmentRow(
        row_num=row_num,
        code=values["code"],
        type=values["type"],
        brand=values["brand"],
        model=values["model"],
        serial=values["serial"],
        plate=values["plate"],
        year=values["year"],
        hour_meter=values["hour_meter"],
        hourly_rate=values["hourly_rate"],
        company=values["company"],
        status=values["status"],
        location=values["location"],
    )


def parse_insurance_row(row_num: int, values: Mapping[str, Any], layout: SheetLayout) -> InsuranceRow:
    return InsuranceRow(
        row_num=row_num,
        equipment_ref=values["equipment_ref"],
        policy_number=values["policy_number"],
        insurer=values["insurer"],
        start_date=values["start_date"],
        expiry_date=values["expiry_date"],
        premium=values["premium"],
    )


def parse_inspection_row(row_num: int, values: Mapping[str, Any], layout: SheetLayout) -> InspectionRow:
    return InspectionRow(
        row_num=row_num,
        equipment_ref=values["equipment_ref"],
        certificate_number=values["certificate_number"],
        workshop=values["workshop"],
        inspection_date=values["inspection_date"],
        expiry_date=values["expiry_date"],
        result=parse_inspection_result(values["result"]),
        cost=values["cost"],
        notes=values["notes"],
    )


def parse_maintenance_row(row_num: int, values: Mapping[str, Any], layout: SheetLayout) -> MaintenanceRow:
    return MaintenanceRow(
        row_num=row_num,
        equipment_code=values["equipment_code"],
        kind=parse_maintenance_kind(values["kind"]),
        description=values["description"],
        scheduled_date=values["scheduled_date"],
        cost=values["cost"],
        provider=values["provider"],
        maintenance_hours=values["maintenance_hours"],
        next_due_hours=values["next_due_hours"],
        current_hours=values["current_hours"],
        operator=values["operator"],
        location=values["location"],
        # The control workbook only tracks the last maintenance of each machine
        history=layout.kind == LayoutKind.CONTROL,
    )


RowParser = Callable[[int, Mapping[str, Any], SheetLayout], ImportRow]

ROW_PARSERS: dict[ImportCategory, RowParser] = {
    ImportCategory.EQUIPMENT: parse_equipment_row,
    ImportCategory.INSURANCE: parse_insurance_row,
    ImportCategory.INSPECTION: parse_inspection_row,
    ImportCategory.MAINTENANCE: parse_maintenance_row,
}


def parse_rows(
    numbered_rows: Iterable[tuple[int, Mapping[str, Any]]],
    layout: SheetLayout,
    import_date: date,
) -> list[ImportRow]:
    """Turn raw sheet rows into typed rows of the layout's category.

    Args:
        numbered_rows: (sheet row number, raw row) pairs, as read from the sheet
        layout: Layout describing the columns
        import_date: Day the import runs, for fields that default to it

    Returns:
        One typed row per data row. Rows without the layout's key field are
        legends or totals and are dropped.
    """
    parser = ROW_PARSERS[layout.category]
    rows = []
    for row_num, raw in numbered_rows:
        supplied = extract_fields(raw, layout)
        if layout.key_field is not None and layout.key_field not in supplied:
            continue
        row = parser(row_num, apply_defaults(supplied, layout, import_date), layout)
        row.supplied = frozenset(supplied)
        rows.append(row)
    return rows
