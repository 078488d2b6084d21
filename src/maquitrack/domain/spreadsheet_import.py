"""Spreadsheet import domain service.

An import runs in two steps. preview() reads a sheet, extracts typed rows
and validates them against a snapshot of the store; nothing is written.
commit() then writes the valid rows one at a time. A row that fails while
being written is reported and the run moves on to the next row; rows that
were already written stay written.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional

from maquitrack.database.base import Database
from maquitrack.domain.alerts import AlertService
from maquitrack.domain.entities import MaintenanceStatus
from maquitrack.domain.import_layouts import (
    CONTROL_IMPORT_ORDER,
    ImportCategory,
    LayoutKind,
    SheetLayout,
    get_layout,
)
from maquitrack.domain.import_log import ImportLog
from maquitrack.domain.import_rows import (
    EquipmentRow,
    ImportRow,
    InspectionRow,
    InsuranceRow,
    MaintenanceRow,
    parse_rows,
)
from maquitrack.domain.import_validation import RowValidator
from maquitrack.domain.reference_data import ReferenceData
from maquitrack.utils.spreadsheet import SpreadsheetReader, WorkbookSource

logger = logging.getLogger(__name__)


@dataclass
class ImportPreview:
    """Extracted and validated rows of one category, ready to commit."""

    category: ImportCategory
    layout: SheetLayout
    rows: list[ImportRow]
    import_date: date

    @property
    def valid_rows(self) -> list[ImportRow]:
        return [row for row in self.rows if row.valid]

    @property
    def invalid_rows(self) -> list[ImportRow]:
        return [row for row in self.rows if not row.valid]


@dataclass
class ImportResult:
    """Counts and error messages of one category run."""

    category: ImportCategory
    read: int = 0
    valid: int = 0
    invalid: int = 0
    imported: int = 0
    skipped: int = 0
    failed: int = 0
    errors: list[str] = field(default_factory=list)


def row_error(row_num: int, message: str) -> str:
    return f"Fila {row_num}: {message}"


class SpreadsheetImportService:
    """Service for importing equipment, insurance, inspections and maintenance from spreadsheets."""

    def __init__(
        self,
        db: Database,
        log: Optional[ImportLog] = None,
        today: Optional[date] = None,
        strict_companies: bool = False,
    ):
        """Initialize spreadsheet import service.

        Args:
            db: Database instance
            log: Import log receiving progress messages (a new one if omitted)
            today: Day the import runs (defaults to today)
            strict_companies: Reject equipment rows whose company is not
                recognized instead of assigning the default company
        """
        self.db = db
        self.log = log or ImportLog()
        self.today = today
        self.strict_companies = strict_companies
        self.alert_service = AlertService(db)

    def _import_date(self) -> date:
        return self.today or date.today()

    def preview(
        self,
        category: ImportCategory,
        reader: SpreadsheetReader,
        layout: Optional[SheetLayout] = None,
    ) -> ImportPreview:
        """Read and validate the rows of one category without writing anything.

        Args:
            category: What the sheet holds
            reader: Open workbook
            layout: Sheet layout (defaults to the category's template layout)

        Returns:
            ImportPreview with every extracted row, valid or not
        """
        category = ImportCategory(category)
        layout = layout or get_layout(category)
        import_date = self._import_date()

        numbered = reader.numbered_rows(layout.sheet_name, layout.header_offset)
        rows = parse_rows(numbered, layout, import_date)

        reference = ReferenceData.load(self.db)
        validator = RowValidator(reference, strict_companies=self.strict_companies)
        validator.validate_all(category, rows)

        preview = ImportPreview(category=category, layout=layout, rows=rows, import_date=import_date)
        self.log.info(
            f"{category.value}: {len(rows)} filas leídas, "
            f"{len(preview.valid_rows)} válidas, {len(preview.invalid_rows)} con errores"
        )
        for row in preview.invalid_rows:
            self.log.warning(row_error(row.row_num, row.error))
        return preview

    def commit(self, preview: ImportPreview) -> ImportResult:
        """Write the valid rows of a preview to the store.

        Rows are written in sheet order. A failure on one row is recorded in
        the result and the log, and the remaining rows are still written.

        Args:
            preview: Result of preview()

        Returns:
            ImportResult with counts and error messages
        """
        result = self._summarize(preview)
        writers = {
            ImportCategory.EQUIPMENT: self._write_equipment,
            ImportCategory.INSURANCE: self._write_insurance,
            ImportCategory.INSPECTION: self._write_inspection,
            ImportCategory.MAINTENANCE: self._write_maintenance,
        }
        write = writers[preview.category]

        for row in preview.valid_rows:
            for warning in row.warnings:
                self.log.warning(row_error(row.row_num, warning))
            try:
                written = write(row, preview)
            except Exception as e:
                logger.exception("Import of row %d failed", row.row_num)
                message = row_error(row.row_num, str(e))
                result.failed += 1
                result.errors.append(message)
                self.log.error(message)
                continue
            if written:
                result.imported += 1
            else:
                result.skipped += 1

        self.log.info(
            f"{preview.category.value}: {result.imported} importados, "
            f"{result.skipped} omitidos, {result.failed} fallidos"
        )
        return result

    def import_file(
        self, category: ImportCategory, source: WorkbookSource, dry_run: bool = False
    ) -> ImportResult:
        """Import a single-category spreadsheet laid out like the template.

        Args:
            category: What the spreadsheet holds
            source: Path, bytes or binary file of the workbook
            dry_run: Validate only, write nothing

        Returns:
            ImportResult for the category

        Raises:
            SpreadsheetError: If the workbook cannot be read
        """
        with SpreadsheetReader(source) as reader:
            preview = self.preview(category, reader)
        if dry_run:
            return self._summarize(preview)
        return self.commit(preview)

    def import_control_workbook(
        self,
        source: WorkbookSource,
        categories: Optional[Iterable[ImportCategory]] = None,
        dry_run: bool = False,
    ) -> list[ImportResult]:
        """Import the bulk control workbook, one sheet per category.

        Categories run in a fixed order (equipment first) and each one
        reloads the reference snapshot, so policies and maintenance can refer
        to equipment created earlier in the same run.

        Args:
            source: Path, bytes or binary file of the workbook
            categories: Categories to import (defaults to all)
            dry_run: Validate only, write nothing

        Returns:
            One ImportResult per category imported

        Raises:
            SpreadsheetError: If the workbook cannot be read
        """
        selected = set(ImportCategory(c) for c in categories) if categories else set(CONTROL_IMPORT_ORDER)
        results = []
        with SpreadsheetReader(source) as reader:
            for category in CONTROL_IMPORT_ORDER:
                if category not in selected:
                    continue
                layout = get_layout(category, LayoutKind.CONTROL)
                if not reader.has_sheet(layout.sheet_name):
                    self.log.warning(f"Hoja '{layout.sheet_name}' no encontrada")
                    results.append(ImportResult(category=category))
                    continue
                self.log.info(f"Procesando hoja '{layout.sheet_name}'")
                preview = self.preview(category, reader, layout)
                results.append(self._summarize(preview) if dry_run else self.commit(preview))
        return results

    def _summarize(self, preview: ImportPreview) -> ImportResult:
        invalid = preview.invalid_rows
        return ImportResult(
            category=preview.category,
            read=len(preview.rows),
            valid=len(preview.rows) - len(invalid),
            invalid=len(invalid),
            errors=[row_error(row.row_num, row.error) for row in invalid],
        )

    # Row writers return True when a record was written, False when skipped
    def _write_equipment(self, row: EquipmentRow, preview: ImportPreview) -> bool:
        equipment_id, created = self.db.upsert_equipment(row.code, row.attributes())
        logger.debug("%s equipment %s (id %d)", "Created" if created else "Updated", row.code, equipment_id)
        return True

    def _write_insurance(self, row: InsuranceRow, preview: ImportPreview) -> bool:
        if self.db.insurance_exists(row.equipment_id, row.expiry_date):
            return False

        # Control workbook rows carry no status; expired policies are stored inactive
        if preview.layout.kind == LayoutKind.CONTROL:
            active = row.expiry_date > preview.import_date
        else:
            active = True

        alert = self.alert_service.insurance_import_alert(
            row.equipment_code, row.expiry_date, preview.import_date
        )
        self.db.create_insurance(
            equipment_id=row.equipment_id,
            policy_number=row.policy_number,
            insurer=row.insurer,
            start_date=row.start_date,
            expiry_date=row.expiry_date,
            premium=row.premium,
            active=active,
            alert=alert,
        )
        if alert is not None:
            self.log.warning(alert.message)
        return True

    def _write_inspection(self, row: InspectionRow, preview: ImportPreview) -> bool:
        if self.db.inspection_exists(row.equipment_id, row.expiry_date):
            return False
        self.db.create_inspection(
            equipment_id=row.equipment_id,
            inspection_date=row.inspection_date,
            expiry_date=row.expiry_date,
            result=row.result,
            certificate_number=row.certificate_number,
            workshop=row.workshop,
            cost=row.cost,
            notes=row.notes,
        )
        return True

    def _write_maintenance(self, row: MaintenanceRow, preview: ImportPreview) -> bool:
        if not row.is_history:
            if self.db.scheduled_maintenance_exists(row.equipment_id, row.description, row.scheduled_date):
                return False
            self.db.create_maintenance(
                equipment_id=row.equipment_id,
                kind=row.kind,
                description=row.description,
                status=MaintenanceStatus.PENDING,
                scheduled_date=row.scheduled_date,
                cost=row.cost,
                provider=row.provider,
            )
            return True

        # The machine has run at least up to its last maintenance
        current = row.current_hours if row.current_hours is not None else row.maintenance_hours
        maintenance_id, hour_meter = self.db.record_last_maintenance(
            equipment_id=row.equipment_id,
            hour_meter_reading=row.maintenance_hours,
            current_hour_meter=current,
            description=row.description,
            kind=row.kind,
            next_due_hours=row.next_due_hours,
            provider=row.provider,
            notes=row.history_notes(),
        )
        if hour_meter is not None:
            self.log.info(f"Horómetro de {row.equipment_code} actualizado a {hour_meter}")
        return maintenance_id is not None
