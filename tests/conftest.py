"""Shared pytest fixtures for maquitrack tests."""

import tempfile
import os
from decimal import Decimal
from pathlib import Path
import pytest
from openpyxl import Workbook

from maquitrack.database.factories import create_sqlite_database
from maquitrack.domain.alerts import AlertService
from maquitrack.domain.equipment import CompanyService, EquipmentService
from maquitrack.domain.hour_control import HourControlService
from maquitrack.domain.maintenance import MaintenanceService
from maquitrack.domain.project import ProjectService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def company_service(temp_db):
    """Create a CompanyService with a temporary database."""
    return CompanyService(temp_db)


@pytest.fixture
def equipment_service(temp_db):
    """Create an EquipmentService with a temporary database."""
    return EquipmentService(temp_db)


@pytest.fixture
def project_service(temp_db):
    """Create a ProjectService with a temporary database."""
    return ProjectService(temp_db)


@pytest.fixture
def hour_control_service(temp_db):
    """Create an HourControlService with a temporary database."""
    return HourControlService(temp_db)


@pytest.fixture
def maintenance_service(temp_db):
    """Create a MaintenanceService with a temporary database."""
    return MaintenanceService(temp_db)


@pytest.fixture
def alert_service(temp_db):
    """Create an AlertService with a temporary database."""
    return AlertService(temp_db)


@pytest.fixture
def sample_companies(company_service):
    """Register the three owner companies, JLMX first (the default company)."""
    return {
        "jlmx": company_service.create_company("JLMX CONTRATISTAS GENERALES"),
        "jomex": company_service.create_company("JOMEX S.A.C."),
        "jorge": company_service.create_company("JORGE CUSMA E.I.R.L."),
    }


@pytest.fixture
def sample_equipment(equipment_service, sample_companies):
    """Create a sample excavator with a plate and 1500 hours."""
    equipment_id = equipment_service.create_equipment(
        code="EXC-001",
        type="EXCAVADORA",
        brand="CATERPILLAR",
        model="320D",
        plate="ABC-123",
        hour_meter=Decimal("1500.00"),
        hourly_rate=Decimal("180"),
        company_id=sample_companies["jlmx"],
    )
    return equipment_service.get_equipment(equipment_id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def make_workbook(tmp_path):
    """Return a builder writing .xlsx files from {sheet name: rows}.

    Rows are written as given, starting at row 1, so title rows above the
    header are part of the list.
    """

    def build(sheets: dict[str, list[list]], name: str = "book.xlsx") -> Path:
        workbook = Workbook()
        workbook.remove(workbook.active)
        for sheet_name, rows in sheets.items():
            worksheet = workbook.create_sheet(sheet_name)
            for row in rows:
                worksheet.append(row)
        path = tmp_path / name
        workbook.save(path)
        return path

    return build
