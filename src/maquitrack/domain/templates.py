"""Downloadable import templates."""

from pathlib import Path
from typing import Any, BinaryIO

from maquitrack.domain.import_layouts import ImportCategory, get_layout
from maquitrack.utils.spreadsheet import write_workbook

SHEET_TITLES = {
    ImportCategory.EQUIPMENT: "Equipos",
    ImportCategory.INSURANCE: "SOAT",
    ImportCategory.INSPECTION: "Revisiones",
    ImportCategory.MAINTENANCE: "Mantenimientos",
}

# One illustrative row per template, keyed by field name
EXAMPLE_ROWS: dict[ImportCategory, dict[str, Any]] = {
    ImportCategory.EQUIPMENT: {
        "code": "EXC-001",
        "type": "EXCAVADORA",
        "brand": "CATERPILLAR",
        "model": "320D",
        "serial": "CAT0320DXYZ",
        "plate": "ABC-123",
        "year": 2018,
        "hour_meter": 1500.5,
        "hourly_rate": 180,
        "company": "JLMX",
        "status": "OPERATIVO",
        "location": "TRAMO 1",
    },
    ImportCategory.INSURANCE: {
        "equipment_ref": "EXC-001",
        "policy_number": "POL-2024-0001",
        "insurer": "RIMAC",
        "start_date": "2024-01-15",
        "expiry_date": "2025-01-15",
        "premium": 850,
    },
    ImportCategory.INSPECTION: {
        "equipment_ref": "EXC-001",
        "certificate_number": "CERT-0001",
        "workshop": "CENTRO DE REVISIONES",
        "inspection_date": "2024-02-01",
        "expiry_date": "2025-02-01",
        "result": "aprobado",
        "cost": 120,
        "notes": "",
    },
    ImportCategory.MAINTENANCE: {
        "equipment_code": "EXC-001",
        "kind": "preventivo",
        "description": "Cambio de aceite y filtros",
        "scheduled_date": "2024-03-01",
        "cost": 450,
        "provider": "INTERNO",
    },
}


def template_headers(category: ImportCategory) -> list[str]:
    """Header labels of a category's template: the first alias of each field."""
    return [column.aliases[0] for column in get_layout(category).fields]


def write_template(category: ImportCategory, destination: str | Path | BinaryIO) -> None:
    """Write the import template of a category as an .xlsx workbook.

    Args:
        category: Import category
        destination: Output path or binary file object
    """
    category = ImportCategory(category)
    example = EXAMPLE_ROWS[category]
    fields = get_layout(category).fields
    write_workbook(
        destination,
        SHEET_TITLES[category],
        template_headers(category),
        [[example.get(column.name) for column in fields]],
    )
