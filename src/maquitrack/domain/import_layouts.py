"""Column layouts for spreadsheet imports.

Each import category declares its target fields once, with the ordered list
of header labels accepted for each of them. Spreadsheet authors spell the
same column many ways ("Código", "codigo", "CÓDIGO"), so the first alias
found in a row wins.

Two layouts exist per category: the downloadable template (first sheet,
header on the first row) and the bulk "CONTROL DE MAQUINARIA" workbook
(named sheets with two title rows above the header).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional


class ImportCategory(str, Enum):
    """Record types that can be imported from a spreadsheet."""

    EQUIPMENT = "equipos"
    INSURANCE = "soat"
    INSPECTION = "revisiones"
    MAINTENANCE = "mantenimientos"


class FieldType(Enum):
    """How a cell is coerced."""

    TEXT = "text"
    DECIMAL = "decimal"
    INTEGER = "integer"
    DATE = "date"


class LayoutKind(str, Enum):
    """Which spreadsheet family a layout reads."""

    TEMPLATE = "template"
    CONTROL = "control"


# Default that resolves to the day the import runs
IMPORT_DATE = object()


@dataclass(frozen=True)
class FieldSpec:
    """A target field and the header labels it may appear under."""

    name: str
    aliases: tuple[str, ...]
    field_type: FieldType = FieldType.TEXT
    default: Any = None


@dataclass(frozen=True)
class SheetLayout:
    """Where a category lives in a workbook and how its columns are named."""

    category: ImportCategory
    kind: LayoutKind
    sheet_name: Optional[str]
    header_offset: int
    fields: tuple[FieldSpec, ...]
    # Rows without this field are not data rows (legends, totals) and are dropped
    key_field: Optional[str] = None
    defaults: Mapping[str, Any] = field(default_factory=dict)

    def default_for(self, column: FieldSpec) -> Any:
        """Default of a field in this layout."""
        return self.defaults.get(column.name, column.default)


EQUIPMENT_FIELDS = (
    FieldSpec("code", ("Código", "codigo", "CODIGO", "CÓDIGO", "Codigo")),
    FieldSpec("type", ("Tipo", "tipo", "TIPO")),
    FieldSpec("brand", ("Marca", "marca", "MARCA")),
    FieldSpec("model", ("Modelo", "modelo", "MODELO")),
    FieldSpec("serial", ("Serie", "serie", "SERIE")),
    FieldSpec("plate", ("Placa", "placa", "PLACA")),
    FieldSpec("year", ("Año", "año", "AÑO", "anio"), FieldType.INTEGER),
    FieldSpec(
        "hour_meter",
        ("Horómetro", "horometro", "Horometro", "HOROMETRO", "HORAS ACTUALES"),
        FieldType.DECIMAL,
        default=0,
    ),
    FieldSpec("hourly_rate", ("Tarifa", "tarifa", "TARIFA", "Tarifa/Hora"), FieldType.DECIMAL, default=0),
    FieldSpec("company", ("Empresa", "empresa", "EMPRESA")),
    FieldSpec("status", ("Estado", "estado", "ESTADO")),
    FieldSpec("location", ("Ubicación", "ubicacion", "TRAMO")),
)

INSURANCE_FIELDS = (
    FieldSpec("equipment_ref", ("Código Equipo", "codigo_equipo", "Equipo", "equipo", "CÓDIGO", "CODIGO")),
    FieldSpec("policy_number", ("Número Póliza", "numero_poliza", "Poliza", "PLACA/SERIE")),
    FieldSpec("insurer", ("Aseguradora", "aseguradora")),
    FieldSpec("start_date", ("Fecha Inicio", "fecha_inicio"), FieldType.DATE),
    FieldSpec(
        "expiry_date",
        ("Fecha Vencimiento", "fecha_vencimiento", "Vencimiento", "FECHA VENCIMIENTO"),
        FieldType.DATE,
    ),
    FieldSpec("premium", ("Monto", "monto"), FieldType.DECIMAL, default=0),
)

INSPECTION_FIELDS = (
    FieldSpec("equipment_ref", ("Código Equipo", "codigo_equipo", "Equipo", "equipo", "CÓDIGO", "CODIGO")),
    FieldSpec("certificate_number", ("Número Certificado", "numero_certificado", "Certificado")),
    FieldSpec("workshop", ("Taller", "taller", "Centro")),
    FieldSpec("inspection_date", ("Fecha Revisión", "fecha_revision"), FieldType.DATE),
    FieldSpec(
        "expiry_date",
        ("Fecha Vencimiento", "fecha_vencimiento", "Vencimiento", "FECHA VENCIMIENTO"),
        FieldType.DATE,
    ),
    FieldSpec("result", ("Resultado", "resultado"), default="aprobado"),
    FieldSpec("cost", ("Costo", "costo"), FieldType.DECIMAL, default=0),
    FieldSpec("notes", ("Observaciones", "observaciones")),
)

MAINTENANCE_FIELDS = (
    FieldSpec("equipment_code", ("Código Equipo", "codigo_equipo", "Equipo", "CODIGO", "CÓDIGO")),
    FieldSpec("kind", ("Tipo", "tipo"), default="preventivo"),
    FieldSpec("description", ("Descripción", "descripcion")),
    FieldSpec("scheduled_date", ("Fecha Programada", "fecha_programada", "Fecha"), FieldType.DATE),
    FieldSpec("cost", ("Costo", "costo"), FieldType.DECIMAL, default=0),
    FieldSpec("provider", ("Proveedor", "proveedor")),
    FieldSpec("maintenance_hours", ("MANTENIMIENTO",), FieldType.DECIMAL),
    FieldSpec("next_due_hours", ("MANTENIMIENTO PROX",), FieldType.DECIMAL),
    FieldSpec("current_hours", ("HORA ACTUAL",), FieldType.DECIMAL),
    FieldSpec("operator", ("OPERADOR",)),
    FieldSpec("location", ("TRAMO",)),
)

FIELDS_BY_CATEGORY = {
    ImportCategory.EQUIPMENT: EQUIPMENT_FIELDS,
    ImportCategory.INSURANCE: INSURANCE_FIELDS,
    ImportCategory.INSPECTION: INSPECTION_FIELDS,
    ImportCategory.MAINTENANCE: MAINTENANCE_FIELDS,
}

TEMPLATE_LAYOUTS = {
    category: SheetLayout(
        category=category,
        kind=LayoutKind.TEMPLATE,
        sheet_name=None,
        header_offset=0,
        fields=fields,
    )
    for category, fields in FIELDS_BY_CATEGORY.items()
}

CONTROL_HEADER_OFFSET = 2
NOT_SPECIFIED = "NO ESPECIFICADO"
NO_NUMBER = "S/N"

CONTROL_LAYOUTS = {
    ImportCategory.EQUIPMENT: SheetLayout(
        category=ImportCategory.EQUIPMENT,
        kind=LayoutKind.CONTROL,
        sheet_name="BD MAQUINARIA",
        header_offset=CONTROL_HEADER_OFFSET,
        fields=EQUIPMENT_FIELDS,
        key_field="code",
    ),
    # The control workbook has no insurer, policy or start-date columns
    ImportCategory.INSURANCE: SheetLayout(
        category=ImportCategory.INSURANCE,
        kind=LayoutKind.CONTROL,
        sheet_name="CONTROL SOAT",
        header_offset=CONTROL_HEADER_OFFSET,
        fields=INSURANCE_FIELDS,
        key_field="equipment_ref",
        defaults={"policy_number": NO_NUMBER, "insurer": NOT_SPECIFIED, "start_date": IMPORT_DATE},
    ),
    ImportCategory.INSPECTION: SheetLayout(
        category=ImportCategory.INSPECTION,
        kind=LayoutKind.CONTROL,
        sheet_name="REVISIONES TECNICAS",
        header_offset=CONTROL_HEADER_OFFSET,
        fields=INSPECTION_FIELDS,
        key_field="equipment_ref",
        defaults={
            "certificate_number": NO_NUMBER,
            "workshop": NOT_SPECIFIED,
            "inspection_date": IMPORT_DATE,
            "notes": "Importado desde Excel",
        },
    ),
    ImportCategory.MAINTENANCE: SheetLayout(
        category=ImportCategory.MAINTENANCE,
        kind=LayoutKind.CONTROL,
        sheet_name="CONTROL MANTENIMIENTOS",
        header_offset=CONTROL_HEADER_OFFSET,
        fields=MAINTENANCE_FIELDS,
        key_field="equipment_code",
        defaults={
            "description": "Importación Inicial - Último Mantenimiento Registrado",
            "provider": "INTERNO",
        },
    ),
}

# Order in which a control workbook is imported: later categories look up
# equipment created by the first one
CONTROL_IMPORT_ORDER = (
    ImportCategory.EQUIPMENT,
    ImportCategory.INSURANCE,
    ImportCategory.INSPECTION,
    ImportCategory.MAINTENANCE,
)


def get_layout(category: ImportCategory, kind: LayoutKind = LayoutKind.TEMPLATE) -> SheetLayout:
    """Look up the layout of a category."""
    layouts = TEMPLATE_LAYOUTS if kind == LayoutKind.TEMPLATE else CONTROL_LAYOUTS
    return layouts[ImportCategory(category)]
