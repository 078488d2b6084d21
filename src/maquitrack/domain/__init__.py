"""Domain layer for maquitrack application."""

from importlib import import_module

_SERVICES = {
    "AlertService": "maquitrack.domain.alerts",
    "CompanyService": "maquitrack.domain.equipment",
    "EquipmentService": "maquitrack.domain.equipment",
    "HourControlService": "maquitrack.domain.hour_control",
    "MaintenanceService": "maquitrack.domain.maintenance",
    "ProjectService": "maquitrack.domain.project",
    "SpreadsheetImportService": "maquitrack.domain.spreadsheet_import",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    # Services import the database layer, which imports domain entities;
    # load them on first use to keep that cycle out of package import.
    if name in _SERVICES:
        return getattr(import_module(_SERVICES[name]), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
