"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class SpreadsheetError(DomainError):
    """Workbook could not be opened or read."""


def equipment_not_found(equipment: int | str) -> str:
    """Return message for missing equipment by ID or code."""
    if isinstance(equipment, int):
        return f"Equipment {equipment} not found"
    return f"Equipment '{equipment}' not found"


def company_not_found(company: int | str) -> str:
    """Return message for missing company by ID or name."""
    if isinstance(company, int):
        return f"Company {company} not found"
    return f"Company '{company}' not found"


def project_not_found(project: int | str) -> str:
    """Return message for missing project by ID or code."""
    if isinstance(project, int):
        return f"Project {project} not found"
    return f"Project '{project}' not found"


def maintenance_not_found(maintenance_id: int) -> str:
    """Return message for missing maintenance record."""
    return f"Maintenance {maintenance_id} not found"


def alert_not_found(alert_id: int) -> str:
    """Return message for missing alert."""
    return f"Alert {alert_id} not found"


def duplicate_equipment_code(code: str) -> str:
    """Return message for an equipment code that is already registered."""
    return f"Equipment with code '{code}' already exists"


def invalid_status_transition(current: str, requested: str) -> str:
    """Return message for a maintenance status change that is not allowed."""
    return f"Cannot change maintenance status from '{current}' to '{requested}'"
