"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so string columns become domain
enums in one place.
"""

from decimal import Decimal
from typing import Optional

from maquitrack.domain import entities as domain
from maquitrack.database.models import (
    Company as ORMCompany,
    Equipment as ORMEquipment,
    Project as ORMProject,
    HourControl as ORMHourControl,
    Maintenance as ORMMaintenance,
    Insurance as ORMInsurance,
    Inspection as ORMInspection,
    Alert as ORMAlert,
)


def _decimal(value) -> Decimal:
    return Decimal(value) if value is not None else Decimal("0")


def _optional_decimal(value) -> Optional[Decimal]:
    return Decimal(value) if value is not None else None


def company_to_domain(orm_company: ORMCompany) -> domain.Company:
    """Convert SQLAlchemy Company model to domain Company entity."""
    return domain.Company(
        id=orm_company.id,
        name=orm_company.name,
        tax_id=orm_company.tax_id,
        active=orm_company.active,
        created_at=orm_company.created_at,
    )


def equipment_to_domain(orm_equipment: ORMEquipment) -> domain.Equipment:
    """Convert SQLAlchemy Equipment model to domain Equipment entity."""
    status = orm_equipment.status
    return domain.Equipment(
        id=orm_equipment.id,
        code=orm_equipment.code,
        type=orm_equipment.type,
        brand=orm_equipment.brand,
        model=orm_equipment.model,
        serial=orm_equipment.serial,
        plate=orm_equipment.plate,
        year=orm_equipment.year,
        hour_meter=_decimal(orm_equipment.hour_meter),
        hourly_rate=_decimal(orm_equipment.hourly_rate),
        company_id=orm_equipment.company_id,
        status=domain.EquipmentStatus(status) if status else None,
        location=orm_equipment.location,
        active=orm_equipment.active,
        created_at=orm_equipment.created_at,
        updated_at=orm_equipment.updated_at,
    )


def project_to_domain(orm_project: ORMProject) -> domain.Project:
    """Convert SQLAlchemy Project model to domain Project entity."""
    return domain.Project(
        id=orm_project.id,
        code=orm_project.code,
        name=orm_project.name,
        client=orm_project.client,
        company_id=orm_project.company_id,
        active=orm_project.active,
        created_at=orm_project.created_at,
    )


def hour_control_to_domain(orm_entry: ORMHourControl) -> domain.HourControl:
    """Convert SQLAlchemy HourControl model to domain HourControl entity."""
    return domain.HourControl(
        id=orm_entry.id,
        equipment_id=orm_entry.equipment_id,
        project_id=orm_entry.project_id,
        date=orm_entry.date,
        shift=domain.Shift(orm_entry.shift) if orm_entry.shift else None,
        start_reading=_decimal(orm_entry.start_reading),
        end_reading=_decimal(orm_entry.end_reading),
        worked_hours=_decimal(orm_entry.worked_hours),
        operator=orm_entry.operator,
        activity=orm_entry.activity,
        notes=orm_entry.notes,
        created_at=orm_entry.created_at,
    )


def maintenance_to_domain(orm_maintenance: ORMMaintenance) -> domain.Maintenance:
    """Convert SQLAlchemy Maintenance model to domain Maintenance entity."""
    return domain.Maintenance(
        id=orm_maintenance.id,
        equipment_id=orm_maintenance.equipment_id,
        kind=domain.MaintenanceKind(orm_maintenance.kind),
        description=orm_maintenance.description,
        scheduled_date=orm_maintenance.scheduled_date,
        executed_date=orm_maintenance.executed_date,
        hour_meter_reading=_optional_decimal(orm_maintenance.hour_meter_reading),
        cost=_decimal(orm_maintenance.cost),
        provider=orm_maintenance.provider,
        next_due_hours=_optional_decimal(orm_maintenance.next_due_hours),
        next_due_date=orm_maintenance.next_due_date,
        status=domain.MaintenanceStatus(orm_maintenance.status),
        notes=orm_maintenance.notes,
        created_at=orm_maintenance.created_at,
    )


def insurance_to_domain(orm_insurance: ORMInsurance) -> domain.Insurance:
    """Convert SQLAlchemy Insurance model to domain Insurance entity."""
    return domain.Insurance(
        id=orm_insurance.id,
        equipment_id=orm_insurance.equipment_id,
        policy_number=orm_insurance.policy_number,
        insurer=orm_insurance.insurer,
        start_date=orm_insurance.start_date,
        expiry_date=orm_insurance.expiry_date,
        premium=_decimal(orm_insurance.premium),
        active=orm_insurance.active,
        created_at=orm_insurance.created_at,
    )


def inspection_to_domain(orm_inspection: ORMInspection) -> domain.Inspection:
    """Convert SQLAlchemy Inspection model to domain Inspection entity."""
    return domain.Inspection(
        id=orm_inspection.id,
        equipment_id=orm_inspection.equipment_id,
        certificate_number=orm_inspection.certificate_number,
        workshop=orm_inspection.workshop,
        inspection_date=orm_inspection.inspection_date,
        expiry_date=orm_inspection.expiry_date,
        result=domain.InspectionResult(orm_inspection.result),
        cost=_decimal(orm_inspection.cost),
        notes=orm_inspection.notes,
        created_at=orm_inspection.created_at,
    )


def alert_to_domain(orm_alert: ORMAlert) -> domain.Alert:
    """Convert SQLAlchemy Alert model to domain Alert entity."""
    return domain.Alert(
        id=orm_alert.id,
        alert_type=domain.AlertType(orm_alert.alert_type),
        equipment_id=orm_alert.equipment_id,
        reference_id=orm_alert.reference_id,
        title=orm_alert.title,
        message=orm_alert.message,
        alert_date=orm_alert.alert_date,
        days_remaining=orm_alert.days_remaining,
        priority=domain.AlertPriority(orm_alert.priority),
        acknowledged=orm_alert.acknowledged,
        created_at=orm_alert.created_at,
    )
