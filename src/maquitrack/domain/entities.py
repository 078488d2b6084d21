"""Domain model entities for maquitrack.

These are pure data classes representing business concepts, independent of
database schema. Enumerated values keep the Spanish vocabulary used by the
operators and their spreadsheets.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class EquipmentStatus(str, Enum):
    """Operational status of a machine."""

    OPERATIONAL = "OPERATIVO"
    IN_MAINTENANCE = "EN_MANTENIMIENTO"


class Shift(str, Enum):
    """Work shift of an hour-control entry."""

    MORNING = "mañana"
    AFTERNOON = "tarde"
    NIGHT = "noche"


class MaintenanceKind(str, Enum):
    """Kind of maintenance work."""

    PREVENTIVE = "preventivo"
    CORRECTIVE = "correctivo"
    EMERGENCY = "emergencia"


class MaintenanceStatus(str, Enum):
    """Lifecycle status of a maintenance record."""

    PENDING = "pendiente"
    IN_PROGRESS = "en_proceso"
    COMPLETED = "completado"
    CANCELLED = "cancelado"


class InspectionResult(str, Enum):
    """Outcome of a technical inspection."""

    APPROVED = "aprobado"
    FLAGGED = "observado"
    REJECTED = "rechazado"


class AlertType(str, Enum):
    """What an alert refers to."""

    MAINTENANCE = "mantenimiento"
    INSURANCE = "soat"
    INSPECTION = "revision_tecnica"


class AlertPriority(str, Enum):
    """Urgency tier derived from days remaining."""

    LOW = "baja"
    NORMAL = "normal"
    HIGH = "alta"
    URGENT = "urgente"


@dataclass(frozen=True)
class Company:
    """Company (owner of equipment) domain entity."""

    id: int
    name: str
    tax_id: Optional[str]
    active: bool
    created_at: datetime


@dataclass(frozen=True)
class Equipment:
    """Machine domain entity."""

    id: int
    code: str
    type: str
    brand: Optional[str]
    model: Optional[str]
    serial: Optional[str]
    plate: Optional[str]
    year: Optional[int]
    hour_meter: Decimal
    hourly_rate: Decimal
    company_id: Optional[int]
    status: Optional[EquipmentStatus]
    location: Optional[str]
    active: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Project:
    """Project (work site) domain entity."""

    id: int
    code: str
    name: str
    client: Optional[str]
    company_id: Optional[int]
    active: bool
    created_at: datetime


@dataclass(frozen=True)
class HourControl:
    """Hour-meter usage entry for one shift."""

    id: int
    equipment_id: int
    project_id: Optional[int]
    date: date
    shift: Optional[Shift]
    start_reading: Decimal
    end_reading: Decimal
    worked_hours: Decimal
    operator: Optional[str]
    activity: Optional[str]
    notes: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class Maintenance:
    """Maintenance domain entity."""

    id: int
    equipment_id: int
    kind: MaintenanceKind
    description: str
    scheduled_date: Optional[date]
    executed_date: Optional[date]
    hour_meter_reading: Optional[Decimal]
    cost: Decimal
    provider: Optional[str]
    next_due_hours: Optional[Decimal]
    next_due_date: Optional[date]
    status: MaintenanceStatus
    notes: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class Insurance:
    """SOAT insurance policy domain entity."""

    id: int
    equipment_id: int
    policy_number: str
    insurer: str
    start_date: date
    expiry_date: date
    premium: Decimal
    active: bool
    created_at: datetime


@dataclass(frozen=True)
class Inspection:
    """Technical inspection domain entity."""

    id: int
    equipment_id: int
    certificate_number: Optional[str]
    workshop: Optional[str]
    inspection_date: date
    expiry_date: date
    result: InspectionResult
    cost: Decimal
    notes: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class Alert:
    """Expiry alert domain entity."""

    id: int
    alert_type: AlertType
    equipment_id: Optional[int]
    reference_id: Optional[int]
    title: str
    message: str
    alert_date: date
    days_remaining: int
    priority: AlertPriority
    acknowledged: bool
    created_at: datetime


@dataclass(frozen=True)
class AlertNotice:
    """Alert to store together with the record it refers to."""

    alert_type: AlertType
    title: str
    message: str
    alert_date: date
    days_remaining: int
    priority: AlertPriority
