"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Any
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from maquitrack.domain.entities import (
    Company,
    Equipment,
    Project,
    HourControl,
    Maintenance,
    MaintenanceKind,
    MaintenanceStatus,
    Insurance,
    Inspection,
    InspectionResult,
    Alert,
    AlertNotice,
    AlertType,
    AlertPriority,
    Shift,
)


class Database(ABC):
    """Abstract database interface for maquitrack.

    Every write that touches the equipment hour meter keeps it monotonic:
    the stored value only changes when the new reading is greater.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Company operations
    @abstractmethod
    def create_company(self, name: str, tax_id: Optional[str] = None) -> int:
        """Create a company. Returns company ID."""
        pass

    @abstractmethod
    def get_company(self, company_id: int) -> Optional[Company]:
        """Get company by ID."""
        pass

    @abstractmethod
    def list_companies(self) -> list[Company]:
        """List all companies ordered by ID."""
        pass

    # Equipment operations
    @abstractmethod
    def create_equipment(
        self,
        code: str,
        type: str,
        brand: Optional[str] = None,
        model: Optional[str] = None,
        serial: Optional[str] = None,
        plate: Optional[str] = None,
        year: Optional[int] = None,
        hour_meter: Decimal = Decimal("0"),
        hourly_rate: Decimal = Decimal("0"),
        company_id: Optional[int] = None,
        status: Optional[str] = None,
        location: Optional[str] = None,
    ) -> int:
        """Create equipment. Returns equipment ID."""
        pass

    @abstractmethod
    def upsert_equipment(self, code: str, attributes: dict[str, Any]) -> tuple[int, bool]:
        """Insert or update equipment keyed on code.

        Codes match case-insensitively and an existing record keeps its
        spelling of the code. Only the attributes given are written on
        update. Returns (equipment ID, True if a new record was created).
        """
        pass

    @abstractmethod
    def get_equipment(self, equipment_id: int) -> Optional[Equipment]:
        """Get equipment by ID."""
        pass

    @abstractmethod
    def get_equipment_by_code(self, code: str) -> Optional[Equipment]:
        """Get equipment by code, ignoring case."""
        pass

    @abstractmethod
    def list_equipment(self, active_only: bool = False) -> list[Equipment]:
        """List equipment ordered by code."""
        pass

    @abstractmethod
    def advance_hour_meter(self, equipment_id: int, reading: Decimal) -> Decimal:
        """Raise the equipment hour meter to reading if it is greater.

        Returns the resulting hour meter value.
        """
        pass

    # Project operations
    @abstractmethod
    def create_project(
        self,
        code: str,
        name: str,
        client: Optional[str] = None,
        company_id: Optional[int] = None,
    ) -> int:
        """Create a project. Returns project ID."""
        pass

    @abstractmethod
    def get_project(self, project_id: int) -> Optional[Project]:
        """Get project by ID."""
        pass

    @abstractmethod
    def get_project_by_code(self, code: str) -> Optional[Project]:
        """Get project by code."""
        pass

    @abstractmethod
    def list_projects(self) -> list[Project]:
        """List projects ordered by name."""
        pass

    # Hour control operations
    @abstractmethod
    def create_hour_control(
        self,
        equipment_id: int,
        date: date,
        start_reading: Decimal,
        end_reading: Decimal,
        worked_hours: Decimal,
        project_id: Optional[int] = None,
        shift: Optional[Shift] = None,
        operator: Optional[str] = None,
        activity: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> int:
        """Create an hour-control entry and advance the equipment hour meter.

        Both writes happen in one transaction. Returns entry ID.
        """
        pass

    @abstractmethod
    def list_hour_controls(
        self,
        equipment_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[HourControl]:
        """List hour-control entries, newest first."""
        pass

    # Maintenance operations
    @abstractmethod
    def create_maintenance(
        self,
        equipment_id: int,
        kind: MaintenanceKind,
        description: str,
        status: MaintenanceStatus = MaintenanceStatus.PENDING,
        scheduled_date: Optional[date] = None,
        executed_date: Optional[date] = None,
        hour_meter_reading: Optional[Decimal] = None,
        cost: Decimal = Decimal("0"),
        provider: Optional[str] = None,
        next_due_hours: Optional[Decimal] = None,
        next_due_date: Optional[date] = None,
        notes: Optional[str] = None,
    ) -> int:
        """Create a maintenance record. Returns maintenance ID."""
        pass

    @abstractmethod
    def get_maintenance(self, maintenance_id: int) -> Optional[Maintenance]:
        """Get maintenance by ID."""
        pass

    @abstractmethod
    def maintenance_exists_at_reading(self, equipment_id: int, hour_meter_reading: Decimal) -> bool:
        """Check if a maintenance was recorded at this hour-meter reading."""
        pass

    @abstractmethod
    def scheduled_maintenance_exists(
        self, equipment_id: int, description: str, scheduled_date: Optional[date]
    ) -> bool:
        """Check if the same maintenance is already scheduled for the equipment."""
        pass

    @abstractmethod
    def record_last_maintenance(
        self,
        equipment_id: int,
        hour_meter_reading: Decimal,
        current_hour_meter: Optional[Decimal],
        description: str,
        kind: MaintenanceKind = MaintenanceKind.PREVENTIVE,
        next_due_hours: Optional[Decimal] = None,
        executed_date: Optional[date] = None,
        provider: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> tuple[Optional[int], Optional[Decimal]]:
        """Record the last known maintenance of a machine.

        In one transaction: inserts a completed maintenance unless one exists
        at the same hour-meter reading, and advances the equipment hour meter
        to current_hour_meter.

        Returns:
            (new maintenance ID or None when it was already recorded,
            new hour meter or None when the meter did not move)
        """
        pass

    @abstractmethod
    def update_maintenance_status(
        self,
        maintenance_id: int,
        status: MaintenanceStatus,
        executed_date: Optional[date] = None,
    ) -> None:
        """Update maintenance status."""
        pass

    @abstractmethod
    def list_maintenances(
        self,
        equipment_id: Optional[int] = None,
        status: Optional[MaintenanceStatus] = None,
        scheduled_from: Optional[date] = None,
        scheduled_to: Optional[date] = None,
    ) -> list[Maintenance]:
        """List maintenance records with optional filters."""
        pass

    # Insurance operations
    @abstractmethod
    def create_insurance(
        self,
        equipment_id: int,
        policy_number: str,
        insurer: str,
        start_date: date,
        expiry_date: date,
        premium: Decimal = Decimal("0"),
        active: bool = True,
        alert: Optional[AlertNotice] = None,
    ) -> int:
        """Create an insurance record. Returns insurance ID.

        When alert is given it is stored for the new policy in the same
        transaction, so a policy is never kept without its alert.
        """
        pass

    @abstractmethod
    def insurance_exists(self, equipment_id: int, expiry_date: date) -> bool:
        """Check if an insurance with this expiry exists for the equipment."""
        pass

    @abstractmethod
    def list_insurance(
        self,
        active_only: bool = False,
        expiring_from: Optional[date] = None,
        expiring_to: Optional[date] = None,
        equipment_id: Optional[int] = None,
    ) -> list[Insurance]:
        """List insurance records ordered by expiry date."""
        pass

    # Inspection operations
    @abstractmethod
    def create_inspection(
        self,
        equipment_id: int,
        inspection_date: date,
        expiry_date: date,
        result: InspectionResult = InspectionResult.APPROVED,
        certificate_number: Optional[str] = None,
        workshop: Optional[str] = None,
        cost: Decimal = Decimal("0"),
        notes: Optional[str] = None,
    ) -> int:
        """Create a technical inspection record. Returns inspection ID."""
        pass

    @abstractmethod
    def inspection_exists(self, equipment_id: int, expiry_date: date) -> bool:
        """Check if an inspection with this expiry exists for the equipment."""
        pass

    @abstractmethod
    def list_inspections(
        self,
        expiring_from: Optional[date] = None,
        expiring_to: Optional[date] = None,
        equipment_id: Optional[int] = None,
    ) -> list[Inspection]:
        """List inspections ordered by expiry date."""
        pass

    # Alert operations
    @abstractmethod
    def create_alert(
        self,
        alert_type: AlertType,
        title: str,
        message: str,
        alert_date: date,
        days_remaining: int,
        priority: AlertPriority,
        equipment_id: Optional[int] = None,
        reference_id: Optional[int] = None,
    ) -> int:
        """Create an alert. Returns alert ID."""
        pass

    @abstractmethod
    def open_alert_exists(self, alert_type: AlertType, reference_id: int) -> bool:
        """Check if an unacknowledged alert exists for the referenced entity."""
        pass

    @abstractmethod
    def get_alert(self, alert_id: int) -> Optional[Alert]:
        """Get alert by ID."""
        pass

    @abstractmethod
    def list_alerts(self, include_acknowledged: bool = False) -> list[Alert]:
        """List alerts ordered by alert date."""
        pass

    @abstractmethod
    def acknowledge_alert(self, alert_id: int) -> None:
        """Mark an alert as acknowledged."""
        pass
