"""Company and equipment domain services."""

from decimal import Decimal
from typing import Optional

from maquitrack.database.base import Database
from maquitrack.domain.entities import Company, Equipment, EquipmentStatus
from maquitrack.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    company_not_found,
    duplicate_equipment_code,
    equipment_not_found,
)


class CompanyService:
    """Service for managing the companies that own equipment."""

    def __init__(self, db: Database):
        """Initialize company service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_company(self, name: str, tax_id: Optional[str] = None) -> int:
        """Create a new company.

        Args:
            name: Company name (razón social)
            tax_id: Optional tax ID (RUC)

        Returns:
            Company ID

        Raises:
            ConflictError: If a company with the same name exists
        """
        for company in self.db.list_companies():
            if company.name.lower() == name.lower():
                raise ConflictError(f"Company with name '{name}' already exists")
        return self.db.create_company(name=name, tax_id=tax_id)

    def list_companies(self) -> list[Company]:
        return self.db.list_companies()


class EquipmentService:
    """Service for managing equipment."""

    def __init__(self, db: Database):
        """Initialize equipment service.

        Args:
            db: Database instance
        """
        self.db = db

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
        location: Optional[str] = None,
    ) -> int:
        """Register a machine.

        Args:
            code: Unique equipment code
            type: Equipment type (EXCAVADORA, CARGADOR, ...)
            brand: Optional brand
            model: Optional model
            serial: Optional serial number
            plate: Optional license plate
            year: Optional fabrication year
            hour_meter: Initial hour-meter reading
            hourly_rate: Default rental rate per hour
            company_id: Optional owning company
            location: Optional location (work section)

        Returns:
            Equipment ID

        Raises:
            ValidationError: If code or type is empty, or a reading is negative
            ConflictError: If the code is already registered
            NotFoundError: If company doesn't exist
        """
        code = code.strip()
        if not code:
            raise ValidationError("Equipment code is required")
        if not type or not type.strip():
            raise ValidationError("Equipment type is required")
        if hour_meter < 0:
            raise ValidationError("Hour meter cannot be negative")
        if hourly_rate < 0:
            raise ValidationError("Hourly rate cannot be negative")
        if self.db.get_equipment_by_code(code) is not None:
            raise ConflictError(duplicate_equipment_code(code))
        if company_id is not None and self.db.get_company(company_id) is None:
            raise NotFoundError(company_not_found(company_id))

        return self.db.create_equipment(
            code=code,
            type=type.strip(),
            brand=brand,
            model=model,
            serial=serial,
            plate=plate,
            year=year,
            hour_meter=hour_meter,
            hourly_rate=hourly_rate,
            company_id=company_id,
            status=EquipmentStatus.OPERATIONAL,
            location=location,
        )

    def get_equipment(self, equipment_id: int) -> Optional[Equipment]:
        return self.db.get_equipment(equipment_id)

    def get_equipment_by_code(self, code: str) -> Equipment:
        """Get equipment by code.

        Raises:
            NotFoundError: If no equipment has this code
        """
        equipment = self.db.get_equipment_by_code(code.strip())
        if equipment is None:
            raise NotFoundError(equipment_not_found(code))
        return equipment

    def list_equipment(self, active_only: bool = False) -> list[Equipment]:
        return self.db.list_equipment(active_only=active_only)
