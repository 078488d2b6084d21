"""Lookups against records already in the store, for import validation."""

from dataclasses import dataclass, field
from typing import Optional

from maquitrack.database.base import Database
from maquitrack.domain.entities import Company, Equipment

# Spreadsheet company spellings -> fragment of the registered company name
COMPANY_ALIASES = (
    (("jlmx",), "jlmx"),
    (("jomex",), "jomex"),
    (("cusma", "jorge"), "jorge"),
)


def normalize_key(value: Optional[str]) -> str:
    """Case- and whitespace-insensitive form of a code, plate or name."""
    return (value or "").strip().lower()


@dataclass
class ReferenceData:
    """Snapshot of equipment and companies taken once per import run."""

    equipment_by_code: dict[str, Equipment] = field(default_factory=dict)
    equipment_by_plate: dict[str, Equipment] = field(default_factory=dict)
    companies: list[Company] = field(default_factory=list)

    @classmethod
    def load(cls, db: Database) -> "ReferenceData":
        """Load active equipment and all companies from the store."""
        reference = cls(companies=db.list_companies())
        for equipment in db.list_equipment(active_only=True):
            reference.equipment_by_code[normalize_key(equipment.code)] = equipment
            if equipment.plate:
                reference.equipment_by_plate.setdefault(normalize_key(equipment.plate), equipment)
        return reference

    @property
    def default_company(self) -> Optional[Company]:
        """Company that receives equipment whose company name is not recognized."""
        if not self.companies:
            return None
        return min(self.companies, key=lambda c: c.id)

    def find_equipment(self, reference: Optional[str], by_plate: bool = False) -> Optional[Equipment]:
        """Find equipment by code, or by plate too when by_plate is set."""
        key = normalize_key(reference)
        if not key:
            return None
        equipment = self.equipment_by_code.get(key)
        if equipment is None and by_plate:
            equipment = self.equipment_by_plate.get(key)
        return equipment

    def find_company(self, name: Optional[str]) -> Optional[Company]:
        """Match a spreadsheet company name against registered companies."""
        normalized = normalize_key(name)
        if not normalized:
            return None

        for spellings, fragment in COMPANY_ALIASES:
            if any(spelling in normalized for spelling in spellings):
                return self._company_containing(fragment)

        for company in self.companies:
            registered = normalize_key(company.name)
            if registered and (registered in normalized or normalized in registered):
                return company
        return None

    def resolve_company(self, name: Optional[str]) -> tuple[Optional[int], bool]:
        """Resolve a company name to an ID.

        Returns:
            (company_id, fell_back). fell_back is True when the name matched
            nothing and the default company was used instead.
        """
        company = self.find_company(name)
        if company is not None:
            return company.id, False
        default = self.default_company
        return (default.id if default is not None else None), True

    def _company_containing(self, fragment: str) -> Optional[Company]:
        for company in self.companies:
            if fragment in normalize_key(company.name):
                return company
        return None

