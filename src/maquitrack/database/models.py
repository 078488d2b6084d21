"""SQLAlchemy models for maquitrack database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Boolean,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


def _now() -> datetime:
    return datetime.now(UTC)


class Company(Base):
    """Company model."""

    __tablename__ = "companies"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    tax_id = Column(String, nullable=True)
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)

    # Relationships
    equipment = relationship("Equipment", back_populates="company")


class Equipment(Base):
    """Equipment (machine) model."""

    __tablename__ = "equipment"

    id = Column(Integer, primary_key=True)
    code = Column(String, unique=True, nullable=False)
    type = Column(String, nullable=False)
    brand = Column(String, nullable=True)
    model = Column(String, nullable=True)
    serial = Column(String, nullable=True)
    plate = Column(String, nullable=True)
    year = Column(Integer, nullable=True)
    hour_meter = Column(Numeric(12, 2), default=0, nullable=False)
    hourly_rate = Column(Numeric(10, 2), default=0, nullable=False)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=True)
    status = Column(String, nullable=True)
    location = Column(String, nullable=True)
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)
    updated_at = Column(DateTime, default=_now, onupdate=_now, nullable=False)

    # Relationships
    company = relationship("Company", back_populates="equipment")
    hour_controls = relationship("HourControl", back_populates="equipment")
    maintenances = relationship("Maintenance", back_populates="equipment")


class Project(Base):
    """Project (work site) model."""

    __tablename__ = "projects"

    id = Column(Integer, primary_key=True)
    code = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    client = Column(String, nullable=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=True)
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)


class HourControl(Base):
    """Hour-meter usage per shift."""

    __tablename__ = "hour_controls"

    id = Column(Integer, primary_key=True)
    equipment_id = Column(Integer, ForeignKey("equipment.id"), nullable=False)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=True)
    date = Column(Date, nullable=False)
    shift = Column(String, nullable=True)
    start_reading = Column(Numeric(12, 2), nullable=False)
    end_reading = Column(Numeric(12, 2), nullable=False)
    worked_hours = Column(Numeric(12, 2), nullable=False)
    operator = Column(String, nullable=True)
    activity = Column(String, nullable=True)
    notes = Column(String, nullable=True)
    created_at = Column(DateTime, default=_now, nullable=False)

    # Relationships
    equipment = relationship("Equipment", back_populates="hour_controls")


class Maintenance(Base):
    """Maintenance model."""

    __tablename__ = "maintenances"

    id = Column(Integer, primary_key=True)
    equipment_id = Column(Integer, ForeignKey("equipment.id"), nullable=False)
    kind = Column(String, nullable=False)
    description = Column(String, nullable=False)
    scheduled_date = Column(Date, nullable=True)
    executed_date = Column(Date, nullable=True)
    hour_meter_reading = Column(Numeric(12, 2), nullable=True)
    cost = Column(Numeric(12, 2), default=0, nullable=False)
    provider = Column(String, nullable=True)
    next_due_hours = Column(Numeric(12, 2), nullable=True)
    next_due_date = Column(Date, nullable=True)
    status = Column(String, nullable=False)
    notes = Column(String, nullable=True)
    created_at = Column(DateTime, default=_now, nullable=False)

    # Relationships
    equipment = relationship("Equipment", back_populates="maintenances")


class Insurance(Base):
    """SOAT insurance model."""

    __tablename__ = "insurance_policies"

    id = Column(Integer, primary_key=True)
    equipment_id = Column(Integer, ForeignKey("equipment.id"), nullable=False)
    policy_number = Column(String, nullable=False)
    insurer = Column(String, nullable=False)
    start_date = Column(Date, nullable=False)
    expiry_date = Column(Date, nullable=False)
    premium = Column(Numeric(12, 2), default=0, nullable=False)
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)

    # Reimports are idempotent on equipment + expiry
    __table_args__ = (
        UniqueConstraint("equipment_id", "expiry_date", name="uq_insurance_equipment_expiry"),
    )


class Inspection(Base):
    """Technical inspection model."""

    __tablename__ = "technical_inspections"

    id = Column(Integer, primary_key=True)
    equipment_id = Column(Integer, ForeignKey("equipment.id"), nullable=False)
    certificate_number = Column(String, nullable=True)
    workshop = Column(String, nullable=True)
    inspection_date = Column(Date, nullable=False)
    expiry_date = Column(Date, nullable=False)
    result = Column(String, nullable=False)
    cost = Column(Numeric(12, 2), default=0, nullable=False)
    notes = Column(String, nullable=True)
    created_at = Column(DateTime, default=_now, nullable=False)

    __table_args__ = (
        UniqueConstraint("equipment_id", "expiry_date", name="uq_inspection_equipment_expiry"),
    )


class Alert(Base):
    """Alert model."""

    __tablename__ = "alerts"

    id = Column(Integer, primary_key=True)
    alert_type = Column(String, nullable=False)
    equipment_id = Column(Integer, ForeignKey("equipment.id"), nullable=True)
    reference_id = Column(Integer, nullable=True)
    title = Column(String, nullable=False)
    message = Column(String, nullable=False)
    alert_date = Column(Date, nullable=False)
    days_remaining = Column(Integer, nullable=False)
    priority = Column(String, nullable=False)
    acknowledged = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
