"""Simulation and version snapshot models."""

from __future__ import annotations

import enum
import uuid
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from sqlalchemy import (
    JSON,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.config.settings import DEFAULT_YEARS_PROJECTION
from app.db.base import Base

from .client import enum_values

if TYPE_CHECKING:
    from .allocation import Allocation
    from .client import Client
    from .insurance import Insurance


class SimulationStatus(str, enum.Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    ARCHIVED = "archived"


class Simulation(Base):
    __tablename__ = "simulations"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    client_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("clients.id", ondelete="CASCADE"), index=True)
    name: Mapped[str] = mapped_column(String(255))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[SimulationStatus] = mapped_column(
        Enum(SimulationStatus, name="simulation_status", values_callable=enum_values),
        default=SimulationStatus.DRAFT,
    )
    initial_capital: Mapped[Decimal] = mapped_column(Numeric(18, 2))
    monthly_contribution: Mapped[Decimal] = mapped_column(Numeric(18, 2), default=Decimal("0"))
    inflation_rate: Mapped[Decimal] = mapped_column(Numeric(7, 4), default=Decimal("3.5"))
    years_projection: Mapped[int] = mapped_column(Integer, default=DEFAULT_YEARS_PROJECTION)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=datetime.utcnow, onupdate=datetime.utcnow
    )

    client: Mapped[Client] = relationship(back_populates="simulations")
    allocations: Mapped[list[Allocation]] = relationship(back_populates="simulation", passive_deletes=True)
    insurances: Mapped[list[Insurance]] = relationship(back_populates="simulation", passive_deletes=True)
    versions: Mapped[list[SimulationVersion]] = relationship(back_populates="simulation", passive_deletes=True)


class SimulationVersion(Base):
    __tablename__ = "simulation_versions"
    __table_args__ = (
        UniqueConstraint("simulation_id", "version_number", name="uq_simulation_version_number"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    simulation_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("simulations.id", ondelete="CASCADE"), index=True)
    version_number: Mapped[int] = mapped_column(Integer)
    snapshot: Mapped[dict[str, Any]] = mapped_column(JSON)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=datetime.utcnow)

    simulation: Mapped[Simulation] = relationship(back_populates="versions")


__all__ = ["Simulation", "SimulationStatus", "SimulationVersion"]
