"""Schemas for simulations and their saved versions."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal
from uuid import UUID

from pydantic import BaseModel, Field

SimulationStatusValue = Literal["draft", "active", "archived"]


class SimulationCreateRequest(BaseModel):
    client_id: UUID
    name: str = Field(..., min_length=1, max_length=255, examples=["Retirement plan"])
    description: str | None = None
    status: SimulationStatusValue = "draft"
    initial_capital: float = Field(..., ge=0)
    monthly_contribution: float = Field(0.0, ge=0)
    inflation_rate: float = Field(3.5, ge=0, le=100, description="Annual inflation in percent")
    years_projection: int | None = Field(
        default=None, ge=1, le=100, description="Horizon in years; the configured default when omitted"
    )


class SimulationUpdateRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    status: SimulationStatusValue | None = None
    initial_capital: float | None = Field(default=None, ge=0)
    monthly_contribution: float | None = Field(default=None, ge=0)
    inflation_rate: float | None = Field(default=None, ge=0, le=100)
    years_projection: int | None = Field(default=None, ge=1, le=100)


class SimulationSchema(BaseModel):
    id: UUID
    client_id: UUID
    name: str
    description: str | None = None
    status: SimulationStatusValue
    initial_capital: float
    monthly_contribution: float
    inflation_rate: float
    years_projection: int
    created_at: datetime
    updated_at: datetime


class SimulationVersionSchema(BaseModel):
    id: UUID
    simulation_id: UUID
    version_number: int
    snapshot: dict[str, Any]
    created_at: datetime


__all__ = [
    "SimulationCreateRequest",
    "SimulationSchema",
    "SimulationStatusValue",
    "SimulationUpdateRequest",
    "SimulationVersionSchema",
]
