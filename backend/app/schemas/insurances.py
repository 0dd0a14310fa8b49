"""Schemas for insurance policies attached to a simulation."""

from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field, model_validator


class InsuranceCreateRequest(BaseModel):
    simulation_id: UUID
    type: str = Field(..., min_length=1, max_length=50, examples=["life", "disability"])
    description: str | None = Field(default=None, max_length=255)
    coverage_amount: float = Field(..., ge=0)
    monthly_cost: float = Field(..., ge=0)
    start_date: date
    end_date: date | None = None

    @model_validator(mode="after")
    def _check_dates(self) -> "InsuranceCreateRequest":
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date must not precede start_date")
        return self


class InsuranceUpdateRequest(BaseModel):
    type: str | None = Field(default=None, min_length=1, max_length=50)
    description: str | None = Field(default=None, max_length=255)
    coverage_amount: float | None = Field(default=None, ge=0)
    monthly_cost: float | None = Field(default=None, ge=0)
    start_date: date | None = None
    end_date: date | None = None


class InsuranceSchema(BaseModel):
    id: UUID
    simulation_id: UUID
    type: str
    description: str | None = None
    coverage_amount: float
    monthly_cost: float
    start_date: date
    end_date: date | None = None
    created_at: datetime
    updated_at: datetime


__all__ = ["InsuranceCreateRequest", "InsuranceSchema", "InsuranceUpdateRequest"]
