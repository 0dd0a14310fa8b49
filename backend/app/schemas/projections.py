"""Schemas for projection, comparison and realized-position responses."""

from __future__ import annotations

import datetime as dt
from uuid import UUID

from pydantic import BaseModel, Field


class MonthlyProjectionSchema(BaseModel):
    date: dt.date
    financial_assets: float
    property_assets: float
    total_assets: float
    total_without_insurance: float
    entries: float
    exits: float
    insurance_premiums: float
    insurance_payouts: float
    financing_payments: float


class YearlyProjectionSchema(BaseModel):
    year: int
    financial_assets: float
    property_assets: float
    total_assets: float


class ProjectionSummarySchema(BaseModel):
    initial_assets: float
    final_assets: float
    total_growth: float
    total_growth_percent: float
    total_entries: float
    total_exits: float
    insurance_impact: float


class ProjectionResponse(BaseModel):
    simulation_id: UUID
    start_date: dt.date
    end_date: dt.date
    interest_rate: float
    inflation_rate: float
    life_status: str
    life_status_change_date: dt.date | None = None
    monthly: list[MonthlyProjectionSchema]
    yearly: list[YearlyProjectionSchema]
    summary: ProjectionSummarySchema


class ComparisonRequest(BaseModel):
    simulation_ids: list[UUID] = Field(..., min_length=1)
    interest_rate: float | None = Field(default=None, ge=0, le=100)
    inflation_rate: float | None = Field(default=None, ge=0, le=100)


class ComparisonEntrySchema(BaseModel):
    simulation_id: UUID
    name: str
    projection: ProjectionResponse


class ComparisonResponse(BaseModel):
    client_id: UUID
    comparisons: list[ComparisonEntrySchema]


class RealizedAllocationsSchema(BaseModel):
    total: float
    financial: float
    property: float


class RealizedTransactionsSchema(BaseModel):
    total_entries: float
    total_exits: float
    per_type: dict[str, float]


class RealizedInsurancesSchema(BaseModel):
    count: int
    total_monthly_cost: float
    total_coverage: float


class RealizedResponse(BaseModel):
    client_id: UUID
    total_assets: float
    allocations: RealizedAllocationsSchema
    transactions: RealizedTransactionsSchema
    insurances: RealizedInsurancesSchema


__all__ = [
    "ComparisonEntrySchema",
    "ComparisonRequest",
    "ComparisonResponse",
    "MonthlyProjectionSchema",
    "ProjectionResponse",
    "ProjectionSummarySchema",
    "RealizedAllocationsSchema",
    "RealizedInsurancesSchema",
    "RealizedResponse",
    "RealizedTransactionsSchema",
    "YearlyProjectionSchema",
]
