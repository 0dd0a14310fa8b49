"""Schemas for asset allocations and their ledger transactions."""

from __future__ import annotations

from datetime import date, datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

AllocationTypeValue = Literal["financial", "property"]
TransactionTypeValue = Literal["contribution", "withdrawal", "yield", "fee"]


class AllocationCreateRequest(BaseModel):
    simulation_id: UUID
    type: AllocationTypeValue
    description: str = Field(..., min_length=1, max_length=255, examples=["Fixed income fund"])
    percentage: float = Field(..., ge=0, le=100)
    initial_value: float = Field(..., ge=0)
    annual_return: float = Field(0.0, ge=0, le=100, description="Expected annual return in percent")
    allocation_date: date
    monthly_payment: float | None = Field(default=None, ge=0, description="Financing instalment")
    remaining_payments: int | None = Field(default=None, ge=0)


class AllocationUpdateRequest(BaseModel):
    type: AllocationTypeValue | None = None
    description: str | None = Field(default=None, min_length=1, max_length=255)
    percentage: float | None = Field(default=None, ge=0, le=100)
    initial_value: float | None = Field(default=None, ge=0)
    annual_return: float | None = Field(default=None, ge=0, le=100)
    allocation_date: date | None = None
    monthly_payment: float | None = Field(default=None, ge=0)
    remaining_payments: int | None = Field(default=None, ge=0)


class AllocationSchema(BaseModel):
    id: UUID
    simulation_id: UUID
    type: AllocationTypeValue
    description: str
    percentage: float
    initial_value: float
    annual_return: float
    allocation_date: date
    monthly_payment: float | None = None
    remaining_payments: int | None = None
    created_at: datetime
    updated_at: datetime


class TransactionCreateRequest(BaseModel):
    allocation_id: UUID
    type: TransactionTypeValue
    amount: float = Field(..., gt=0)
    description: str | None = Field(default=None, max_length=255)
    transaction_date: date


class TransactionUpdateRequest(BaseModel):
    type: TransactionTypeValue | None = None
    amount: float | None = Field(default=None, gt=0)
    description: str | None = Field(default=None, max_length=255)
    transaction_date: date | None = None


class TransactionSchema(BaseModel):
    id: UUID
    allocation_id: UUID
    type: TransactionTypeValue
    amount: float
    description: str | None = None
    transaction_date: date
    created_at: datetime
    updated_at: datetime


__all__ = [
    "AllocationCreateRequest",
    "AllocationSchema",
    "AllocationTypeValue",
    "AllocationUpdateRequest",
    "TransactionCreateRequest",
    "TransactionSchema",
    "TransactionTypeValue",
    "TransactionUpdateRequest",
]
