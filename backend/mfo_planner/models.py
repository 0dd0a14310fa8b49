"""Domain models used by the projection engine."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional, Sequence

ZERO = Decimal("0")


class LifeStatus(str, Enum):
    NORMAL = "normal"
    DEAD = "dead"
    INVALID = "invalid"


class AllocationType(str, Enum):
    FINANCIAL = "financial"
    PROPERTY = "property"


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"


class TransactionInterval(str, Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"


class InsuranceType(str, Enum):
    LIFE = "life"
    INVALIDITY = "invalidity"
    GENERAL = "general"


def as_decimal(value: Decimal | int | float | str | None) -> Decimal:
    """Coerce a numeric value to ``Decimal``; ``None`` becomes zero."""

    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class AllocationSnapshot:
    """An asset position at the start of the projection."""

    type: AllocationType
    name: str
    value: Decimal
    is_financed: bool = False
    monthly_payment: Optional[Decimal] = None
    remaining_payments: Optional[int] = None


@dataclass(frozen=True)
class TransactionTimeline:
    """A recurring or one-off cash movement.

    ``end_date`` defaults to ``start_date`` when omitted, which makes the
    entry a single-month event.
    """

    type: TransactionType
    value: Decimal
    start_date: date
    end_date: Optional[date] = None
    interval: TransactionInterval = TransactionInterval.MONTHLY
    name: str = ""


@dataclass(frozen=True)
class InsurancePolicy:
    """An insurance contract; ``id`` guards against paying twice."""

    id: str
    type: InsuranceType
    monthly_premium: Decimal
    coverage_value: Decimal
    start_date: date
    end_date: Optional[date] = None
    name: str = ""


@dataclass(frozen=True)
class ProjectionInput:
    """Everything the engine needs for one run."""

    start_date: date
    end_date: date
    interest_rate: Decimal
    inflation_rate: Decimal
    life_status: LifeStatus = LifeStatus.NORMAL
    life_status_change_date: Optional[date] = None
    allocations: Sequence[AllocationSnapshot] = field(default_factory=tuple)
    transactions: Sequence[TransactionTimeline] = field(default_factory=tuple)
    insurances: Sequence[InsurancePolicy] = field(default_factory=tuple)


@dataclass(frozen=True)
class MonthlyProjection:
    date: date
    financial_assets: Decimal
    property_assets: Decimal
    total_assets: Decimal
    total_without_insurance: Decimal
    entries: Decimal
    exits: Decimal
    insurance_premiums: Decimal
    insurance_payouts: Decimal
    financing_payments: Decimal


@dataclass(frozen=True)
class YearlyProjection:
    year: int
    financial_assets: Decimal
    property_assets: Decimal
    total_assets: Decimal


@dataclass(frozen=True)
class ProjectionSummary:
    initial_assets: Decimal
    final_assets: Decimal
    total_growth: Decimal
    total_growth_percent: Decimal
    total_entries: Decimal
    total_exits: Decimal
    insurance_impact: Decimal


@dataclass(frozen=True)
class ProjectionOutput:
    monthly: List[MonthlyProjection]
    yearly: List[YearlyProjection]
    summary: ProjectionSummary
