"""Core package for the family office projection engine."""

from .models import (
    AllocationSnapshot,
    AllocationType,
    InsurancePolicy,
    InsuranceType,
    LifeStatus,
    MonthlyProjection,
    ProjectionInput,
    ProjectionOutput,
    ProjectionSummary,
    TransactionInterval,
    TransactionTimeline,
    TransactionType,
    YearlyProjection,
)
from .pipeline import calculate_projection

__all__ = [
    "AllocationSnapshot",
    "AllocationType",
    "InsurancePolicy",
    "InsuranceType",
    "LifeStatus",
    "MonthlyProjection",
    "ProjectionInput",
    "ProjectionOutput",
    "ProjectionSummary",
    "TransactionInterval",
    "TransactionTimeline",
    "TransactionType",
    "YearlyProjection",
    "calculate_projection",
]
