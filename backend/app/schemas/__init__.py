"""Pydantic schema exports."""

from .allocations import (
    AllocationCreateRequest,
    AllocationSchema,
    AllocationUpdateRequest,
    TransactionCreateRequest,
    TransactionSchema,
    TransactionUpdateRequest,
)
from .clients import ClientCreateRequest, ClientSchema, ClientUpdateRequest
from .health import HealthResponse
from .insurances import InsuranceCreateRequest, InsuranceSchema, InsuranceUpdateRequest
from .projections import (
    ComparisonEntrySchema,
    ComparisonRequest,
    ComparisonResponse,
    MonthlyProjectionSchema,
    ProjectionResponse,
    ProjectionSummarySchema,
    RealizedResponse,
    YearlyProjectionSchema,
)
from .simulations import (
    SimulationCreateRequest,
    SimulationSchema,
    SimulationUpdateRequest,
    SimulationVersionSchema,
)

__all__ = [
    "AllocationCreateRequest",
    "AllocationSchema",
    "AllocationUpdateRequest",
    "ClientCreateRequest",
    "ClientSchema",
    "ClientUpdateRequest",
    "ComparisonEntrySchema",
    "ComparisonRequest",
    "ComparisonResponse",
    "HealthResponse",
    "InsuranceCreateRequest",
    "InsuranceSchema",
    "InsuranceUpdateRequest",
    "MonthlyProjectionSchema",
    "ProjectionResponse",
    "ProjectionSummarySchema",
    "RealizedResponse",
    "SimulationCreateRequest",
    "SimulationSchema",
    "SimulationUpdateRequest",
    "SimulationVersionSchema",
    "TransactionCreateRequest",
    "TransactionSchema",
    "TransactionUpdateRequest",
    "YearlyProjectionSchema",
]
