"""Assemble engine input from stored records and run projections."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Sequence
from uuid import UUID

from dateutil.relativedelta import relativedelta
from opentelemetry import trace
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.models import Allocation, AllocationKind, Client, ClientStatus, Insurance, Simulation, Transaction, TransactionKind
from mfo_planner import (
    AllocationSnapshot,
    AllocationType,
    InsurancePolicy,
    InsuranceType,
    LifeStatus,
    ProjectionInput,
    ProjectionOutput,
    TransactionInterval,
    TransactionTimeline,
    TransactionType,
    calculate_projection,
)
from mfo_planner.models import ZERO, as_decimal

from .errors import InvalidInputError, NotFoundError

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

MONTHLY_CONTRIBUTION_NAME = "Monthly contribution"

_LIFE_STATUS_TOKENS = {
    "normal": LifeStatus.NORMAL,
    "alive": LifeStatus.NORMAL,
    "dead": LifeStatus.DEAD,
    "deceased": LifeStatus.DEAD,
    "invalid": LifeStatus.INVALID,
    "disabled": LifeStatus.INVALID,
}

_CLIENT_STATUS_TO_LIFE = {
    ClientStatus.ALIVE: LifeStatus.NORMAL,
    ClientStatus.DECEASED: LifeStatus.DEAD,
    ClientStatus.DISABLED: LifeStatus.INVALID,
}


@dataclass(frozen=True)
class ProjectionRequest:
    """Caller overrides for a projection run; ``None`` means use the stored default."""

    start_date: date | None = None
    end_date: date | None = None
    interest_rate: Decimal | None = None
    inflation_rate: Decimal | None = None
    life_status: str | None = None
    life_status_change_date: date | None = None


@dataclass(frozen=True)
class ProjectionResult:
    simulation: Simulation
    projection_input: ProjectionInput
    output: ProjectionOutput


def map_transaction_type(value: TransactionKind | str) -> TransactionType:
    kind = TransactionKind(value)
    if kind == TransactionKind.WITHDRAWAL:
        return TransactionType.WITHDRAWAL
    if kind == TransactionKind.FEE:
        return TransactionType.EXPENSE
    return TransactionType.INCOME


def map_insurance_type(value: str) -> InsuranceType:
    normalized = value.lower()
    if "life" in normalized or "vida" in normalized:
        return InsuranceType.LIFE
    if "inval" in normalized or "disab" in normalized:
        return InsuranceType.INVALIDITY
    return InsuranceType.GENERAL


def map_allocation(allocation: Allocation) -> AllocationSnapshot:
    kind = AllocationType.PROPERTY if allocation.type == AllocationKind.PROPERTY else AllocationType.FINANCIAL
    financed = bool(allocation.monthly_payment) and bool(allocation.remaining_payments)
    return AllocationSnapshot(
        type=kind,
        name=allocation.description,
        value=as_decimal(allocation.initial_value),
        is_financed=financed,
        monthly_payment=as_decimal(allocation.monthly_payment) if allocation.monthly_payment is not None else None,
        remaining_payments=allocation.remaining_payments,
    )


def map_transaction(tx: Transaction) -> TransactionTimeline:
    # Ledger rows are one-off movements in the month they happened.
    return TransactionTimeline(
        type=map_transaction_type(tx.type),
        value=as_decimal(tx.amount),
        start_date=tx.transaction_date,
        end_date=tx.transaction_date,
        interval=TransactionInterval.MONTHLY,
        name=tx.description or "Transaction",
    )


def map_insurance(insurance: Insurance) -> InsurancePolicy:
    return InsurancePolicy(
        id=str(insurance.id),
        type=map_insurance_type(insurance.type),
        monthly_premium=as_decimal(insurance.monthly_cost),
        coverage_value=as_decimal(insurance.coverage_amount),
        start_date=insurance.start_date,
        end_date=insurance.end_date,
        name=insurance.description or "Insurance",
    )


def parse_life_status(token: str | None) -> LifeStatus | None:
    if token is None or not token.strip():
        return None
    status = _LIFE_STATUS_TOKENS.get(token.strip().lower())
    if status is None:
        raise InvalidInputError(f"Unknown life status '{token}'")
    return status


def resolve_life_status(requested: LifeStatus | None, client_status: ClientStatus | str | None) -> LifeStatus:
    """Use the requested status, else derive it from the client's stored status."""

    if requested is not None:
        return requested
    if client_status is None:
        return LifeStatus.NORMAL
    return _CLIENT_STATUS_TO_LIFE.get(ClientStatus(client_status), LifeStatus.NORMAL)


def weighted_annual_return(allocations: Iterable[Allocation], default: Decimal | None = None) -> Decimal:
    """Value-weighted average of allocation returns, in percent."""

    fallback = default if default is not None else get_settings().default_interest_rate
    items = list(allocations)
    total_value = sum((as_decimal(a.initial_value) for a in items), ZERO)
    if total_value == 0:
        return as_decimal(fallback)
    weighted = sum((as_decimal(a.initial_value) * as_decimal(a.annual_return) for a in items), ZERO)
    return weighted / total_value


def build_projection_input(
    simulation: Simulation,
    client_status: ClientStatus | str | None,
    allocations: Sequence[Allocation],
    transactions: Sequence[Transaction],
    insurances: Sequence[Insurance],
    request: ProjectionRequest,
    *,
    today: date | None = None,
) -> ProjectionInput:
    """Resolve defaults, validate the range and build the engine input."""

    start_date = request.start_date or today or date.today()
    end_date = request.end_date or start_date + relativedelta(years=simulation.years_projection)
    if end_date <= start_date:
        raise InvalidInputError("end_date must be after start_date")

    life_status = resolve_life_status(parse_life_status(request.life_status), client_status)
    interest_rate = (
        as_decimal(request.interest_rate)
        if request.interest_rate is not None
        else weighted_annual_return(allocations)
    )
    inflation_rate = (
        as_decimal(request.inflation_rate)
        if request.inflation_rate is not None
        else as_decimal(simulation.inflation_rate)
    )

    timelines = [map_transaction(tx) for tx in transactions]
    contribution = as_decimal(simulation.monthly_contribution)
    if contribution > 0:
        timelines.append(
            TransactionTimeline(
                type=TransactionType.DEPOSIT,
                value=contribution,
                start_date=start_date,
                end_date=end_date,
                interval=TransactionInterval.MONTHLY,
                name=MONTHLY_CONTRIBUTION_NAME,
            )
        )

    return ProjectionInput(
        start_date=start_date,
        end_date=end_date,
        interest_rate=interest_rate,
        inflation_rate=inflation_rate,
        life_status=life_status,
        life_status_change_date=request.life_status_change_date,
        allocations=tuple(map_allocation(a) for a in allocations),
        transactions=tuple(timelines),
        insurances=tuple(map_insurance(i) for i in insurances),
    )


async def run_projection(
    simulation_id: UUID,
    session: AsyncSession,
    request: ProjectionRequest | None = None,
) -> ProjectionResult:
    request = request or ProjectionRequest()
    simulation = await session.get(Simulation, simulation_id)
    if simulation is None:
        raise NotFoundError("Simulation", simulation_id)

    client = await session.get(Client, simulation.client_id)
    allocations = (
        await session.execute(
            select(Allocation).where(Allocation.simulation_id == simulation.id).order_by(Allocation.created_at)
        )
    ).scalars().all()
    allocation_ids = [a.id for a in allocations]
    transactions = []
    if allocation_ids:
        transactions = (
            await session.execute(
                select(Transaction)
                .where(Transaction.allocation_id.in_(allocation_ids))
                .order_by(Transaction.transaction_date)
            )
        ).scalars().all()
    insurances = (
        await session.execute(
            select(Insurance).where(Insurance.simulation_id == simulation.id).order_by(Insurance.start_date)
        )
    ).scalars().all()

    projection_input = build_projection_input(
        simulation,
        client.status if client is not None else None,
        list(allocations),
        list(transactions),
        list(insurances),
        request,
    )

    with tracer.start_as_current_span("projection.calculate") as span:
        span.set_attribute("simulation.id", str(simulation.id))
        output = calculate_projection(projection_input)
        span.set_attribute("projection.months", len(output.monthly))

    logger.info(
        "Projected simulation %s over %d months (interest=%s, inflation=%s, status=%s)",
        simulation.id,
        len(output.monthly),
        projection_input.interest_rate,
        projection_input.inflation_rate,
        projection_input.life_status.value,
    )
    return ProjectionResult(simulation=simulation, projection_input=projection_input, output=output)


__all__ = [
    "MONTHLY_CONTRIBUTION_NAME",
    "ProjectionRequest",
    "ProjectionResult",
    "build_projection_input",
    "map_allocation",
    "map_insurance",
    "map_insurance_type",
    "map_transaction",
    "map_transaction_type",
    "parse_life_status",
    "resolve_life_status",
    "run_projection",
    "weighted_annual_return",
]
