"""Current-state totals across every simulation of a client."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Allocation, AllocationKind, Client, Insurance, Simulation, Transaction, TransactionKind

from .errors import NotFoundError

ZERO = Decimal("0")


@dataclass
class RealizedTotals:
    client_id: UUID
    financial_total: Decimal = ZERO
    property_total: Decimal = ZERO
    per_type: dict[TransactionKind, Decimal] = field(
        default_factory=lambda: {kind: ZERO for kind in TransactionKind}
    )
    insurance_count: int = 0
    insurance_monthly_cost: Decimal = ZERO
    insurance_coverage: Decimal = ZERO

    @property
    def total_allocations(self) -> Decimal:
        return self.financial_total + self.property_total

    @property
    def total_entries(self) -> Decimal:
        return self.per_type[TransactionKind.CONTRIBUTION] + self.per_type[TransactionKind.YIELD]

    @property
    def total_exits(self) -> Decimal:
        return self.per_type[TransactionKind.WITHDRAWAL] + self.per_type[TransactionKind.FEE]

    @property
    def total_assets(self) -> Decimal:
        return self.total_allocations + self.total_entries - self.total_exits


async def calculate_realized(client_id: UUID, session: AsyncSession) -> RealizedTotals:
    if await session.get(Client, client_id) is None:
        raise NotFoundError("Client", client_id)

    totals = RealizedTotals(client_id=client_id)
    simulation_ids = select(Simulation.id).where(Simulation.client_id == client_id)

    allocations = (
        await session.execute(select(Allocation).where(Allocation.simulation_id.in_(simulation_ids)))
    ).scalars().all()
    for allocation in allocations:
        value = Decimal(str(allocation.initial_value))
        if allocation.type == AllocationKind.FINANCIAL:
            totals.financial_total += value
        else:
            totals.property_total += value

    allocation_ids = select(Allocation.id).where(Allocation.simulation_id.in_(simulation_ids))
    transactions = (
        await session.execute(select(Transaction).where(Transaction.allocation_id.in_(allocation_ids)))
    ).scalars().all()
    for tx in transactions:
        totals.per_type[TransactionKind(tx.type)] += Decimal(str(tx.amount))

    insurances = (
        await session.execute(select(Insurance).where(Insurance.simulation_id.in_(simulation_ids)))
    ).scalars().all()
    totals.insurance_count = len(insurances)
    for insurance in insurances:
        totals.insurance_monthly_cost += Decimal(str(insurance.monthly_cost))
        totals.insurance_coverage += Decimal(str(insurance.coverage_amount))

    return totals


__all__ = ["RealizedTotals", "calculate_realized"]
