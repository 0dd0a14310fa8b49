"""Allocations within a simulation and their ledger transactions."""

from __future__ import annotations

import logging
from decimal import Decimal
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Allocation, AllocationKind, Simulation, Transaction, TransactionKind
from app.schemas import (
    AllocationCreateRequest,
    AllocationUpdateRequest,
    TransactionCreateRequest,
    TransactionUpdateRequest,
)

from .errors import NotFoundError

logger = logging.getLogger(__name__)

_ALLOCATION_DECIMALS = {"percentage", "initial_value", "annual_return", "monthly_payment"}
_NULLABLE_ALLOCATION_FIELDS = {"monthly_payment", "remaining_payments"}


def _to_decimal(value: float | int | None) -> Decimal | None:
    if value is None:
        return None
    return Decimal(str(value))


async def create_allocation(payload: AllocationCreateRequest, session: AsyncSession) -> Allocation:
    if await session.get(Simulation, payload.simulation_id) is None:
        raise NotFoundError("Simulation", payload.simulation_id)

    allocation = Allocation(
        simulation_id=payload.simulation_id,
        type=AllocationKind(payload.type),
        description=payload.description.strip(),
        percentage=_to_decimal(payload.percentage),
        initial_value=_to_decimal(payload.initial_value),
        annual_return=_to_decimal(payload.annual_return),
        allocation_date=payload.allocation_date,
        monthly_payment=_to_decimal(payload.monthly_payment),
        remaining_payments=payload.remaining_payments,
    )
    session.add(allocation)
    await session.commit()
    await session.refresh(allocation)
    logger.info("Created %s allocation %s", allocation.type.value, allocation.id)
    return allocation


async def get_allocation(allocation_id: UUID, session: AsyncSession) -> Allocation:
    allocation = await session.get(Allocation, allocation_id)
    if allocation is None:
        raise NotFoundError("Allocation", allocation_id)
    return allocation


async def list_allocations(simulation_id: UUID, session: AsyncSession) -> list[Allocation]:
    if await session.get(Simulation, simulation_id) is None:
        raise NotFoundError("Simulation", simulation_id)
    result = await session.execute(
        select(Allocation).where(Allocation.simulation_id == simulation_id).order_by(Allocation.created_at)
    )
    return list(result.scalars().all())


async def update_allocation(
    allocation_id: UUID,
    payload: AllocationUpdateRequest,
    session: AsyncSession,
) -> Allocation:
    allocation = await get_allocation(allocation_id, session)
    for field, value in payload.model_dump(exclude_unset=True).items():
        if value is None and field not in _NULLABLE_ALLOCATION_FIELDS:
            continue
        if field in _ALLOCATION_DECIMALS:
            value = _to_decimal(value)
        elif field == "type":
            value = AllocationKind(value)
        setattr(allocation, field, value)
    await session.commit()
    await session.refresh(allocation)
    return allocation


async def delete_allocation(allocation_id: UUID, session: AsyncSession) -> None:
    allocation = await get_allocation(allocation_id, session)
    await session.execute(delete(Transaction).where(Transaction.allocation_id == allocation.id))
    await session.delete(allocation)
    await session.commit()
    logger.info("Deleted allocation %s", allocation_id)


async def create_transaction(payload: TransactionCreateRequest, session: AsyncSession) -> Transaction:
    if await session.get(Allocation, payload.allocation_id) is None:
        raise NotFoundError("Allocation", payload.allocation_id)

    tx = Transaction(
        allocation_id=payload.allocation_id,
        type=TransactionKind(payload.type),
        amount=_to_decimal(payload.amount),
        description=payload.description,
        transaction_date=payload.transaction_date,
    )
    session.add(tx)
    await session.commit()
    await session.refresh(tx)
    logger.info("Recorded %s transaction %s on allocation %s", tx.type.value, tx.id, tx.allocation_id)
    return tx


async def get_transaction(transaction_id: UUID, session: AsyncSession) -> Transaction:
    tx = await session.get(Transaction, transaction_id)
    if tx is None:
        raise NotFoundError("Transaction", transaction_id)
    return tx


async def list_transactions(allocation_id: UUID, session: AsyncSession) -> list[Transaction]:
    await get_allocation(allocation_id, session)
    result = await session.execute(
        select(Transaction)
        .where(Transaction.allocation_id == allocation_id)
        .order_by(Transaction.transaction_date, Transaction.created_at)
    )
    return list(result.scalars().all())


async def update_transaction(
    transaction_id: UUID,
    payload: TransactionUpdateRequest,
    session: AsyncSession,
) -> Transaction:
    tx = await get_transaction(transaction_id, session)
    for field, value in payload.model_dump(exclude_unset=True).items():
        if value is None and field != "description":
            continue
        if field == "amount":
            value = _to_decimal(value)
        elif field == "type":
            value = TransactionKind(value)
        setattr(tx, field, value)
    await session.commit()
    await session.refresh(tx)
    return tx


async def delete_transaction(transaction_id: UUID, session: AsyncSession) -> None:
    tx = await get_transaction(transaction_id, session)
    await session.delete(tx)
    await session.commit()


__all__ = [
    "create_allocation",
    "create_transaction",
    "delete_allocation",
    "delete_transaction",
    "get_allocation",
    "get_transaction",
    "list_allocations",
    "list_transactions",
    "update_allocation",
    "update_transaction",
]
