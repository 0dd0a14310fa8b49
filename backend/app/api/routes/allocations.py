"""Allocation and ledger transaction endpoints."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import Database
from app.models import Allocation, Transaction
from app.schemas import (
    AllocationCreateRequest,
    AllocationSchema,
    AllocationUpdateRequest,
    TransactionCreateRequest,
    TransactionSchema,
    TransactionUpdateRequest,
)
from app.services import allocations as allocation_service

from ..errors import to_http_exception


def _serialize_allocation(allocation: Allocation) -> AllocationSchema:
    return AllocationSchema(
        id=allocation.id,
        simulation_id=allocation.simulation_id,
        type=allocation.type.value,
        description=allocation.description,
        percentage=float(allocation.percentage),
        initial_value=float(allocation.initial_value),
        annual_return=float(allocation.annual_return),
        allocation_date=allocation.allocation_date,
        monthly_payment=float(allocation.monthly_payment) if allocation.monthly_payment is not None else None,
        remaining_payments=allocation.remaining_payments,
        created_at=allocation.created_at,
        updated_at=allocation.updated_at,
    )


def _serialize_transaction(tx: Transaction) -> TransactionSchema:
    return TransactionSchema(
        id=tx.id,
        allocation_id=tx.allocation_id,
        type=tx.type.value,
        amount=float(tx.amount),
        description=tx.description,
        transaction_date=tx.transaction_date,
        created_at=tx.created_at,
        updated_at=tx.updated_at,
    )


def get_allocations_router(database: Database) -> APIRouter:
    router = APIRouter(tags=["allocations"])

    @router.get("/simulations/{simulation_id}/allocations", response_model=list[AllocationSchema])
    async def get_simulation_allocations(
        simulation_id: UUID,
        session: AsyncSession = Depends(database.get_session),
    ) -> list[AllocationSchema]:
        try:
            allocations = await allocation_service.list_allocations(simulation_id, session)
        except LookupError as exc:
            raise to_http_exception(exc) from exc
        return [_serialize_allocation(a) for a in allocations]

    @router.post("/allocations", response_model=AllocationSchema, status_code=status.HTTP_201_CREATED)
    async def post_allocation(
        payload: AllocationCreateRequest,
        session: AsyncSession = Depends(database.get_session),
    ) -> AllocationSchema:
        try:
            allocation = await allocation_service.create_allocation(payload, session)
        except LookupError as exc:
            raise to_http_exception(exc) from exc
        return _serialize_allocation(allocation)

    @router.get("/allocations/{allocation_id}", response_model=AllocationSchema)
    async def get_allocation(
        allocation_id: UUID,
        session: AsyncSession = Depends(database.get_session),
    ) -> AllocationSchema:
        try:
            allocation = await allocation_service.get_allocation(allocation_id, session)
        except LookupError as exc:
            raise to_http_exception(exc) from exc
        return _serialize_allocation(allocation)

    @router.put("/allocations/{allocation_id}", response_model=AllocationSchema)
    async def put_allocation(
        allocation_id: UUID,
        payload: AllocationUpdateRequest,
        session: AsyncSession = Depends(database.get_session),
    ) -> AllocationSchema:
        try:
            allocation = await allocation_service.update_allocation(allocation_id, payload, session)
        except LookupError as exc:
            raise to_http_exception(exc) from exc
        return _serialize_allocation(allocation)

    @router.delete("/allocations/{allocation_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_allocation(
        allocation_id: UUID,
        session: AsyncSession = Depends(database.get_session),
    ) -> Response:
        try:
            await allocation_service.delete_allocation(allocation_id, session)
        except LookupError as exc:
            raise to_http_exception(exc) from exc
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.get("/allocations/{allocation_id}/transactions", response_model=list[TransactionSchema])
    async def get_allocation_transactions(
        allocation_id: UUID,
        session: AsyncSession = Depends(database.get_session),
    ) -> list[TransactionSchema]:
        try:
            transactions = await allocation_service.list_transactions(allocation_id, session)
        except LookupError as exc:
            raise to_http_exception(exc) from exc
        return [_serialize_transaction(tx) for tx in transactions]

    @router.post("/transactions", response_model=TransactionSchema, status_code=status.HTTP_201_CREATED)
    async def post_transaction(
        payload: TransactionCreateRequest,
        session: AsyncSession = Depends(database.get_session),
    ) -> TransactionSchema:
        try:
            tx = await allocation_service.create_transaction(payload, session)
        except LookupError as exc:
            raise to_http_exception(exc) from exc
        return _serialize_transaction(tx)

    @router.get("/transactions/{transaction_id}", response_model=TransactionSchema)
    async def get_transaction(
        transaction_id: UUID,
        session: AsyncSession = Depends(database.get_session),
    ) -> TransactionSchema:
        try:
            tx = await allocation_service.get_transaction(transaction_id, session)
        except LookupError as exc:
            raise to_http_exception(exc) from exc
        return _serialize_transaction(tx)

    @router.put("/transactions/{transaction_id}", response_model=TransactionSchema)
    async def put_transaction(
        transaction_id: UUID,
        payload: TransactionUpdateRequest,
        session: AsyncSession = Depends(database.get_session),
    ) -> TransactionSchema:
        try:
            tx = await allocation_service.update_transaction(transaction_id, payload, session)
        except LookupError as exc:
            raise to_http_exception(exc) from exc
        return _serialize_transaction(tx)

    @router.delete("/transactions/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_transaction(
        transaction_id: UUID,
        session: AsyncSession = Depends(database.get_session),
    ) -> Response:
        try:
            await allocation_service.delete_transaction(transaction_id, session)
        except LookupError as exc:
            raise to_http_exception(exc) from exc
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


__all__ = ["get_allocations_router"]
