"""Insurance policy endpoints."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import Database
from app.models import Insurance
from app.schemas import InsuranceCreateRequest, InsuranceSchema, InsuranceUpdateRequest
from app.services import insurances as insurance_service

from ..errors import to_http_exception


def _serialize_insurance(insurance: Insurance) -> InsuranceSchema:
    return InsuranceSchema(
        id=insurance.id,
        simulation_id=insurance.simulation_id,
        type=insurance.type,
        description=insurance.description,
        coverage_amount=float(insurance.coverage_amount),
        monthly_cost=float(insurance.monthly_cost),
        start_date=insurance.start_date,
        end_date=insurance.end_date,
        created_at=insurance.created_at,
        updated_at=insurance.updated_at,
    )


def get_insurances_router(database: Database) -> APIRouter:
    router = APIRouter(tags=["insurances"])

    @router.get("/simulations/{simulation_id}/insurances", response_model=list[InsuranceSchema])
    async def get_simulation_insurances(
        simulation_id: UUID,
        session: AsyncSession = Depends(database.get_session),
    ) -> list[InsuranceSchema]:
        try:
            insurances = await insurance_service.list_insurances(simulation_id, session)
        except LookupError as exc:
            raise to_http_exception(exc) from exc
        return [_serialize_insurance(i) for i in insurances]

    @router.post("/insurances", response_model=InsuranceSchema, status_code=status.HTTP_201_CREATED)
    async def post_insurance(
        payload: InsuranceCreateRequest,
        session: AsyncSession = Depends(database.get_session),
    ) -> InsuranceSchema:
        try:
            insurance = await insurance_service.create_insurance(payload, session)
        except LookupError as exc:
            raise to_http_exception(exc) from exc
        return _serialize_insurance(insurance)

    @router.get("/insurances/{insurance_id}", response_model=InsuranceSchema)
    async def get_insurance(
        insurance_id: UUID,
        session: AsyncSession = Depends(database.get_session),
    ) -> InsuranceSchema:
        try:
            insurance = await insurance_service.get_insurance(insurance_id, session)
        except LookupError as exc:
            raise to_http_exception(exc) from exc
        return _serialize_insurance(insurance)

    @router.put("/insurances/{insurance_id}", response_model=InsuranceSchema)
    async def put_insurance(
        insurance_id: UUID,
        payload: InsuranceUpdateRequest,
        session: AsyncSession = Depends(database.get_session),
    ) -> InsuranceSchema:
        try:
            insurance = await insurance_service.update_insurance(insurance_id, payload, session)
        except (LookupError, ValueError) as exc:
            raise to_http_exception(exc) from exc
        return _serialize_insurance(insurance)

    @router.delete("/insurances/{insurance_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_insurance(
        insurance_id: UUID,
        session: AsyncSession = Depends(database.get_session),
    ) -> Response:
        try:
            await insurance_service.delete_insurance(insurance_id, session)
        except LookupError as exc:
            raise to_http_exception(exc) from exc
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


__all__ = ["get_insurances_router"]
