"""Projection, comparison and realized-position endpoints."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import Database
from app.schemas import (
    ComparisonEntrySchema,
    ComparisonRequest,
    ComparisonResponse,
    MonthlyProjectionSchema,
    ProjectionResponse,
    ProjectionSummarySchema,
    RealizedResponse,
    YearlyProjectionSchema,
)
from app.schemas.projections import (
    RealizedAllocationsSchema,
    RealizedInsurancesSchema,
    RealizedTransactionsSchema,
)
from app.services.comparison import compare_simulations
from app.services.projection import ProjectionRequest, ProjectionResult, run_projection
from app.services.realized import RealizedTotals, calculate_realized

from ..errors import to_http_exception


def _optional_decimal(value: float | None) -> Decimal | None:
    return Decimal(str(value)) if value is not None else None


def serialize_projection(result: ProjectionResult) -> ProjectionResponse:
    projection_input = result.projection_input
    output = result.output
    summary = output.summary
    return ProjectionResponse(
        simulation_id=result.simulation.id,
        start_date=projection_input.start_date,
        end_date=projection_input.end_date,
        interest_rate=float(projection_input.interest_rate),
        inflation_rate=float(projection_input.inflation_rate),
        life_status=projection_input.life_status.value,
        life_status_change_date=projection_input.life_status_change_date,
        monthly=[
            MonthlyProjectionSchema(
                date=m.date,
                financial_assets=float(m.financial_assets),
                property_assets=float(m.property_assets),
                total_assets=float(m.total_assets),
                total_without_insurance=float(m.total_without_insurance),
                entries=float(m.entries),
                exits=float(m.exits),
                insurance_premiums=float(m.insurance_premiums),
                insurance_payouts=float(m.insurance_payouts),
                financing_payments=float(m.financing_payments),
            )
            for m in output.monthly
        ],
        yearly=[
            YearlyProjectionSchema(
                year=y.year,
                financial_assets=float(y.financial_assets),
                property_assets=float(y.property_assets),
                total_assets=float(y.total_assets),
            )
            for y in output.yearly
        ],
        summary=ProjectionSummarySchema(
            initial_assets=float(summary.initial_assets),
            final_assets=float(summary.final_assets),
            total_growth=float(summary.total_growth),
            total_growth_percent=float(summary.total_growth_percent),
            total_entries=float(summary.total_entries),
            total_exits=float(summary.total_exits),
            insurance_impact=float(summary.insurance_impact),
        ),
    )


def _serialize_realized(totals: RealizedTotals) -> RealizedResponse:
    return RealizedResponse(
        client_id=totals.client_id,
        total_assets=float(totals.total_assets),
        allocations=RealizedAllocationsSchema(
            total=float(totals.total_allocations),
            financial=float(totals.financial_total),
            property=float(totals.property_total),
        ),
        transactions=RealizedTransactionsSchema(
            total_entries=float(totals.total_entries),
            total_exits=float(totals.total_exits),
            per_type={kind.value: float(amount) for kind, amount in totals.per_type.items()},
        ),
        insurances=RealizedInsurancesSchema(
            count=totals.insurance_count,
            total_monthly_cost=float(totals.insurance_monthly_cost),
            total_coverage=float(totals.insurance_coverage),
        ),
    )


def get_projections_router(database: Database) -> APIRouter:
    router = APIRouter(tags=["projections"])

    @router.get("/simulations/{simulation_id}/projection", response_model=ProjectionResponse)
    async def get_projection(
        simulation_id: UUID,
        start_date: date | None = Query(default=None),
        end_date: date | None = Query(default=None),
        interest_rate: float | None = Query(default=None, ge=0, le=100),
        inflation_rate: float | None = Query(default=None, ge=0, le=100),
        life_status: str | None = Query(default=None, description="normal, dead or invalid"),
        life_status_change_date: date | None = Query(default=None),
        session: AsyncSession = Depends(database.get_session),
    ) -> ProjectionResponse:
        request = ProjectionRequest(
            start_date=start_date,
            end_date=end_date,
            interest_rate=_optional_decimal(interest_rate),
            inflation_rate=_optional_decimal(inflation_rate),
            life_status=life_status,
            life_status_change_date=life_status_change_date,
        )
        try:
            result = await run_projection(simulation_id, session, request)
        except (LookupError, ValueError) as exc:
            raise to_http_exception(exc) from exc
        return serialize_projection(result)

    @router.post("/clients/{client_id}/compare", response_model=ComparisonResponse)
    async def post_comparison(
        client_id: UUID,
        payload: ComparisonRequest,
        session: AsyncSession = Depends(database.get_session),
    ) -> ComparisonResponse:
        try:
            results = await compare_simulations(
                client_id,
                payload.simulation_ids,
                session,
                interest_rate=_optional_decimal(payload.interest_rate),
                inflation_rate=_optional_decimal(payload.inflation_rate),
            )
        except (LookupError, ValueError) as exc:
            raise to_http_exception(exc) from exc
        return ComparisonResponse(
            client_id=client_id,
            comparisons=[
                ComparisonEntrySchema(
                    simulation_id=result.simulation.id,
                    name=result.simulation.name,
                    projection=serialize_projection(result),
                )
                for result in results
            ],
        )

    @router.get("/clients/{client_id}/realized", response_model=RealizedResponse)
    async def get_realized(
        client_id: UUID,
        session: AsyncSession = Depends(database.get_session),
    ) -> RealizedResponse:
        try:
            totals = await calculate_realized(client_id, session)
        except LookupError as exc:
            raise to_http_exception(exc) from exc
        return _serialize_realized(totals)

    return router


__all__ = ["get_projections_router", "serialize_projection"]
