"""Simulation and version endpoints."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import Database
from app.models import Simulation, SimulationVersion
from app.schemas import (
    SimulationCreateRequest,
    SimulationSchema,
    SimulationUpdateRequest,
    SimulationVersionSchema,
)
from app.services import simulations as simulation_service

from ..errors import to_http_exception


def serialize_simulation(simulation: Simulation) -> SimulationSchema:
    return SimulationSchema(
        id=simulation.id,
        client_id=simulation.client_id,
        name=simulation.name,
        description=simulation.description,
        status=simulation.status.value,
        initial_capital=float(simulation.initial_capital),
        monthly_contribution=float(simulation.monthly_contribution),
        inflation_rate=float(simulation.inflation_rate),
        years_projection=simulation.years_projection,
        created_at=simulation.created_at,
        updated_at=simulation.updated_at,
    )


def _serialize_version(version: SimulationVersion) -> SimulationVersionSchema:
    return SimulationVersionSchema(
        id=version.id,
        simulation_id=version.simulation_id,
        version_number=version.version_number,
        snapshot=version.snapshot,
        created_at=version.created_at,
    )


def get_simulations_router(database: Database) -> APIRouter:
    router = APIRouter(tags=["simulations"])

    @router.get("/clients/{client_id}/simulations", response_model=list[SimulationSchema])
    async def get_client_simulations(
        client_id: UUID,
        session: AsyncSession = Depends(database.get_session),
    ) -> list[SimulationSchema]:
        try:
            simulations = await simulation_service.list_simulations(client_id, session)
        except LookupError as exc:
            raise to_http_exception(exc) from exc
        return [serialize_simulation(s) for s in simulations]

    @router.post("/simulations", response_model=SimulationSchema, status_code=status.HTTP_201_CREATED)
    async def post_simulation(
        payload: SimulationCreateRequest,
        session: AsyncSession = Depends(database.get_session),
    ) -> SimulationSchema:
        try:
            simulation = await simulation_service.create_simulation(payload, session)
        except LookupError as exc:
            raise to_http_exception(exc) from exc
        return serialize_simulation(simulation)

    @router.get("/simulations/{simulation_id}", response_model=SimulationSchema)
    async def get_simulation(
        simulation_id: UUID,
        session: AsyncSession = Depends(database.get_session),
    ) -> SimulationSchema:
        try:
            simulation = await simulation_service.get_simulation(simulation_id, session)
        except LookupError as exc:
            raise to_http_exception(exc) from exc
        return serialize_simulation(simulation)

    @router.put("/simulations/{simulation_id}", response_model=SimulationSchema)
    async def put_simulation(
        simulation_id: UUID,
        payload: SimulationUpdateRequest,
        session: AsyncSession = Depends(database.get_session),
    ) -> SimulationSchema:
        try:
            simulation = await simulation_service.update_simulation(simulation_id, payload, session)
        except LookupError as exc:
            raise to_http_exception(exc) from exc
        return serialize_simulation(simulation)

    @router.delete("/simulations/{simulation_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_simulation(
        simulation_id: UUID,
        session: AsyncSession = Depends(database.get_session),
    ) -> Response:
        try:
            await simulation_service.delete_simulation(simulation_id, session)
        except LookupError as exc:
            raise to_http_exception(exc) from exc
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.post(
        "/simulations/{simulation_id}/versions",
        response_model=SimulationVersionSchema,
        status_code=status.HTTP_201_CREATED,
    )
    async def post_version(
        simulation_id: UUID,
        session: AsyncSession = Depends(database.get_session),
    ) -> SimulationVersionSchema:
        try:
            version = await simulation_service.create_version(simulation_id, session)
        except LookupError as exc:
            raise to_http_exception(exc) from exc
        return _serialize_version(version)

    @router.get("/simulations/{simulation_id}/versions", response_model=list[SimulationVersionSchema])
    async def get_versions(
        simulation_id: UUID,
        session: AsyncSession = Depends(database.get_session),
    ) -> list[SimulationVersionSchema]:
        try:
            versions = await simulation_service.list_versions(simulation_id, session)
        except LookupError as exc:
            raise to_http_exception(exc) from exc
        return [_serialize_version(v) for v in versions]

    return router


__all__ = ["get_simulations_router", "serialize_simulation"]
