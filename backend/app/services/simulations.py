"""Simulation lifecycle and version snapshots."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.models import (
    Allocation,
    Client,
    Insurance,
    Simulation,
    SimulationStatus,
    SimulationVersion,
    Transaction,
)
from app.schemas import SimulationCreateRequest, SimulationUpdateRequest

from .errors import NotFoundError

logger = logging.getLogger(__name__)

_DECIMAL_FIELDS = {"initial_capital", "monthly_contribution", "inflation_rate"}


def _to_decimal(value: float | int) -> Decimal:
    return Decimal(str(value))


async def create_simulation(payload: SimulationCreateRequest, session: AsyncSession) -> Simulation:
    client = await session.get(Client, payload.client_id)
    if client is None:
        raise NotFoundError("Client", payload.client_id)

    simulation = Simulation(
        client_id=client.id,
        name=payload.name.strip(),
        description=payload.description,
        status=SimulationStatus(payload.status),
        initial_capital=_to_decimal(payload.initial_capital),
        monthly_contribution=_to_decimal(payload.monthly_contribution),
        inflation_rate=_to_decimal(payload.inflation_rate),
        years_projection=payload.years_projection or get_settings().default_years_projection,
    )
    session.add(simulation)
    await session.commit()
    await session.refresh(simulation)
    logger.info("Created simulation %s for client %s", simulation.id, client.id)
    return simulation


async def get_simulation(simulation_id: UUID, session: AsyncSession) -> Simulation:
    simulation = await session.get(Simulation, simulation_id)
    if simulation is None:
        raise NotFoundError("Simulation", simulation_id)
    return simulation


async def list_simulations(client_id: UUID, session: AsyncSession) -> list[Simulation]:
    if await session.get(Client, client_id) is None:
        raise NotFoundError("Client", client_id)
    result = await session.execute(
        select(Simulation).where(Simulation.client_id == client_id).order_by(Simulation.created_at)
    )
    return list(result.scalars().all())


async def update_simulation(
    simulation_id: UUID,
    payload: SimulationUpdateRequest,
    session: AsyncSession,
) -> Simulation:
    simulation = await get_simulation(simulation_id, session)
    for field, value in payload.model_dump(exclude_unset=True).items():
        if value is None:
            if field == "description":
                simulation.description = None
            continue
        if field in _DECIMAL_FIELDS:
            value = _to_decimal(value)
        elif field == "status":
            value = SimulationStatus(value)
        setattr(simulation, field, value)
    await session.commit()
    await session.refresh(simulation)
    return simulation


async def delete_simulation_tree(simulation_id: UUID, session: AsyncSession) -> None:
    """Remove a simulation and every row hanging off it without committing."""

    allocation_ids = select(Allocation.id).where(Allocation.simulation_id == simulation_id)
    await session.execute(delete(Transaction).where(Transaction.allocation_id.in_(allocation_ids)))
    await session.execute(delete(Allocation).where(Allocation.simulation_id == simulation_id))
    await session.execute(delete(Insurance).where(Insurance.simulation_id == simulation_id))
    await session.execute(delete(SimulationVersion).where(SimulationVersion.simulation_id == simulation_id))
    await session.execute(delete(Simulation).where(Simulation.id == simulation_id))


async def delete_simulation(simulation_id: UUID, session: AsyncSession) -> None:
    simulation = await get_simulation(simulation_id, session)
    await delete_simulation_tree(simulation.id, session)
    await session.commit()
    logger.info("Deleted simulation %s", simulation_id)


def _number(value: Decimal | None) -> float | None:
    return float(value) if value is not None else None


def build_snapshot(
    simulation: Simulation,
    allocations: list[Allocation],
    insurances: list[Insurance],
) -> dict[str, Any]:
    """Freeze the simulation and its inputs into a JSON-compatible payload."""

    return {
        "simulation": {
            "id": str(simulation.id),
            "client_id": str(simulation.client_id),
            "name": simulation.name,
            "description": simulation.description,
            "status": SimulationStatus(simulation.status).value,
            "initial_capital": _number(simulation.initial_capital),
            "monthly_contribution": _number(simulation.monthly_contribution),
            "inflation_rate": _number(simulation.inflation_rate),
            "years_projection": simulation.years_projection,
        },
        "allocations": [
            {
                "id": str(allocation.id),
                "type": allocation.type.value,
                "description": allocation.description,
                "percentage": _number(allocation.percentage),
                "initial_value": _number(allocation.initial_value),
                "annual_return": _number(allocation.annual_return),
                "allocation_date": allocation.allocation_date.isoformat(),
                "monthly_payment": _number(allocation.monthly_payment),
                "remaining_payments": allocation.remaining_payments,
            }
            for allocation in allocations
        ],
        "insurances": [
            {
                "id": str(insurance.id),
                "type": insurance.type,
                "description": insurance.description,
                "coverage_amount": _number(insurance.coverage_amount),
                "monthly_cost": _number(insurance.monthly_cost),
                "start_date": insurance.start_date.isoformat(),
                "end_date": insurance.end_date.isoformat() if insurance.end_date else None,
            }
            for insurance in insurances
        ],
    }


async def create_version(simulation_id: UUID, session: AsyncSession) -> SimulationVersion:
    simulation = await get_simulation(simulation_id, session)
    allocations = (
        await session.execute(
            select(Allocation).where(Allocation.simulation_id == simulation.id).order_by(Allocation.created_at)
        )
    ).scalars().all()
    insurances = (
        await session.execute(
            select(Insurance).where(Insurance.simulation_id == simulation.id).order_by(Insurance.created_at)
        )
    ).scalars().all()
    latest = (
        await session.execute(
            select(func.max(SimulationVersion.version_number)).where(
                SimulationVersion.simulation_id == simulation.id
            )
        )
    ).scalar()

    version = SimulationVersion(
        simulation_id=simulation.id,
        version_number=(latest or 0) + 1,
        snapshot=build_snapshot(simulation, list(allocations), list(insurances)),
    )
    session.add(version)
    await session.commit()
    await session.refresh(version)
    logger.info("Saved version %d of simulation %s", version.version_number, simulation.id)
    return version


async def list_versions(simulation_id: UUID, session: AsyncSession) -> list[SimulationVersion]:
    await get_simulation(simulation_id, session)
    result = await session.execute(
        select(SimulationVersion)
        .where(SimulationVersion.simulation_id == simulation_id)
        .order_by(SimulationVersion.version_number)
    )
    return list(result.scalars().all())


__all__ = [
    "build_snapshot",
    "create_simulation",
    "create_version",
    "delete_simulation",
    "delete_simulation_tree",
    "get_simulation",
    "list_simulations",
    "list_versions",
    "update_simulation",
]
