"""Insurance policies attached to a simulation."""

from __future__ import annotations

import logging
from decimal import Decimal
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Insurance, Simulation
from app.schemas import InsuranceCreateRequest, InsuranceUpdateRequest

from .errors import InvalidInputError, NotFoundError

logger = logging.getLogger(__name__)

_DECIMAL_FIELDS = {"coverage_amount", "monthly_cost"}
_NULLABLE_FIELDS = {"description", "end_date"}


async def create_insurance(payload: InsuranceCreateRequest, session: AsyncSession) -> Insurance:
    if await session.get(Simulation, payload.simulation_id) is None:
        raise NotFoundError("Simulation", payload.simulation_id)

    insurance = Insurance(
        simulation_id=payload.simulation_id,
        type=payload.type.strip(),
        description=payload.description,
        coverage_amount=Decimal(str(payload.coverage_amount)),
        monthly_cost=Decimal(str(payload.monthly_cost)),
        start_date=payload.start_date,
        end_date=payload.end_date,
    )
    session.add(insurance)
    await session.commit()
    await session.refresh(insurance)
    logger.info("Created insurance %s on simulation %s", insurance.id, insurance.simulation_id)
    return insurance


async def get_insurance(insurance_id: UUID, session: AsyncSession) -> Insurance:
    insurance = await session.get(Insurance, insurance_id)
    if insurance is None:
        raise NotFoundError("Insurance", insurance_id)
    return insurance


async def list_insurances(simulation_id: UUID, session: AsyncSession) -> list[Insurance]:
    if await session.get(Simulation, simulation_id) is None:
        raise NotFoundError("Simulation", simulation_id)
    result = await session.execute(
        select(Insurance).where(Insurance.simulation_id == simulation_id).order_by(Insurance.start_date)
    )
    return list(result.scalars().all())


async def update_insurance(
    insurance_id: UUID,
    payload: InsuranceUpdateRequest,
    session: AsyncSession,
) -> Insurance:
    insurance = await get_insurance(insurance_id, session)
    changes = payload.model_dump(exclude_unset=True)

    start_date = changes.get("start_date") or insurance.start_date
    end_date = changes["end_date"] if "end_date" in changes else insurance.end_date
    if end_date is not None and end_date < start_date:
        raise InvalidInputError("end_date must not precede start_date")

    for field, value in changes.items():
        if value is None and field not in _NULLABLE_FIELDS:
            continue
        if field in _DECIMAL_FIELDS:
            value = Decimal(str(value))
        elif field == "type":
            value = value.strip()
        setattr(insurance, field, value)
    await session.commit()
    await session.refresh(insurance)
    return insurance


async def delete_insurance(insurance_id: UUID, session: AsyncSession) -> None:
    insurance = await get_insurance(insurance_id, session)
    await session.delete(insurance)
    await session.commit()


__all__ = [
    "create_insurance",
    "delete_insurance",
    "get_insurance",
    "list_insurances",
    "update_insurance",
]
