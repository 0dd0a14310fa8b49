"""Side-by-side projections for several simulations of one client."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Sequence
from uuid import UUID

from dateutil.relativedelta import relativedelta
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.models import Client, Simulation

from .errors import InvalidInputError, NotFoundError
from .projection import ProjectionRequest, ProjectionResult, run_projection

logger = logging.getLogger(__name__)


async def compare_simulations(
    client_id: UUID,
    simulation_ids: Sequence[UUID],
    session: AsyncSession,
    *,
    interest_rate: Decimal | None = None,
    inflation_rate: Decimal | None = None,
    today: date | None = None,
) -> list[ProjectionResult]:
    """Project each simulation over its own horizon starting today.

    Ids that are unknown or belong to another client are skipped.
    """

    limit = get_settings().max_compare_simulations
    if len(simulation_ids) > limit:
        raise InvalidInputError(f"At most {limit} simulations can be compared at once")
    if await session.get(Client, client_id) is None:
        raise NotFoundError("Client", client_id)

    start = today or date.today()
    results: list[ProjectionResult] = []
    for simulation_id in simulation_ids:
        simulation = await session.get(Simulation, simulation_id)
        if simulation is None or simulation.client_id != client_id:
            logger.warning("Skipping simulation %s for client %s in comparison", simulation_id, client_id)
            continue
        request = ProjectionRequest(
            start_date=start,
            end_date=start + relativedelta(years=simulation.years_projection),
            interest_rate=interest_rate,
            inflation_rate=inflation_rate,
        )
        results.append(await run_projection(simulation.id, session, request))
    return results


__all__ = ["compare_simulations"]
