"""Month-by-month net worth projection."""
from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Iterable, List, Set

from .cashflows import evaluate_cash_flows
from .financing import build_financing_schedules, total_financing_payment
from .insurance import evaluate_insurance
from .models import (
    ZERO,
    AllocationSnapshot,
    AllocationType,
    LifeStatus,
    MonthlyProjection,
    ProjectionInput,
    ProjectionOutput,
    as_decimal,
)
from .months import iter_months, start_of_month
from .rates import ONE, grow_property, monthly_real_rate
from .summary import aggregate_yearly, summarize

logger = logging.getLogger(__name__)


def _sum_allocations(allocations: Iterable[AllocationSnapshot], kind: AllocationType) -> Decimal:
    return sum((as_decimal(a.value) for a in allocations if a.type == kind), ZERO)


def resolve_life_status(month: date, projection_input: ProjectionInput) -> LifeStatus:
    """Status in effect for ``month``.

    Without a change date the requested status covers the whole range;
    otherwise months before the change month are always normal.
    """

    change_date = projection_input.life_status_change_date
    if change_date is None:
        return LifeStatus(projection_input.life_status)
    if start_of_month(month) >= start_of_month(change_date):
        return LifeStatus(projection_input.life_status)
    return LifeStatus.NORMAL


def project_monthly(projection_input: ProjectionInput) -> List[MonthlyProjection]:
    """Step through every month in range and emit one snapshot per month.

    The running financial balances are not floored, so a deficit keeps
    compounding and absorbs later entries; only the reported figures are
    clamped at zero.
    """

    allocations = list(projection_input.allocations)
    financial_assets = _sum_allocations(allocations, AllocationType.FINANCIAL)
    property_assets = _sum_allocations(allocations, AllocationType.PROPERTY)
    financial_without_insurance = financial_assets
    growth = ONE + monthly_real_rate(projection_input.interest_rate, projection_input.inflation_rate)
    schedules = build_financing_schedules(allocations)
    paid_policy_ids: Set[str] = set()

    projections: List[MonthlyProjection] = []
    for month in iter_months(projection_input.start_date, projection_input.end_date):
        status = resolve_life_status(month, projection_input)
        cash = evaluate_cash_flows(month, projection_input.transactions, status)
        insurance = evaluate_insurance(month, projection_input.insurances, status, paid_policy_ids)
        financing = total_financing_payment(schedules)

        net_flow = cash.entries - cash.exits - financing
        financial_assets = financial_assets * growth + net_flow - insurance.premiums + insurance.payouts
        financial_without_insurance = financial_without_insurance * growth + net_flow
        property_assets = grow_property(property_assets, projection_input.inflation_rate)

        reported_financial = max(ZERO, financial_assets)
        projections.append(
            MonthlyProjection(
                date=month,
                financial_assets=reported_financial,
                property_assets=property_assets,
                total_assets=reported_financial + property_assets,
                total_without_insurance=max(ZERO, financial_without_insurance) + property_assets,
                entries=cash.entries,
                exits=cash.exits,
                insurance_premiums=insurance.premiums,
                insurance_payouts=insurance.payouts,
                financing_payments=financing,
            )
        )

    return projections


def calculate_projection(projection_input: ProjectionInput) -> ProjectionOutput:
    """Run the engine and derive yearly and summary views."""

    monthly = project_monthly(projection_input)
    logger.debug(
        "Projected %d months from %s to %s",
        len(monthly),
        projection_input.start_date,
        projection_input.end_date,
    )
    return ProjectionOutput(monthly=monthly, yearly=aggregate_yearly(monthly), summary=summarize(monthly))


__all__ = ["calculate_projection", "project_monthly", "resolve_life_status"]
