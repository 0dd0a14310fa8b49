"""Yearly roll-up and scalar summary of a monthly projection."""
from __future__ import annotations

from decimal import Decimal
from typing import Dict, List, Sequence

from .models import ZERO, MonthlyProjection, ProjectionSummary, YearlyProjection


def aggregate_yearly(monthly: Sequence[MonthlyProjection]) -> List[YearlyProjection]:
    """Keep the last snapshot of each calendar year, in encounter order."""

    grouped: Dict[int, YearlyProjection] = {}
    for entry in monthly:
        grouped[entry.date.year] = YearlyProjection(
            year=entry.date.year,
            financial_assets=entry.financial_assets,
            property_assets=entry.property_assets,
            total_assets=entry.total_assets,
        )
    return list(grouped.values())


def summarize(monthly: Sequence[MonthlyProjection]) -> ProjectionSummary:
    if not monthly:
        return ProjectionSummary(
            initial_assets=ZERO,
            final_assets=ZERO,
            total_growth=ZERO,
            total_growth_percent=ZERO,
            total_entries=ZERO,
            total_exits=ZERO,
            insurance_impact=ZERO,
        )

    first = monthly[0]
    last = monthly[-1]
    initial_assets = first.total_assets
    final_assets = last.total_assets
    total_growth = final_assets - initial_assets
    if initial_assets > 0:
        total_growth_percent = total_growth / initial_assets * Decimal("100")
    else:
        total_growth_percent = ZERO

    return ProjectionSummary(
        initial_assets=initial_assets,
        final_assets=final_assets,
        total_growth=total_growth,
        total_growth_percent=total_growth_percent,
        total_entries=sum((entry.entries for entry in monthly), ZERO),
        total_exits=sum((entry.exits for entry in monthly), ZERO),
        # Positive when premiums paid exceeded payouts received by the end.
        insurance_impact=last.total_without_insurance - last.total_assets,
    )


__all__ = ["aggregate_yearly", "summarize"]
