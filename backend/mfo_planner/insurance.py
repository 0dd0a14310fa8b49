"""Insurance premiums and one-off payouts."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, MutableSet

from .models import ZERO, InsurancePolicy, InsuranceType, LifeStatus, as_decimal
from .months import start_of_month

# Which policy type pays out when the subject enters a given status.
PAYOUT_TRIGGERS = {
    LifeStatus.DEAD: InsuranceType.LIFE,
    LifeStatus.INVALID: InsuranceType.INVALIDITY,
}


@dataclass(frozen=True)
class InsuranceFlows:
    premiums: Decimal
    payouts: Decimal


def is_policy_active(month: date, policy: InsurancePolicy) -> bool:
    current = start_of_month(month)
    if current < start_of_month(policy.start_date):
        return False
    if policy.end_date is not None and current > start_of_month(policy.end_date):
        return False
    return True


def evaluate_insurance(
    month: date,
    policies: Iterable[InsurancePolicy],
    status: LifeStatus,
    paid_policy_ids: MutableSet[str],
) -> InsuranceFlows:
    """Return premiums charged and payouts received in ``month``.

    Premiums are only billed while the status is normal. A matching policy
    pays its coverage once per run; its id is added to ``paid_policy_ids``
    so later months skip it.
    """

    premiums = ZERO
    payouts = ZERO
    trigger = PAYOUT_TRIGGERS.get(status)
    for policy in policies:
        if not is_policy_active(month, policy):
            continue
        if status == LifeStatus.NORMAL:
            premiums += as_decimal(policy.monthly_premium)
            continue
        if policy.type == trigger and policy.id not in paid_policy_ids:
            payouts += as_decimal(policy.coverage_value)
            paid_policy_ids.add(policy.id)
    return InsuranceFlows(premiums=premiums, payouts=payouts)


__all__ = ["InsuranceFlows", "PAYOUT_TRIGGERS", "evaluate_insurance", "is_policy_active"]
