"""Fixed-instalment financing schedules."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List

from .models import ZERO, AllocationSnapshot, as_decimal


@dataclass
class FinancingSchedule:
    """Mutable per-run state for one financed allocation."""

    monthly_payment: Decimal = ZERO
    remaining_payments: int = 0

    @classmethod
    def from_allocation(cls, allocation: AllocationSnapshot) -> "FinancingSchedule":
        return cls(
            monthly_payment=as_decimal(allocation.monthly_payment),
            remaining_payments=int(allocation.remaining_payments or 0),
        )

    @property
    def exhausted(self) -> bool:
        return self.monthly_payment <= 0 or self.remaining_payments <= 0

    def next_payment(self) -> Decimal:
        """Return this month's instalment and consume it."""

        if self.exhausted:
            return ZERO
        self.remaining_payments -= 1
        return self.monthly_payment


def build_financing_schedules(allocations: Iterable[AllocationSnapshot]) -> List[FinancingSchedule]:
    return [FinancingSchedule.from_allocation(allocation) for allocation in allocations]


def total_financing_payment(schedules: Iterable[FinancingSchedule]) -> Decimal:
    """Advance every schedule by one month and return the combined payment."""

    return sum((schedule.next_payment() for schedule in schedules), ZERO)


__all__ = ["FinancingSchedule", "build_financing_schedules", "total_financing_payment"]
