"""Recurring cash-flow evaluation for a single projection month."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable

from .models import ZERO, LifeStatus, TransactionInterval, TransactionTimeline, TransactionType, as_decimal
from .months import start_of_month

ENTRY_TYPES = frozenset({TransactionType.INCOME, TransactionType.DEPOSIT})
EXIT_TYPES = frozenset({TransactionType.EXPENSE, TransactionType.WITHDRAWAL})

# Income stops entirely once the subject is dead or disabled; expenses halve on death.
_ENTRY_MULTIPLIER = {
    LifeStatus.NORMAL: Decimal("1"),
    LifeStatus.DEAD: ZERO,
    LifeStatus.INVALID: ZERO,
}
_EXIT_MULTIPLIER = {
    LifeStatus.NORMAL: Decimal("1"),
    LifeStatus.DEAD: Decimal("0.5"),
    LifeStatus.INVALID: Decimal("1"),
}


@dataclass(frozen=True)
class CashFlows:
    entries: Decimal
    exits: Decimal


def is_transaction_active(month: date, tx: TransactionTimeline) -> bool:
    """Return whether ``tx`` moves cash in ``month``.

    Monthly entries count in every month of their window; yearly entries
    only in the anniversary month of their start date.
    """

    current = start_of_month(month)
    start = start_of_month(tx.start_date)
    end = start_of_month(tx.end_date) if tx.end_date is not None else start
    if current < start or current > end:
        return False
    if tx.interval == TransactionInterval.MONTHLY:
        return True
    return current.month == start.month


def evaluate_cash_flows(
    month: date,
    transactions: Iterable[TransactionTimeline],
    status: LifeStatus,
) -> CashFlows:
    """Sum the entries and exits that apply to ``month`` under ``status``."""

    entries = ZERO
    exits = ZERO
    for tx in transactions:
        if not is_transaction_active(month, tx):
            continue
        if tx.type in ENTRY_TYPES:
            entries += as_decimal(tx.value)
        elif tx.type in EXIT_TYPES:
            exits += as_decimal(tx.value)
    return CashFlows(
        entries=entries * _ENTRY_MULTIPLIER[status],
        exits=exits * _EXIT_MULTIPLIER[status],
    )


__all__ = ["CashFlows", "ENTRY_TYPES", "EXIT_TYPES", "evaluate_cash_flows", "is_transaction_active"]
