"""Calendar helpers; the engine works on first-of-month dates only."""
from __future__ import annotations

from datetime import date
from typing import Iterator

from dateutil.relativedelta import relativedelta


def start_of_month(value: date) -> date:
    """Return the first day of the month containing ``value``.

    Accepts ``datetime`` instances too; the time component is dropped.
    """

    return date(value.year, value.month, 1)


def add_months(value: date, months: int) -> date:
    return start_of_month(value) + relativedelta(months=months)


def months_between(start: date, end: date) -> int:
    """Whole calendar months from ``start`` to ``end`` (negative if reversed)."""

    return (end.year - start.year) * 12 + (end.month - start.month)


def iter_months(start: date, end: date) -> Iterator[date]:
    """Yield month starts from ``start`` to ``end`` inclusive."""

    current = start_of_month(start)
    last = start_of_month(end)
    while current <= last:
        yield current
        current = add_months(current, 1)


__all__ = ["start_of_month", "add_months", "months_between", "iter_months"]
