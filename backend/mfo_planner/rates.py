"""Rate conversion helpers.

Rates may arrive as percentages (``8.5``) or decimals (``0.085``). Any value
strictly greater than one is read as a percentage, so ``1`` itself means
100% expressed as a decimal. The heuristic is kept as-is because stored
simulations already rely on it.
"""
from __future__ import annotations

from decimal import Decimal, getcontext

from .models import as_decimal

getcontext().prec = 28

ONE = Decimal("1")
HUNDRED = Decimal("100")
ONE_TWELFTH = ONE / Decimal("12")


def normalize_rate(rate: Decimal | int | float | str) -> Decimal:
    """Return ``rate`` as a decimal fraction."""

    value = as_decimal(rate)
    return value / HUNDRED if value > ONE else value


def monthly_real_rate(annual_nominal: Decimal | float, annual_inflation: Decimal | float) -> Decimal:
    """Effective monthly real rate via Fisher's relation."""

    nominal = normalize_rate(annual_nominal)
    inflation = normalize_rate(annual_inflation)
    real = (ONE + nominal) / (ONE + inflation) - ONE
    return (ONE + real) ** ONE_TWELFTH - ONE


def monthly_inflation_rate(annual_inflation: Decimal | float) -> Decimal:
    inflation = normalize_rate(annual_inflation)
    return (ONE + inflation) ** ONE_TWELFTH - ONE


def grow_property(value: Decimal, annual_inflation: Decimal | float) -> Decimal:
    """Apply one month of inflation to a property balance."""

    return value * (ONE + monthly_inflation_rate(annual_inflation))


__all__ = [
    "normalize_rate",
    "monthly_real_rate",
    "monthly_inflation_rate",
    "grow_property",
]
