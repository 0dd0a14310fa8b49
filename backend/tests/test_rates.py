from decimal import Decimal

import pytest

from mfo_planner.rates import grow_property, monthly_inflation_rate, monthly_real_rate, normalize_rate


def test_normalize_rate_reads_values_above_one_as_percent():
    assert normalize_rate(8) == Decimal("0.08")
    assert normalize_rate("3.5") == Decimal("0.035")
    assert normalize_rate(Decimal("0.08")) == Decimal("0.08")


def test_normalize_rate_keeps_exactly_one_as_decimal():
    assert normalize_rate(1) == Decimal("1")


def test_monthly_real_rate_compounds_to_annual_rate():
    monthly = monthly_real_rate(10, 0)
    assert float((1 + monthly) ** 12) == pytest.approx(1.10)


def test_monthly_real_rate_accepts_percent_or_decimal():
    assert monthly_real_rate(8, 3.5) == monthly_real_rate(Decimal("0.08"), Decimal("0.035"))


def test_monthly_real_rate_uses_fisher_relation():
    monthly = monthly_real_rate(Decimal("5"), Decimal("5"))
    assert float(monthly) == pytest.approx(0.0, abs=1e-20)

    expected_real = (1.08 / 1.035) ** (1 / 12) - 1
    assert float(monthly_real_rate(8, 3.5)) == pytest.approx(expected_real)


def test_grow_property_applies_inflation_only():
    value = Decimal("1000")
    for _ in range(12):
        value = grow_property(value, 12)
    assert float(value) == pytest.approx(1120.0)
    assert float(monthly_inflation_rate(0)) == 0.0
