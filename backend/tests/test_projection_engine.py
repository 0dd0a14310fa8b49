from datetime import date
from decimal import Decimal

import pytest

from mfo_planner import (
    AllocationSnapshot,
    AllocationType,
    InsurancePolicy,
    InsuranceType,
    LifeStatus,
    ProjectionInput,
    TransactionInterval,
    TransactionTimeline,
    TransactionType,
    calculate_projection,
)
from mfo_planner.months import months_between
from mfo_planner.rates import monthly_real_rate


def _fund(value="100000", **kwargs):
    return AllocationSnapshot(type=AllocationType.FINANCIAL, name="Fund", value=Decimal(value), **kwargs)


def _input(**overrides):
    params = dict(
        start_date=date(2024, 1, 1),
        end_date=date(2025, 1, 1),
        interest_rate=Decimal("10"),
        inflation_rate=Decimal("3"),
        allocations=(_fund(),),
    )
    params.update(overrides)
    return ProjectionInput(**params)


def test_single_allocation_grows_over_one_year():
    projection_input = _input()
    output = calculate_projection(projection_input)
    assert len(output.monthly) == months_between(projection_input.start_date, projection_input.end_date) + 1
    assert len(output.monthly) == 13
    assert output.monthly[0].date == date(2024, 1, 1)
    assert output.monthly[-1].date == date(2025, 1, 1)
    assert output.summary.final_assets > Decimal("100000")
    assert output.summary.total_growth_percent > 0


def test_recurring_transactions_accumulate_per_active_month():
    transactions = (
        TransactionTimeline(type=TransactionType.INCOME, value=Decimal("1000"),
                            start_date=date(2024, 1, 1), end_date=date(2024, 6, 1)),
        TransactionTimeline(type=TransactionType.EXPENSE, value=Decimal("250"),
                            start_date=date(2024, 1, 1), end_date=date(2024, 12, 1)),
    )
    output = calculate_projection(_input(transactions=transactions))
    assert output.summary.total_entries == Decimal("6000")
    assert output.summary.total_exits == Decimal("3000")


def test_yearly_transaction_counts_once_per_year():
    transactions = (
        TransactionTimeline(type=TransactionType.DEPOSIT, value=Decimal("5000"), start_date=date(2024, 3, 1),
                            end_date=date(2026, 12, 1), interval=TransactionInterval.YEARLY),
    )
    output = calculate_projection(_input(end_date=date(2026, 12, 1), transactions=transactions))
    assert output.summary.total_entries == Decimal("15000")


def test_life_policy_pays_full_coverage_once_when_dead():
    policy = InsurancePolicy(id="life-1", type=InsuranceType.LIFE, monthly_premium=Decimal("200"),
                             coverage_value=Decimal("250000"), start_date=date(2023, 1, 1))
    output = calculate_projection(_input(life_status=LifeStatus.DEAD, insurances=(policy,)))

    payouts = [m.insurance_payouts for m in output.monthly]
    assert sum(payouts) == Decimal("250000")
    assert payouts[0] == Decimal("250000")
    assert all(p == 0 for p in payouts[1:])
    assert all(m.insurance_premiums == 0 for m in output.monthly)


def test_invalidity_payout_never_repeats():
    policy = InsurancePolicy(id="inv-1", type=InsuranceType.INVALIDITY, monthly_premium=Decimal("80"),
                             coverage_value=Decimal("90000"), start_date=date(2024, 1, 1))
    output = calculate_projection(
        _input(end_date=date(2028, 1, 1), life_status=LifeStatus.INVALID, insurances=(policy,))
    )
    assert len([m for m in output.monthly if m.insurance_payouts > 0]) == 1


def test_change_date_splits_status_behaviour():
    income = TransactionTimeline(type=TransactionType.INCOME, value=Decimal("1000"),
                                 start_date=date(2024, 1, 1), end_date=date(2025, 1, 1))
    output = calculate_projection(
        _input(
            life_status=LifeStatus.INVALID,
            life_status_change_date=date(2024, 7, 15),
            transactions=(income,),
        )
    )
    by_month = {m.date: m for m in output.monthly}
    assert by_month[date(2024, 6, 1)].entries == Decimal("1000")
    assert by_month[date(2024, 7, 1)].entries == 0
    assert by_month[date(2025, 1, 1)].entries == 0
    assert output.summary.total_entries == Decimal("6000")


def test_premiums_stop_after_status_change():
    policy = InsurancePolicy(id="life-2", type=InsuranceType.LIFE, monthly_premium=Decimal("100"),
                             coverage_value=Decimal("10000"), start_date=date(2024, 1, 1))
    output = calculate_projection(
        _input(life_status=LifeStatus.DEAD, life_status_change_date=date(2024, 4, 1), insurances=(policy,))
    )
    premiums = [m.insurance_premiums for m in output.monthly]
    assert premiums[:3] == [Decimal("100")] * 3
    assert all(p == 0 for p in premiums[3:])
    assert output.monthly[3].insurance_payouts == Decimal("10000")


def test_financing_runs_for_configured_number_of_months():
    allocation = _fund(is_financed=True, monthly_payment=Decimal("2000"), remaining_payments=3)
    output = calculate_projection(_input(allocations=(allocation,)))

    payments = [m.financing_payments for m in output.monthly]
    assert payments[:3] == [Decimal("2000")] * 3
    assert all(p == 0 for p in payments[3:])
    assert sum(payments) == Decimal("6000")


def test_property_follows_inflation_only():
    house = AllocationSnapshot(type=AllocationType.PROPERTY, name="House", value=Decimal("500000"))
    withdrawal = TransactionTimeline(type=TransactionType.WITHDRAWAL, value=Decimal("1000"),
                                     start_date=date(2024, 1, 1), end_date=date(2024, 12, 1))
    output = calculate_projection(
        _input(end_date=date(2024, 12, 1), inflation_rate=Decimal("12"), allocations=(house,),
               transactions=(withdrawal,))
    )
    assert float(output.monthly[-1].property_assets) == pytest.approx(560000.0)
    assert all(m.financial_assets == 0 for m in output.monthly)


def test_reported_financial_assets_are_floored_at_zero():
    expense = TransactionTimeline(type=TransactionType.EXPENSE, value=Decimal("5000"),
                                  start_date=date(2024, 1, 1), end_date=date(2024, 1, 1))
    income = TransactionTimeline(type=TransactionType.INCOME, value=Decimal("3000"),
                                 start_date=date(2024, 2, 1), end_date=date(2024, 2, 1))
    output = calculate_projection(
        _input(
            end_date=date(2024, 3, 1),
            interest_rate=Decimal("0"),
            inflation_rate=Decimal("0"),
            allocations=(_fund("1000"),),
            transactions=(expense, income),
        )
    )
    assert [m.financial_assets for m in output.monthly] == [Decimal("0"), Decimal("0"), Decimal("0")]


def test_negative_balance_grows_before_later_income_counts():
    expense = TransactionTimeline(type=TransactionType.EXPENSE, value=Decimal("5000"),
                                  start_date=date(2024, 1, 1))
    small_income = TransactionTimeline(type=TransactionType.INCOME, value=Decimal("3000"),
                                       start_date=date(2024, 2, 1))
    large_income = TransactionTimeline(type=TransactionType.INCOME, value=Decimal("10000"),
                                       start_date=date(2024, 3, 1))
    output = calculate_projection(
        _input(
            end_date=date(2024, 3, 1),
            interest_rate=Decimal("12"),
            inflation_rate=Decimal("0"),
            allocations=(_fund("1000"),),
            transactions=(expense, small_income, large_income),
        )
    )

    growth = 1 + monthly_real_rate(Decimal("12"), Decimal("0"))
    balance = Decimal("1000") * growth - Decimal("5000")
    balance = balance * growth + Decimal("3000")
    assert balance < 0
    expected = balance * growth + Decimal("10000")

    assert output.monthly[0].financial_assets == 0
    assert output.monthly[1].financial_assets == 0
    assert float(output.monthly[2].financial_assets) == pytest.approx(float(expected))
    assert output.monthly[2].financial_assets < Decimal("10000")


def test_insurance_impact_is_premiums_paid_without_payout():
    policy = InsurancePolicy(id="g", type=InsuranceType.GENERAL, monthly_premium=Decimal("100"),
                             coverage_value=Decimal("1000"), start_date=date(2024, 1, 1))
    output = calculate_projection(
        _input(interest_rate=Decimal("0"), inflation_rate=Decimal("0"), insurances=(policy,))
    )
    assert output.summary.insurance_impact == Decimal("1300")
    assert output.monthly[-1].total_without_insurance == Decimal("100000")


def test_zero_assets_give_zero_growth_percent():
    output = calculate_projection(_input(allocations=()))
    assert output.summary.initial_assets == 0
    assert output.summary.total_growth_percent == 0


def test_single_month_range_is_well_defined():
    output = calculate_projection(_input(end_date=date(2024, 1, 20)))
    assert len(output.monthly) == 1
    assert len(output.yearly) == 1


def test_input_allocations_are_not_mutated():
    allocation = _fund(is_financed=True, monthly_payment=Decimal("100"), remaining_payments=2)
    projection_input = _input(allocations=(allocation,))
    first = calculate_projection(projection_input)
    second = calculate_projection(projection_input)
    assert allocation.remaining_payments == 2
    assert first.monthly == second.monthly
