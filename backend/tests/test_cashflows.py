from datetime import date
from decimal import Decimal

from mfo_planner import LifeStatus, TransactionInterval, TransactionTimeline, TransactionType
from mfo_planner.cashflows import evaluate_cash_flows, is_transaction_active


def _tx(kind, value, start, end=None, interval=TransactionInterval.MONTHLY):
    return TransactionTimeline(type=kind, value=Decimal(value), start_date=start, end_date=end, interval=interval)


def test_monthly_transaction_is_active_inside_inclusive_window():
    tx = _tx(TransactionType.INCOME, "100", date(2024, 1, 15), date(2024, 3, 2))
    assert not is_transaction_active(date(2023, 12, 1), tx)
    assert is_transaction_active(date(2024, 1, 1), tx)
    assert is_transaction_active(date(2024, 3, 1), tx)
    assert not is_transaction_active(date(2024, 4, 1), tx)


def test_missing_end_date_means_one_off():
    tx = _tx(TransactionType.EXPENSE, "50", date(2024, 5, 20))
    assert is_transaction_active(date(2024, 5, 1), tx)
    assert not is_transaction_active(date(2024, 6, 1), tx)


def test_yearly_transaction_only_counts_in_anniversary_month():
    tx = _tx(TransactionType.INCOME, "1000", date(2024, 3, 10), date(2027, 12, 1), TransactionInterval.YEARLY)
    assert is_transaction_active(date(2025, 3, 1), tx)
    assert not is_transaction_active(date(2025, 4, 1), tx)
    assert not is_transaction_active(date(2028, 3, 1), tx)


def test_entries_and_exits_by_type():
    month = date(2024, 1, 1)
    transactions = [
        _tx(TransactionType.INCOME, "1000", month, month),
        _tx(TransactionType.DEPOSIT, "500", month, month),
        _tx(TransactionType.EXPENSE, "300", month, month),
        _tx(TransactionType.WITHDRAWAL, "200", month, month),
    ]
    flows = evaluate_cash_flows(month, transactions, LifeStatus.NORMAL)
    assert flows.entries == Decimal("1500")
    assert flows.exits == Decimal("500")


def test_status_multipliers():
    month = date(2024, 1, 1)
    transactions = [
        _tx(TransactionType.INCOME, "1000", month, month),
        _tx(TransactionType.EXPENSE, "400", month, month),
    ]
    dead = evaluate_cash_flows(month, transactions, LifeStatus.DEAD)
    assert dead.entries == 0
    assert dead.exits == Decimal("200")

    invalid = evaluate_cash_flows(month, transactions, LifeStatus.INVALID)
    assert invalid.entries == 0
    assert invalid.exits == Decimal("400")
