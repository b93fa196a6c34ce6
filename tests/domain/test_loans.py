"""Tests for loan models and services."""

from datetime import datetime
from decimal import Decimal

import pytest

from money_manager.domain.models.loans import (
    Loan,
    LoanStatus,
    LoanSummary,
    LoanType,
)
from money_manager.domain.services.loans import (
    filter_loans,
    loan_progress,
    mark_loan_paid,
    summarize_loans,
    unpaid_loans,
)

NOW = datetime(2024, 5, 15, 12, 0, 0)


def _loan(**overrides) -> Loan:
    values = {
        "name": "Car loan",
        "lender": "Bank",
        "original_amount": Decimal("25000"),
        "current_balance": Decimal("18500"),
        "interest_rate": Decimal("4.5"),
        "monthly_payment": Decimal("450"),
        "start_date": datetime(2022, 1, 20),
        "end_date": datetime(2027, 1, 20),
        "loan_type": LoanType.AUTO,
    }
    values.update(overrides)
    return Loan(**values)


def test_derived_fields() -> None:
    """Paid amount and progress derive from the stored balances."""
    loan = _loan()

    assert loan.total_paid == Decimal("6500")
    assert loan.progress_percentage == Decimal("26")


def test_progress_is_guarded_and_clamped() -> None:
    assert _loan(original_amount=Decimal("0"), current_balance=Decimal("0")).progress_percentage == 0
    assert _loan(current_balance=Decimal("30000")).progress_percentage == 0


def test_negative_balance_is_rejected() -> None:
    with pytest.raises(ValueError):
        _loan(current_balance=Decimal("-1"))


def test_next_payment_date_rolls_forward() -> None:
    """The due day of this month is used until it has passed."""
    loan = _loan(start_date=datetime(2022, 1, 20))

    assert loan.next_payment_date(NOW) == datetime(2024, 5, 20)
    assert loan.next_payment_date(datetime(2024, 5, 20, 0, 0)) == datetime(2024, 6, 20)
    assert loan.days_until_next_payment(NOW) == 4


def test_next_payment_date_clamps_short_months() -> None:
    loan = _loan(start_date=datetime(2022, 1, 31))

    assert loan.next_payment_date(datetime(2024, 2, 10)) == datetime(2024, 2, 29)
    assert loan.next_payment_date(datetime(2024, 4, 30, 9)) == datetime(2024, 5, 31)


def test_remaining_payments_counts_whole_months() -> None:
    loan = _loan(end_date=datetime(2024, 11, 15, 12))

    assert loan.remaining_payments(NOW) == 6
    assert _loan(end_date=datetime(2024, 1, 1)).remaining_payments(NOW) == 0


def test_apply_payment_clamps_and_pays_off() -> None:
    loan = _loan(current_balance=Decimal("300"))

    partial = loan.apply_payment(100)
    assert partial.current_balance == Decimal("200")
    assert partial.status is LoanStatus.ACTIVE

    paid = partial.apply_payment(500)
    assert paid.current_balance == Decimal("0")
    assert paid.status is LoanStatus.PAID_OFF
    assert paid.id == loan.id

    with pytest.raises(ValueError):
        loan.apply_payment(0)


def test_summary_of_no_loans_is_empty() -> None:
    summary = LoanSummary.calculate([], now=NOW)

    assert summary.total_loans == 0
    assert summary.active_loans == 0
    assert summary.total_debt == 0
    assert summary.total_monthly_payments == 0
    assert summary.average_interest_rate == 0
    assert summary.total_paid_off == 0
    assert summary.next_payment_date is None


def test_summary_splits_active_and_paid_off() -> None:
    """Debt comes from active loans and paid-off principal is totalled."""
    loans = [
        _loan(),
        _loan(
            name="Laptop",
            original_amount=Decimal("5000"),
            current_balance=Decimal("0"),
            status=LoanStatus.PAID_OFF,
        ),
    ]

    summary = LoanSummary.calculate(loans, now=NOW)

    assert summary.total_loans == 2
    assert summary.active_loans == 1
    assert summary.total_debt == Decimal("18500")
    assert summary.total_paid_off == Decimal("5000")
    assert summary.total_monthly_payments == Decimal("450")
    assert summary.average_interest_rate == Decimal("4.5")
    assert summary.next_payment_date == datetime(2024, 5, 20)


def test_summary_averages_rates_and_picks_earliest_payment() -> None:
    loans = [
        _loan(interest_rate=Decimal("4"), start_date=datetime(2022, 1, 25)),
        _loan(interest_rate=Decimal("6"), start_date=datetime(2022, 1, 18)),
    ]

    summary = LoanSummary.calculate(loans, now=NOW)

    assert summary.average_interest_rate == Decimal("5")
    assert summary.next_payment_date == datetime(2024, 5, 18)


def test_loan_service_helpers() -> None:
    auto = _loan()
    student = _loan(loan_type=LoanType.STUDENT, current_balance=Decimal("1000"))
    paid = mark_loan_paid(student)

    assert filter_loans([auto, student], LoanType.STUDENT) == [student]
    assert filter_loans([auto, student]) == [auto, student]
    assert unpaid_loans([auto, paid]) == [auto]
    assert paid.status is LoanStatus.PAID_OFF
    assert loan_progress(auto) == Decimal("0.26")
    summary = summarize_loans([auto, student], loan_type=LoanType.AUTO, now=NOW)
    assert summary.total_loans == 1
    assert summary.total_debt == Decimal("18500")
