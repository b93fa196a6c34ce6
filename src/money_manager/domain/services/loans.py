"""Domain services for loan aggregates."""

from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime
from decimal import Decimal

from money_manager.domain.models.loans import (
    Loan,
    LoanStatus,
    LoanSummary,
    LoanType,
)


def filter_loans(
    loans: Iterable[Loan],
    loan_type: LoanType | None = None,
) -> list[Loan]:
    """Return loans of one type, or all loans when ``loan_type`` is None."""
    if loan_type is None:
        return list(loans)
    return [loan for loan in loans if loan.loan_type is loan_type]


def unpaid_loans(loans: Iterable[Loan]) -> list[Loan]:
    return [loan for loan in loans if loan.status is not LoanStatus.PAID_OFF]


def summarize_loans(
    loans: Iterable[Loan],
    *,
    loan_type: LoanType | None = None,
    now: datetime | None = None,
) -> LoanSummary:
    """Summarize loans, optionally restricted to one loan type.

    Args:
        loans: Loans to aggregate.
        loan_type: Optional type filter.
        now: Reference time for the next payment date.

    Returns:
        LoanSummary: Aggregated figures.
    """
    return LoanSummary.calculate(filter_loans(loans, loan_type), now=now)


def loan_progress(loan: Loan) -> Decimal:
    """Return the repaid share of a loan as a fraction in ``[0, 1]``."""
    return loan.progress_percentage / 100


def mark_loan_paid(loan: Loan) -> Loan:
    return replace(loan, current_balance=Decimal("0"), status=LoanStatus.PAID_OFF)


__all__ = [
    "filter_loans",
    "unpaid_loans",
    "summarize_loans",
    "loan_progress",
    "mark_loan_paid",
]
