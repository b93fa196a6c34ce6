"""Domain models for loans and loan summaries."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import uuid4

from money_manager.utils.dates import add_months, months_between, start_of_day
from money_manager.utils.decimal_utils import coerce_decimal, safe_divide


class LoanType(str, Enum):
    STUDENT = "Student"
    AUTO = "Auto"
    PERSONAL = "Personal"
    MORTGAGE = "Mortgage"
    BUSINESS = "Business"
    CREDIT_CARD = "Credit Card"
    OTHER = "Other"


class LoanStatus(str, Enum):
    ACTIVE = "Active"
    PAID_OFF = "Paid Off"
    DEFAULTED = "Defaulted"
    DEFERRED = "Deferred"
    REFINANCED = "Refinanced"


@dataclass(frozen=True)
class Loan:
    """A loan being repaid by the user.

    Derived figures are computed from the stored fields on every access;
    clock-dependent ones take an optional ``now``.
    """

    name: str
    lender: str
    original_amount: Decimal
    current_balance: Decimal
    interest_rate: Decimal
    monthly_payment: Decimal
    start_date: datetime
    end_date: datetime
    loan_type: LoanType = LoanType.OTHER
    status: LoanStatus = LoanStatus.ACTIVE
    notes: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))

    def __post_init__(self) -> None:
        if self.current_balance < 0:
            raise ValueError("Loan balance cannot be negative")

    @property
    def total_paid(self) -> Decimal:
        return self.original_amount - self.current_balance

    @property
    def progress_percentage(self) -> Decimal:
        """Return the repaid share of the original amount, in ``[0, 100]``."""
        percentage = safe_divide(self.total_paid, self.original_amount) * 100
        return min(max(percentage, Decimal("0")), Decimal("100"))

    def next_payment_date(self, now: datetime | None = None) -> datetime:
        """Return the next due date, on the start date's day of month.

        The due day in the current month is used unless it has already passed,
        in which case the same day of the following month is returned. Days
        beyond the end of a short month are clamped to its last day.
        """
        now = now or datetime.now()
        due_day = self.start_date.day
        candidate = add_months(start_of_day(now), 0, day=due_day)
        if candidate <= now:
            candidate = add_months(candidate, 1, day=due_day)
        return candidate

    def remaining_payments(self, now: datetime | None = None) -> int:
        """Return the number of whole months left until ``end_date``."""
        now = now or datetime.now()
        return max(0, months_between(now, self.end_date))

    def days_until_next_payment(self, now: datetime | None = None) -> int:
        now = now or datetime.now()
        return (self.next_payment_date(now) - now).days

    def apply_payment(self, amount) -> "Loan":
        """Return the loan after a payment of ``amount``.

        The balance never drops below zero; reaching zero marks the loan as
        paid off.

        Raises:
            ValueError: If ``amount`` is not positive.
        """
        payment = coerce_decimal(amount)
        if payment <= 0:
            raise ValueError("Payment amount must be greater than zero")
        balance = max(self.current_balance - payment, Decimal("0"))
        status = LoanStatus.PAID_OFF if balance == 0 else self.status
        return replace(self, current_balance=balance, status=status)


@dataclass(frozen=True)
class LoanSummary:
    """Aggregated figures across a user's loans."""

    total_loans: int
    active_loans: int
    total_debt: Decimal
    total_monthly_payments: Decimal
    average_interest_rate: Decimal
    next_payment_date: datetime | None
    total_paid_off: Decimal

    @classmethod
    def calculate(
        cls,
        loans: list[Loan],
        now: datetime | None = None,
    ) -> "LoanSummary":
        """Summarize active and paid-off loans.

        Args:
            loans: Loans to aggregate.
            now: Reference time for the next payment date.

        Returns:
            LoanSummary: Totals over active loans plus paid-off principal.
        """
        active = [loan for loan in loans if loan.status is LoanStatus.ACTIVE]
        paid_off = [
            loan for loan in loans if loan.status is LoanStatus.PAID_OFF
        ]
        total_debt = sum(
            (loan.current_balance for loan in active), Decimal("0")
        )
        total_monthly_payments = sum(
            (loan.monthly_payment for loan in active), Decimal("0")
        )
        total_paid_off = sum(
            (loan.original_amount for loan in paid_off), Decimal("0")
        )
        average_interest_rate = safe_divide(
            sum((loan.interest_rate for loan in active), Decimal("0")),
            len(active),
        )
        next_payment_date = min(
            (loan.next_payment_date(now) for loan in active),
            default=None,
        )
        return cls(
            total_loans=len(loans),
            active_loans=len(active),
            total_debt=total_debt,
            total_monthly_payments=total_monthly_payments,
            average_interest_rate=average_interest_rate,
            next_payment_date=next_payment_date,
            total_paid_off=total_paid_off,
        )


__all__ = ["LoanType", "LoanStatus", "Loan", "LoanSummary"]
