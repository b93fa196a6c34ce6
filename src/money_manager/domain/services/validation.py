"""Domain validation helpers for user input."""

import re
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation

from money_manager.domain.constants import (
    EMAIL_PATTERN,
    MAX_CURRENCY_INPUT,
    MAX_GOAL_NAME_LENGTH,
    MAX_GOAL_TARGET_AMOUNT,
    MAX_GOAL_YEARS_AHEAD,
    MAX_TITLE_LENGTH,
    MAX_TRANSACTION_AMOUNT,
)
from money_manager.utils.dates import whole_years_between
from money_manager.utils.decimal_utils import coerce_decimal

_EMAIL_RE = re.compile(EMAIL_PATTERN)
_NON_AMOUNT_CHARS = re.compile(r"[^0-9.]")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation pass.

    Attributes:
        is_valid: True when no rule failed.
        errors: Human-readable messages, in rule order.
    """

    is_valid: bool
    errors: tuple[str, ...] = field(default_factory=tuple)

    @property
    def error_message(self) -> str:
        return "\n".join(self.errors)


def _result(errors: list[str]) -> ValidationResult:
    return ValidationResult(is_valid=not errors, errors=tuple(errors))


def _parse_amount(value) -> Decimal | None:
    """Return ``value`` as a finite Decimal, or None when it is not one."""
    try:
        amount = coerce_decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return None
    if not amount.is_finite():
        return None
    return amount


def validate_transaction(amount, title: str, category: str) -> ValidationResult:
    """Validate the fields of a transaction before it is saved.

    An amount above the upper bound is reported in the same error list as
    the hard failures, so it blocks the save.

    Args:
        amount: Transaction magnitude.
        title: Transaction title.
        category: Category value; the empty string means missing.

    Returns:
        ValidationResult: Validity flag and the failed rules' messages.
    """
    errors: list[str] = []
    value = _parse_amount(amount)
    if value is None or value <= 0:
        errors.append("Amount must be greater than 0")
    elif value > MAX_TRANSACTION_AMOUNT:
        errors.append("Amount seems too large. Please verify the amount.")
    if not title.strip():
        errors.append("Title is required")
    if len(title) > MAX_TITLE_LENGTH:
        errors.append(
            f"Title is too long (maximum {MAX_TITLE_LENGTH} characters)"
        )
    if not category:
        errors.append("Category is required")
    return _result(errors)


def validate_goal(
    name: str,
    target_amount,
    target_date: datetime,
    now: datetime | None = None,
) -> ValidationResult:
    """Validate the fields of a savings goal.

    Args:
        name: Goal name.
        target_amount: Amount to save.
        target_date: Deadline; must be strictly after ``now``.
        now: Reference time, defaults to the current time.

    Returns:
        ValidationResult: Validity flag and the failed rules' messages.
    """
    current = now or datetime.now()
    errors: list[str] = []
    if not name.strip():
        errors.append("Goal name is required")
    if len(name) > MAX_GOAL_NAME_LENGTH:
        errors.append(
            "Goal name is too long "
            f"(maximum {MAX_GOAL_NAME_LENGTH} characters)"
        )
    target = _parse_amount(target_amount)
    if target is None or target <= 0:
        errors.append("Target amount must be greater than 0")
    elif target > MAX_GOAL_TARGET_AMOUNT:
        errors.append(
            "Target amount seems too large. Please verify the amount."
        )
    if target_date <= current:
        errors.append("Target date must be in the future")
    if whole_years_between(current, target_date) > MAX_GOAL_YEARS_AHEAD:
        errors.append("Target date is too far in the future")
    return _result(errors)


def validate_email(email: str) -> bool:
    return _EMAIL_RE.fullmatch(email) is not None


def sanitize_currency_amount(raw: str) -> Decimal | None:
    """Parse a user-typed amount, keeping only digits and dots.

    Args:
        raw: Text such as ``"$1,234.50"``.

    Returns:
        Decimal | None: Parsed amount, or None when unparsable or outside
        ``[0, 1_000_000]``.
    """
    cleaned = _NON_AMOUNT_CHARS.sub("", raw)
    if not cleaned:
        return None
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return None
    if not value.is_finite() or value < 0 or value > MAX_CURRENCY_INPUT:
        return None
    return value


def validate_currency_amount(raw: str) -> bool:
    return sanitize_currency_amount(raw) is not None


def sanitize_input(text: str) -> str:
    return text.strip()


__all__ = [
    "ValidationResult",
    "validate_transaction",
    "validate_goal",
    "validate_email",
    "sanitize_currency_amount",
    "validate_currency_amount",
    "sanitize_input",
]
