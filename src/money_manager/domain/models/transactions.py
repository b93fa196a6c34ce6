"""Domain models for transactions."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import uuid4


class TransactionCategory(str, Enum):
    """Categories a transaction can be filed under."""

    ESSENTIALS = "essentials"
    LEISURE = "leisure"
    SAVINGS = "savings"
    INCOME = "income"
    BILLS = "bills"
    OTHER = "other"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def from_value(cls, value: "str | TransactionCategory") -> "TransactionCategory":
        """Parse a category, falling back to ``OTHER`` for unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.OTHER


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class Transaction:
    """A single income or expense record.

    Attributes:
        title: Short description shown to the user.
        amount: Non-negative magnitude; the direction lives in ``is_income``.
        is_income: True for income, False for expenses.
        category: Category the transaction is filed under.
        date: When the transaction happened.
        subtitle: Free text; recurring transactions carry their frequency here.
        linked_goal_id: Savings goal credited by this transaction, if any.
        id: Stable identifier.
    """

    title: str
    amount: Decimal
    is_income: bool
    category: TransactionCategory
    date: datetime
    subtitle: str = ""
    linked_goal_id: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))

    @property
    def transaction_type(self) -> TransactionType:
        return TransactionType.INCOME if self.is_income else TransactionType.EXPENSE

    @property
    def signed_amount(self) -> Decimal:
        """Return the amount with expenses negated."""
        return self.amount if self.is_income else -self.amount

    def with_changes(self, **changes) -> "Transaction":
        """Return a copy with the given fields replaced (id preserved)."""
        changes.pop("id", None)
        return replace(self, **changes)


__all__ = ["TransactionCategory", "TransactionType", "Transaction"]
