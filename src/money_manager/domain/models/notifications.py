"""Domain models for user-facing notifications."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from uuid import uuid4


class NotificationCategory(str, Enum):
    ALERTS = "alerts"
    TRANSACTIONS = "transactions"
    GOALS = "goals"
    UPCOMING = "upcoming"


class NotificationType(str, Enum):
    """Kinds of notifications produced by the aggregation layer."""

    NEW_TRANSACTION = "new_transaction"
    UPCOMING_TRANSACTION = "upcoming_transaction"
    UPCOMING_INCOME = "upcoming_income"
    GOAL_MILESTONE = "goal_milestone"
    BUDGET_ALERT = "budget_alert"

    @property
    def priority(self) -> int:
        """Return the display priority (1 is most urgent)."""
        return _PRIORITIES[self]

    @property
    def category(self) -> NotificationCategory:
        return _CATEGORIES[self]


_PRIORITIES = {
    NotificationType.BUDGET_ALERT: 1,
    NotificationType.UPCOMING_TRANSACTION: 2,
    NotificationType.UPCOMING_INCOME: 2,
    NotificationType.GOAL_MILESTONE: 3,
    NotificationType.NEW_TRANSACTION: 4,
}

_CATEGORIES = {
    NotificationType.BUDGET_ALERT: NotificationCategory.ALERTS,
    NotificationType.NEW_TRANSACTION: NotificationCategory.TRANSACTIONS,
    NotificationType.GOAL_MILESTONE: NotificationCategory.GOALS,
    NotificationType.UPCOMING_TRANSACTION: NotificationCategory.UPCOMING,
    NotificationType.UPCOMING_INCOME: NotificationCategory.UPCOMING,
}


@dataclass(frozen=True)
class NotificationItem:
    """A single alert shown to the user."""

    type: NotificationType
    title: str
    message: str
    date: datetime = field(default_factory=datetime.now)
    is_read: bool = False
    related_transaction_id: str | None = None
    related_goal_id: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))

    def as_read(self) -> "NotificationItem":
        """Return the same notification flagged as read."""
        return replace(self, is_read=True)


__all__ = ["NotificationCategory", "NotificationType", "NotificationItem"]
