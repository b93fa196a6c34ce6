"""In-memory notification feed with publish-on-mutation listeners."""

from collections.abc import Callable
from datetime import datetime

from money_manager.domain.constants import NOTIFICATION_LIMIT
from money_manager.domain.models.goals import Goal
from money_manager.domain.models.notifications import (
    NotificationItem,
    NotificationType,
)
from money_manager.domain.models.transactions import Transaction
from money_manager.domain.services.currency import format_amount
from money_manager.infrastructure.logging.logger import get_app_logger

Listener = Callable[["NotificationService"], None]


class NotificationService:
    """Hold notifications newest-first, capped at ``limit`` entries.

    Adding beyond the cap evicts the oldest-inserted entries. Every mutation
    notifies the subscribed listeners with the service itself.
    """

    def __init__(
        self,
        limit: int = NOTIFICATION_LIMIT,
        logger=None,
        currency_code: str = "USD",
    ) -> None:
        """Initialize the service.

        Args:
            limit: Maximum number of notifications retained.
            logger: Optional logger compatible with logging.Logger-like API.
            currency_code: Currency used when formatting amounts in messages.
        """
        if limit < 1:
            raise ValueError("Notification limit must be at least 1")
        self._limit = limit
        self._logger = logger or get_app_logger()
        self._currency_code = currency_code
        self._items: list[NotificationItem] = []
        self._listeners: list[Listener] = []

    @property
    def notifications(self) -> list[NotificationItem]:
        return list(self._items)

    @property
    def unread_count(self) -> int:
        return sum(1 for item in self._items if not item.is_read)

    @property
    def limit(self) -> int:
        return self._limit

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def add(self, notification: NotificationItem) -> NotificationItem:
        """Prepend a notification, evicting the oldest beyond the cap."""
        self._items.insert(0, notification)
        evicted = len(self._items) - self._limit
        if evicted > 0:
            del self._items[self._limit:]
            self._logger.debug(f"Evicted {evicted} notification(s)")
        self._publish()
        return notification

    def mark_as_read(self, notification_id: str) -> bool:
        """Mark one notification as read.

        Returns:
            bool: False when no notification has that id.
        """
        for index, item in enumerate(self._items):
            if item.id == notification_id:
                self._items[index] = item.as_read()
                self._publish()
                return True
        return False

    def mark_all_as_read(self) -> None:
        self._items = [item.as_read() for item in self._items]
        self._publish()

    def remove(self, notification_id: str) -> bool:
        remaining = [item for item in self._items if item.id != notification_id]
        if len(remaining) == len(self._items):
            return False
        self._items = remaining
        self._publish()
        return True

    def clear_all(self) -> None:
        self._items = []
        self._publish()

    def notify_new_transaction(self, transaction: Transaction) -> NotificationItem:
        """Announce a newly recorded transaction."""
        amount = format_amount(transaction.amount, self._currency_code)
        if transaction.is_income:
            notification = NotificationItem(
                type=NotificationType.UPCOMING_INCOME,
                title="New Income Added",
                message=f"{transaction.title}: +{amount}",
                related_transaction_id=transaction.id,
            )
        else:
            notification = NotificationItem(
                type=NotificationType.NEW_TRANSACTION,
                title="New Expense Added",
                message=f"{transaction.title}: -{amount}",
                related_transaction_id=transaction.id,
            )
        return self.add(notification)

    def notify_upcoming_transaction(
        self,
        transaction: Transaction,
        due_date: datetime,
    ) -> NotificationItem:
        """Announce a transaction expected on ``due_date``."""
        amount = format_amount(transaction.amount, self._currency_code)
        if transaction.is_income:
            notification_type = NotificationType.UPCOMING_INCOME
            title = "Upcoming Income"
        else:
            notification_type = NotificationType.UPCOMING_TRANSACTION
            title = "Upcoming Payment"
        return self.add(
            NotificationItem(
                type=notification_type,
                title=title,
                message=(
                    f"{transaction.title} ({amount}) is due on "
                    f"{due_date:%b %d, %Y}"
                ),
                related_transaction_id=transaction.id,
            )
        )

    def notify_goal_milestone(self, goal: Goal, milestone: int) -> NotificationItem:
        return self.add(
            NotificationItem(
                type=NotificationType.GOAL_MILESTONE,
                title="Goal Milestone Reached!",
                message=f"You've reached {milestone}% of your '{goal.name}' goal",
                related_goal_id=goal.id,
            )
        )

    def notify_budget_alert(self, category: str, percentage) -> NotificationItem:
        """Warn that spending in ``category`` reached ``percentage`` percent."""
        return self.add(
            NotificationItem(
                type=NotificationType.BUDGET_ALERT,
                title="Budget Alert",
                message=(
                    f"You've used {int(percentage)}% of your "
                    f"{category} budget"
                ),
            )
        )

    def _publish(self) -> None:
        for listener in list(self._listeners):
            listener(self)


__all__ = ["NotificationService", "Listener"]
