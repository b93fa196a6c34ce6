"""Application ports."""

from .database import DatabaseEnginePort
from .goal_repository import GoalRepositoryPort
from .transaction_repository import TransactionRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "GoalRepositoryPort",
    "TransactionRepositoryPort",
]
