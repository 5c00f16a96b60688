from .base import BaseRepository
from .transaction import TransactionRepository, month_bounds
from .goal import GoalRepository
from .budget import BudgetRepository

__all__ = [
    "BaseRepository",
    "TransactionRepository",
    "month_bounds",
    "GoalRepository",
    "BudgetRepository",
]
