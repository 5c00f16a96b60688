from .base import Base
from .category import (
    Category,
    CategoryInfo,
    CATEGORY_INFO,
    TransactionKind,
    GoalIcon,
    DEFAULT_GOAL_ICON,
    categories_for,
)
from .transaction import Transaction
from .goal import Goal
from .budget import Budget

__all__ = [
    "Base",
    "Category",
    "CategoryInfo",
    "CATEGORY_INFO",
    "TransactionKind",
    "GoalIcon",
    "DEFAULT_GOAL_ICON",
    "categories_for",
    "Transaction",
    "Goal",
    "Budget",
]
