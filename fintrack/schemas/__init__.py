from .transaction import TransactionCreate, TransactionUpdate, TransactionResponse
from .goal import GoalCreate, GoalUpdate, GoalProgressResponse, GoalResponse
from .budget import (
    BudgetCreate,
    BudgetUpdate,
    BudgetResponse,
    BudgetStatusItem,
    BudgetOverviewResponse,
    BudgetStatusResponse,
)
from .analytics import (
    SummaryResponse,
    CategorySpendItem,
    MonthTotalsResponse,
    TrendResponse,
    ExpenseInsightsResponse,
)
from .category import CategoryResponse, GoalIconResponse

__all__ = [
    "TransactionCreate",
    "TransactionUpdate",
    "TransactionResponse",
    "GoalCreate",
    "GoalUpdate",
    "GoalProgressResponse",
    "GoalResponse",
    "BudgetCreate",
    "BudgetUpdate",
    "BudgetResponse",
    "BudgetStatusItem",
    "BudgetOverviewResponse",
    "BudgetStatusResponse",
    "SummaryResponse",
    "CategorySpendItem",
    "MonthTotalsResponse",
    "TrendResponse",
    "ExpenseInsightsResponse",
    "CategoryResponse",
    "GoalIconResponse",
]
