from .analytics import (
    Summary,
    CategoryTotal,
    BudgetStatus,
    BudgetOverview,
    GoalProgress,
    MonthTotals,
    Trend,
    ExpenseInsights,
    current_period,
    summarize,
    category_breakdown,
    budget_status,
    budget_overview,
    goal_progress,
    monthly_trend,
    expense_insights,
)
from .analytics_service import AnalyticsService
from .budget_service import BudgetService
from .goal_service import GoalService
from .transaction_service import TransactionService

__all__ = [
    "Summary",
    "CategoryTotal",
    "BudgetStatus",
    "BudgetOverview",
    "GoalProgress",
    "MonthTotals",
    "Trend",
    "ExpenseInsights",
    "current_period",
    "summarize",
    "category_breakdown",
    "budget_status",
    "budget_overview",
    "goal_progress",
    "monthly_trend",
    "expense_insights",
    "AnalyticsService",
    "BudgetService",
    "GoalService",
    "TransactionService",
]
