from sqlalchemy.orm import Session

from ..repositories import TransactionRepository, month_bounds
from .analytics import (
    CategoryTotal,
    ExpenseInsights,
    Summary,
    Trend,
    category_breakdown,
    expense_insights,
    monthly_trend,
    previous_periods,
    summarize,
)

TREND_MONTHS = 6


class AnalyticsService:
    """Loads the record sets and hands them to the pure aggregations."""

    def __init__(self, db: Session):
        self.db = db
        self.transactions = TransactionRepository(db)

    def summary(self, month: int, year: int) -> Summary:
        # The all-time balance needs every transaction, not just the month
        return summarize(self.transactions.get_all(), month, year)

    def category_breakdown(self, month: int, year: int) -> list[CategoryTotal]:
        return category_breakdown(self.transactions.get_for_month(month, year), month, year)

    def trend(self, month: int, year: int, months: int = TREND_MONTHS) -> Trend:
        """Month-by-month totals for the window ending at (month, year)."""
        first_month, first_year = previous_periods(month, year, months)[0]
        start, _ = month_bounds(first_month, first_year)
        _, end = month_bounds(month, year)
        return monthly_trend(self.transactions.get_between(start, end), month, year, months)

    def insights(self, month: int, year: int) -> ExpenseInsights:
        return expense_insights(self.transactions.get_for_month(month, year))
