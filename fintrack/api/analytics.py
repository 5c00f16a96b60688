from decimal import Decimal
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas import SummaryResponse, CategorySpendItem, TrendResponse, ExpenseInsightsResponse
from ..services import AnalyticsService
from ..services.analytics import percent
from .params import Period, period_params

router = APIRouter()


@router.get("/summary", response_model=SummaryResponse)
def summary(period: Period = Depends(period_params), db: Session = Depends(get_db)):
    result = AnalyticsService(db).summary(period.month, period.year)
    return SummaryResponse(
        month=period.month,
        year=period.year,
        total_balance=result.total_balance,
        monthly_income=result.monthly_income,
        monthly_expenses=result.monthly_expenses,
        monthly_balance=result.monthly_balance,
        transaction_count=result.transaction_count,
    )


@router.get("/categories", response_model=list[CategorySpendItem])
def category_breakdown(period: Period = Depends(period_params), db: Session = Depends(get_db)):
    """Expense totals per category for the month, largest first."""
    rows = AnalyticsService(db).category_breakdown(period.month, period.year)
    total = sum((row.amount for row in rows), Decimal("0"))

    return [
        CategorySpendItem(
            category=row.category,
            category_name=row.category.info.name,
            icon=row.category.info.icon,
            color=row.category.info.color,
            amount=row.amount,
            share=percent(row.amount, total),
        )
        for row in rows
    ]


@router.get("/trend", response_model=TrendResponse)
def trend(
    period: Period = Depends(period_params),
    months: int = Query(6, ge=1, le=24),
    db: Session = Depends(get_db),
):
    """Income, expenses and balance for the months ending at the given month, oldest first."""
    return AnalyticsService(db).trend(period.month, period.year, months)


@router.get("/insights", response_model=ExpenseInsightsResponse)
def insights(period: Period = Depends(period_params), db: Session = Depends(get_db)):
    result = AnalyticsService(db).insights(period.month, period.year)
    return ExpenseInsightsResponse(
        month=period.month,
        year=period.year,
        income_count=result.income_count,
        expense_count=result.expense_count,
        income_share=result.income_share,
        expense_share=result.expense_share,
        largest_expense=result.largest_expense,
        average_expense=result.average_expense,
    )
