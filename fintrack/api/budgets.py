from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas import (
    BudgetCreate,
    BudgetUpdate,
    BudgetResponse,
    BudgetStatusItem,
    BudgetOverviewResponse,
    BudgetStatusResponse,
)
from ..services import BudgetService, BudgetStatus
from .params import Period, period_params

router = APIRouter()


def _build_status(status: BudgetStatus) -> BudgetStatusItem:
    return BudgetStatusItem(
        **BudgetResponse.model_validate(status.budget).model_dump(),
        actual_spent=status.actual_spent,
        remaining=status.remaining,
        percentage=status.percentage,
        is_over_budget=status.is_over_budget,
    )


@router.get("/", response_model=list[BudgetResponse])
def list_budgets(period: Period = Depends(period_params), db: Session = Depends(get_db)):
    """Budgets for a month; defaults to the current month."""
    return BudgetService(db).list_budgets(period.month, period.year)


# Declared before /{budget_id} so "status" is not parsed as an id
@router.get("/status", response_model=BudgetStatusResponse)
def budget_status(period: Period = Depends(period_params), db: Session = Depends(get_db)):
    """Budget vs actual spending for every budget in the month."""
    statuses, overview = BudgetService(db).budget_status(period.month, period.year)
    return BudgetStatusResponse(
        month=period.month,
        year=period.year,
        budgets=[_build_status(s) for s in statuses],
        overview=BudgetOverviewResponse.model_validate(overview),
    )


@router.get("/{budget_id}", response_model=BudgetResponse)
def get_budget(budget_id: int, db: Session = Depends(get_db)):
    return BudgetService(db).get_budget(budget_id)


@router.post("/", response_model=BudgetResponse, status_code=201)
def create_budget(data: BudgetCreate, db: Session = Depends(get_db)):
    return BudgetService(db).create_budget(data)


@router.api_route("/{budget_id}", methods=["PATCH", "PUT"], response_model=BudgetResponse)
def update_budget(budget_id: int, data: BudgetUpdate, db: Session = Depends(get_db)):
    return BudgetService(db).update_budget(budget_id, data)


@router.delete("/{budget_id}", status_code=204)
def delete_budget(budget_id: int, db: Session = Depends(get_db)):
    BudgetService(db).delete_budget(budget_id)
    return None
