from datetime import datetime
from decimal import Decimal
from typing import Annotated
from pydantic import AfterValidator, BaseModel, ConfigDict

from ..models.category import Category, TransactionKind
from .common import Month, PositiveMoney, Year


def _expense_only(value: Category) -> Category:
    if value.kind != TransactionKind.EXPENSE:
        raise ValueError(f"budgets can only be set on expense categories, not '{value.value}'")
    return value


ExpenseCategory = Annotated[Category, AfterValidator(_expense_only)]


# --- Input schemas ---

class BudgetCreate(BaseModel):
    category: ExpenseCategory
    budget_amount: PositiveMoney
    month: Month
    year: Year


class BudgetUpdate(BaseModel):
    category: ExpenseCategory | None = None
    budget_amount: PositiveMoney | None = None
    month: Month | None = None
    year: Year | None = None


# --- Response schemas ---

class BudgetResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    category: Category
    budget_amount: Decimal
    month: int
    year: int
    created_at: datetime
    updated_at: datetime


# --- Budget vs actual schemas ---

class BudgetStatusItem(BudgetResponse):
    actual_spent: Decimal
    remaining: Decimal
    percentage: Decimal
    is_over_budget: bool


class BudgetOverviewResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_budget: Decimal
    total_spent: Decimal
    total_remaining: Decimal
    is_over_budget: bool


class BudgetStatusResponse(BaseModel):
    month: int
    year: int
    budgets: list[BudgetStatusItem]
    overview: BudgetOverviewResponse
