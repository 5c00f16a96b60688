from decimal import Decimal
from pydantic import BaseModel, ConfigDict, computed_field

from ..currency import format_currency_compact
from ..models.category import Category


class SummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    month: int
    year: int
    total_balance: Decimal
    monthly_income: Decimal
    monthly_expenses: Decimal
    monthly_balance: Decimal
    transaction_count: int

    @computed_field
    @property
    def compact(self) -> dict[str, str]:
        """Dashboard tile labels, e.g. ₹1.5L."""
        return {
            "total_balance": format_currency_compact(self.total_balance),
            "monthly_income": format_currency_compact(self.monthly_income),
            "monthly_expenses": format_currency_compact(self.monthly_expenses),
            "monthly_balance": format_currency_compact(self.monthly_balance),
        }


class CategorySpendItem(BaseModel):
    category: Category
    category_name: str
    icon: str
    color: str
    amount: Decimal
    share: Decimal  # percent of the month's expenses


class MonthTotalsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    month: int
    year: int
    income: Decimal
    expenses: Decimal
    balance: Decimal


class TrendResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    months: list[MonthTotalsResponse]
    average_income: Decimal
    average_expenses: Decimal


class ExpenseInsightsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    month: int
    year: int
    income_count: int
    expense_count: int
    income_share: Decimal
    expense_share: Decimal
    largest_expense: Decimal
    average_expense: Decimal
