"""
Aggregations over ledger records.

Every function here is pure: it takes record sequences by value and returns
new result objects. Callers load the records (see the repositories) and pass
them in; nothing is cached between calls.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Sequence

from ..currency import CENT, ZERO
from ..models import Budget, Category, Goal, Transaction, TransactionKind

HUNDRED = Decimal("100")
PERCENT_PLACES = Decimal("0.01")
FULL = Decimal("100.00")


@dataclass(frozen=True)
class Summary:
    total_balance: Decimal
    monthly_income: Decimal
    monthly_expenses: Decimal
    monthly_balance: Decimal
    transaction_count: int


@dataclass(frozen=True)
class CategoryTotal:
    category: Category
    amount: Decimal


@dataclass(frozen=True)
class BudgetStatus:
    budget: Budget
    actual_spent: Decimal
    remaining: Decimal
    percentage: Decimal
    is_over_budget: bool


@dataclass(frozen=True)
class BudgetOverview:
    total_budget: Decimal
    total_spent: Decimal
    total_remaining: Decimal
    is_over_budget: bool


@dataclass(frozen=True)
class GoalProgress:
    progress: Decimal
    display_progress: Decimal
    remaining_amount: Decimal
    is_completed: bool


def current_period(today: date | None = None) -> tuple[int, int]:
    """
    (month, year) of the current calendar month.

    Read from the UTC clock, the same clock stored timestamps are kept in.
    """
    today = today or datetime.utcnow().date()
    return today.month, today.year


def percent(part: Decimal, whole: Decimal) -> Decimal:
    """part / whole * 100, rounded half-up to two places. whole must be non-zero."""
    return (part / whole * HUNDRED).quantize(PERCENT_PLACES, rounding=ROUND_HALF_UP)


def _in_month(transactions: Iterable[Transaction], month: int, year: int) -> list[Transaction]:
    return [t for t in transactions if t.in_month(month, year)]


def _total(transactions: Iterable[Transaction], kind: TransactionKind) -> Decimal:
    return sum((t.amount for t in transactions if t.type == kind), ZERO)


def summarize(transactions: Sequence[Transaction], month: int, year: int) -> Summary:
    """
    Income, expense and balance figures for one month.

    total_balance is the all-time net position and ignores the month filter.
    """
    monthly = _in_month(transactions, month, year)
    income = _total(monthly, TransactionKind.INCOME)
    expenses = _total(monthly, TransactionKind.EXPENSE)

    return Summary(
        total_balance=sum((t.signed_amount for t in transactions), ZERO),
        monthly_income=income,
        monthly_expenses=expenses,
        monthly_balance=income - expenses,
        transaction_count=len(monthly),
    )


def category_breakdown(
    transactions: Sequence[Transaction], month: int, year: int
) -> list[CategoryTotal]:
    """
    Expense totals per category for one month, largest first.

    Equal totals are ordered by category id so the result never depends on
    grouping order.
    """
    totals: dict[Category, Decimal] = defaultdict(lambda: ZERO)
    for t in _in_month(transactions, month, year):
        if t.type == TransactionKind.EXPENSE:
            totals[t.category] += t.amount

    rows = [CategoryTotal(category=c, amount=a) for c, a in totals.items()]
    rows.sort(key=lambda r: (-r.amount, r.category.value))
    return rows


def spent_by_category(
    transactions: Iterable[Transaction], month: int, year: int
) -> dict[Category, Decimal]:
    """Expense sum per category for one month, without ordering."""
    return {row.category: row.amount for row in category_breakdown(list(transactions), month, year)}


def budget_status(
    budgets: Sequence[Budget], transactions: Sequence[Transaction]
) -> list[BudgetStatus]:
    """Compare each budget against actual spending in its own category and month."""
    spent_cache: dict[tuple[int, int], dict[Category, Decimal]] = {}

    statuses = []
    for budget in budgets:
        period = (budget.month, budget.year)
        if period not in spent_cache:
            spent_cache[period] = spent_by_category(transactions, *period)

        actual = spent_cache[period].get(budget.category, ZERO)
        limit = budget.budget_amount
        statuses.append(BudgetStatus(
            budget=budget,
            actual_spent=actual,
            remaining=limit - actual,
            percentage=percent(actual, limit),
            is_over_budget=actual > limit,
        ))
    return statuses


def budget_overview(statuses: Sequence[BudgetStatus]) -> BudgetOverview:
    """Totals across a month's budgets."""
    total_budget = sum((s.budget.budget_amount for s in statuses), ZERO)
    total_spent = sum((s.actual_spent for s in statuses), ZERO)
    total_remaining = total_budget - total_spent
    return BudgetOverview(
        total_budget=total_budget,
        total_spent=total_spent,
        total_remaining=total_remaining,
        is_over_budget=total_remaining < 0,
    )


def goal_progress(goal: Goal) -> GoalProgress:
    progress = percent(goal.current_amount, goal.target_amount)
    return GoalProgress(
        progress=progress,
        display_progress=min(progress, FULL),
        remaining_amount=max(goal.target_amount - goal.current_amount, ZERO),
        is_completed=goal.current_amount >= goal.target_amount,
    )


@dataclass(frozen=True)
class MonthTotals:
    month: int
    year: int
    income: Decimal
    expenses: Decimal
    balance: Decimal


@dataclass(frozen=True)
class Trend:
    months: list[MonthTotals]
    average_income: Decimal
    average_expenses: Decimal


@dataclass(frozen=True)
class ExpenseInsights:
    income_count: int
    expense_count: int
    income_share: Decimal
    expense_share: Decimal
    largest_expense: Decimal
    average_expense: Decimal


def previous_periods(month: int, year: int, count: int) -> list[tuple[int, int]]:
    """The `count` months ending at (month, year), oldest first."""
    index = year * 12 + (month - 1)
    return [
        (i % 12 + 1, i // 12)
        for i in range(index - count + 1, index + 1)
    ]


def _average(total: Decimal, count: int) -> Decimal:
    if count == 0:
        return ZERO
    return (total / count).quantize(CENT, rounding=ROUND_HALF_UP)


def monthly_trend(
    transactions: Sequence[Transaction], month: int, year: int, months: int = 6
) -> Trend:
    """
    Income, expenses and balance for each of the last `months` months up to
    and including (month, year), with per-month averages over the window.

    Months without transactions are included as zeros and count towards the
    averages.
    """
    rows = []
    for m, y in previous_periods(month, year, months):
        in_month = _in_month(transactions, m, y)
        income = _total(in_month, TransactionKind.INCOME)
        expenses = _total(in_month, TransactionKind.EXPENSE)
        rows.append(MonthTotals(month=m, year=y, income=income, expenses=expenses, balance=income - expenses))

    return Trend(
        months=rows,
        average_income=_average(sum((r.income for r in rows), ZERO), len(rows)),
        average_expenses=_average(sum((r.expenses for r in rows), ZERO), len(rows)),
    )


def expense_insights(transactions: Sequence[Transaction]) -> ExpenseInsights:
    """Income/expense distribution by count, plus largest and mean expense."""
    expenses = [t.amount for t in transactions if t.type == TransactionKind.EXPENSE]
    income_count = sum(1 for t in transactions if t.type == TransactionKind.INCOME)
    expense_count = len(expenses)
    total = income_count + expense_count

    return ExpenseInsights(
        income_count=income_count,
        expense_count=expense_count,
        income_share=percent(Decimal(income_count), Decimal(total)) if total else ZERO,
        expense_share=percent(Decimal(expense_count), Decimal(total)) if total else ZERO,
        largest_expense=max(expenses, default=ZERO),
        average_expense=_average(sum(expenses, ZERO), expense_count),
    )
