from datetime import date, datetime
from decimal import Decimal

from fintrack.models import Budget, Category, Goal, Transaction, TransactionKind
from fintrack.services.analytics import (
    budget_overview,
    budget_status,
    category_breakdown,
    current_period,
    expense_insights,
    goal_progress,
    monthly_trend,
    previous_periods,
    summarize,
)

INCOME = TransactionKind.INCOME
EXPENSE = TransactionKind.EXPENSE


def tx(kind, amount, category, when):
    return Transaction(type=kind, amount=Decimal(amount), category=category, date=when)


def january_scenario():
    return [
        tx(INCOME, "1000", Category.SALARY, datetime(2025, 1, 5)),
        tx(EXPENSE, "300", Category.FOOD, datetime(2025, 1, 12)),
    ]


def mixed_transactions():
    return [
        tx(INCOME, "2500.00", Category.SALARY, datetime(2025, 3, 1)),
        tx(EXPENSE, "120.45", Category.FOOD, datetime(2025, 3, 3)),
        tx(EXPENSE, "80.10", Category.TRANSPORT, datetime(2025, 3, 9)),
        tx(EXPENSE, "19.55", Category.FOOD, datetime(2025, 3, 31, 23, 59)),
        tx(INCOME, "300.00", Category.FREELANCE, datetime(2025, 3, 20)),
        tx(EXPENSE, "999.99", Category.TRAVEL, datetime(2025, 2, 28)),
        tx(EXPENSE, "45.00", Category.BILLS, datetime(2025, 4, 1)),
    ]


def test_summary_scenario():
    summary = summarize(january_scenario(), month=1, year=2025)
    assert summary.monthly_income == Decimal("1000")
    assert summary.monthly_expenses == Decimal("300")
    assert summary.monthly_balance == Decimal("700")
    assert summary.total_balance == Decimal("700")
    assert summary.transaction_count == 2


def test_summary_empty_is_all_zero():
    summary = summarize([], month=6, year=2025)
    assert summary.total_balance == 0
    assert summary.monthly_income == 0
    assert summary.monthly_expenses == 0
    assert summary.monthly_balance == 0
    assert summary.transaction_count == 0


def test_total_balance_ignores_month_filter():
    summary = summarize(mixed_transactions(), month=3, year=2025)
    # 2500 + 300 - 120.45 - 80.10 - 19.55 - 999.99 - 45.00
    assert summary.total_balance == Decimal("1534.91")
    assert summary.monthly_income == Decimal("2800.00")
    assert summary.monthly_expenses == Decimal("220.10")
    assert summary.transaction_count == 5


def test_monthly_balance_is_income_minus_expenses():
    transactions = mixed_transactions()
    for month in range(1, 13):
        summary = summarize(transactions, month=month, year=2025)
        assert summary.monthly_balance == summary.monthly_income - summary.monthly_expenses


def test_month_filter_checks_year():
    transactions = [tx(EXPENSE, "50", Category.FOOD, datetime(2024, 1, 10))]
    summary = summarize(transactions, month=1, year=2025)
    assert summary.monthly_expenses == 0
    assert summary.total_balance == Decimal("-50")


def test_category_breakdown_sorted_descending():
    rows = category_breakdown(mixed_transactions(), month=3, year=2025)
    assert [(r.category, r.amount) for r in rows] == [
        (Category.FOOD, Decimal("140.00")),
        (Category.TRANSPORT, Decimal("80.10")),
    ]


def test_category_breakdown_sums_to_monthly_expenses():
    transactions = mixed_transactions()
    for month in (2, 3, 4, 5):
        rows = category_breakdown(transactions, month=month, year=2025)
        summary = summarize(transactions, month=month, year=2025)
        assert sum(r.amount for r in rows) == summary.monthly_expenses


def test_category_breakdown_ties_ordered_by_category_id():
    when = datetime(2025, 5, 2)
    transactions = [
        tx(EXPENSE, "40", Category.TRAVEL, when),
        tx(EXPENSE, "40", Category.BILLS, when),
        tx(EXPENSE, "40", Category.FOOD, when),
        tx(EXPENSE, "90", Category.SHOPPING, when),
    ]
    rows = category_breakdown(transactions, month=5, year=2025)
    assert [r.category for r in rows] == [
        Category.SHOPPING,
        Category.BILLS,
        Category.FOOD,
        Category.TRAVEL,
    ]


def test_category_breakdown_ignores_income():
    rows = category_breakdown(january_scenario(), month=1, year=2025)
    assert [r.category for r in rows] == [Category.FOOD]


def test_budget_status_scenario():
    budget = Budget(category=Category.FOOD, budget_amount=Decimal("200"), month=1, year=2025)
    [status] = budget_status([budget], january_scenario())
    assert status.actual_spent == Decimal("300")
    assert status.remaining == Decimal("-100")
    assert status.percentage == Decimal("150")
    assert status.is_over_budget is True


def test_budget_status_only_counts_own_month_and_category():
    budgets = [
        Budget(category=Category.FOOD, budget_amount=Decimal("500"), month=3, year=2025),
        Budget(category=Category.TRAVEL, budget_amount=Decimal("1000"), month=2, year=2025),
        Budget(category=Category.HEALTHCARE, budget_amount=Decimal("75"), month=3, year=2025),
    ]
    food, travel, health = budget_status(budgets, mixed_transactions())

    assert food.actual_spent == Decimal("140.00")
    assert food.percentage == Decimal("28.00")
    assert not food.is_over_budget

    assert travel.actual_spent == Decimal("999.99")
    assert travel.remaining == Decimal("0.01")
    assert not travel.is_over_budget

    assert health.actual_spent == 0
    assert health.remaining == Decimal("75")
    assert health.percentage == 0


def test_budget_remaining_plus_spent_equals_amount():
    budgets = [
        Budget(category=c, budget_amount=Decimal("33.33"), month=3, year=2025)
        for c in (Category.FOOD, Category.TRANSPORT, Category.SHOPPING)
    ]
    for status in budget_status(budgets, mixed_transactions()):
        assert status.remaining + status.actual_spent == status.budget.budget_amount
        assert status.remaining == status.budget.budget_amount - status.actual_spent


def test_budget_exactly_spent_is_not_over():
    budget = Budget(category=Category.FOOD, budget_amount=Decimal("300"), month=1, year=2025)
    [status] = budget_status([budget], january_scenario())
    assert status.remaining == 0
    assert status.percentage == Decimal("100")
    assert status.is_over_budget is False


def test_budget_percentage_rounds_to_two_places():
    budget = Budget(category=Category.FOOD, budget_amount=Decimal("900"), month=1, year=2025)
    [status] = budget_status([budget], january_scenario())
    assert status.percentage == Decimal("33.33")


def test_budget_overview_totals():
    budgets = [
        Budget(category=Category.FOOD, budget_amount=Decimal("200"), month=1, year=2025),
        Budget(category=Category.BILLS, budget_amount=Decimal("50"), month=1, year=2025),
    ]
    overview = budget_overview(budget_status(budgets, january_scenario()))
    assert overview.total_budget == Decimal("250")
    assert overview.total_spent == Decimal("300")
    assert overview.total_remaining == Decimal("-50")
    assert overview.is_over_budget is True


def test_goal_progress_completed():
    goal = Goal(name="Laptop", target_amount=Decimal("500"), current_amount=Decimal("500"))
    progress = goal_progress(goal)
    assert progress.progress == Decimal("100")
    assert progress.is_completed is True
    assert progress.remaining_amount == 0


def test_goal_progress_over_saving_is_clamped_for_display():
    goal = Goal(name="Car", target_amount=Decimal("400"), current_amount=Decimal("600"))
    progress = goal_progress(goal)
    assert progress.progress == Decimal("150")
    assert progress.display_progress == Decimal("100")
    assert progress.is_completed is True
    assert progress.remaining_amount == 0


def test_goal_progress_just_short_is_not_completed():
    goal = Goal(name="Phone", target_amount=Decimal("500"), current_amount=Decimal("499.99"))
    progress = goal_progress(goal)
    assert progress.is_completed is False
    assert progress.remaining_amount == Decimal("0.01")


def test_goal_progress_partial():
    goal = Goal(name="Trip", target_amount=Decimal("1200"), current_amount=Decimal("300"))
    progress = goal_progress(goal)
    assert progress.progress == Decimal("25")
    assert progress.display_progress == Decimal("25")
    assert progress.remaining_amount == Decimal("900")
    assert not progress.is_completed


def test_current_period_reads_utc_clock(monkeypatch):
    import fintrack.services.analytics as analytics

    class FrozenDatetime(datetime):
        @classmethod
        def utcnow(cls):
            return cls(2025, 1, 31, 19, 0)

    monkeypatch.setattr(analytics, "datetime", FrozenDatetime)
    assert current_period() == (1, 2025)
    assert current_period(date(2024, 12, 31)) == (12, 2024)


def test_previous_periods_wraps_year():
    assert previous_periods(2, 2025, 4) == [(11, 2024), (12, 2024), (1, 2025), (2, 2025)]
    assert previous_periods(6, 2025, 1) == [(6, 2025)]


def test_monthly_trend_includes_empty_months():
    trend = monthly_trend(mixed_transactions(), 3, 2025, months=3)

    assert [(m.month, m.year) for m in trend.months] == [(1, 2025), (2, 2025), (3, 2025)]
    january, february, march = trend.months
    assert (january.income, january.expenses, january.balance) == (0, 0, 0)
    assert february.expenses == Decimal("999.99")
    assert february.balance == Decimal("-999.99")
    assert march.income == Decimal("2800.00")
    assert march.expenses == Decimal("220.10")
    assert march.balance == Decimal("2579.90")

    # Averages are over the whole window, empty months included
    assert trend.average_income == Decimal("933.33")
    assert trend.average_expenses == Decimal("406.70")


def test_monthly_trend_defaults_to_six_months():
    trend = monthly_trend([], 4, 2025)
    assert [(m.month, m.year) for m in trend.months][0] == (11, 2024)
    assert len(trend.months) == 6
    assert trend.average_income == Decimal("0")
    assert trend.average_expenses == Decimal("0")


def test_expense_insights_for_month():
    march = [t for t in mixed_transactions() if t.in_month(3, 2025)]
    insights = expense_insights(march)

    assert (insights.income_count, insights.expense_count) == (2, 3)
    assert insights.income_share == Decimal("40.00")
    assert insights.expense_share == Decimal("60.00")
    assert insights.largest_expense == Decimal("120.45")
    assert insights.average_expense == Decimal("73.37")


def test_expense_insights_empty_is_all_zero():
    insights = expense_insights([])
    assert (insights.income_count, insights.expense_count) == (0, 0)
    assert insights.income_share == insights.expense_share == Decimal("0")
    assert insights.largest_expense == insights.average_expense == Decimal("0")


def test_expense_insights_income_only():
    insights = expense_insights(january_scenario()[:1])
    assert insights.income_share == Decimal("100.00")
    assert insights.expense_share == Decimal("0.00")
    assert insights.largest_expense == Decimal("0")
