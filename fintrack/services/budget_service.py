import logging
from typing import Any, Mapping

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..errors import DuplicateBudgetError, NotFoundError
from ..models import Budget, Category
from ..repositories import BudgetRepository, TransactionRepository
from ..schemas import BudgetCreate, BudgetUpdate
from .analytics import BudgetOverview, BudgetStatus, budget_overview, budget_status
from .common import parse_input, update_fields

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("category", "budget_amount", "month", "year")


class BudgetService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = BudgetRepository(db)
        self.transactions = TransactionRepository(db)

    def list_budgets(self, month: int, year: int) -> list[Budget]:
        return self.repo.get_for_month(month, year)

    def get_budget(self, budget_id: int) -> Budget:
        budget = self.repo.get_by_id(budget_id)
        if budget is None:
            raise NotFoundError("Budget", budget_id)
        return budget

    def _ensure_slot_free(
        self, category: Category, month: int, year: int, budget_id: int | None = None
    ) -> None:
        existing = self.repo.find(category, month, year)
        if existing is not None and existing.id != budget_id:
            logger.warning(
                "Rejected budget for %s %d-%02d: budget %s already exists",
                category.value, year, month, existing.id,
            )
            raise DuplicateBudgetError(
                f"Budget already exists for '{category.value}' in {year}-{month:02d}"
            )

    def _save(self, write):
        # The unique constraint backs up _ensure_slot_free
        try:
            return write()
        except IntegrityError as exc:
            raise DuplicateBudgetError("Budget already exists for this category and month") from exc

    def create_budget(self, data: BudgetCreate | Mapping[str, Any]) -> Budget:
        data = parse_input(BudgetCreate, data)
        self._ensure_slot_free(data.category, data.month, data.year)

        budget = Budget(
            category=data.category,
            budget_amount=data.budget_amount,
            month=data.month,
            year=data.year,
        )
        budget = self._save(lambda: self.repo.add(budget))
        logger.info("Created %r", budget)
        return budget

    def update_budget(self, budget_id: int, data: BudgetUpdate | Mapping[str, Any]) -> Budget:
        data = parse_input(BudgetUpdate, data)
        budget = self.get_budget(budget_id)
        update_data = update_fields(data, REQUIRED_FIELDS)

        self._ensure_slot_free(
            update_data.get("category", budget.category),
            update_data.get("month", budget.month),
            update_data.get("year", budget.year),
            budget_id=budget.id,
        )
        return self._save(lambda: self.repo.update(budget, **update_data))

    def delete_budget(self, budget_id: int) -> None:
        budget = self.get_budget(budget_id)
        self.repo.delete(budget)
        logger.info("Deleted budget %s", budget_id)

    def budget_status(self, month: int, year: int) -> tuple[list[BudgetStatus], BudgetOverview]:
        """Budget-vs-actual for every budget in the month, plus month totals."""
        budgets = self.repo.get_for_month(month, year)
        transactions = self.transactions.get_for_month(month, year)
        statuses = budget_status(budgets, transactions)
        return statuses, budget_overview(statuses)
