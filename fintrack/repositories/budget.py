from sqlalchemy.orm import Session

from ..models import Budget, Category
from .base import BaseRepository


class BudgetRepository(BaseRepository[Budget]):
    def __init__(self, db: Session) -> None:
        super().__init__(Budget, db)

    def get_for_month(self, month: int, year: int) -> list[Budget]:
        return (
            self.db.query(Budget)
            .filter(Budget.month == month, Budget.year == year)
            .order_by(Budget.id)
            .all()
        )

    def find(self, category: Category, month: int, year: int) -> Budget | None:
        """The budget for a (category, month, year) slot, if one exists."""
        return (
            self.db.query(Budget)
            .filter(
                Budget.category == category,
                Budget.month == month,
                Budget.year == year,
            )
            .first()
        )
