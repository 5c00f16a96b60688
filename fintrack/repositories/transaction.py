from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session

from ..models import Category, Transaction, TransactionKind
from .base import BaseRepository


def month_bounds(month: int, year: int) -> tuple[datetime, datetime]:
    """Half-open [start, end) datetime range covering a calendar month."""
    start = datetime(year, month, 1)
    if month == 12:
        end = datetime(year + 1, 1, 1)
    else:
        end = datetime(year, month + 1, 1)
    return start, end


class TransactionRepository(BaseRepository[Transaction]):
    def __init__(self, db: Session) -> None:
        super().__init__(Transaction, db)

    @staticmethod
    def _newest_first(query: Query) -> list[Transaction]:
        return query.order_by(Transaction.date.desc(), Transaction.id.desc()).all()

    def get_all(self) -> list[Transaction]:
        """All transactions, newest first."""
        return self._newest_first(self.db.query(Transaction))

    def get_between(self, start: datetime, end: datetime) -> list[Transaction]:
        """Transactions dated in [start, end), newest first."""
        return self._newest_first(
            self.db.query(Transaction).filter(Transaction.date >= start, Transaction.date < end)
        )

    def get_for_month(self, month: int, year: int) -> list[Transaction]:
        """Transactions dated within the given month, newest first."""
        return self.get_between(*month_bounds(month, year))

    def search(
        self,
        month: int | None = None,
        year: int | None = None,
        kind: TransactionKind | None = None,
        category: Category | None = None,
        text: str | None = None,
    ) -> list[Transaction]:
        """
        Transactions matching every given filter, newest first.

        text matches case-insensitively against the description or the
        category id. month and year must be given together.
        """
        query = self.db.query(Transaction)

        if month is not None and year is not None:
            start, end = month_bounds(month, year)
            query = query.filter(Transaction.date >= start, Transaction.date < end)
        if kind is not None:
            query = query.filter(Transaction.type == kind)
        if category is not None:
            query = query.filter(Transaction.category == category)
        if text:
            needle = text.lower()
            matching = [c for c in Category if needle in c.value]
            conditions = [Transaction.description.ilike(f"%{text}%")]
            if matching:
                conditions.append(Transaction.category.in_(matching))
            query = query.filter(or_(*conditions))

        return self._newest_first(query)
