import logging
from datetime import datetime
from typing import Any, Mapping

from sqlalchemy.orm import Session

from ..errors import NotFoundError, ValidationError
from ..models import Category, Transaction, TransactionKind
from ..repositories import TransactionRepository
from ..schemas import TransactionCreate, TransactionUpdate
from .analytics import current_period
from .common import parse_input, update_fields

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("type", "amount", "category", "date")


class TransactionService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = TransactionRepository(db)

    def list_transactions(
        self,
        month: int | None = None,
        year: int | None = None,
        kind: TransactionKind | None = None,
        category: Category | None = None,
        search: str | None = None,
    ) -> list[Transaction]:
        """
        Transactions newest first, optionally filtered.

        With neither month nor year every month is included; a missing half of
        the pair falls back to the current month or year. search matches the
        description or category id, ignoring case.
        """
        if month is not None or year is not None:
            current_month, current_year = current_period()
            month, year = month or current_month, year or current_year
        return self.repo.search(
            month=month, year=year, kind=kind, category=category, text=search or None
        )

    def get_transaction(self, transaction_id: int) -> Transaction:
        transaction = self.repo.get_by_id(transaction_id)
        if transaction is None:
            raise NotFoundError("Transaction", transaction_id)
        return transaction

    def create_transaction(self, data: TransactionCreate | Mapping[str, Any]) -> Transaction:
        data = parse_input(TransactionCreate, data)
        transaction = Transaction(
            type=data.type,
            amount=data.amount,
            category=data.category,
            description=data.description,
            date=data.date or datetime.utcnow(),
        )
        transaction = self.repo.add(transaction)
        logger.info("Created %r", transaction)
        return transaction

    def update_transaction(
        self, transaction_id: int, data: TransactionUpdate | Mapping[str, Any]
    ) -> Transaction:
        """Merge the sent fields into the stored transaction."""
        data = parse_input(TransactionUpdate, data)
        transaction = self.get_transaction(transaction_id)
        update_data = update_fields(data, REQUIRED_FIELDS)

        new_type = update_data.get("type", transaction.type)
        new_category = update_data.get("category", transaction.category)
        if new_category.kind != new_type:
            logger.warning(
                "Rejected update of transaction %s: %s is not a %s category",
                transaction_id, new_category.value, new_type.value,
            )
            raise ValidationError(
                f"category '{new_category.value}' is not an {new_type.value} category"
            )

        return self.repo.update(transaction, **update_data)

    def delete_transaction(self, transaction_id: int) -> None:
        transaction = self.get_transaction(transaction_id)
        self.repo.delete(transaction)
        logger.info("Deleted transaction %s", transaction_id)
