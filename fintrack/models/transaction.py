from datetime import datetime
from decimal import Decimal
from sqlalchemy import String, Integer, DateTime, Enum
from sqlalchemy.orm import Mapped, mapped_column

from ..currency import from_cents, to_cents
from .base import Base, TimestampMixin
from .category import Category, TransactionKind


class Transaction(Base, TimestampMixin):
    """
    A single dated income or expense record.

    Amounts are stored as positive integer cents; the direction of money flow
    comes from `type`, never from the sign.
    """

    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    type: Mapped[TransactionKind] = mapped_column(Enum(TransactionKind), nullable=False)
    amount_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    category: Mapped[Category] = mapped_column(Enum(Category), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)

    @property
    def amount(self) -> Decimal:
        return from_cents(self.amount_cents)

    @amount.setter
    def amount(self, value: Decimal) -> None:
        self.amount_cents = to_cents(value)

    @property
    def signed_amount(self) -> Decimal:
        """Amount as a balance delta: positive for income, negative for expense."""
        if self.type == TransactionKind.INCOME:
            return self.amount
        return -self.amount

    def in_month(self, month: int, year: int) -> bool:
        return self.date.month == month and self.date.year == year

    def __repr__(self) -> str:
        return (
            f"<Transaction(id={self.id}, type={self.type.value}, "
            f"amount={self.amount}, category='{self.category.value}', date={self.date:%Y-%m-%d})>"
        )
