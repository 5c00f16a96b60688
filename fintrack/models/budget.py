from decimal import Decimal
from sqlalchemy import Integer, Enum, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from ..currency import from_cents, to_cents
from .base import Base, TimestampMixin
from .category import Category


class Budget(Base, TimestampMixin):
    """A spending cap for one expense category in one calendar month."""

    __tablename__ = "budgets"
    __table_args__ = (
        UniqueConstraint("category", "month", "year", name="uq_budget_category_month"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category: Mapped[Category] = mapped_column(Enum(Category), nullable=False)
    budget_amount_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    month: Mapped[int] = mapped_column(Integer, nullable=False)  # 1-12
    year: Mapped[int] = mapped_column(Integer, nullable=False)

    @property
    def budget_amount(self) -> Decimal:
        return from_cents(self.budget_amount_cents)

    @budget_amount.setter
    def budget_amount(self, value: Decimal) -> None:
        self.budget_amount_cents = to_cents(value)

    def __repr__(self) -> str:
        return (
            f"<Budget(id={self.id}, category='{self.category.value}', "
            f"period={self.year}-{self.month:02d}, amount={self.budget_amount})>"
        )
