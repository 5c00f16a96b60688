from datetime import datetime
from decimal import Decimal
from sqlalchemy import String, Integer, DateTime, Enum
from sqlalchemy.orm import Mapped, mapped_column

from ..currency import from_cents, to_cents
from .base import Base, TimestampMixin
from .category import GoalIcon, DEFAULT_GOAL_ICON


class Goal(Base, TimestampMixin):
    """
    A savings target. Progress is tracked by hand through current_amount and
    may run past the target.
    """

    __tablename__ = "goals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    target_amount_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    current_amount_cents: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    target_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    icon: Mapped[GoalIcon] = mapped_column(
        Enum(GoalIcon), nullable=False, default=DEFAULT_GOAL_ICON
    )

    @property
    def target_amount(self) -> Decimal:
        return from_cents(self.target_amount_cents)

    @target_amount.setter
    def target_amount(self, value: Decimal) -> None:
        self.target_amount_cents = to_cents(value)

    @property
    def current_amount(self) -> Decimal:
        return from_cents(self.current_amount_cents or 0)

    @current_amount.setter
    def current_amount(self, value: Decimal) -> None:
        self.current_amount_cents = to_cents(value)

    def __repr__(self) -> str:
        return f"<Goal(id={self.id}, name='{self.name}', target={self.target_amount})>"
