from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, computed_field, model_validator

from ..currency import format_currency
from ..models.category import Category, TransactionKind
from .common import PositiveMoney, Timestamp


class TransactionBase(BaseModel):
    """Base transaction fields."""
    type: TransactionKind
    amount: PositiveMoney
    category: Category
    description: str | None = None


class TransactionCreate(TransactionBase):
    """Fields for creating a transaction. Date defaults to now."""
    date: Timestamp | None = None

    @model_validator(mode="after")
    def category_matches_type(self) -> "TransactionCreate":
        if self.category.kind != self.type:
            raise ValueError(
                f"category '{self.category.value}' is not an {self.type.value} category"
            )
        return self


class TransactionUpdate(BaseModel):
    """Fields for updating a transaction (all optional)."""
    type: TransactionKind | None = None
    amount: PositiveMoney | None = None
    category: Category | None = None
    description: str | None = None
    date: Timestamp | None = None


class TransactionResponse(TransactionBase):
    """Transaction response with all fields."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    amount: Decimal
    date: datetime
    created_at: datetime
    updated_at: datetime

    @computed_field
    @property
    def formatted_amount(self) -> str:
        return format_currency(self.amount)
