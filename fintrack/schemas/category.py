from pydantic import BaseModel

from ..models.category import Category, GoalIcon, TransactionKind


class CategoryResponse(BaseModel):
    """A category with its display metadata."""
    id: Category
    name: str
    icon: str
    color: str
    kind: TransactionKind


class GoalIconResponse(BaseModel):
    id: GoalIcon
    name: str
