from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field

from ..models.category import GoalIcon, DEFAULT_GOAL_ICON
from .common import NonNegativeMoney, PositiveMoney, Timestamp


class GoalCreate(BaseModel):
    """Fields for creating a goal. Target date defaults to now."""
    name: str = Field(min_length=1, max_length=255)
    target_amount: PositiveMoney
    current_amount: NonNegativeMoney = Decimal("0")
    target_date: Timestamp | None = None
    icon: GoalIcon = DEFAULT_GOAL_ICON


class GoalUpdate(BaseModel):
    """Fields for updating a goal (all optional)."""
    name: str | None = Field(None, min_length=1, max_length=255)
    target_amount: PositiveMoney | None = None
    current_amount: NonNegativeMoney | None = None
    target_date: Timestamp | None = None
    icon: GoalIcon | None = None


class GoalProgressResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    progress: Decimal
    display_progress: Decimal
    remaining_amount: Decimal
    is_completed: bool


class GoalResponse(BaseModel):
    """Goal with its derived progress."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    target_amount: Decimal
    current_amount: Decimal
    target_date: datetime
    icon: GoalIcon
    created_at: datetime
    updated_at: datetime
    progress: GoalProgressResponse
