from fastapi import APIRouter, Query

from ..models import GoalIcon, TransactionKind, categories_for
from ..schemas import CategoryResponse, GoalIconResponse

router = APIRouter()


@router.get("/", response_model=list[CategoryResponse])
def list_categories(kind: TransactionKind | None = Query(None)):
    """Get the category catalogue, optionally for income or expense only."""
    return [
        CategoryResponse(
            id=category,
            name=category.info.name,
            icon=category.info.icon,
            color=category.info.color,
            kind=category.kind,
        )
        for category in categories_for(kind)
    ]


@router.get("/goal-icons", response_model=list[GoalIconResponse])
def list_goal_icons():
    return [GoalIconResponse(id=icon, name=icon.label) for icon in GoalIcon]
