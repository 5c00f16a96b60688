from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..models import Goal
from ..schemas import GoalCreate, GoalUpdate, GoalResponse, GoalProgressResponse
from ..services import GoalService, goal_progress

router = APIRouter()


def _build_response(goal: Goal) -> dict:
    return {
        "id": goal.id,
        "name": goal.name,
        "target_amount": goal.target_amount,
        "current_amount": goal.current_amount,
        "target_date": goal.target_date,
        "icon": goal.icon,
        "created_at": goal.created_at,
        "updated_at": goal.updated_at,
        "progress": GoalProgressResponse.model_validate(goal_progress(goal)),
    }


@router.get("/", response_model=list[GoalResponse])
def list_goals(db: Session = Depends(get_db)):
    """Get all goals, most recently created first."""
    return [_build_response(g) for g in GoalService(db).list_goals()]


@router.get("/{goal_id}", response_model=GoalResponse)
def get_goal(goal_id: int, db: Session = Depends(get_db)):
    return _build_response(GoalService(db).get_goal(goal_id))


@router.post("/", response_model=GoalResponse, status_code=201)
def create_goal(data: GoalCreate, db: Session = Depends(get_db)):
    return _build_response(GoalService(db).create_goal(data))


@router.api_route("/{goal_id}", methods=["PATCH", "PUT"], response_model=GoalResponse)
def update_goal(goal_id: int, data: GoalUpdate, db: Session = Depends(get_db)):
    return _build_response(GoalService(db).update_goal(goal_id, data))


@router.delete("/{goal_id}", status_code=204)
def delete_goal(goal_id: int, db: Session = Depends(get_db)):
    GoalService(db).delete_goal(goal_id)
    return None
