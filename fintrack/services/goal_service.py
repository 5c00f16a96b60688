import logging
from datetime import datetime
from typing import Any, Mapping

from sqlalchemy.orm import Session

from ..errors import NotFoundError
from ..models import Goal
from ..repositories import GoalRepository
from ..schemas import GoalCreate, GoalUpdate
from .common import parse_input, update_fields

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "target_amount", "current_amount", "target_date", "icon")


class GoalService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = GoalRepository(db)

    def list_goals(self) -> list[Goal]:
        return self.repo.get_all()

    def get_goal(self, goal_id: int) -> Goal:
        goal = self.repo.get_by_id(goal_id)
        if goal is None:
            raise NotFoundError("Goal", goal_id)
        return goal

    def create_goal(self, data: GoalCreate | Mapping[str, Any]) -> Goal:
        data = parse_input(GoalCreate, data)
        goal = Goal(
            name=data.name,
            target_amount=data.target_amount,
            current_amount=data.current_amount,
            target_date=data.target_date or datetime.utcnow(),
            icon=data.icon,
        )
        goal = self.repo.add(goal)
        logger.info("Created %r", goal)
        return goal

    def update_goal(self, goal_id: int, data: GoalUpdate | Mapping[str, Any]) -> Goal:
        """Merge the sent fields into the stored goal; progress updates go through here too."""
        data = parse_input(GoalUpdate, data)
        goal = self.get_goal(goal_id)
        return self.repo.update(goal, **update_fields(data, REQUIRED_FIELDS))

    def delete_goal(self, goal_id: int) -> None:
        goal = self.get_goal(goal_id)
        self.repo.delete(goal)
        logger.info("Deleted goal %s", goal_id)
