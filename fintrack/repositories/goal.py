from sqlalchemy.orm import Session

from ..models import Goal
from .base import BaseRepository


class GoalRepository(BaseRepository[Goal]):
    def __init__(self, db: Session) -> None:
        super().__init__(Goal, db)

    def get_all(self) -> list[Goal]:
        """All goals, most recently created first."""
        return (
            self.db.query(Goal)
            .order_by(Goal.created_at.desc(), Goal.id.desc())
            .all()
        )
