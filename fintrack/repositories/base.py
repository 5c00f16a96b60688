from typing import Any, Generic, Type, TypeVar

from sqlalchemy.orm import Session

from ..models import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """CRUD access to one record kind through an injected session."""

    def __init__(self, model: Type[ModelType], db: Session) -> None:
        self.model = model
        self.db = db

    def get_by_id(self, pk: int) -> ModelType | None:
        return self.db.get(self.model, pk)

    def get_all(self) -> list[ModelType]:
        return self.db.query(self.model).all()

    def add(self, instance: ModelType) -> ModelType:
        self.db.add(instance)
        self.db.flush()
        self.db.refresh(instance)
        return instance

    def update(self, instance: ModelType, **data: Any) -> ModelType:
        for key, value in data.items():
            setattr(instance, key, value)
        self.db.flush()
        self.db.refresh(instance)
        return instance

    def delete(self, instance: ModelType) -> None:
        self.db.delete(instance)
        self.db.flush()
