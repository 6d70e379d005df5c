from typing import Any, Generic, TypeVar

from sqlalchemy.orm import Session

from app.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class CrudRepository(Generic[ModelT]):
    """find_all / find_by_id / save / delete for a single model keyed by `id`."""

    model: type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> list[ModelT]:
        return self.db.query(self.model).all()

    def find_by_id(self, id: Any) -> ModelT | None:
        return self.db.query(self.model).filter(self.model.id == id).first()

    def save(self, entity: ModelT) -> ModelT:
        """Insert when the entity has no key, otherwise overwrite the matching row."""
        entity = self.db.merge(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity: ModelT) -> None:
        self.db.delete(entity)
        self.db.commit()
