from __future__ import annotations

from typing import Generic, Iterable, Type, TypeVar

from sqlalchemy.orm import Session

from school_service.models import Classroom, Coordinator, Instructor, ScrumMaster, Student

ModelT = TypeVar("ModelT")


class Repository(Generic[ModelT]):
    """Lookup and persistence for one model class over a session."""

    def __init__(self, model: Type[ModelT], db: Session):
        self.model = model
        self.db = db

    def find_by_id(self, entity_id: int) -> ModelT | None:
        return self.db.get(self.model, entity_id)

    def find_all_by_id(self, ids: Iterable[int]) -> list[ModelT]:
        """Return the stored entities for `ids`; unknown ids are silently dropped."""
        ids = list(ids)
        if not ids:
            return []
        return (
            self.db.query(self.model)
            .filter(self.model.id.in_(ids))
            .order_by(self.model.id)
            .all()
        )

    def find_all(self) -> list[ModelT]:
        return self.db.query(self.model).order_by(self.model.id).all()

    def save(self, entity: ModelT) -> ModelT:
        """Add `entity` to the unit of work and flush so it gets an id."""
        self.db.add(entity)
        self.db.flush()
        return entity


def classrooms(db: Session) -> Repository[Classroom]:
    return Repository(Classroom, db)


def students(db: Session) -> Repository[Student]:
    return Repository(Student, db)


def instructors(db: Session) -> Repository[Instructor]:
    return Repository(Instructor, db)


def coordinators(db: Session) -> Repository[Coordinator]:
    return Repository(Coordinator, db)


def scrum_masters(db: Session) -> Repository[ScrumMaster]:
    return Repository(ScrumMaster, db)
