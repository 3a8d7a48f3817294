"""
Registration and lookup of students and staff (instructors, coordinators,
scrum masters).

Newly registered students and instructors are never linked to a classroom
here; only the classroom lifecycle operations assign them.
"""
from __future__ import annotations

import logging
from typing import Any, Type

from sqlalchemy.orm import Session

from school_service.models import Coordinator, Instructor, ScrumMaster, Student
from school_service.services.repositories import Repository
from school_service.services.results import ErrorKind, Result

logger = logging.getLogger(__name__)

LABELS: dict[type, str] = {
    Student: "Student",
    Instructor: "Instructor",
    Coordinator: "Coordinator",
    ScrumMaster: "Scrum Master",
}

PERSON_FIELDS = ("first_name", "last_name", "email", "phone")


def get_person(db: Session, model: Type, person_id: int) -> Result:
    person = Repository(model, db).find_by_id(person_id)
    if person is None:
        return Result.failure(
            ErrorKind.NOT_FOUND,
            f"{LABELS[model]} not found with id: {person_id}",
            [person_id],
        )
    return Result.success(person)


def list_people(db: Session, model: Type) -> list:
    return Repository(model, db).find_all()


def register_person(db: Session, model: Type, data: dict[str, Any]):
    """Persist a new person of `model`; keys outside the contact fields are ignored."""
    person = model(**{k: data[k] for k in PERSON_FIELDS})
    Repository(model, db).save(person)
    db.commit()
    db.refresh(person)

    logger.info("Registered %s %s", LABELS[model].lower(), person.id)
    return person
