"""
Classroom lifecycle: creation, enrollment and the WAITING -> STARTED -> FINISHED
state machine.

Every public function is one unit of work over the given session: it commits
when it succeeds and rolls back when it returns a failure, so a failed
operation never leaves partial changes behind.
"""
from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy.orm import Session

from school_service.core.config import settings
from school_service.models import Classroom, ClassStatus
from school_service.services import repositories
from school_service.services.repositories import Repository
from school_service.services.results import ErrorKind, Result

logger = logging.getLogger(__name__)

MIN_INSTRUCTORS = settings.CLASSROOM_MIN_INSTRUCTORS
MIN_STUDENTS = settings.CLASSROOM_MIN_STUDENTS
MAX_STUDENTS = settings.CLASSROOM_MAX_STUDENTS


def _unique(ids: Iterable[int]) -> list[int]:
    return list(dict.fromkeys(ids))


def _find_all(repo: Repository, ids: list[int]) -> tuple[list, list[int]]:
    """Resolve `ids`, returning (found entities, ids with no stored entity)."""
    found = repo.find_all_by_id(ids)
    found_ids = {entity.id for entity in found}
    missing = [i for i in ids if i not in found_ids]
    return found, missing


def _fail(db: Session, kind: ErrorKind, message: str, ids=()) -> Result:
    db.rollback()
    logger.info("Classroom operation rejected (%s): %s", kind.value, message)
    return Result.failure(kind, message, ids)


def _classroom_not_found(db: Session, classroom_id: int) -> Result:
    return _fail(
        db,
        ErrorKind.NOT_FOUND,
        f"Class room not found with id: {classroom_id}",
        [classroom_id],
    )


def get_classroom(db: Session, classroom_id: int) -> Result[Classroom]:
    classroom = repositories.classrooms(db).find_by_id(classroom_id)
    if classroom is None:
        return Result.failure(
            ErrorKind.NOT_FOUND,
            f"Class room not found with id: {classroom_id}",
            [classroom_id],
        )
    return Result.success(classroom)


def list_classrooms(db: Session, status: ClassStatus | None = None) -> list[Classroom]:
    query = db.query(Classroom)
    if status is not None:
        query = query.filter(Classroom.status == status)
    return query.order_by(Classroom.id).all()


def create_classroom(
    db: Session,
    name: str,
    coordinator_ids: Iterable[int],
    scrum_master_ids: Iterable[int],
    instructor_ids: Iterable[int],
) -> Result[Classroom]:
    """
    Create a classroom in WAITING status with its staff linked.

    Fails with NOT_FOUND (listing every unknown id) when a coordinator, scrum
    master or instructor id does not resolve, INSUFFICIENT_INSTRUCTORS when
    fewer than MIN_INSTRUCTORS instructors are given, and ALREADY_ASSIGNED
    when an instructor already teaches another classroom.
    """
    coordinator_ids = _unique(coordinator_ids)
    scrum_master_ids = _unique(scrum_master_ids)
    instructor_ids = _unique(instructor_ids)

    coordinators, missing = _find_all(repositories.coordinators(db), coordinator_ids)
    if missing:
        return _fail(db, ErrorKind.NOT_FOUND, f"Coordinators not found for IDs: {missing}", missing)

    scrum_masters, missing = _find_all(repositories.scrum_masters(db), scrum_master_ids)
    if missing:
        return _fail(db, ErrorKind.NOT_FOUND, f"Scrum Masters not found for IDs: {missing}", missing)

    if len(instructor_ids) < MIN_INSTRUCTORS:
        return _fail(
            db,
            ErrorKind.INSUFFICIENT_INSTRUCTORS,
            f"Requires a minimum of {MIN_INSTRUCTORS} instructors",
            instructor_ids,
        )

    instructors, missing = _find_all(repositories.instructors(db), instructor_ids)
    if missing:
        return _fail(db, ErrorKind.NOT_FOUND, f"Instructors not found for IDs: {missing}", missing)

    for instructor in instructors:
        if instructor.classroom_id is not None:
            return _fail(
                db,
                ErrorKind.ALREADY_ASSIGNED,
                f"Instructor {instructor.first_name} [ID: {instructor.id}] is already assigned to a class.",
                [instructor.id],
            )

    classroom = Classroom(name=name, status=ClassStatus.WAITING)
    classroom.coordinators.extend(coordinators)
    classroom.scrum_masters.extend(scrum_masters)
    classroom.instructors.extend(instructors)

    repositories.classrooms(db).save(classroom)
    db.commit()
    db.refresh(classroom)

    logger.info(
        "Created classroom %s (%s) with %d instructors",
        classroom.id,
        classroom.name,
        len(instructors),
    )
    return Result.success(classroom)


def add_students(db: Session, classroom_id: int, student_ids: Iterable[int]) -> Result[Classroom]:
    """
    Enroll students into a WAITING classroom.

    The maximum is checked against the enrollment *before* this batch, so a
    single batch can take the classroom past MAX_STUDENTS.
    """
    classroom = repositories.classrooms(db).find_by_id(classroom_id)
    if classroom is None:
        return _classroom_not_found(db, classroom_id)

    student_ids = _unique(student_ids)
    students, missing = _find_all(repositories.students(db), student_ids)
    if missing:
        return _fail(db, ErrorKind.NOT_FOUND, f"Students not found for IDs: {missing}", missing)

    if classroom.status != ClassStatus.WAITING:
        return _fail(
            db,
            ErrorKind.INVALID_STATUS,
            "It is only possible to add new students when the class room status is in WAITING",
            [classroom.id],
        )

    if len(classroom.students) >= MAX_STUDENTS:
        return _fail(
            db,
            ErrorKind.MAXIMUM_STUDENTS_EXCEEDED,
            f"A class can have a maximum of {MAX_STUDENTS} students",
            [classroom.id],
        )

    for student in students:
        if student.classroom_id is not None:
            return _fail(
                db,
                ErrorKind.ALREADY_ASSIGNED,
                f"Student {student.first_name} [ID: {student.id}] is already assigned to a class.",
                [student.id],
            )

    classroom.students.extend(students)
    repositories.classrooms(db).save(classroom)
    db.commit()
    db.refresh(classroom)

    logger.info(
        "Added %d students to classroom %s (now %d)",
        len(students),
        classroom.id,
        len(classroom.students),
    )
    return Result.success(classroom)


def start_class(db: Session, classroom_id: int) -> Result[None]:
    classroom = repositories.classrooms(db).find_by_id(classroom_id)
    if classroom is None:
        return _classroom_not_found(db, classroom_id)

    students_count = len(classroom.students)
    if students_count < MIN_STUDENTS or students_count > MAX_STUDENTS:
        return _fail(
            db,
            ErrorKind.INSUFFICIENT_STUDENTS,
            f"A class needs between {MIN_STUDENTS} and {MAX_STUDENTS} students to start "
            f"(currently {students_count}).",
            [classroom.id],
        )

    if classroom.status != ClassStatus.WAITING:
        return _fail(
            db,
            ErrorKind.INVALID_STATUS,
            "To start a class you need the status in WAITING",
            [classroom.id],
        )

    classroom.status = ClassStatus.STARTED
    db.commit()

    logger.info("Started classroom %s with %d students", classroom_id, students_count)
    return Result.success()


def finish_class(db: Session, classroom_id: int) -> Result[None]:
    classroom = repositories.classrooms(db).find_by_id(classroom_id)
    if classroom is None:
        return _classroom_not_found(db, classroom_id)

    if classroom.status == ClassStatus.FINISHED:
        return _fail(db, ErrorKind.INVALID_STATUS, "Class room is already finished.", [classroom.id])
    if classroom.status != ClassStatus.STARTED:
        return _fail(
            db,
            ErrorKind.INVALID_STATUS,
            "Classroom needs to be in STARTED status to be finished.",
            [classroom.id],
        )

    classroom.status = ClassStatus.FINISHED
    db.commit()

    logger.info("Finished classroom %s", classroom_id)
    return Result.success()
