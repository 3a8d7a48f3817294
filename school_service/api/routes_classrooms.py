from typing import List

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from school_service.api.errors import unwrap
from school_service.api.schemas import AddStudentsRequest, ClassroomCreate, ClassroomOut
from school_service.db import get_db
from school_service.models import ClassStatus
from school_service.services import classrooms as classroom_service

router = APIRouter(
    prefix="/classrooms",
    tags=["classrooms"],
)


@router.post("", response_model=ClassroomOut, status_code=201)
def create_classroom(body: ClassroomCreate, db: Session = Depends(get_db)):
    result = classroom_service.create_classroom(
        db,
        name=body.name,
        coordinator_ids=body.coordinator_ids,
        scrum_master_ids=body.scrum_master_ids,
        instructor_ids=body.instructor_ids,
    )
    return ClassroomOut.model_validate(unwrap(result))


@router.get("", response_model=List[ClassroomOut])
def list_classrooms(
    status: ClassStatus | None = Query(None, description="Filter by lifecycle status"),
    db: Session = Depends(get_db),
):
    return [ClassroomOut.model_validate(c) for c in classroom_service.list_classrooms(db, status)]


@router.get("/{classroom_id}", response_model=ClassroomOut)
def get_classroom(classroom_id: int, db: Session = Depends(get_db)):
    result = classroom_service.get_classroom(db, classroom_id)
    return ClassroomOut.model_validate(unwrap(result))


@router.put("/{classroom_id}/start", status_code=204)
def start_classroom(classroom_id: int, db: Session = Depends(get_db)):
    unwrap(classroom_service.start_class(db, classroom_id))
    return Response(status_code=204)


@router.put("/{classroom_id}/add-students", response_model=ClassroomOut)
def add_students(classroom_id: int, body: AddStudentsRequest, db: Session = Depends(get_db)):
    result = classroom_service.add_students(db, classroom_id, body.student_ids)
    return ClassroomOut.model_validate(unwrap(result))


@router.put("/{classroom_id}/finish", status_code=204)
def finish_classroom(classroom_id: int, db: Session = Depends(get_db)):
    unwrap(classroom_service.finish_class(db, classroom_id))
    return Response(status_code=204)
