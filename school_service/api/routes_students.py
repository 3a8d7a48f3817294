from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from school_service.api.errors import unwrap
from school_service.api.schemas import PersonCreate, StudentOut
from school_service.db import get_db
from school_service.models import Student
from school_service.services import people

router = APIRouter(prefix="/students", tags=["students"])


@router.post("", response_model=StudentOut, status_code=201)
def register_student(body: PersonCreate, db: Session = Depends(get_db)):
    return people.register_person(db, Student, body.model_dump())


@router.get("", response_model=List[StudentOut])
def list_students(db: Session = Depends(get_db)):
    return people.list_people(db, Student)


@router.get("/{student_id}", response_model=StudentOut)
def get_student(student_id: int, db: Session = Depends(get_db)):
    return unwrap(people.get_person(db, Student, student_id))
