from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from school_service.api.errors import unwrap
from school_service.api.schemas import InstructorOut, PersonCreate, PersonOut
from school_service.db import get_db
from school_service.models import Coordinator, Instructor, ScrumMaster
from school_service.services import people

router = APIRouter(tags=["staff"])


# ========= Instructors =========

@router.post("/instructors", response_model=InstructorOut, status_code=201)
def register_instructor(body: PersonCreate, db: Session = Depends(get_db)):
    return people.register_person(db, Instructor, body.model_dump())


@router.get("/instructors", response_model=List[InstructorOut])
def list_instructors(db: Session = Depends(get_db)):
    return people.list_people(db, Instructor)


@router.get("/instructors/{instructor_id}", response_model=InstructorOut)
def get_instructor(instructor_id: int, db: Session = Depends(get_db)):
    return unwrap(people.get_person(db, Instructor, instructor_id))


# ========= Coordinators =========

@router.post("/coordinators", response_model=PersonOut, status_code=201)
def register_coordinator(body: PersonCreate, db: Session = Depends(get_db)):
    return people.register_person(db, Coordinator, body.model_dump())


@router.get("/coordinators", response_model=List[PersonOut])
def list_coordinators(db: Session = Depends(get_db)):
    return people.list_people(db, Coordinator)


@router.get("/coordinators/{coordinator_id}", response_model=PersonOut)
def get_coordinator(coordinator_id: int, db: Session = Depends(get_db)):
    return unwrap(people.get_person(db, Coordinator, coordinator_id))


# ========= Scrum masters =========

@router.post("/scrum-masters", response_model=PersonOut, status_code=201)
def register_scrum_master(body: PersonCreate, db: Session = Depends(get_db)):
    return people.register_person(db, ScrumMaster, body.model_dump())


@router.get("/scrum-masters", response_model=List[PersonOut])
def list_scrum_masters(db: Session = Depends(get_db)):
    return people.list_people(db, ScrumMaster)


@router.get("/scrum-masters/{scrum_master_id}", response_model=PersonOut)
def get_scrum_master(scrum_master_id: int, db: Session = Depends(get_db)):
    return unwrap(people.get_person(db, ScrumMaster, scrum_master_id))
