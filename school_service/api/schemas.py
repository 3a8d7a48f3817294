from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from school_service.models import ClassStatus

# JSON bodies use camelCase keys; snake_case is accepted as well.
_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)
_ORM_CONFIG = ConfigDict(
    alias_generator=to_camel, populate_by_name=True, from_attributes=True, str_strip_whitespace=True
)


# ========= People =========

class PersonBase(BaseModel):
    model_config = _CONFIG

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., max_length=200, pattern=r"^[^@\s]+@[^@\s]+$")
    phone: str = Field(..., min_length=1, max_length=30)


class PersonCreate(PersonBase):
    pass


class PersonOut(PersonBase):
    model_config = _ORM_CONFIG

    id: int


class StudentOut(PersonOut):
    classroom_id: int | None = None


class InstructorOut(PersonOut):
    classroom_id: int | None = None


# ========= Classrooms =========

class ClassroomCreate(BaseModel):
    model_config = _CONFIG

    name: str = Field(..., min_length=1, max_length=100)
    coordinator_ids: List[int] = Field(..., min_length=1)
    scrum_master_ids: List[int] = Field(..., min_length=1)
    # minimum count is a lifecycle rule, checked by the service
    instructor_ids: List[int] = Field(default_factory=list)


class AddStudentsRequest(BaseModel):
    model_config = _CONFIG

    student_ids: List[int] = Field(..., min_length=1)


class ClassroomOut(BaseModel):
    model_config = _ORM_CONFIG

    id: int
    name: str
    status: ClassStatus
    coordinators: List[PersonOut] = []
    scrum_masters: List[PersonOut] = []
    instructors: List[InstructorOut] = []
    students: List[StudentOut] = []
