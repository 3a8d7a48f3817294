# school_service/models.py
import enum

from sqlalchemy import Column, Enum, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from school_service.db import Base


class ClassStatus(str, enum.Enum):
    WAITING = "WAITING"
    STARTED = "STARTED"
    FINISHED = "FINISHED"


classroom_coordinators = Table(
    "classroom_coordinators",
    Base.metadata,
    Column("classroom_id", ForeignKey("classrooms.id"), primary_key=True),
    Column("coordinator_id", ForeignKey("coordinators.id"), primary_key=True),
)

classroom_scrum_masters = Table(
    "classroom_scrum_masters",
    Base.metadata,
    Column("classroom_id", ForeignKey("classrooms.id"), primary_key=True),
    Column("scrum_master_id", ForeignKey("scrum_masters.id"), primary_key=True),
)


class Classroom(Base):
    __tablename__ = "classrooms"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    status = Column(Enum(ClassStatus), nullable=False, default=ClassStatus.WAITING)

    coordinators = relationship(
        "Coordinator",
        secondary=classroom_coordinators,
        back_populates="classrooms",
        order_by="Coordinator.id",
    )
    scrum_masters = relationship(
        "ScrumMaster",
        secondary=classroom_scrum_masters,
        back_populates="classrooms",
        order_by="ScrumMaster.id",
    )
    instructors = relationship("Instructor", back_populates="classroom", order_by="Instructor.id")
    students = relationship("Student", back_populates="classroom", order_by="Student.id")


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(200), nullable=False)
    phone = Column(String(30), nullable=False)
    # Written only by the classroom lifecycle operations
    classroom_id = Column(Integer, ForeignKey("classrooms.id"), nullable=True, index=True)

    classroom = relationship("Classroom", back_populates="students")


class Instructor(Base):
    __tablename__ = "instructors"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(200), nullable=False)
    phone = Column(String(30), nullable=False)
    # Written only by the classroom lifecycle operations
    classroom_id = Column(Integer, ForeignKey("classrooms.id"), nullable=True, index=True)

    classroom = relationship("Classroom", back_populates="instructors")


class Coordinator(Base):
    __tablename__ = "coordinators"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(200), nullable=False)
    phone = Column(String(30), nullable=False)

    classrooms = relationship(
        "Classroom",
        secondary=classroom_coordinators,
        back_populates="coordinators",
    )


class ScrumMaster(Base):
    __tablename__ = "scrum_masters"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(200), nullable=False)
    phone = Column(String(30), nullable=False)

    classrooms = relationship(
        "Classroom",
        secondary=classroom_scrum_masters,
        back_populates="scrum_masters",
    )
