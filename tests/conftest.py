"""
Pytest configuration and shared fixtures.

The application is imported against an in-memory SQLite database; tables are
recreated for every test.
"""
import itertools
import os

# Must be set before the application modules read their settings
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from school_service.db import Base, SessionLocal, engine
from school_service.main import app
from school_service.models import Coordinator, Instructor, ScrumMaster, Student
from school_service.services import classrooms as classroom_service

_sequence = itertools.count(1)


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers",
        "known_defect: test pins down current behaviour that is a known defect",
    )


def _person(model, first_name: str):
    n = next(_sequence)
    return model(
        first_name=f"{first_name}{n}",
        last_name="Moraes",
        email=f"{first_name.lower()}{n}@school.test",
        phone="81984458436",
    )


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_people(db):
    """Persist `count` people of `model` and return their ids."""

    def _make(model, count: int, first_name: str | None = None) -> list[int]:
        people = [_person(model, first_name or model.__name__) for _ in range(count)]
        db.add_all(people)
        db.commit()
        return [p.id for p in people]

    return _make


@pytest.fixture
def make_students(make_people):
    def _make(count: int) -> list[int]:
        return make_people(Student, count, "Gabriel")

    return _make


@pytest.fixture
def make_staff(make_people):
    """Persist a fresh staff set: 1 coordinator, 1 scrum master, `instructors` instructors."""

    def _make(instructors: int = 3) -> dict[str, list[int]]:
        return {
            "coordinator_ids": make_people(Coordinator, 1),
            "scrum_master_ids": make_people(ScrumMaster, 1),
            "instructor_ids": make_people(Instructor, instructors),
        }

    return _make


@pytest.fixture
def make_classroom(db, make_staff):
    """Create a WAITING classroom with fresh staff through the lifecycle service."""

    def _make(name: str = "Turma Python"):
        result = classroom_service.create_classroom(db, name=name, **make_staff())
        assert result.ok, result.error
        return result.value

    return _make
