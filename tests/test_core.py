"""Tests for configuration, logging setup, result objects and repositories."""
import logging

from school_service.core.config import settings
from school_service.core.logging import configure_logging
from school_service.models import Student
from school_service.services.repositories import Repository
from school_service.services.results import ErrorKind, Result


def test_classroom_limits_defaults():
    assert settings.CLASSROOM_MIN_INSTRUCTORS == 3
    assert settings.CLASSROOM_MIN_STUDENTS == 15
    assert settings.CLASSROOM_MAX_STUDENTS == 30


def test_tests_run_on_sqlite():
    assert settings.DATABASE_URL.startswith("sqlite")


def test_configure_logging_is_idempotent():
    configure_logging()
    handlers = list(logging.getLogger().handlers)

    configure_logging()

    assert logging.getLogger().handlers == handlers


def test_failure_result_to_dict():
    result = Result.failure(ErrorKind.NOT_FOUND, "Students not found for IDs: [4, 5]", [4, 5])

    assert not result.ok
    assert result.value is None
    assert result.error.to_dict() == {
        "error": "not_found",
        "message": "Students not found for IDs: [4, 5]",
        "ids": [4, 5],
    }


def test_success_result():
    result = Result.success("value")

    assert result.ok
    assert result.value == "value"
    assert result.error is None


class TestRepository:
    def test_save_assigns_id(self, db):
        student = Student(first_name="Gabriel", last_name="Moraes", email="g@moraes", phone="1")

        saved = Repository(Student, db).save(student)

        assert saved.id is not None

    def test_find_all_by_id_drops_unknown_ids(self, db, make_students):
        ids = make_students(3)

        found = Repository(Student, db).find_all_by_id([ids[2], 999, ids[0]])

        assert [s.id for s in found] == [ids[0], ids[2]]

    def test_find_all_by_id_empty(self, db):
        assert Repository(Student, db).find_all_by_id([]) == []

    def test_find_by_id_missing(self, db):
        assert Repository(Student, db).find_by_id(1) is None
