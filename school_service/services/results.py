"""
Explicit result objects returned by the service layer.

Service operations never raise for business-rule failures. They return a
``Result`` carrying either the value or a ``ServiceError`` that names the
error kind, a human-readable message and the offending ids.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, enum.Enum):
    NOT_FOUND = "not_found"
    INVALID_STATUS = "invalid_status"
    INSUFFICIENT_INSTRUCTORS = "insufficient_instructors"
    INSUFFICIENT_STUDENTS = "insufficient_students"
    MAXIMUM_STUDENTS_EXCEEDED = "maximum_students_exceeded"
    ALREADY_ASSIGNED = "already_assigned"


@dataclass(frozen=True)
class ServiceError:
    """A business-rule failure.

    Attributes:
        kind: Which rule failed.
        message: Text suitable for returning to the caller.
        ids: Identifiers the failure refers to (missing ids, conflicting student, ...).
    """

    kind: ErrorKind
    message: str
    ids: tuple[int, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "error": self.kind.value,
            "message": self.message,
            "ids": list(self.ids),
        }


@dataclass(frozen=True)
class Result(Generic[T]):
    value: T | None = None
    error: ServiceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, ids=()) -> "Result[T]":
        return cls(error=ServiceError(kind=kind, message=message, ids=tuple(ids)))
