from fastapi import HTTPException

from school_service.services.results import ErrorKind, Result, ServiceError

STATUS_CODES = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_STATUS: 409,
    ErrorKind.ALREADY_ASSIGNED: 409,
    ErrorKind.INSUFFICIENT_INSTRUCTORS: 400,
    ErrorKind.INSUFFICIENT_STUDENTS: 400,
    ErrorKind.MAXIMUM_STUDENTS_EXCEEDED: 400,
}


def to_http_exception(error: ServiceError) -> HTTPException:
    return HTTPException(status_code=STATUS_CODES[error.kind], detail=error.to_dict())


def unwrap(result: Result):
    """Return the result's value, or raise the HTTP error matching its failure."""
    if not result.ok:
        raise to_http_exception(result.error)
    return result.value
