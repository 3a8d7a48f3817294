from fastapi import FastAPI

from school_service.api.routes_classrooms import router as classrooms_router
from school_service.api.routes_staff import router as staff_router
from school_service.api.routes_students import router as students_router
from school_service.core.logging import configure_logging
from school_service.db import Base, engine
from school_service import models  # noqa: F401  registers tables on Base

configure_logging()

app = FastAPI(title="School Classroom Service")
Base.metadata.create_all(bind=engine)


app.include_router(classrooms_router)
app.include_router(students_router)
app.include_router(staff_router)


@app.get("/health")
def health_check():
    return {"status": "ok"}
