# school_service/db.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from school_service.core.config import settings

DATABASE_URL = settings.DATABASE_URL


def _engine_options(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {}
    # SQLite: one shared connection so an in-memory database survives across sessions
    return {
        "connect_args": {"check_same_thread": False},
        "poolclass": StaticPool,
    }


engine = create_engine(
    DATABASE_URL,
    future=True,
    **_engine_options(DATABASE_URL),
)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
