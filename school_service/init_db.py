# school_service/init_db.py
import logging

from school_service.core.logging import configure_logging
from school_service.db import Base, engine
from school_service import models  # noqa: F401

logger = logging.getLogger(__name__)


def init_db():
    logger.info("Creating tables in database...")
    Base.metadata.create_all(bind=engine)
    logger.info("Done.")


if __name__ == "__main__":
    configure_logging()
    init_db()
