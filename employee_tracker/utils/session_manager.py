import logging
from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from employee_tracker.config.config import SQLALCHEMY_DATABASE_URI
from employee_tracker.models.base import Base
from employee_tracker.utils.exceptions_handlers import DatabaseConnectionError
from employee_tracker.utils.helpers import safe_close

# Imported for their side effect of registering the tables on Base.metadata
from employee_tracker.models import department, role, employee  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(engine):
    """Create any missing tables."""
    Base.metadata.create_all(engine)


def connect(database_uri=SQLALCHEMY_DATABASE_URI, create_tables=True):
    """Open the single session the application works with.

    Raises DatabaseConnectionError when the first round-trip fails.
    """
    engine = create_engine(database_uri, pool_pre_ping=True)
    Session = sessionmaker(bind=engine)
    session = Session()
    try:
        session.execute(text("SELECT 1"))
        if create_tables:
            init_db(engine)
    except SQLAlchemyError as e:
        safe_close(session)
        engine.dispose()
        raise DatabaseConnectionError(f"Could not connect to the database: {e}") from e
    logger.info("Connected to %s", engine.url.render_as_string(hide_password=True))
    return session


def close(session):
    """Release the session and the engine behind it."""
    bind = session.get_bind()
    safe_close(session)
    bind.dispose()
    logger.info("Database connection closed")
