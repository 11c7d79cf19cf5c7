from sqlalchemy.exc import IntegrityError, SQLAlchemyError
import logging
from functools import wraps
from employee_tracker.utils.custom_responses import print_error

logger = logging.getLogger(__name__)


class TrackerError(Exception):
    """Base class for the tracker's own errors."""


class DatabaseConnectionError(TrackerError):
    """The database could not be reached at startup."""


class ValidationError(TrackerError):
    """User input was rejected; the prompt asks again."""


def handle_exceptions(func):
    """Keep a failing action from ending the program.

    Errors are logged, the session is rolled back, and the wrapped action
    returns None so the caller shows its menu again.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        session = kwargs.get("session")  # Get session from function arguments if passed
        if session is None and args:
            session = args[0]

        try:
            return func(*args, **kwargs)

        except IntegrityError as e:
            if session:
                session.rollback()
            logger.error(f"Integrity error in {func.__name__}: {e.orig}")
            print_error("A database constraint was violated. No changes were saved.")

        except SQLAlchemyError as e:
            if session:
                session.rollback()  # Rollback the session for general database errors
            logger.error(f"Database error in {func.__name__}: {e}")
            print_error("A database error occurred. Please try again.")

        except Exception as e:
            if session:
                session.rollback()
            logger.error(f"Unexpected error in {func.__name__}: {e}", exc_info=True)
            print_error(f"An unexpected error occurred: {e}")

        return None

    return wrapper
