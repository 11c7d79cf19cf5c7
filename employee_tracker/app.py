import logging
import sys
from employee_tracker.config.config import LOG_FILE, LOG_LEVEL, SQLALCHEMY_DATABASE_URI
from employee_tracker.menus import menu
from employee_tracker.utils import session_manager
from employee_tracker.utils.custom_responses import console, print_error
from employee_tracker.utils.exceptions_handlers import DatabaseConnectionError

logger = logging.getLogger(__name__)


def configure_logging(level=LOG_LEVEL, log_file=LOG_FILE):
    logging.basicConfig(
        level=level,
        filename=log_file,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(database_uri=SQLALCHEMY_DATABASE_URI):
    configure_logging()
    try:
        session = session_manager.connect(database_uri)
    except DatabaseConnectionError as e:
        logger.error(e)
        print_error("Could not connect to the database. Check the MYSQL_* settings and try again.")
        return 1

    console.print("[bold magenta]Employee Tracker[/bold magenta]")
    try:
        menu.run(session)
    except (EOFError, KeyboardInterrupt):
        # Ctrl-D / Ctrl-C at a prompt quits like the Quit entry
        console.print()
        logger.info("Input closed, quitting")
    finally:
        session_manager.close(session)
    console.print("Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
