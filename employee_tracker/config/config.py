"""
Application configuration.
Connection settings are read from the environment (or a .env file).
"""
import os
from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()

MYSQL_HOST = os.getenv("MYSQL_HOST", "localhost")
MYSQL_PORT = int(os.getenv("MYSQL_PORT", "3306"))
MYSQL_USER = os.getenv("MYSQL_USER", "root")
MYSQL_PASSWORD = os.getenv("MYSQL_PASSWORD", "password")
DATABASE_NAME = "employee_tracker_db"

# Full URL override, e.g. sqlite:///tracker.db for a local run without MySQL
DATABASE_URL = os.getenv("EMPLOYEE_TRACKER_DATABASE_URL")

if DATABASE_URL:
    SQLALCHEMY_DATABASE_URI = DATABASE_URL
else:
    SQLALCHEMY_DATABASE_URI = URL.create(
        "mysql+mysqlconnector",
        username=MYSQL_USER,
        password=MYSQL_PASSWORD,
        host=MYSQL_HOST,
        port=MYSQL_PORT,
        database=DATABASE_NAME,
    )

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.getenv("LOG_FILE")
