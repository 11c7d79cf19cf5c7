"""
Create the schema and load a small sample organisation.
Safe to run repeatedly: rows are looked up by name before they are inserted.

    python -m employee_tracker.seed
"""
import logging
import sys
from employee_tracker.config.config import SQLALCHEMY_DATABASE_URI
from employee_tracker.models.department import Department
from employee_tracker.models.employee import Employee
from employee_tracker.models.role import Role
from employee_tracker.utils import session_manager
from employee_tracker.utils.custom_responses import print_error
from employee_tracker.utils.exceptions_handlers import DatabaseConnectionError

logger = logging.getLogger(__name__)

DEPARTMENTS = ["Engineering", "Finance", "Legal", "Sales"]

# (title, salary, department)
ROLES = [
    ("Lead Engineer", 150000, "Engineering"),
    ("Software Engineer", 120000, "Engineering"),
    ("Account Manager", 160000, "Finance"),
    ("Accountant", 125000, "Finance"),
    ("Legal Team Lead", 250000, "Legal"),
    ("Lawyer", 190000, "Legal"),
    ("Sales Lead", 100000, "Sales"),
    ("Salesperson", 80000, "Sales"),
]

# (first name, last name, role title, manager full name)
EMPLOYEES = [
    ("Ashley", "Rodriguez", "Lead Engineer", None),
    ("Kevin", "Tupik", "Software Engineer", "Ashley Rodriguez"),
    ("Kunal", "Singh", "Account Manager", None),
    ("Malia", "Brown", "Accountant", "Kunal Singh"),
    ("Sarah", "Lourd", "Legal Team Lead", None),
    ("Tom", "Allen", "Lawyer", "Sarah Lourd"),
    ("John", "Doe", "Sales Lead", None),
    ("Mike", "Chan", "Salesperson", "John Doe"),
]


def seed_departments(session):
    departments = {}
    for name in DEPARTMENTS:
        dept = session.query(Department).filter_by(name=name).first()
        if not dept:
            dept = Department(name=name)
            session.add(dept)
        departments[name] = dept
    session.commit()
    return departments


def seed_roles(session, departments):
    roles = {}
    for title, salary, department_name in ROLES:
        department = departments[department_name]
        role = session.query(Role).filter_by(title=title, department_id=department.id).first()
        if not role:
            role = Role(title=title, salary=salary, department_id=department.id)
            session.add(role)
        else:
            role.salary = salary  # Update salary if needed
        roles[title] = role
    session.commit()
    return roles


def seed_employees(session, roles):
    employees = {}
    for first_name, last_name, title, manager_name in EMPLOYEES:
        role_id = roles[title].id
        emp = session.query(Employee).filter_by(first_name=first_name, last_name=last_name).first()
        if not emp:
            emp = Employee(first_name=first_name, last_name=last_name, role_id=role_id)
            session.add(emp)
        else:
            emp.role_id = role_id
        # Managers are listed before their reports
        emp.manager = employees[manager_name] if manager_name else None
        employees[f"{first_name} {last_name}"] = emp
        session.flush()
    session.commit()
    return employees


def seed(session):
    departments = seed_departments(session)
    roles = seed_roles(session, departments)
    employees = seed_employees(session, roles)
    logger.info(
        "Seeded %d departments, %d roles, %d employees",
        len(departments), len(roles), len(employees),
    )
    return employees


def main(database_uri=SQLALCHEMY_DATABASE_URI):
    logging.basicConfig(level=logging.INFO)
    print("⚙️ Setting up database and seeding data...")
    try:
        session = session_manager.connect(database_uri)
    except DatabaseConnectionError as e:
        logger.error(e)
        print_error("Could not connect to the database. Check the MYSQL_* settings and try again.")
        return 1
    try:
        seed(session)
    finally:
        session_manager.close(session)
    print("✅ Successfully seeded departments, roles and employees!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
