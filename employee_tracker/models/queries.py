"""
Data access for the tracker tables.
Every function takes the session explicitly and returns plain rows or models.
"""
from sqlalchemy import func
from sqlalchemy.orm import aliased
from employee_tracker.models.department import Department
from employee_tracker.models.role import Role
from employee_tracker.models.employee import Employee


def department_names(session):
    return [name for (name,) in session.query(Department.name).all()]


def role_titles(session, department_id):
    query = session.query(Role.title).filter(Role.department_id == department_id)
    return [title for (title,) in query.all()]


# Picker sources

def all_departments(session):
    return session.query(Department).order_by(Department.name).all()


def roles_in_department(session, department_id):
    return (
        session.query(Role)
        .filter(Role.department_id == department_id)
        .order_by(Role.title)
        .all()
    )


def employees_in_role(session, role_id):
    return (
        session.query(Employee)
        .filter(Employee.role_id == role_id)
        .order_by(Employee.first_name, Employee.last_name)
        .all()
    )


def employees_in_department(session, department_id, exclude_employee_id=None):
    query = (
        session.query(Employee)
        .join(Role, Employee.role_id == Role.id)
        .filter(Role.department_id == department_id)
    )
    if exclude_employee_id is not None:
        query = query.filter(Employee.id != exclude_employee_id)
    return query.order_by(Employee.first_name, Employee.last_name).all()


# Display projections

def department_rows(session):
    return (
        session.query(Department.id.label("ID"), Department.name.label("Name"))
        .order_by(Department.id)
        .all()
    )


def role_rows(session, department_id=None):
    query = (
        session.query(
            Role.id.label("ID"),
            Role.title.label("Title"),
            Role.salary.label("Salary"),
            Department.name.label("Department"),
        )
        .outerjoin(Department, Role.department_id == Department.id)
    )
    if department_id is not None:
        query = query.filter(Role.department_id == department_id)
    return query.order_by(Role.id).all()


def employee_rows(session, department_id=None, role_id=None, manager_id=None):
    manager = aliased(Employee)
    query = (
        session.query(
            Employee.id.label("ID"),
            Employee.first_name.label("First Name"),
            Employee.last_name.label("Last Name"),
            Role.title.label("Title"),
            Department.name.label("Department"),
            Role.salary.label("Salary"),
            (manager.first_name + " " + manager.last_name).label("Manager"),
        )
        .outerjoin(Role, Employee.role_id == Role.id)
        .outerjoin(Department, Role.department_id == Department.id)
        .outerjoin(manager, Employee.manager_id == manager.id)
    )
    if department_id is not None:
        query = query.filter(Role.department_id == department_id)
    if role_id is not None:
        query = query.filter(Employee.role_id == role_id)
    if manager_id is not None:
        query = query.filter(Employee.manager_id == manager_id)
    return query.order_by(Employee.id).all()


# Deletion guards

def count_roles(session, department_id):
    return session.query(func.count(Role.id)).filter(Role.department_id == department_id).scalar()


def count_employees(session, role_id):
    return session.query(func.count(Employee.id)).filter(Employee.role_id == role_id).scalar()


def department_budget(session, department_id):
    """Sum of the salary of every filled position in the department."""
    total = (
        session.query(func.sum(Role.salary))
        .select_from(Employee)
        .join(Role, Employee.role_id == Role.id)
        .filter(Role.department_id == department_id)
        .scalar()
    )
    return total or 0


def clear_manager_references(session, employee_id):
    return (
        session.query(Employee)
        .filter(Employee.manager_id == employee_id)
        .update({Employee.manager_id: None}, synchronize_session="fetch")
    )
