"""
Cascading pickers.
Department, then a role in it, then an employee holding that role.
Each returns None when the user picks the "none available" entry.
"""
from employee_tracker.models import queries
from employee_tracker.utils import prompts

NO_DEPARTMENTS = "No departments available"
NO_ROLES = "No roles available"
NO_EMPLOYEES = "No employees available"
NO_MANAGER = "None"


def choose_department(session, purpose):
    departments = queries.all_departments(session)
    choices = [(d.name, d) for d in departments] or [(NO_DEPARTMENTS, None)]
    return prompts.select(f"{purpose}: select a department", choices)


def choose_role(session, purpose, department_id=None):
    if department_id is None:
        department = choose_department(session, purpose)
        if department is None:
            return None
        department_id = department.id
    roles = queries.roles_in_department(session, department_id)
    choices = [(r.title, r) for r in roles] or [(NO_ROLES, None)]
    return prompts.select(f"{purpose}: select a role", choices)


def choose_employee(session, purpose, role_id=None):
    if role_id is None:
        role = choose_role(session, purpose)
        if role is None:
            return None
        role_id = role.id
    employees = queries.employees_in_role(session, role_id)
    choices = [(e.full_name, e) for e in employees] or [(NO_EMPLOYEES, None)]
    return prompts.select(f"{purpose}: select an employee", choices)


def list_manager_candidates(session, department_id, exclude_employee_id=None):
    """Employees of the department as (label, id) choices, ending with "None"."""
    candidates = queries.employees_in_department(session, department_id, exclude_employee_id)
    return [(e.full_name, e.id) for e in candidates] + [(NO_MANAGER, None)]


def choose_manager(session, purpose, department_id, exclude_employee_id=None):
    choices = list_manager_candidates(session, department_id, exclude_employee_id)
    return prompts.select(f"{purpose}: select a manager", choices, default=NO_MANAGER)
