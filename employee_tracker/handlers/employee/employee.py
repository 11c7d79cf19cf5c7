import logging
from employee_tracker.handlers.selection.selection import (
    choose_department,
    choose_employee,
    choose_manager,
    choose_role,
)
from employee_tracker.models import queries
from employee_tracker.models.employee import Employee
from employee_tracker.utils import prompts
from employee_tracker.utils.custom_responses import print_info, print_success, print_table
from employee_tracker.utils.exceptions_handlers import handle_exceptions

logger = logging.getLogger(__name__)


# Views

@handle_exceptions
def view_all_employees(session):
    rows = queries.employee_rows(session)
    print_table("Employees", rows, "There are no employees yet.")


@handle_exceptions
def view_employees_by_department(session):
    department = choose_department(session, "View employees by department")
    if department is None:
        print_info("There are no departments yet.")
        return
    rows = queries.employee_rows(session, department_id=department.id)
    print_table(f"Employees in {department.name}", rows, f"There are no employees in {department.name} yet.")


@handle_exceptions
def view_employees_by_role(session):
    role = choose_role(session, "View employees by role")
    if role is None:
        print_info("There are no roles to view.")
        return
    rows = queries.employee_rows(session, role_id=role.id)
    print_table(f"Employees with role {role.title}", rows, f"No employees hold the role {role.title} yet.")


@handle_exceptions
def view_employees_by_manager(session):
    manager = choose_employee(session, "View employees by manager")
    if manager is None:
        print_info("There are no employees to view.")
        return
    rows = queries.employee_rows(session, manager_id=manager.id)
    print_table(f"Employees managed by {manager.full_name}", rows, f"{manager.full_name} does not manage anyone.")


# Mutations

@handle_exceptions
def add_employee(session):
    role = choose_role(session, "Add an employee")
    if role is None:
        print_info("There are no roles to add an employee to. Add a role first.")
        return

    first_name = prompts.ask_text("What is the employee's first name?", validate=prompts.require_text("First name"))
    last_name = prompts.ask_text("What is the employee's last name?", validate=prompts.require_text("Last name"))
    manager_id = choose_manager(session, "Add an employee", role.department_id)

    employee = Employee(first_name=first_name, last_name=last_name, role_id=role.id, manager_id=manager_id)
    session.add(employee)
    session.commit()
    logger.info("Added employee %s", employee.as_dict())
    print_success(f"{employee.full_name} was successfully added!")


@handle_exceptions
def update_employee_role(session):
    employee = choose_employee(session, "Update an employee's role")
    if employee is None:
        print_info("There are no employees to update.")
        return
    new_role = choose_role(session, f"New role for {employee.full_name}")
    if new_role is None:
        print_info("There are no roles to move the employee to.")
        return

    # The manager reference is kept as is, even across departments.
    employee.role_id = new_role.id
    session.commit()
    logger.info("Moved employee %s to role %s", employee.id, new_role.id)
    print_success(f"{employee.full_name} now holds the role '{new_role.title}'.")

    manager = employee.manager
    if manager is not None and manager.role.department_id != new_role.department_id:
        print_info(
            f"Note: {employee.full_name}'s manager {manager.full_name} works in another department. "
            "Use 'Update an employee's manager' to change it."
        )


@handle_exceptions
def update_employee_manager(session):
    role = choose_role(session, "Update an employee's manager")
    if role is None:
        print_info("There are no roles to choose from.")
        return
    employee = choose_employee(session, "Update an employee's manager", role_id=role.id)
    if employee is None:
        print_info(f"No employees hold the role '{role.title}'.")
        return
    manager_id = choose_manager(
        session,
        f"New manager for {employee.full_name}",
        role.department_id,
        exclude_employee_id=employee.id,
    )

    employee.manager_id = manager_id
    session.commit()
    logger.info("Set manager of employee %s to %s", employee.id, manager_id)
    if manager_id is None:
        print_success(f"{employee.full_name} no longer has a manager.")
    else:
        print_success(f"{employee.full_name} is now managed by {employee.manager.full_name}.")


@handle_exceptions
def delete_employee(session):
    employee = choose_employee(session, "Delete an employee")
    if employee is None:
        print_info("There are no employees to delete.")
        return
    if not prompts.confirm(f"Are you sure you want to delete {employee.full_name}?"):
        print_info("The employee was not deleted.")
        return

    details = employee.as_dict()
    cleared = queries.clear_manager_references(session, employee.id)
    session.delete(employee)
    session.commit()
    logger.info("Deleted employee %s, cleared manager on %d report(s)", details, cleared)
    print_success(f"{details['first_name']} {details['last_name']} was successfully deleted!")
