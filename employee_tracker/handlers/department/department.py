import logging
from employee_tracker.handlers.selection.selection import choose_department
from employee_tracker.models import queries
from employee_tracker.models.department import Department
from employee_tracker.utils import prompts
from employee_tracker.utils.custom_responses import print_info, print_success, print_table
from employee_tracker.utils.exceptions_handlers import ValidationError, handle_exceptions
from employee_tracker.utils.helpers import format_currency

logger = logging.getLogger(__name__)


@handle_exceptions
def view_all_departments(session):
    rows = queries.department_rows(session)
    print_table("Departments", rows, "There are no departments yet.")


@handle_exceptions
def add_department(session):
    existing = set(queries.department_names(session))
    check_name = prompts.require_text("Department name")

    def validate(name):
        check_name(name)
        if name in existing:
            raise ValidationError("That department already exists")

    name = prompts.ask_text("What is the new department's name?", validate=validate)
    department = Department(name=name)
    session.add(department)
    session.commit()
    logger.info("Added department %s", department.as_dict())
    print_success(f"The department '{name}' was successfully added!")


@handle_exceptions
def view_department_budget(session):
    department = choose_department(session, "View budget utilization")
    if department is None:
        print_info("There are no departments yet.")
        return
    total = queries.department_budget(session, department.id)
    print_info(f"Total utilized budget of {department.name}: {format_currency(total)}")
    return total


@handle_exceptions
def delete_department(session):
    department = choose_department(session, "Delete a department")
    if department is None:
        print_info("There are no departments to delete.")
        return
    role_count = queries.count_roles(session, department.id)
    if role_count:
        logger.info("Refused to delete department %s: %d role(s) remain", department.id, role_count)
        print_info(
            f"The department '{department.name}' still has {role_count} role(s). "
            "Delete or move them before deleting the department."
        )
        return
    if not prompts.confirm(f"Are you sure you want to delete the department '{department.name}'?"):
        print_info("The department was not deleted.")
        return
    details = department.as_dict()
    session.delete(department)
    session.commit()
    logger.info("Deleted department %s", details)
    print_success(f"The department '{details['name']}' was successfully deleted!")
