import logging
from employee_tracker.handlers.selection.selection import choose_department, choose_role
from employee_tracker.models import queries
from employee_tracker.models.role import Role
from employee_tracker.utils import prompts
from employee_tracker.utils.custom_responses import print_info, print_success, print_table
from employee_tracker.utils.exceptions_handlers import ValidationError, handle_exceptions

logger = logging.getLogger(__name__)


@handle_exceptions
def view_all_roles(session):
    rows = queries.role_rows(session)
    print_table("Roles", rows, "There are no roles yet.")


@handle_exceptions
def view_roles_by_department(session):
    department = choose_department(session, "View roles by department")
    if department is None:
        print_info("There are no departments yet.")
        return
    rows = queries.role_rows(session, department_id=department.id)
    print_table(f"Roles in {department.name}", rows, f"There are no roles in {department.name} yet.")


@handle_exceptions
def add_role(session):
    department = choose_department(session, "Add a role")
    if department is None:
        print_info("There are no departments yet. Add a department first.")
        return

    existing = set(queries.role_titles(session, department.id))
    check_title = prompts.require_text("Role title")

    def validate(title):
        check_title(title)
        if title in existing:
            raise ValidationError(f"The role '{title}' already exists in {department.name}")

    title = prompts.ask_text("What is the new role's title?", validate=validate)
    salary = prompts.ask_number("What is the new role's salary?", minimum=0)

    role = Role(title=title, salary=salary, department_id=department.id)
    session.add(role)
    session.commit()
    logger.info("Added role %s", role.as_dict())
    print_success(f"The role '{title}' was successfully added to {department.name}!")


@handle_exceptions
def delete_role(session):
    role = choose_role(session, "Delete a role")
    if role is None:
        print_info("There are no roles to delete.")
        return
    employee_count = queries.count_employees(session, role.id)
    if employee_count:
        logger.info("Refused to delete role %s: %d employee(s) hold it", role.id, employee_count)
        print_info(
            f"The role '{role.title}' is still held by {employee_count} employee(s). "
            "Reassign or delete them before deleting the role."
        )
        return
    if not prompts.confirm(f"Are you sure you want to delete the role '{role.title}'?"):
        print_info("The role was not deleted.")
        return
    details = role.as_dict()
    session.delete(role)
    session.commit()
    logger.info("Deleted role %s", details)
    print_success(f"The role '{details['title']}' was successfully deleted!")
