"""
Menu interface.
Main menu with Create, Read, Update and Delete sub-menus. Actions are enum
members routed through DISPATCH; after an action its sub-menu is shown again.
"""
from enum import Enum
from employee_tracker.handlers.department import department
from employee_tracker.handlers.employee import employee
from employee_tracker.handlers.role import role
from employee_tracker.utils import prompts


class Menu(Enum):
    MAIN = "What would you like to do?"
    CREATE = "What would you like to create?"
    READ = "What would you like to view?"
    UPDATE = "What would you like to update?"
    DELETE = "What would you like to delete?"


class Action(Enum):
    ADD_DEPARTMENT = "Add a department"
    ADD_ROLE = "Add a role"
    ADD_EMPLOYEE = "Add an employee"
    VIEW_DEPARTMENTS = "View all departments"
    VIEW_ROLES = "View all roles"
    VIEW_EMPLOYEES = "View all employees"
    VIEW_ROLES_BY_DEPARTMENT = "View roles by department"
    VIEW_EMPLOYEES_BY_DEPARTMENT = "View employees by department"
    VIEW_EMPLOYEES_BY_ROLE = "View employees by role"
    VIEW_EMPLOYEES_BY_MANAGER = "View employees by manager"
    VIEW_DEPARTMENT_BUDGET = "View department budget utilization"
    UPDATE_EMPLOYEE_ROLE = "Update an employee's role"
    UPDATE_EMPLOYEE_MANAGER = "Update an employee's manager"
    DELETE_DEPARTMENT = "Delete a department"
    DELETE_ROLE = "Delete a role"
    DELETE_EMPLOYEE = "Delete an employee"
    GO_BACK = "Go back"
    QUIT = "Quit"


MAIN_MENU_CHOICES = [
    ("Create", Menu.CREATE),
    ("Read", Menu.READ),
    ("Update", Menu.UPDATE),
    ("Delete", Menu.DELETE),
    (Action.QUIT.value, Action.QUIT),
]

SUB_MENU_ACTIONS = {
    Menu.CREATE: [Action.ADD_DEPARTMENT, Action.ADD_ROLE, Action.ADD_EMPLOYEE],
    Menu.READ: [
        Action.VIEW_DEPARTMENTS,
        Action.VIEW_ROLES,
        Action.VIEW_EMPLOYEES,
        Action.VIEW_ROLES_BY_DEPARTMENT,
        Action.VIEW_EMPLOYEES_BY_DEPARTMENT,
        Action.VIEW_EMPLOYEES_BY_ROLE,
        Action.VIEW_EMPLOYEES_BY_MANAGER,
        Action.VIEW_DEPARTMENT_BUDGET,
    ],
    Menu.UPDATE: [Action.UPDATE_EMPLOYEE_ROLE, Action.UPDATE_EMPLOYEE_MANAGER],
    Menu.DELETE: [Action.DELETE_DEPARTMENT, Action.DELETE_ROLE, Action.DELETE_EMPLOYEE],
}

DISPATCH = {
    Action.ADD_DEPARTMENT: department.add_department,
    Action.ADD_ROLE: role.add_role,
    Action.ADD_EMPLOYEE: employee.add_employee,
    Action.VIEW_DEPARTMENTS: department.view_all_departments,
    Action.VIEW_ROLES: role.view_all_roles,
    Action.VIEW_EMPLOYEES: employee.view_all_employees,
    Action.VIEW_ROLES_BY_DEPARTMENT: role.view_roles_by_department,
    Action.VIEW_EMPLOYEES_BY_DEPARTMENT: employee.view_employees_by_department,
    Action.VIEW_EMPLOYEES_BY_ROLE: employee.view_employees_by_role,
    Action.VIEW_EMPLOYEES_BY_MANAGER: employee.view_employees_by_manager,
    Action.VIEW_DEPARTMENT_BUDGET: department.view_department_budget,
    Action.UPDATE_EMPLOYEE_ROLE: employee.update_employee_role,
    Action.UPDATE_EMPLOYEE_MANAGER: employee.update_employee_manager,
    Action.DELETE_DEPARTMENT: department.delete_department,
    Action.DELETE_ROLE: role.delete_role,
    Action.DELETE_EMPLOYEE: employee.delete_employee,
}


def show_menu(session, menu):
    """Show one menu and return the menu to show next, or None to quit."""
    if menu is Menu.MAIN:
        choice = prompts.select(menu.value, MAIN_MENU_CHOICES)
        return None if choice is Action.QUIT else choice

    actions = SUB_MENU_ACTIONS[menu] + [Action.GO_BACK]
    action = prompts.select(menu.value, [(a.value, a) for a in actions])
    if action is Action.GO_BACK:
        return Menu.MAIN
    DISPATCH[action](session=session)
    return menu


def run(session, start=Menu.MAIN):
    """Drive the menus until the user quits."""
    menu = start
    while menu is not None:
        menu = show_menu(session, menu)
