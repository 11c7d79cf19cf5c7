from employee_tracker.models import queries
from employee_tracker.models.department import Department
from employee_tracker.models.employee import Employee
from employee_tracker.models.role import Role


def test_department_rows_empty(session):
    assert queries.department_rows(session) == []


def test_role_rows_join_department_name(session, org):
    rows = queries.role_rows(session, department_id=org["sales"].id)
    assert [tuple(row) for row in rows] == [(org["salesperson"].id, "Salesperson", 80000, "Sales")]
    assert rows[0]._fields == ("ID", "Title", "Salary", "Department")


def test_employee_rows_filters(session, org):
    assert [row.ID for row in queries.employee_rows(session, manager_id=org["ashley"].id)] == [org["kevin"].id]
    assert queries.employee_rows(session, department_id=org["sales"].id) == []
    assert len(queries.employee_rows(session, role_id=org["lead"].id)) == 1


def test_count_guards(session, org):
    assert queries.count_roles(session, org["engineering"].id) == 2
    assert queries.count_employees(session, org["salesperson"].id) == 0


def test_department_budget_counts_every_filled_position(session):
    dept = Department(name="Ops")
    session.add(dept)
    session.flush()
    first = Role(title="Analyst", salary=50000, department_id=dept.id)
    second = Role(title="Planner", salary=60000, department_id=dept.id)
    session.add_all([first, second])
    session.flush()
    session.add_all([
        Employee(first_name="A", last_name="One", role_id=first.id),
        Employee(first_name="B", last_name="Two", role_id=second.id),
    ])
    session.commit()
    assert queries.department_budget(session, dept.id) == 110000

    # Same role twice counts twice
    session.add(Employee(first_name="C", last_name="Three", role_id=first.id))
    session.commit()
    assert queries.department_budget(session, dept.id) == 160000


def test_department_budget_empty_department(session, org):
    assert queries.department_budget(session, org["sales"].id) == 0


def test_clear_manager_references(session, org):
    assert queries.clear_manager_references(session, org["ashley"].id) == 1
    session.commit()
    assert session.get(Employee, org["kevin"].id).manager_id is None
