from employee_tracker.handlers.department import department
from employee_tracker.models import queries
from employee_tracker.models.department import Department


def test_view_all_departments_empty_database(session, answers, output):
    department.view_all_departments(session=session)
    assert "There are no departments yet." in output()


def test_view_all_departments_lists_rows(session, answers, output, org):
    department.view_all_departments(session=session)
    text = output()
    assert "Engineering" in text
    assert "Sales" in text


def test_add_department(session, answers, output):
    answers.feed("  Legal  ")
    department.add_department(session=session)
    assert queries.department_names(session) == ["Legal"]
    assert "successfully added" in output()


def test_add_department_reprompts_on_duplicate_name(session, answers, output, org):
    answers.feed("Sales", "", "Marketing")
    department.add_department(session=session)
    text = output()
    assert "That department already exists" in text
    assert "Department name is required" in text
    assert sorted(queries.department_names(session)) == ["Engineering", "Marketing", "Sales"]


def test_add_department_name_match_is_case_sensitive(session, answers, org):
    answers.feed("sales")
    department.add_department(session=session)
    assert session.query(Department).filter_by(name="sales").count() == 1


def test_delete_department_refused_while_roles_remain(session, answers, output, org):
    answers.feed("Sales")
    department.delete_department(session=session)
    assert "still has 1 role(s)" in output()
    assert session.get(Department, org["sales"].id) is not None


def test_delete_department_without_roles(session, answers, output):
    session.add(Department(name="Legal"))
    session.commit()
    answers.feed("Legal", True)
    department.delete_department(session=session)
    assert queries.department_names(session) == []
    assert "successfully deleted" in output()


def test_delete_department_cancelled(session, answers, output):
    session.add(Department(name="Legal"))
    session.commit()
    answers.feed("Legal", False)
    department.delete_department(session=session)
    assert queries.department_names(session) == ["Legal"]
    assert "was not deleted" in output()


def test_delete_department_with_no_departments(session, answers, output):
    answers.feed("No departments available")
    department.delete_department(session=session)
    assert "no departments to delete" in output()


def test_department_budget_sums_filled_positions(session, answers, output, org):
    answers.feed("Engineering")
    assert department.view_department_budget(session=session) == 270000
    assert "$270,000.00" in output()


def test_department_budget_without_employees_is_zero(session, answers, output, org):
    answers.feed("Sales")
    assert department.view_department_budget(session=session) == 0
    assert "$0.00" in output()
