from collections import deque

import pytest

from employee_tracker.models.department import Department
from employee_tracker.models.employee import Employee
from employee_tracker.models.role import Role
from employee_tracker.utils import custom_responses, prompts, session_manager


@pytest.fixture
def session():
    """A session on a fresh in-memory SQLite database with the schema created."""
    session = session_manager.connect("sqlite://")
    yield session
    session_manager.close(session)


class ScriptedPrompts:
    """Answers the interactive prompts from a queue.

    List prompts are answered by label; text prompts go through the real
    validation loop so rejected answers are reprompted.
    """

    def __init__(self):
        self.answers = deque()
        self.messages = []

    def feed(self, *answers):
        self.answers.extend(answers)

    def _next(self, message):
        self.messages.append(message)
        assert self.answers, f"Unexpected prompt: {message!r}"
        return self.answers.popleft()

    def select(self, message, choices, default=None):
        label = self._next(message)
        for choice_label, value in choices:
            if choice_label == label:
                return value
        offered = [choice_label for choice_label, _ in choices]
        raise AssertionError(f"{label!r} is not offered by {message!r}: {offered}")

    def ask(self, message, **kwargs):
        return self._next(message)

    def confirm(self, message):
        return self._next(message)


@pytest.fixture
def answers(monkeypatch):
    scripted = ScriptedPrompts()
    monkeypatch.setattr(prompts, "select", scripted.select)
    monkeypatch.setattr(prompts.Prompt, "ask", scripted.ask)
    monkeypatch.setattr(prompts, "confirm", scripted.confirm)
    yield scripted
    assert not scripted.answers, f"Unused answers: {list(scripted.answers)}"


@pytest.fixture
def output(capsys, monkeypatch):
    """Captured console text with whitespace collapsed."""
    monkeypatch.setattr(custom_responses.console, "width", 200)

    def read():
        return " ".join(capsys.readouterr().out.split())

    return read


@pytest.fixture
def org(session):
    """Two departments with roles and a small reporting line.

    Engineering: Lead Engineer (150000) held by Ashley Rodriguez,
                 Software Engineer (120000) held by Kevin Tupik (reports to Ashley).
    Sales:       Salesperson (80000), nobody holds it.
    """
    engineering = Department(name="Engineering")
    sales = Department(name="Sales")
    session.add_all([engineering, sales])
    session.flush()

    lead = Role(title="Lead Engineer", salary=150000, department_id=engineering.id)
    engineer = Role(title="Software Engineer", salary=120000, department_id=engineering.id)
    salesperson = Role(title="Salesperson", salary=80000, department_id=sales.id)
    session.add_all([lead, engineer, salesperson])
    session.flush()

    ashley = Employee(first_name="Ashley", last_name="Rodriguez", role_id=lead.id)
    session.add(ashley)
    session.flush()
    kevin = Employee(first_name="Kevin", last_name="Tupik", role_id=engineer.id, manager_id=ashley.id)
    session.add(kevin)
    session.commit()

    return {
        "engineering": engineering,
        "sales": sales,
        "lead": lead,
        "engineer": engineer,
        "salesperson": salesperson,
        "ashley": ashley,
        "kevin": kevin,
    }
