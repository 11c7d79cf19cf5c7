"""
Terminal prompts.
List, text, number and confirm questions built on rich.prompt.
"""
from rich.markup import escape
from rich.prompt import Prompt, Confirm
from employee_tracker.utils.custom_responses import console, print_error
from employee_tracker.utils.exceptions_handlers import ValidationError
from employee_tracker.utils.helpers import parse_salary


def select(message, choices, default=None):
    """Show a numbered list and return the value of the chosen entry.

    ``choices`` is a list of ``(label, value)`` pairs; ``default`` is the
    label preselected when the user just presses enter.
    """
    console.print(f"\n[bold]{escape(message)}[/bold]")
    default_index = ...  # rich's "no default"
    for index, (label, _) in enumerate(choices, start=1):
        console.print(f"  {index}. {label}", markup=False)
        if label == default:
            default_index = str(index)
    answer = Prompt.ask(
        "Select an option",
        choices=[str(i) for i in range(1, len(choices) + 1)],
        default=default_index,
        show_choices=False,
        console=console,
    )
    return choices[int(answer) - 1][1]


def ask_text(message, validate=None):
    """Ask for a line of text until ``validate`` accepts it."""
    while True:
        answer = (Prompt.ask(message, console=console) or "").strip()
        try:
            if validate:
                validate(answer)
        except ValidationError as e:
            print_error(str(e))
            continue
        return answer


def ask_number(message, minimum=None):
    while True:
        answer = Prompt.ask(message, console=console) or ""
        try:
            value = parse_salary(answer)
        except ValueError:
            print_error("Please enter a number")
            continue
        if minimum is not None and value < minimum:
            print_error(f"Please enter a number of at least {minimum}")
            continue
        return value


def confirm(message):
    return Confirm.ask(message, default=False, console=console)


def require_text(field, max_length=30):
    """Validator rejecting blank answers and answers too long for the column."""
    def validate(answer):
        if not answer:
            raise ValidationError(f"{field} is required")
        if len(answer) > max_length:
            raise ValidationError(f"{field} must be at most {max_length} characters")
    return validate
