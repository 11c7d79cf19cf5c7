from rich.console import Console
from rich.table import Table
from employee_tracker.utils.helpers import format_cell

console = Console()


def print_success(message):
    console.print(message, style="bold green", markup=False)


def print_info(message):
    console.print(message, style="cyan", markup=False)


def print_error(message):
    console.print(message, style="bold red", markup=False)


def print_table(title, rows, empty_message):
    """Render a row set as a table, or the empty-state message when there are no rows."""
    if not rows:
        print_info(empty_message)
        return
    table = Table(title=title, show_lines=False)
    for column in rows[0]._fields:
        table.add_column(column)
    for row in rows:
        table.add_row(*(format_cell(value) for value in row))
    console.print(table)
