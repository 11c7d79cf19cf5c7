import math


def parse_salary(value):
    """Parse a salary string such as '70000' or '70,000.50' into a float.
    """
    cleaned = (value or "").strip().replace(",", "").lstrip("$")
    amount = float(cleaned)
    if not math.isfinite(amount):
        raise ValueError(f"Not a finite number: {value!r}")
    return amount


def format_currency(amount):
    return f"${amount or 0:,.2f}"


def format_cell(value):
    if value is None:
        return ""
    if isinstance(value, float):
        return f"{value:.0f}" if value.is_integer() else f"{value:.2f}"
    return str(value)


def safe_close(session):
    if session:
        session.close()
