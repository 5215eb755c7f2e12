"""Wedding Calendar — pure date formatting and countdown for wedding pages and the dashboard.

Invariants:
    - standard format reads "Saturday, Jun 20, 2026"; number format reads "06.20.2026"
    - days_remaining is -1 when the wedding has no date
    - No IO, no clock access: callers pass `today`
"""

from datetime import date


def format_standard_date(value: date) -> str:
    return f"{value:%A}, {value:%b} {value.day}, {value.year}"


def format_number_date(value: date) -> str:
    return value.strftime("%m.%d.%Y")


def days_remaining(wedding_date: date | None, today: date) -> int:
    """Whole days until the wedding (negative once it has passed, -1 if undated)."""
    if wedding_date is None:
        return -1
    return (wedding_date - today).days


def describe_wedding_date(wedding_date: date | None, today: date) -> dict:
    """Bundle the formatted date and countdown the way pages render them."""
    return {
        "wedding_date": {
            "standard_format": format_standard_date(wedding_date),
            "number_format": format_number_date(wedding_date),
        } if wedding_date else None,
        "days_remaining": days_remaining(wedding_date, today),
    }
