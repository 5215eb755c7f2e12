"""Wedding Calendar — verifies date formatting and the countdown.

Tests:
    - Standard and number formats match the page rendering
    - days_remaining is -1 when undated and negative once the date has passed
    - describe_wedding_date bundles both (or None when undated)
"""

from datetime import date

from weddingsite.core.wedding_calendar import (
    days_remaining, describe_wedding_date, format_number_date, format_standard_date,
)


def test_standard_format_spells_weekday_and_month():
    assert format_standard_date(date(2026, 6, 20)) == "Saturday, Jun 20, 2026"


def test_standard_format_does_not_pad_day():
    assert format_standard_date(date(2027, 1, 3)) == "Sunday, Jan 3, 2027"


def test_number_format_is_dotted_month_day_year():
    assert format_number_date(date(2026, 6, 5)) == "06.05.2026"


def test_days_remaining_counts_whole_days():
    assert days_remaining(date(2026, 6, 20), date(2026, 6, 10)) == 10


def test_days_remaining_is_zero_on_the_day():
    assert days_remaining(date(2026, 6, 20), date(2026, 6, 20)) == 0


def test_days_remaining_negative_after_wedding():
    assert days_remaining(date(2026, 6, 20), date(2026, 6, 22)) == -2


def test_days_remaining_undated_is_minus_one():
    assert days_remaining(None, date(2026, 6, 20)) == -1


def test_describe_wedding_date_with_date():
    described = describe_wedding_date(date(2026, 6, 20), date(2026, 6, 1))
    assert described == {
        "wedding_date": {
            "standard_format": "Saturday, Jun 20, 2026",
            "number_format": "06.20.2026",
        },
        "days_remaining": 19,
    }


def test_describe_wedding_date_without_date():
    assert describe_wedding_date(None, date(2026, 6, 1)) == {
        "wedding_date": None, "days_remaining": -1,
    }
