"""Event Schemas — verifies name and date validation."""

from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from weddingsite.schemas.event import EventCreate


def test_name_is_stripped():
    assert EventCreate(name="  Reception  ").name == "Reception"


def test_blank_name_rejected():
    with pytest.raises(ValidationError):
        EventCreate(name="   ")


def test_name_longer_than_50_rejected():
    with pytest.raises(ValidationError):
        EventCreate(name="x" * 51)


def test_today_is_allowed():
    assert EventCreate(name="Brunch", date=date.today()).date == date.today()


def test_past_date_rejected():
    with pytest.raises(ValidationError):
        EventCreate(name="Brunch", date=date.today() - timedelta(days=1))


def test_collect_rsvp_defaults_off():
    assert EventCreate(name="Brunch").collect_rsvp is False
